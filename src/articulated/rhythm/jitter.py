"""Period perturbation (jitter) measures.

Each measure compares a period with its 2-, 3- or 5-point neighbourhood.
Only windows whose period (both periods for the local measure, the centre
period otherwise) lies in ``[min_period, max_period]`` contribute a
deviation. The relative form divides the mean deviation by an average
period accumulated from the counted periods plus the edge periods that
can never be a window centre.

Relative values are fractions; multiply by 100 for the percentages Praat
reports.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from ..sequence.missing import as_float_array, drop_missing


def _prepare(periods: Iterable[float] | np.ndarray, remove_na: bool) -> np.ndarray:
    return drop_missing(periods) if remove_na else as_float_array(periods)


def _in_range(values: np.ndarray, min_period: float, max_period: float) -> np.ndarray:
    with np.errstate(invalid="ignore"):
        return (values >= min_period) & (values <= max_period)


def _finish(totaldev: float, n_windows: int, period_sum: float, n: int, absolute: bool) -> float:
    result = totaldev / n_windows
    if absolute:
        return float(result)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(result) / np.float64(period_sum / n))


def jitter_local(
    periods: Iterable[float] | np.ndarray,
    min_period: float = -math.inf,
    max_period: float = math.inf,
    absolute: bool = False,
    remove_na: bool = True,
) -> float:
    """Mean absolute difference between consecutive periods.

    Both periods of a pair must lie in range for the pair to count.
    """

    x = _prepare(periods, remove_na)
    n = x.size
    if n <= 1:
        return np.nan

    prev, cur = x[:-1], x[1:]
    counted = _in_range(prev, min_period, max_period) & _in_range(cur, min_period, max_period)
    totaldev = float(np.sum(np.abs(cur - prev)[counted]))
    period_sum = float(x[0] + np.sum(cur[counted]))
    return _finish(totaldev, n - 1, period_sum, n, absolute)


def jitter_ddp(
    periods: Iterable[float] | np.ndarray,
    min_period: float = -math.inf,
    max_period: float = math.inf,
    absolute: bool = False,
    remove_na: bool = True,
) -> float:
    """Difference of Differences of Periods over 3-point windows."""

    x = _prepare(periods, remove_na)
    n = x.size
    if n <= 3:
        return np.nan

    prev, centre, nxt = x[:-2], x[1:-1], x[2:]
    counted = _in_range(centre, min_period, max_period)
    deviations = np.abs((nxt - centre) - (centre - prev))
    totaldev = float(np.sum(deviations[counted]))
    period_sum = float(x[0] + x[-1] + np.sum(centre[counted]))
    return _finish(totaldev, n - 2, period_sum, n, absolute)


def jitter_rap(
    periods: Iterable[float] | np.ndarray,
    min_period: float = -math.inf,
    max_period: float = math.inf,
    absolute: bool = False,
    remove_na: bool = True,
) -> float:
    """Relative Average Perturbation: deviation from the 3-point running mean."""

    x = _prepare(periods, remove_na)
    n = x.size
    if n <= 3:
        return np.nan

    prev, centre, nxt = x[:-2], x[1:-1], x[2:]
    counted = _in_range(centre, min_period, max_period)
    deviations = np.abs(centre - (prev + centre + nxt) / 3.0)
    totaldev = float(np.sum(deviations[counted]))
    period_sum = float(x[0] + x[-1] + np.sum(centre[counted]))
    return _finish(totaldev, n - 2, period_sum, n, absolute)


def jitter_ppq5(
    periods: Iterable[float] | np.ndarray,
    min_period: float = -math.inf,
    max_period: float = math.inf,
    absolute: bool = False,
    remove_na: bool = True,
) -> float:
    """Five-point Period Perturbation Quotient."""

    x = _prepare(periods, remove_na)
    n = x.size
    if n <= 4:
        return np.nan

    window_mean = (x[:-4] + x[1:-3] + x[2:-2] + x[3:-1] + x[4:]) / 5.0
    centre = x[2:-2]
    counted = _in_range(centre, min_period, max_period)
    totaldev = float(np.sum(np.abs(centre - window_mean)[counted]))
    period_sum = float(x[0] + x[1] + x[-2] + x[-1] + np.sum(centre[counted]))
    return _finish(totaldev, n - 4, period_sum, n, absolute)


__all__ = ["jitter_local", "jitter_ddp", "jitter_rap", "jitter_ppq5"]
