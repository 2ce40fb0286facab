"""Linear trend measures over a track indexed by frame position."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .missing import as_float_array, is_missing_numeric


def _fit_trend(
    values: Iterable[float] | np.ndarray, threshold: float
) -> tuple[np.ndarray, np.ndarray, float, float] | None:
    """Least-squares fit of the retained values against their 1-based positions.

    Returns ``(positions, values, slope, intercept)`` or ``None`` when fewer
    than two values survive the missing-value rule.
    """

    y = as_float_array(values)
    keep = ~is_missing_numeric(y, threshold)
    positions = np.flatnonzero(keep).astype(np.float64) + 1.0
    y = y[keep]

    if y.size < 2:
        return None

    dx = positions - positions.mean()
    denom = float(np.dot(dx, dx))
    if denom == 0.0:
        return None

    slope = float(np.dot(dx, y - y.mean()) / denom)
    intercept = float(y.mean() - slope * positions.mean())
    return positions, y, slope, intercept


def lm_slope(values: Iterable[float] | np.ndarray, threshold: float = 0.0) -> float:
    """Slope of the ordinary least-squares line through the retained values.

    >>> lm_slope([1.0, 1.5, 2.0, 2.5, 3.0])
    0.5
    """

    fit = _fit_trend(values, threshold)
    if fit is None:
        return np.nan
    return fit[2]


def peak_prominence(values: Iterable[float] | np.ndarray, threshold: float = 0.0) -> float:
    """Largest positive deviation of a retained value above the trend line."""

    fit = _fit_trend(values, threshold)
    if fit is None:
        return np.nan
    positions, y, slope, intercept = fit
    residuals = y - (intercept + slope * positions)
    return float(residuals.max())


__all__ = ["lm_slope", "peak_prominence"]
