"""Dispersion and pace-stability measures for syllable repetition tasks.

References
----------
Skodda, S., Flasskamp, A., & Schlegel, U. (2010). Instability of syllable
repetition as a model for impaired motor processing. Journal of Neural
Transmission, 117(5), 605-612.

Skodda, S., Lorenz, J., & Schlegel, U. (2012). Instability of syllable
repetition in Parkinson's disease. Basal Ganglia, 3(1), 33-37.

Flasskamp, A., Kotz, S. A., Schlegel, U., & Skodda, S. (2012). Acceleration
of syllable repetition in Parkinson's disease is more prominent in the
left-side dominant patients. Parkinsonism & Related Disorders, 18(4), 343-347.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from ..sequence.missing import as_float_array, drop_missing

# Intervals 1-4 are the reference block in every Skodda-style measure
REFERENCE_INTERVALS = 4
ON_SHORT_CHOICES = ("undefined", "fail")


def _prepare(durations: Iterable[float] | np.ndarray, remove_na: bool) -> np.ndarray:
    return drop_missing(durations) if remove_na else as_float_array(durations)


def cov(durations: Iterable[float] | np.ndarray, remove_na: bool = True) -> float:
    """Coefficient of variation: sample standard deviation over the mean.

    NaN when fewer than two values remain, when a NaN survives filtering,
    or when the mean is exactly zero.
    """

    x = _prepare(durations, remove_na)
    if x.size <= 1 or np.isnan(x).any():
        return np.nan

    mean = float(np.mean(x))
    if mean == 0.0:
        return np.nan
    return float(np.std(x, ddof=1) / mean)


def cov5_x(
    durations: Iterable[float] | np.ndarray,
    n: int = 20,
    remove_na: bool = True,
    on_short: str = "undefined",
) -> float:
    """Relative coefficient of variation of intervals 5..n against intervals 1..4.

    Args:
        durations: Syllable durations in repetition order.
        n: Number of intervals to include. Below 6 the comparison block has
            fewer than two intervals and the result is NaN.
        remove_na: Drop NaN durations first.
        on_short: ``"undefined"`` returns NaN when fewer than ``n`` durations
            are available, ``"fail"`` raises ``ValueError`` instead.

    Returns:
        ``sd(x[4:n]) / (mean(x[0:4]) / sqrt(n - 4)) * 100``
    """

    if on_short not in ON_SHORT_CHOICES:
        raise ValueError(f"on_short must be one of {ON_SHORT_CHOICES}, got {on_short!r}")

    x = _prepare(durations, remove_na)
    if x.size < n:
        if on_short == "fail":
            raise ValueError(f"The length of the vector should be at least {n}, got {x.size}")
        return np.nan

    comp_n = n - REFERENCE_INTERVALS
    if comp_n < 2:
        return np.nan
    with np.errstate(divide="ignore", invalid="ignore"):
        ref_mean = np.mean(x[:REFERENCE_INTERVALS])
        comp = x[REFERENCE_INTERVALS:n]
        comp_sd = np.std(comp, ddof=1) if comp.size > 1 else np.float64(np.nan)
        return float(comp_sd / (ref_mean / math.sqrt(comp_n)) * 100.0)


def relstab(
    durations: Iterable[float] | np.ndarray,
    compstart: int = 5,
    compstop: int = 12,
    remove_na: bool = True,
) -> float:
    """Relative stability: summed intervals ``compstart..compstop`` over intervals 1..4, in percent.

    ``compstart`` and ``compstop`` are 1-based interval numbers. The
    comparison block must start after the reference block.
    """

    if compstart <= REFERENCE_INTERVALS:
        raise ValueError(
            f"compstart must be at least {REFERENCE_INTERVALS + 1} "
            f"so the comparison block follows intervals 1-4, got {compstart}"
        )

    x = _prepare(durations, remove_na)
    if x.size < compstop - 1:
        return np.nan

    refsum = np.sum(x[:REFERENCE_INTERVALS])
    compsum = np.sum(x[compstart - 1 : compstop])
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(compsum / refsum * 100.0)


def pace_acceleration(
    durations: Iterable[float] | np.ndarray,
    remove_na: bool = True,
    early: tuple[int, int] = (5, 12),
    late: tuple[int, int] = (13, 20),
) -> float:
    """Difference between relative stability of the early and late interval blocks.

    ``early`` and ``late`` are 1-based ``(compstart, compstop)`` pairs, 5-12 and
    13-20 by default.

    Positive values mean the later block is shorter, i.e. the speaker sped up.
    """

    early_stab = relstab(durations, early[0], early[1], remove_na=remove_na)
    late_stab = relstab(durations, late[0], late[1], remove_na=remove_na)
    return float(early_stab - late_stab)


__all__ = ["cov", "cov5_x", "relstab", "pace_acceleration"]
