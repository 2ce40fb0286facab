"""Pairwise Variability Indices over interval durations.

References
----------
Nolan, F., & Asu, E. L. (2009). The Pairwise Variability Index and
Coexisting Rhythms in Language. Phonetica, 66(1-2), 64-77.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from ..sequence.missing import as_float_array, drop_missing


def _prepare(durations: Iterable[float] | np.ndarray, remove_na: bool) -> np.ndarray:
    return drop_missing(durations) if remove_na else as_float_array(durations)


def rpvi(durations: Iterable[float] | np.ndarray, remove_na: bool = True) -> float:
    """Raw PVI: mean absolute difference between successive durations.

    >>> rpvi([1, 2, 4, 7])
    2.0
    """

    x = _prepare(durations, remove_na)
    if x.size <= 1:
        return np.nan
    return float(np.mean(np.abs(np.diff(x))))


def npvi(durations: Iterable[float] | np.ndarray, remove_na: bool = True) -> float:
    """Normalised PVI: successive differences scaled by the local pair mean, times 100.

    A pair whose mean is zero is not guarded and yields ``inf``/``nan``.
    """

    x = _prepare(durations, remove_na)
    if x.size <= 1:
        return np.nan
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = np.abs(np.diff(x)) / ((x[1:] + x[:-1]) / 2.0)
        return float(100.0 * np.mean(terms))


__all__ = ["rpvi", "npvi"]
