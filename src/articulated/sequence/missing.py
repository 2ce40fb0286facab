"""Missing-value classification for measurement sequences.

A value counts as missing when it is NaN (or ``None``) or, for numeric
tracks, when it falls at or below a cut-off such as the ``0.0`` that pitch
and formant trackers write for unvoiced frames. Text tracks use a set of
sentinel labels instead of a cut-off.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np


def as_float_array(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Return ``values`` as a 1-D float64 array, mapping ``None`` to NaN."""

    if isinstance(values, np.ndarray):
        arr = values.astype(np.float64, copy=False)
    else:
        arr = np.asarray(list(values), dtype=np.float64)
    return np.atleast_1d(arr).ravel()


def drop_missing(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Strip NaN entries, keeping the order of the remaining values."""

    arr = as_float_array(values)
    return arr[~np.isnan(arr)]


def _is_na_scalar(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def is_missing_numeric(
    values: Iterable[float] | np.ndarray, threshold: float = 0.0
) -> np.ndarray:
    """Flag values that are NaN or ``<= threshold``.

    >>> is_missing_numeric([1.2, 0, 1.5, float("nan"), -1, 2.0]).tolist()
    [False, True, False, True, True, False]
    """

    arr = as_float_array(values)
    with np.errstate(invalid="ignore"):
        return np.isnan(arr) | (arr <= threshold)


def is_missing_text(values: Iterable[Any], sentinels: str | Iterable[str]) -> np.ndarray:
    """Flag labels that are ``None``/NaN or exactly equal to a sentinel."""

    if isinstance(sentinels, str):
        sentinels = [sentinels]
    lookup = frozenset(sentinels)
    flags = [_is_na_scalar(value) or value in lookup for value in values]
    return np.asarray(flags, dtype=bool)


def is_missing(values: Sequence[Any] | np.ndarray, what_na: Any = 0.0) -> np.ndarray:
    """Dispatch to the numeric or text rule depending on ``what_na``.

    A single number is used as a numeric cut-off; a string or a collection
    of strings is used as the sentinel set.
    """

    if isinstance(what_na, str):
        return is_missing_text(values, [what_na])
    if isinstance(what_na, (int, float, np.integer, np.floating)) and not isinstance(
        what_na, bool
    ):
        return is_missing_numeric(values, float(what_na))

    try:
        candidates = list(what_na)
    except TypeError as exc:
        raise ValueError(
            f"Expected a single numeric cut-off or a set of text sentinels, got {what_na!r}"
        ) from exc
    if candidates and all(isinstance(item, str) for item in candidates):
        return is_missing_text(values, candidates)
    if len(candidates) == 1:
        return is_missing_numeric(values, float(candidates[0]))
    raise ValueError(
        f"Expected a single numeric cut-off or a set of text sentinels, got {what_na!r}"
    )


def missing_fraction(values: Iterable[float] | np.ndarray, threshold: float = 0.0) -> float:
    """Proportion of missing values; NaN for an empty sequence."""

    flags = is_missing_numeric(values, threshold)
    if flags.size == 0:
        return np.nan
    return float(np.count_nonzero(flags) / flags.size)


def _transitions(values: Iterable[float] | np.ndarray, threshold: float) -> np.ndarray:
    flags = is_missing_numeric(values, threshold)
    if flags.size < 2:
        return np.array([], dtype=np.intp)
    # i is the 0-based index of the element after the flip, reported as i + 1
    return np.flatnonzero(flags[1:] != flags[:-1]) + 2


def first_changepoint(values: Iterable[float] | np.ndarray, threshold: float = 0.0) -> int | None:
    """1-based position of the first missing/present transition.

    >>> first_changepoint([0, 0, 1.2, 1.5, 2.0])
    3
    """

    points = _transitions(values, threshold)
    return int(points[0]) if points.size else None


def last_changepoint(values: Iterable[float] | np.ndarray, threshold: float = 0.0) -> int | None:
    """1-based position of the last missing/present transition.

    >>> last_changepoint([0, 0, 1.2, 1.5, 0, 0])
    5
    """

    points = _transitions(values, threshold)
    return int(points[-1]) if points.size else None


__all__ = [
    "as_float_array",
    "drop_missing",
    "is_missing_numeric",
    "is_missing_text",
    "is_missing",
    "missing_fraction",
    "first_changepoint",
    "last_changepoint",
]
