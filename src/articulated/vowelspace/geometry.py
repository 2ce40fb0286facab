"""Vowel formant dispersion geometry in the (F2, F1) plane.

Each vowel is treated as a vector drawn from a vowel space center; its
length (norm) and direction (angle) describe how peripheral the vowel is
and towards which corner of the space it points.

References
----------
Karlsson, F., & van Doorn, J. (2012). Vowel formant dispersion as a measure
of articulation proficiency. The Journal of the Acoustical Society of
America, 132(4), 2633-2641.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from scipy import stats as scipy_stats
from scipy.spatial import ConvexHull

from ..sequence.missing import as_float_array

CENTER_METHODS = ("centroid", "twomeans", "wcentroid")

# Quadrants of atan2(F1 - F1c, F2 - F2c), lowest bound included in the first
CORNER_LABELS = ("[u]-corner", "[i]-corner", "[ae]-corner", "[a]-corner")
_CORNER_INNER_BREAKS = np.array([-math.pi / 2.0, 0.0, math.pi / 2.0])


class VowelCenter(NamedTuple):
    """Center of a vowel space."""

    f1c: float
    f2c: float


@dataclass(frozen=True)
class CornerVector:
    """Mean vowel vector of one corner of the vowel space."""

    corner: str
    n_vectors: int
    norm: float
    angle: float
    f1: float
    f2: float


def _paired(
    f1: Iterable[float] | np.ndarray, f2: Iterable[float] | np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    a = as_float_array(f1)
    b = as_float_array(f2)
    if a.size != b.size:
        raise ValueError(f"F1 and F2 must have the same length, got {a.size} and {b.size}")
    return a, b


def vowel_center(
    f1: Iterable[float] | np.ndarray,
    f2: Iterable[float] | np.ndarray,
    method: str = "wcentroid",
    remove_na: bool = True,
) -> VowelCenter:
    """Compute the center of a vowel space.

    Methods:
        centroid: mean F1 and mean F2.
        twomeans: mean F1; F2 is the average of the mean F2 of vowels above
            and of vowels at or below that F1 line. An empty group counts as 0.
        wcentroid: mean F1; mean F2 of the vowels below that F1 line, or of
            all vowels when none lie below. Triangular vowel spaces otherwise
            tend to get a center outside the triangle.

    With ``remove_na`` a vowel is dropped when either formant is NaN.
    """

    if method not in CENTER_METHODS:
        raise ValueError(f"Invalid method {method!r}. Must be one of {', '.join(CENTER_METHODS)}")

    a, b = _paired(f1, f2)
    if remove_na:
        valid = ~np.isnan(a) & ~np.isnan(b)
        a, b = a[valid], b[valid]

    if a.size == 0:
        return VowelCenter(np.nan, np.nan)

    f1c = float(np.mean(a))

    if method == "centroid":
        return VowelCenter(f1c, float(np.mean(b)))

    if method == "twomeans":
        upper = a > f1c
        f2c_high = float(np.mean(b[upper])) if upper.any() else 0.0
        f2c_low = float(np.mean(b[~upper])) if (~upper).any() else 0.0
        return VowelCenter(f1c, (f2c_high + f2c_low) / 2.0)

    lower = a < f1c
    if lower.any():
        return VowelCenter(f1c, float(np.mean(b[lower])))
    return VowelCenter(f1c, float(np.mean(b)))


def vowel_norms(
    f1: Iterable[float] | np.ndarray,
    f2: Iterable[float] | np.ndarray,
    f1c: float,
    f2c: float,
) -> np.ndarray:
    """Euclidean distance of every vowel from the center; NaN where a formant is missing."""

    a, b = _paired(f1, f2)
    # NaN in either formant wins over an infinite offset in the other
    return np.sqrt((a - f1c) ** 2 + (b - f2c) ** 2)


def vowel_angles(
    f1: Iterable[float] | np.ndarray,
    f2: Iterable[float] | np.ndarray,
    f1c: float,
    f2c: float,
) -> np.ndarray:
    """Angle in radians of every vowel vector, ``atan2(F1 - F1c, F2 - F2c)``."""

    a, b = _paired(f1, f2)
    return np.arctan2(a - f1c, b - f2c)


def vowel_corners(angles: Iterable[float] | np.ndarray) -> list[str | None]:
    """Label each vowel vector angle with the corner of the space it points to."""

    arr = as_float_array(angles)
    idx = np.searchsorted(_CORNER_INNER_BREAKS, arr, side="left")
    return [None if np.isnan(angle) else CORNER_LABELS[i] for angle, i in zip(arr, idx)]


def mean_corner_vectors(
    f1: Iterable[float] | np.ndarray,
    f2: Iterable[float] | np.ndarray,
    center: VowelCenter | tuple[float, float] | None = None,
    center_method: str = "wcentroid",
    minimum_vectors: int = 3,
) -> list[CornerVector]:
    """Mean vowel vector of every sufficiently populated corner.

    A corner is kept when it holds more than ``minimum_vectors`` vectors and
    at least one of its angles falls in the central half of a normal
    distribution fitted to the corner's angles.
    """

    a, b = _paired(f1, f2)
    if center is None:
        center = vowel_center(a, b, method=center_method)
    f1c, f2c = center

    norms = vowel_norms(a, b, f1c, f2c)
    angles = vowel_angles(a, b, f1c, f2c)
    valid = ~np.isnan(norms) & ~np.isnan(angles)
    norms, angles = norms[valid], angles[valid]
    labels = np.asarray(vowel_corners(angles), dtype=object)

    vectors: list[CornerVector] = []
    for corner in CORNER_LABELS:
        selected = labels == corner
        count = int(np.count_nonzero(selected))
        if count <= minimum_vectors:
            continue

        sel_angles = angles[selected]
        with np.errstate(divide="ignore", invalid="ignore"):
            probs = scipy_stats.norm.cdf(
                sel_angles, loc=np.mean(sel_angles), scale=np.std(sel_angles, ddof=1)
            )
        if not np.any(np.abs(probs - 0.5) < 0.25):
            continue

        norm = float(np.mean(norms[selected]))
        angle = float(np.mean(sel_angles))
        vectors.append(
            CornerVector(
                corner=corner,
                n_vectors=count,
                norm=norm,
                angle=angle,
                f1=norm * math.sin(angle) + f1c,
                f2=norm * math.cos(angle) + f2c,
            )
        )
    return vectors


def hull_area(points: np.ndarray) -> float:
    """Area of the convex hull of 2-D points; NaN for fewer than three
    non-collinear finite points."""

    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    points = points[np.isfinite(points).all(axis=1)]
    if points.shape[0] < 3:
        return np.nan
    if np.linalg.matrix_rank(points - points.mean(axis=0)) < 2:
        return np.nan
    # In two dimensions ``volume`` is the enclosed area
    return float(ConvexHull(points).volume)


def vowel_space_area(f1: Iterable[float] | np.ndarray, f2: Iterable[float] | np.ndarray) -> float:
    """Area of the convex hull around the vowels in the (F2, F1) plane.

    Vowels with a non-finite formant are left out.
    """

    a, b = _paired(f1, f2)
    return hull_area(np.column_stack([b, a]))


__all__ = [
    "CENTER_METHODS",
    "CORNER_LABELS",
    "CornerVector",
    "VowelCenter",
    "hull_area",
    "mean_corner_vectors",
    "vowel_angles",
    "vowel_center",
    "vowel_corners",
    "vowel_norms",
    "vowel_space_area",
]
