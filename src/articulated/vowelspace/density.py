"""Vowel space area variants for dense or continuously sampled formants.

Both measures reduce the cloud of (F2, F1) points to its well-populated
part before taking a convex hull, so that a handful of tracking errors
cannot inflate the area.

References
----------
Story, B. H., & Bunton, K. (2017). Vowel space density as an indicator of
speech performance. The Journal of the Acoustical Society of America,
141(5), EL458-EL464.

Sandoval, S., Berisha, V., Utianski, R. L., Liss, J. M., & Spanias, A.
(2013). Automatic assessment of vowel space area. The Journal of the
Acoustical Society of America, 134(5), EL477-EL483.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from scipy.spatial import cKDTree
from sklearn.mixture import GaussianMixture

from .geometry import _paired, hull_area


def _finite_points(f1: Iterable[float] | np.ndarray, f2: Iterable[float] | np.ndarray) -> np.ndarray:
    a, b = _paired(f1, f2)
    points = np.column_stack([b, a])
    return points[np.isfinite(points).all(axis=1)]


def vowel_space_density(
    f1: Iterable[float] | np.ndarray,
    f2: Iterable[float] | np.ndarray,
    resolution: float = 0.05,
    grid_res: float = 0.01,
    density_threshold: float = 0.25,
) -> float:
    """Area of the densely populated part of a median-normalised vowel space.

    Formants are normalised as ``(F - median(F)) / median(F)``. A square
    grid with spacing ``grid_res`` is laid over ``[-1, 1.5)`` in both
    dimensions and every grid point counts the vowels within ``resolution``
    of it. Counts are scaled to the maximum; grid points at or above
    ``density_threshold`` form the convex hull whose area is returned.

    Returns NaN when no finite vowels are given, no vowel lies near the
    grid, or the retained grid points do not span an area.
    """

    points = _finite_points(f1, f2)
    if points.shape[0] == 0:
        return np.nan

    medians = np.median(points, axis=0)
    with np.errstate(divide="ignore", invalid="ignore"):
        normalised = (points - medians) / medians
    normalised = normalised[np.isfinite(normalised).all(axis=1)]
    if normalised.shape[0] == 0:
        return np.nan

    axis = np.arange(-1.0 + grid_res / 2.0, 1.5, grid_res)
    gx, gy = np.meshgrid(axis, axis)
    grid = np.column_stack([gx.ravel(), gy.ravel()])

    counts = cKDTree(normalised).query_ball_point(grid, r=resolution, return_length=True)
    counts = np.asarray(counts, dtype=np.float64)
    peak = counts.max()
    if peak == 0:
        return np.nan

    dense = grid[counts / peak >= density_threshold]
    return hull_area(dense)


def continuous_vowel_space_area(
    f1: Iterable[float] | np.ndarray,
    f2: Iterable[float] | np.ndarray,
    vowel_categories: int = 5,
    threshold: float = 0.3,
    center: bool = False,
    scale: bool = False,
    random_state: int | None = 0,
) -> float:
    """Convex hull area of continuously tracked formants after GMM filtering.

    A Gaussian mixture with one component per expected vowel category is fit
    to the (F2, F1) points. Points whose mixture density is below
    ``threshold`` times the highest density are treated as spurious and
    excluded from the hull.

    With ``center`` the points are shifted to zero mean, with ``scale`` they
    are divided by their sample standard deviation; the area is then in
    those units.

    Returns NaN when there are fewer points than mixture components or the
    retained points do not span an area.
    """

    points = _finite_points(f1, f2)
    if points.shape[0] < max(3, vowel_categories):
        return np.nan

    if center:
        points = points - points.mean(axis=0)
    if scale:
        with np.errstate(divide="ignore", invalid="ignore"):
            points = points / points.std(axis=0, ddof=1)
        if not np.isfinite(points).all():
            return np.nan

    gmm = GaussianMixture(
        n_components=vowel_categories, covariance_type="full", random_state=random_state
    )
    gmm.fit(points)
    density = np.exp(gmm.score_samples(points))

    kept = points[density >= threshold * density.max()]
    return hull_area(kept)


__all__ = ["vowel_space_density", "continuous_vowel_space_area"]
