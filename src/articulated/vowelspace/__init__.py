"""Vowel space center, vector norms/angles, corners and area measures."""

from __future__ import annotations

from .geometry import (
    CENTER_METHODS,
    CORNER_LABELS,
    CornerVector,
    VowelCenter,
    hull_area,
    mean_corner_vectors,
    vowel_angles,
    vowel_center,
    vowel_corners,
    vowel_norms,
    vowel_space_area,
)
from .density import continuous_vowel_space_area, vowel_space_density

__all__ = [
    "CENTER_METHODS",
    "CORNER_LABELS",
    "CornerVector",
    "VowelCenter",
    "continuous_vowel_space_area",
    "hull_area",
    "mean_corner_vectors",
    "vowel_angles",
    "vowel_center",
    "vowel_corners",
    "vowel_norms",
    "vowel_space_area",
    "vowel_space_density",
]
