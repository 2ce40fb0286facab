"""Tests for vowel space center, norms, angles, corners and area."""

from __future__ import annotations

import math

import numpy as np
import pytest

from articulated.vowelspace import (
    CORNER_LABELS,
    VowelCenter,
    mean_corner_vectors,
    vowel_angles,
    vowel_center,
    vowel_corners,
    vowel_norms,
    vowel_space_area,
)

F1 = [300, 600, 600, 300]
F2 = [2200, 1700, 1000, 900]


def test_centroid_center():
    center = vowel_center(F1, F2, "centroid")
    assert center == (450, 1450)
    assert isinstance(center, VowelCenter)


def test_twomeans_center_averages_upper_and_lower_f2():
    assert vowel_center(F1, F2, "twomeans") == pytest.approx((450.0, 1450.0))


def test_wcentroid_center_uses_vowels_below_mean_f1():
    assert vowel_center(F1, F2, "wcentroid") == pytest.approx((450.0, 1550.0))
    assert vowel_center(F1, F2) == vowel_center(F1, F2, "wcentroid")


def test_twomeans_empty_group_contributes_zero():
    """With every F1 equal the upper group is empty and pulls F2 towards 0."""

    assert vowel_center([500, 500], [1000, 2000], "twomeans") == pytest.approx((500.0, 750.0))


def test_wcentroid_falls_back_to_overall_mean():
    assert vowel_center([500, 500], [1000, 2000], "wcentroid") == pytest.approx((500.0, 1500.0))


def test_center_drops_vowels_missing_either_formant():
    center = vowel_center([300, math.nan, 600, 300], [2200, 1700, 1000, math.nan], "centroid")
    assert center == pytest.approx((450.0, 1600.0))


def test_center_without_na_removal_propagates_nan():
    center = vowel_center([300, math.nan, 600, 300], F2, "centroid", remove_na=False)
    assert np.isnan(center.f1c)
    assert center.f2c == pytest.approx(1450.0)


def test_empty_vowel_space_has_undefined_center():
    center = vowel_center([math.nan], [1000.0], "centroid")
    assert np.isnan(center.f1c) and np.isnan(center.f2c)


def test_unknown_center_method():
    with pytest.raises(ValueError, match="Invalid method"):
        vowel_center(F1, F2, "median")


def test_mismatched_formant_lengths():
    with pytest.raises(ValueError):
        vowel_center([300, 600], [2200], "centroid")
    with pytest.raises(ValueError):
        vowel_norms([300, 600], [2200], 450, 1450)


def test_norms_are_euclidean_distances():
    norms = vowel_norms(F1, F2, 450, 1450)
    assert norms.shape == (4,)
    assert norms[0] == pytest.approx(math.hypot(300 - 450, 2200 - 1450))
    assert np.all(norms >= 0)


def test_norms_and_angles_keep_missing_positions():
    f1 = [300, math.nan, 600, 300]
    f2 = [2200, 1700, math.nan, 900]
    norms = vowel_norms(f1, f2, 450, 1450)
    angles = vowel_angles(f1, f2, 450, 1450)
    assert np.isnan(norms).tolist() == [False, True, True, False]
    assert np.isnan(angles).tolist() == [False, True, True, False]


def test_angles_measure_f1_offset_against_f2_offset():
    angles = vowel_angles([450, 550, 450], [1550, 1450, 1350], 450, 1450)
    assert angles.tolist() == pytest.approx([0.0, math.pi / 2, math.pi])

    corner_angles = vowel_angles(F1, F2, 450, 1450)
    assert np.all((corner_angles > -math.pi) & (corner_angles <= math.pi))


def test_corner_quadrants():
    angles = [-math.pi, -math.pi / 2, -0.1, 0.0, 0.1, math.pi / 2, 3.0, math.pi, math.nan]
    assert vowel_corners(angles) == [
        "[u]-corner",
        "[u]-corner",
        "[i]-corner",
        "[i]-corner",
        "[ae]-corner",
        "[ae]-corner",
        "[a]-corner",
        "[a]-corner",
        None,
    ]


@pytest.fixture
def clustered_vowels():
    """Five tokens around each of four corner vowels."""

    offsets = np.array([-20.0, -10.0, 0.0, 10.0, 20.0])
    f1 = np.concatenate([base + offsets / 4 for base in F1])
    f2 = np.concatenate([base + offsets for base in F2])
    return f1, f2


def test_mean_corner_vectors_cover_every_corner(clustered_vowels):
    f1, f2 = clustered_vowels
    vectors = mean_corner_vectors(f1, f2, center_method="centroid")

    assert sorted(v.corner for v in vectors) == sorted(CORNER_LABELS)
    assert all(v.n_vectors == 5 for v in vectors)

    by_corner = {v.corner: v for v in vectors}
    # [i] is the high front vowel at F1 300 / F2 2200
    assert by_corner["[i]-corner"].f1 == pytest.approx(300.0, abs=5.0)
    assert by_corner["[i]-corner"].f2 == pytest.approx(2200.0, abs=5.0)


def test_mean_corner_vectors_need_more_than_minimum(clustered_vowels):
    f1, f2 = clustered_vowels
    assert mean_corner_vectors(f1, f2, center=(450.0, 1450.0), minimum_vectors=5) == []


def test_vowel_space_area_of_trapezoid():
    assert vowel_space_area(F1, F2) == pytest.approx(300000.0)


def test_vowel_space_area_ignores_missing_vowels():
    f1 = F1 + [math.nan]
    f2 = F2 + [1500.0]
    assert vowel_space_area(f1, f2) == pytest.approx(300000.0)


@pytest.mark.parametrize(
    ("f1", "f2"),
    [([300, 600], [2200, 1000]), ([300, 400, 500], [1000, 1100, 1200])],
)
def test_vowel_space_area_undefined_for_degenerate_spaces(f1, f2):
    assert np.isnan(vowel_space_area(f1, f2))


def test_norms_are_undefined_when_a_formant_is_missing_even_if_the_other_is_infinite():
    norms = vowel_norms([math.inf, math.nan], [math.nan, -math.inf], 0.0, 0.0)
    assert np.isnan(norms).all()


def test_vowel_space_area_ignores_infinite_formants():
    f1 = F1 + [math.inf, 500.0]
    f2 = F2 + [1500.0, -math.inf]
    assert vowel_space_area(f1, f2) == pytest.approx(300000.0)
