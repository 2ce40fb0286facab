"""Tests for rhythm and vowel space profiles and feature rows."""

from __future__ import annotations

import json
import logging
import math

import numpy as np
import pytest

from articulated.config import ArticulationConfig, get_config_preset
from articulated.profiles import (
    ARTICULATION_COLUMNS,
    INSUFFICIENT_DATA,
    ensure_feature_keys,
    rhythm_profile,
    syllable_durations,
    to_json_safe,
    vowel_space_profile,
)
from articulated.rhythm import cov5_x, npvi, rpvi


@pytest.fixture
def ddk_durations():
    return np.random.default_rng(123).uniform(0.1, 0.3, 25)


def test_rhythm_profile_full_block(ddk_durations):
    profile = rhythm_profile(ddk_durations)

    assert profile["n_syllables"] == 25
    assert profile["rpvi"] == pytest.approx(rpvi(ddk_durations))
    assert profile["npvi"] == pytest.approx(npvi(ddk_durations))
    assert profile["cov5_20"] == pytest.approx(cov5_x(ddk_durations, n=20))
    assert profile["total_duration"] == pytest.approx(float(np.sum(ddk_durations)))
    for key in ("pace_acceleration", "relstab_5_12", "relstab_13_20", "jitter_local", "jitter_ppq5"):
        assert math.isfinite(profile[key])


def test_rhythm_profile_skips_ddk_block_below_twenty(ddk_durations):
    profile = rhythm_profile(ddk_durations[:10])

    assert "cov5_20" not in profile
    assert "relstab_5_12" not in profile
    assert "jitter_rap" in profile


def test_rhythm_profile_skips_jitter_below_five(ddk_durations):
    profile = rhythm_profile(ddk_durations[:4])
    assert "jitter_local" not in profile
    assert "cov" in profile


def test_rhythm_profile_insufficient_data(caplog):
    with caplog.at_level(logging.WARNING, logger="articulated.profiles.summaries"):
        profile = rhythm_profile([0.2, math.nan])

    assert profile == {"n_syllables": 1, "error": INSUFFICIENT_DATA}
    assert "Insufficient syllables" in caplog.text


def test_vowel_space_profile_from_corner_vowels():
    f1 = [300, 600, 600, 300, 0.0]
    f2 = [2200, 1700, 1000, 900, 1500]
    profile = vowel_space_profile(f1, f2)

    assert profile["n_vowels"] == 4
    assert profile["f1_center"] == pytest.approx(450.0)
    assert profile["f2_center"] == pytest.approx(1550.0)
    assert profile["f2_range"] == pytest.approx(1300.0)
    assert profile["vsa"] == pytest.approx(300000.0)
    assert profile["cv_norm"] == pytest.approx(profile["sd_norm"] / profile["mean_norm"])


def test_vowel_space_profile_uses_configured_center():
    cfg = ArticulationConfig(center_method="centroid")
    profile = vowel_space_profile([300, 600, 600, 300], [2200, 1700, 1000, 900], cfg)
    assert profile["f2_center"] == pytest.approx(1450.0)


def test_vowel_space_profile_insufficient_data():
    profile = vowel_space_profile([300, math.nan, 0.0], [2200, 1700, 1000])
    assert profile == {"n_vowels": 1, "error": INSUFFICIENT_DATA}


def test_syllable_durations_from_frame_counts():
    level = [-30, -10, -10, -10, -30, -5, -30, -10, -10, -30]
    cfg = ArticulationConfig(smooth_frames=1, frame_step_sec=0.01, min_syllable_sec=0.015)
    assert syllable_durations(level, cfg=cfg).tolist() == pytest.approx([0.03, 0.02])


def test_syllable_durations_from_time_axis():
    level = [-30, -10, -10, -10, -30, -5, -30, -10, -10, -30]
    times = np.arange(10) * 0.01
    cfg = ArticulationConfig(smooth_frames=1, min_syllable_sec=0.015)
    assert syllable_durations(level, times, cfg).tolist() == pytest.approx([0.02])


def test_syllable_durations_bridge_single_frame_dips():
    level = [-5, -5, -30, -5, -5, -30, -30, -30]
    cfg = ArticulationConfig(min_syllable_sec=0.01)
    assert syllable_durations(level, cfg=cfg).tolist() == pytest.approx([0.025])


def test_syllable_durations_require_matching_time_axis():
    with pytest.raises(ValueError):
        syllable_durations([-5.0, -5.0], times=[0.0])


def test_strict_config_propagates_to_ddk_block():
    durations = np.full(20, 0.2)
    cfg = ArticulationConfig(cov5_n=25, on_short="fail")
    with pytest.raises(ValueError):
        rhythm_profile(durations, cfg)
    assert rhythm_profile(durations, get_config_preset("balanced"))["cov5_20"] == pytest.approx(0.0)


def test_ensure_feature_keys_fills_every_column():
    row = ensure_feature_keys({"rpvi": 0.05, "custom": 1})
    assert set(ARTICULATION_COLUMNS) <= set(row)
    assert row["custom"] == 1
    assert row["npvi"] is None


def test_to_json_safe_handles_numpy_and_nan():
    payload = {
        "n": np.int64(3),
        "value": np.float64(0.5),
        "undefined": math.nan,
        "track": np.array([1.0, np.inf]),
        "flag": np.bool_(True),
    }
    safe = to_json_safe(payload)
    assert safe == {"n": 3, "value": 0.5, "undefined": None, "track": [1.0, None], "flag": True}
    json.dumps(safe)


def test_vowel_space_profile_drops_infinite_formants():
    profile = vowel_space_profile([300, 600, 600, math.inf], [2200, 1700, 1000, 900])
    assert profile["n_vowels"] == 3
    assert profile["vsa"] == pytest.approx(105000.0)


def test_vowel_space_profile_time_window():
    times = [0.0, 1.0, 2.0, 3.0, 4.0]
    f1 = [300, 600, 600, 300, 900]
    f2 = [2200, 1700, 1000, 900, 3000]

    profile = vowel_space_profile(f1, f2, times=times, time_range=(0.0, 3.0))
    assert profile["n_vowels"] == 4
    assert profile["vsa"] == pytest.approx(300000.0)


def test_vowel_space_profile_ignores_window_without_times(caplog):
    f1 = [300, 600, 600, 300, 900]
    f2 = [2200, 1700, 1000, 900, 3000]
    with caplog.at_level(logging.WARNING):
        profile = vowel_space_profile(f1, f2, time_range=(0.0, 3.0))
    assert profile["n_vowels"] == 5
    assert "ignoring time_range" in caplog.text


def test_vowel_space_profile_density_method():
    profile = vowel_space_profile([300, 600, 600, 300], [2200, 1700, 1000, 900], method="density")
    assert profile["vsd"] > 0
    assert "vsa" not in profile and "f1_center" not in profile


def test_vowel_space_profile_continuous_method_from_config():
    rng = np.random.default_rng(11)
    f1 = np.concatenate([rng.normal(c, 15.0, 40) for c in (300.0, 600.0, 600.0, 300.0)])
    f2 = np.concatenate([rng.normal(c, 30.0, 40) for c in (2200.0, 1700.0, 1000.0, 900.0)])
    cfg = ArticulationConfig(vowel_space_method="continuous", cvsa_components=4)

    profile = vowel_space_profile(f1, f2, cfg)
    assert profile["n_vowels"] == 160
    assert profile["cvsa"] > 0
    assert "vsa" not in profile


def test_vowel_space_profile_rejects_unknown_method():
    with pytest.raises(ValueError, match="Invalid method"):
        vowel_space_profile([300, 600, 600], [2200, 1700, 1000], method="hull")


def test_rhythm_profile_pace_acceleration_follows_configured_windows(ddk_durations):
    cfg = ArticulationConfig(relstab_early=(5, 8), relstab_late=(9, 12))
    profile = rhythm_profile(ddk_durations, cfg)
    assert profile["pace_acceleration"] == pytest.approx(
        profile["relstab_5_8"] - profile["relstab_9_12"]
    )
