"""Tests for waveform track extraction and the combined articulation row."""

from __future__ import annotations

import json

import numpy as np
import pytest

from articulated.profiles import (
    ARTICULATION_COLUMNS,
    articulation_profile,
    formant_track,
    intensity_track,
    syllable_durations,
    to_json_safe,
)

SR = 16000


def _bursts(n_bursts=4, burst_sec=0.15, gap_sec=0.1, sr=SR):
    """Harmonic tone bursts separated by digital silence."""

    t = np.arange(int(burst_sec * sr)) / sr
    tone = sum(np.sin(2 * np.pi * 120 * k * t) / k for k in range(1, 20))
    tone = 0.3 * tone / np.max(np.abs(tone))
    gap = np.zeros(int(gap_sec * sr))
    parts = [gap]
    for _ in range(n_bursts):
        parts.extend([tone, gap])
    return np.concatenate(parts).astype(np.float32)


def test_intensity_track_is_relative_to_peak():
    pytest.importorskip("librosa")
    times, level = intensity_track(_bursts(), SR)

    assert times.shape == level.shape
    assert np.all(np.diff(times) > 0)
    assert level.max() == pytest.approx(0.0, abs=1e-3)


def test_intensity_track_of_empty_signal():
    pytest.importorskip("librosa")
    times, level = intensity_track(np.array([], dtype=np.float32), SR)
    assert times.size == 0 and level.size == 0


def test_bursts_become_syllables():
    pytest.importorskip("librosa")
    times, level = intensity_track(_bursts(), SR)
    durations = syllable_durations(level, times)

    assert durations.size == 4
    assert np.all((durations > 0.1) & (durations < 0.2))


def test_formant_track_shapes():
    pytest.importorskip("parselmouth")
    times, f1, f2 = formant_track(_bursts(), SR)

    assert times.shape == f1.shape == f2.shape
    assert times.size > 0
    assert np.all(np.diff(times) > 0)
    voiced = ~np.isnan(f1)
    assert np.all(f1[voiced] > 0)


def test_articulation_profile_row_is_complete_and_serialisable():
    pytest.importorskip("librosa")
    pytest.importorskip("parselmouth")
    row = articulation_profile(_bursts(), SR)

    assert set(ARTICULATION_COLUMNS) <= set(row)
    assert row["n_syllables"] == 4
    assert row["duration_s"] == pytest.approx(1.1)
    json.dumps(to_json_safe(row))
