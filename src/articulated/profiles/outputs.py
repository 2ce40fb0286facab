"""Feature row helpers for articulation profiles."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

ARTICULATION_COLUMNS = [
    "duration_s",
    # Vowel space
    "n_vowels",
    "f1_mean",
    "f1_sd",
    "f1_range",
    "f2_mean",
    "f2_sd",
    "f2_range",
    "f1_center",
    "f2_center",
    "mean_norm",
    "sd_norm",
    "cv_norm",
    "n_corners",
    "vsa",
    "vsd",
    "cvsa",
    "vowel_space_error",
    # Formant track shape
    "f1_missing_fraction",
    "f1_onset_frame",
    "f1_offset_frame",
    "f1_slope",
    "f2_slope",
    # Rhythm
    "n_syllables",
    "mean_syllable_duration",
    "sd_syllable_duration",
    "min_syllable_duration",
    "max_syllable_duration",
    "total_duration",
    "cov_syllable",
    "rpvi",
    "npvi",
    "cov5_20",
    "pace_acceleration",
    "relstab_5_12",
    "relstab_13_20",
    "jitter_local",
    "jitter_rap",
    "jitter_ppq5",
    "jitter_ddp",
    "intensity_slope_db",
    "intensity_peak_prominence_db",
    "rhythm_error",
]


def ensure_feature_keys(row: dict[str, Any]) -> dict[str, Any]:
    """Fill every column missing from ``row`` with ``None``; extra keys are kept."""

    for key in ARTICULATION_COLUMNS:
        if key not in row:
            row[key] = None
    return row


def to_json_safe(value: Any) -> Any:
    """Convert numpy values and non-finite floats into JSON-compatible values."""

    if isinstance(value, dict):
        return {str(key): to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(item) for item in value]
    if isinstance(value, np.ndarray):
        return [to_json_safe(item) for item in value.tolist()]
    if isinstance(value, (np.bool_, bool)):
        return bool(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, (np.floating, float)):
        value = float(value)
        return value if math.isfinite(value) else None
    return value


__all__ = ["ARTICULATION_COLUMNS", "ensure_feature_keys", "to_json_safe"]
