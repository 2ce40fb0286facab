"""Per-recording articulation profiles built from the individual measures."""

from __future__ import annotations

from .audio import (
    LIBROSA_AVAILABLE,
    PARSELMOUTH_AVAILABLE,
    formant_track,
    intensity_track,
    syllable_durations,
)
from .outputs import ARTICULATION_COLUMNS, ensure_feature_keys, to_json_safe
from .summaries import (
    INSUFFICIENT_DATA,
    VOWEL_SPACE_METHODS,
    articulation_profile,
    rhythm_profile,
    vowel_space_profile,
)

__all__ = [
    "ARTICULATION_COLUMNS",
    "INSUFFICIENT_DATA",
    "LIBROSA_AVAILABLE",
    "PARSELMOUTH_AVAILABLE",
    "VOWEL_SPACE_METHODS",
    "articulation_profile",
    "ensure_feature_keys",
    "formant_track",
    "intensity_track",
    "rhythm_profile",
    "syllable_durations",
    "to_json_safe",
    "vowel_space_profile",
]
