"""Speech rhythm and vowel space statistics.

Every measure is a pure function of its arguments. Undefined results are
returned as ``nan`` (``None`` for changepoints); only invalid arguments
raise ``ValueError``.
"""

from __future__ import annotations

from .config import ArticulationConfig, get_config_preset
from .profiles import (
    ARTICULATION_COLUMNS,
    articulation_profile,
    formant_track,
    intensity_track,
    rhythm_profile,
    syllable_durations,
    to_json_safe,
    vowel_space_profile,
)
from .rhythm import (
    cov,
    cov5_x,
    jitter_ddp,
    jitter_local,
    jitter_ppq5,
    jitter_rap,
    npvi,
    pace_acceleration,
    relstab,
    rpvi,
)
from .sequence import (
    drop_missing,
    first_changepoint,
    is_missing,
    is_missing_numeric,
    is_missing_text,
    last_changepoint,
    lm_slope,
    missing_fraction,
    peak_prominence,
)
from .vowelspace import (
    CornerVector,
    VowelCenter,
    continuous_vowel_space_area,
    mean_corner_vectors,
    vowel_angles,
    vowel_center,
    vowel_corners,
    vowel_norms,
    vowel_space_area,
    vowel_space_density,
)

__all__ = [
    # Configuration
    "ArticulationConfig",
    "get_config_preset",
    # Missing values and trends
    "drop_missing",
    "first_changepoint",
    "is_missing",
    "is_missing_numeric",
    "is_missing_text",
    "last_changepoint",
    "lm_slope",
    "missing_fraction",
    "peak_prominence",
    # Rhythm
    "cov",
    "cov5_x",
    "jitter_ddp",
    "jitter_local",
    "jitter_ppq5",
    "jitter_rap",
    "npvi",
    "pace_acceleration",
    "relstab",
    "rpvi",
    # Vowel space
    "CornerVector",
    "VowelCenter",
    "continuous_vowel_space_area",
    "mean_corner_vectors",
    "vowel_angles",
    "vowel_center",
    "vowel_corners",
    "vowel_norms",
    "vowel_space_area",
    "vowel_space_density",
    # Profiles
    "ARTICULATION_COLUMNS",
    "articulation_profile",
    "formant_track",
    "intensity_track",
    "rhythm_profile",
    "syllable_durations",
    "to_json_safe",
    "vowel_space_profile",
]

__version__ = "0.3.0"
