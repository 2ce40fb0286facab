"""Configuration for articulation profiles.

The measure functions themselves take plain keyword arguments; this
configuration only drives the profile helpers in :mod:`articulated.profiles`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticulationConfig:
    """Defaults for rhythm and vowel space profiling"""

    # Missing-value rule for tracks (values <= threshold are unvoiced/undefined)
    missing_threshold: float = 0.0

    # Skodda DDK block (syllable repetition)
    cov5_n: int = 20
    on_short: str = "undefined"  # or "fail"
    relstab_early: tuple[int, int] = (5, 12)
    relstab_late: tuple[int, int] = (13, 20)
    ddk_min_count: int = 20

    # Jitter over syllable durations, bounded by duration quantiles
    jitter_min_count: int = 5
    jitter_lower_quantile: float = 0.05
    jitter_upper_quantile: float = 0.95

    # Vowel space
    center_method: str = "wcentroid"
    min_vowels: int = 3
    minimum_vectors: int = 3
    vowel_space_method: str = "basic"  # or "density", "continuous"
    vsd_resolution: float = 0.05
    vsd_grid_res: float = 0.01
    vsd_density_threshold: float = 0.25
    cvsa_components: int = 5
    cvsa_threshold: float = 0.3

    # Syllable detection from an intensity contour
    intensity_threshold_db: float = -20.0
    min_syllable_sec: float = 0.05
    frame_step_sec: float = 0.005  # Used when no time axis accompanies the contour
    smooth_frames: int = 3  # Median filter length on the voiced mask (odd, 1 disables)

    # Waveform framing for intensity and formant tracks
    frame_ms: int = 25
    hop_ms: int = 5
    max_formants: int = 5
    formant_ceiling_hz: float = 5500.0


def get_config_preset(preset_name: str) -> ArticulationConfig:
    """
    Get predefined configuration presets for common recording tasks

    Args:
        preset_name: Name of preset ("balanced", "ddk", "conversational", "strict")

    Returns:
        Configured ArticulationConfig object
    """

    if preset_name == "balanced":
        return ArticulationConfig()

    elif preset_name == "ddk":
        # Rapid /pa/-/ta/-/ka/ repetition: short syllables, dense framing
        return ArticulationConfig(
            min_syllable_sec=0.03,
            intensity_threshold_db=-25.0,
            hop_ms=2,
            smooth_frames=5,
        )

    elif preset_name == "conversational":
        # Running speech: longer syllables, more material before jitter is trusted
        return ArticulationConfig(
            min_syllable_sec=0.08,
            intensity_threshold_db=-30.0,
            hop_ms=10,
            jitter_min_count=10,
            min_vowels=10,
        )

    elif preset_name == "strict":
        # Raise instead of returning NaN when a DDK recording is too short
        return ArticulationConfig(on_short="fail")

    else:
        raise ValueError(
            f"Unknown preset: {preset_name}. Available: balanced, ddk, conversational, strict"
        )


__all__ = ["ArticulationConfig", "get_config_preset"]
