"""Aggregate rhythm and vowel space profiles.

Each profile collects the individual measures into a flat dictionary,
suitable as one row of a per-recording feature table.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from ..config import ArticulationConfig
from ..rhythm import (
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
from ..sequence import (
    as_float_array,
    drop_missing,
    first_changepoint,
    is_missing_numeric,
    last_changepoint,
    lm_slope,
    missing_fraction,
    peak_prominence,
)
from ..vowelspace import (
    continuous_vowel_space_area,
    mean_corner_vectors,
    vowel_center,
    vowel_norms,
    vowel_space_area,
    vowel_space_density,
)
from .audio import formant_track, intensity_track, syllable_durations
from .outputs import ensure_feature_keys

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = "Insufficient data"


def rhythm_profile(durations: Any, cfg: ArticulationConfig | None = None) -> dict[str, Any]:
    """
    Rhythm measures for a sequence of syllable (or interval) durations

    Args:
        durations: Interval durations in temporal order; NaN entries are dropped
        cfg: Configuration object

    Returns:
        Descriptive statistics, CV and PVIs; the Skodda DDK block once
        ``cfg.ddk_min_count`` durations are available; jitter measures
        (bounded by duration quantiles) once ``cfg.jitter_min_count`` are.
    """

    cfg = cfg or ArticulationConfig()
    x = drop_missing(durations)
    n = int(x.size)

    if n < 2:
        logger.warning("Insufficient syllables detected (%d < 2)", n)
        return {"n_syllables": n, "error": INSUFFICIENT_DATA}

    result: dict[str, Any] = {
        "n_syllables": n,
        "mean_duration": float(np.mean(x)),
        "sd_duration": float(np.std(x, ddof=1)),
        "min_duration": float(np.min(x)),
        "max_duration": float(np.max(x)),
        "total_duration": float(np.sum(x)),
        "cov": cov(x),
        "rpvi": rpvi(x),
        "npvi": npvi(x),
    }

    if n >= cfg.ddk_min_count:
        early_start, early_stop = cfg.relstab_early
        late_start, late_stop = cfg.relstab_late
        result[f"cov5_{cfg.cov5_n}"] = cov5_x(x, n=cfg.cov5_n, on_short=cfg.on_short)
        result["pace_acceleration"] = pace_acceleration(
            x, early=cfg.relstab_early, late=cfg.relstab_late
        )
        result[f"relstab_{early_start}_{early_stop}"] = relstab(x, early_start, early_stop)
        result[f"relstab_{late_start}_{late_stop}"] = relstab(x, late_start, late_stop)

    if n >= cfg.jitter_min_count:
        min_period, max_period = np.quantile(
            x, [cfg.jitter_lower_quantile, cfg.jitter_upper_quantile]
        )
        result["jitter_local"] = jitter_local(x, min_period, max_period)
        result["jitter_rap"] = jitter_rap(x, min_period, max_period)
        result["jitter_ppq5"] = jitter_ppq5(x, min_period, max_period)
        result["jitter_ddp"] = jitter_ddp(x, min_period, max_period)

    return result


VOWEL_SPACE_METHODS = ("basic", "density", "continuous")


def vowel_space_profile(
    f1: Any,
    f2: Any,
    cfg: ArticulationConfig | None = None,
    method: str | None = None,
    times: Any = None,
    time_range: tuple[float, float] | None = None,
) -> dict[str, Any]:
    """
    Vowel space measures for paired F1/F2 measurements

    Vowels with a missing formant (non-finite or at/below
    ``cfg.missing_threshold``) are dropped from both tracks before anything
    is computed.

    Args:
        f1, f2: Formant measurements in Hz, one pair per vowel or frame
        cfg: Configuration object
        method: ``"basic"`` (center, norms and convex hull area),
            ``"density"`` (vowel space density area) or ``"continuous"``
            (GMM-filtered area); defaults to ``cfg.vowel_space_method``
        times: Time of each measurement in seconds, used with ``time_range``
        time_range: Inclusive ``(start, end)`` window in seconds; ignored
            with a warning when ``times`` is not given

    Returns:
        Descriptive formant statistics plus the measures of ``method``
    """

    cfg = cfg or ArticulationConfig()
    method = method or cfg.vowel_space_method
    if method not in VOWEL_SPACE_METHODS:
        raise ValueError(
            f"Invalid method {method!r}. Must be one of {', '.join(VOWEL_SPACE_METHODS)}"
        )

    a = as_float_array(f1)
    b = as_float_array(f2)
    if a.size != b.size:
        raise ValueError(f"F1 and F2 must have the same length, got {a.size} and {b.size}")

    if time_range is not None:
        if times is None:
            logger.warning("No time axis given; ignoring time_range %s", time_range)
        else:
            t = as_float_array(times)
            if t.size != a.size:
                raise ValueError(
                    f"times and formants must have the same length, got {t.size} and {a.size}"
                )
            window = (t >= time_range[0]) & (t <= time_range[1])
            a, b = a[window], b[window]

    valid = (
        np.isfinite(a)
        & np.isfinite(b)
        & ~is_missing_numeric(a, cfg.missing_threshold)
        & ~is_missing_numeric(b, cfg.missing_threshold)
    )
    a, b = a[valid], b[valid]
    n = int(a.size)

    if n < cfg.min_vowels:
        logger.warning("Insufficient valid formant measurements (%d < %d)", n, cfg.min_vowels)
        return {"n_vowels": n, "error": INSUFFICIENT_DATA}

    result: dict[str, Any] = {
        "n_vowels": n,
        "f1_mean": float(np.mean(a)),
        "f1_sd": float(np.std(a, ddof=1)),
        "f1_range": float(np.ptp(a)),
        "f2_mean": float(np.mean(b)),
        "f2_sd": float(np.std(b, ddof=1)),
        "f2_range": float(np.ptp(b)),
    }

    if method == "density":
        result["vsd"] = vowel_space_density(
            a,
            b,
            resolution=cfg.vsd_resolution,
            grid_res=cfg.vsd_grid_res,
            density_threshold=cfg.vsd_density_threshold,
        )
        return result

    if method == "continuous":
        result["cvsa"] = continuous_vowel_space_area(
            a, b, vowel_categories=cfg.cvsa_components, threshold=cfg.cvsa_threshold
        )
        return result

    center = vowel_center(a, b, method=cfg.center_method)
    norms = vowel_norms(a, b, center.f1c, center.f2c)
    corners = mean_corner_vectors(a, b, center=center, minimum_vectors=cfg.minimum_vectors)

    result.update(
        {
            "f1_center": center.f1c,
            "f2_center": center.f2c,
            "mean_norm": float(np.mean(norms)),
            "sd_norm": float(np.std(norms, ddof=1)),
            "cv_norm": cov(norms),
            "n_corners": len(corners),
            "vsa": vowel_space_area(a, b),
        }
    )
    return result


_RHYTHM_RENAMES = {
    "mean_duration": "mean_syllable_duration",
    "sd_duration": "sd_syllable_duration",
    "min_duration": "min_syllable_duration",
    "max_duration": "max_syllable_duration",
    "cov": "cov_syllable",
    "error": "rhythm_error",
}


def articulation_profile(
    y: np.ndarray, sr: int, cfg: ArticulationConfig | None = None
) -> dict[str, Any]:
    """Complete articulation feature row for one waveform.

    Extracts intensity and formant tracks, derives syllable durations from
    the intensity contour and combines the vowel space and rhythm profiles
    with a few track-shape descriptors. Every key of
    :data:`~articulated.profiles.outputs.ARTICULATION_COLUMNS` is present.
    """

    cfg = cfg or ArticulationConfig()
    audio = np.asarray(y, dtype=np.float32).ravel()
    row: dict[str, Any] = {"duration_s": float(audio.size / max(1, sr))}

    logger.debug("Extracting formants (%.2f s)", row["duration_s"])
    _, f1, f2 = formant_track(audio, sr, cfg)
    threshold = cfg.missing_threshold
    row["f1_missing_fraction"] = missing_fraction(f1, threshold)
    row["f1_onset_frame"] = first_changepoint(f1, threshold)
    row["f1_offset_frame"] = last_changepoint(f1, threshold)
    row["f1_slope"] = lm_slope(f1, threshold)
    row["f2_slope"] = lm_slope(f2, threshold)

    vowel_space = vowel_space_profile(f1, f2, cfg)
    for key, value in vowel_space.items():
        row["vowel_space_error" if key == "error" else key] = value

    logger.debug("Extracting intensity")
    times, level_db = intensity_track(audio, sr, cfg)
    # Levels are dB re peak (<= 0); only NaN is missing
    row["intensity_slope_db"] = lm_slope(level_db, threshold=-np.inf)
    row["intensity_peak_prominence_db"] = peak_prominence(level_db, threshold=-np.inf)

    durations = syllable_durations(level_db, times, cfg)
    rhythm = rhythm_profile(durations, cfg)
    for key, value in rhythm.items():
        row[_RHYTHM_RENAMES.get(key, key)] = value

    return ensure_feature_keys(row)


__all__ = [
    "rhythm_profile",
    "vowel_space_profile",
    "articulation_profile",
    "INSUFFICIENT_DATA",
    "VOWEL_SPACE_METHODS",
]
