"""Track extraction from in-memory waveforms.

Intensity comes from librosa, formants from Praat's Burg algorithm through
parselmouth. Both backends are optional at import time; calling a function
whose backend is missing raises ``RuntimeError``.
"""

from __future__ import annotations

import warnings
from functools import lru_cache

import numpy as np
from scipy import signal as scipy_signal

from ..config import ArticulationConfig
from ..sequence.missing import as_float_array

try:
    import librosa
    import librosa.feature

    LIBROSA_AVAILABLE = True
except ImportError:
    LIBROSA_AVAILABLE = False
    warnings.warn("librosa not available - intensity tracks disabled")

# Praat formant tracking via Python
try:
    import parselmouth

    PARSELMOUTH_AVAILABLE = True
except ImportError:
    PARSELMOUTH_AVAILABLE = False
    warnings.warn("parselmouth not available - formant tracks disabled")

# Suppress performance-impacting warnings
warnings.filterwarnings("ignore", category=UserWarning, module="librosa")
warnings.filterwarnings("ignore", category=FutureWarning, module="librosa")


@lru_cache(maxsize=64)
def _frame_params(sr: int, frame_ms: int, hop_ms: int) -> tuple[int, int]:
    """Frame/hop sizes in samples, frame rounded up to a power of two"""
    frame = max(64, int(sr * frame_ms / 1000.0))
    hop = max(1, int(sr * hop_ms / 1000.0))

    frame = int(2 ** np.ceil(np.log2(frame)))
    hop = min(hop, frame // 4)

    return frame, hop


def intensity_track(
    y: np.ndarray, sr: int, cfg: ArticulationConfig | None = None
) -> tuple[np.ndarray, np.ndarray]:
    """RMS intensity contour in dB relative to the loudest frame.

    Returns:
        ``(times, level_db)`` with times in seconds at frame centres.
    """

    if not LIBROSA_AVAILABLE:
        raise RuntimeError("librosa is required for intensity_track")

    cfg = cfg or ArticulationConfig()
    audio = np.asarray(y, dtype=np.float32).ravel()
    if audio.size == 0:
        return np.array([], dtype=np.float64), np.array([], dtype=np.float64)

    frame, hop = _frame_params(int(sr), cfg.frame_ms, cfg.hop_ms)
    rms = librosa.feature.rms(y=audio, frame_length=frame, hop_length=hop)[0]
    level_db = librosa.amplitude_to_db(rms + 1e-12, ref=np.max)
    times = librosa.frames_to_time(np.arange(rms.size), sr=sr, hop_length=hop)
    return np.asarray(times, dtype=np.float64), np.asarray(level_db, dtype=np.float64)


def formant_track(
    y: np.ndarray, sr: int, cfg: ArticulationConfig | None = None
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """F1 and F2 tracks (Hz) from Praat's Burg formant analysis.

    Frames where Praat finds no formant hold NaN.
    """

    if not PARSELMOUTH_AVAILABLE:
        raise RuntimeError("parselmouth is required for formant_track")

    cfg = cfg or ArticulationConfig()
    audio = np.asarray(y, dtype=np.float64).ravel()
    if audio.size == 0:
        empty = np.array([], dtype=np.float64)
        return empty, empty.copy(), empty.copy()

    sound = parselmouth.Sound(audio, sampling_frequency=float(sr))
    formant = sound.to_formant_burg(
        time_step=cfg.hop_ms / 1000.0,
        max_number_of_formants=float(cfg.max_formants),
        maximum_formant=cfg.formant_ceiling_hz,
        window_length=cfg.frame_ms / 1000.0,
    )

    times = np.asarray(formant.xs(), dtype=np.float64)
    f1 = np.array([formant.get_value_at_time(1, t) for t in times], dtype=np.float64)
    f2 = np.array([formant.get_value_at_time(2, t) for t in times], dtype=np.float64)
    return times, f1, f2


def syllable_durations(
    level_db: np.ndarray,
    times: np.ndarray | None = None,
    cfg: ArticulationConfig | None = None,
) -> np.ndarray:
    """Durations of syllable-like runs of frames above the intensity threshold.

    With ``times`` a run lasts from the time of its first frame to the time
    of its last frame; without, it lasts ``frames * cfg.frame_step_sec``.
    Runs shorter than ``cfg.min_syllable_sec`` are dropped.
    """

    cfg = cfg or ArticulationConfig()
    level = as_float_array(level_db)
    if times is not None:
        times = as_float_array(times)
        if times.size != level.size:
            raise ValueError(
                f"times and level must have the same length, got {times.size} and {level.size}"
            )

    if level.size == 0:
        return np.array([], dtype=np.float64)

    with np.errstate(invalid="ignore"):
        above = level > cfg.intensity_threshold_db

    # Median smoothing removes single-frame dips and spikes
    kernel = cfg.smooth_frames
    if kernel >= 3 and kernel % 2 == 1 and above.size > kernel:
        above = scipy_signal.medfilt(above.astype(np.float64), kernel) > 0.5

    edges = np.diff(np.concatenate(([0], above.astype(np.int8), [0])))
    starts = np.flatnonzero(edges == 1)
    stops = np.flatnonzero(edges == -1) - 1

    if times is not None:
        durations = times[stops] - times[starts]
    else:
        durations = (stops - starts + 1) * cfg.frame_step_sec

    durations = np.asarray(durations, dtype=np.float64)
    return durations[durations >= cfg.min_syllable_sec]


__all__ = [
    "intensity_track",
    "formant_track",
    "syllable_durations",
    "LIBROSA_AVAILABLE",
    "PARSELMOUTH_AVAILABLE",
]
