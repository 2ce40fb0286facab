"""Speech rhythm measures over interval durations."""

from __future__ import annotations

from .dispersion import cov, cov5_x, pace_acceleration, relstab
from .jitter import jitter_ddp, jitter_local, jitter_ppq5, jitter_rap
from .pvi import npvi, rpvi

__all__ = [
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
]
