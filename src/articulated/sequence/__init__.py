"""Sequence utilities: missing-value classification and trend fitting."""

from __future__ import annotations

from .missing import (
    as_float_array,
    drop_missing,
    first_changepoint,
    is_missing,
    is_missing_numeric,
    is_missing_text,
    last_changepoint,
    missing_fraction,
)
from .trend import lm_slope, peak_prominence

__all__ = [
    "as_float_array",
    "drop_missing",
    "first_changepoint",
    "is_missing",
    "is_missing_numeric",
    "is_missing_text",
    "last_changepoint",
    "lm_slope",
    "missing_fraction",
    "peak_prominence",
]
