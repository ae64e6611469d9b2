"""Utility helpers for reusable functionality."""

from .datetime import (
    DUE_DATE_PRESETS,
    TIME_RANGES,
    due_date_window,
    ensure_naive_utc,
    now_utc,
    shift_back,
    start_of_day,
)

__all__ = [
    "DUE_DATE_PRESETS",
    "TIME_RANGES",
    "due_date_window",
    "ensure_naive_utc",
    "now_utc",
    "shift_back",
    "start_of_day",
]
