"""Utility helpers for reusable functionality."""

from .datetime import (
    EPOCH_MIN,
    ensure_aware,
    ensure_utc_naive,
    format_absolute,
    now_utc,
    relative_time,
    resolve_timezone,
)

__all__ = [
    "EPOCH_MIN",
    "ensure_aware",
    "ensure_utc_naive",
    "format_absolute",
    "now_utc",
    "relative_time",
    "resolve_timezone",
]
