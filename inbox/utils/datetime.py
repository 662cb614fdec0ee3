"""Helpers for working with timezone-aware datetimes and display labels."""

from __future__ import annotations

import re
from bisect import bisect_right
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_DEFAULT_TIMEZONE: Final[str] = "UTC"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)

# Stand-in for zero-value timestamps so they sort as the oldest possible activity.
EPOCH_MIN: Final[datetime] = datetime.min.replace(tzinfo=timezone.utc)

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 12 * _MONTH
_LONG_TIME = 37 * _YEAR

# (upper bound in seconds, label format, divisor). A divisor of 0 means the
# label is used verbatim.
_MAGNITUDES: Final[tuple[tuple[float, str, int], ...]] = (
    (1, "now", 0),
    (2, "1 second {label}", 0),
    (_MINUTE, "{n} seconds {label}", 1),
    (2 * _MINUTE, "1 minute {label}", 0),
    (_HOUR, "{n} minutes {label}", _MINUTE),
    (2 * _HOUR, "1 hour {label}", 0),
    (_DAY, "{n} hours {label}", _HOUR),
    (2 * _DAY, "1 day {label}", 0),
    (_WEEK, "{n} days {label}", _DAY),
    (2 * _WEEK, "1 week {label}", 0),
    (_MONTH, "{n} weeks {label}", _WEEK),
    (2 * _MONTH, "1 month {label}", 0),
    (_YEAR, "{n} months {label}", _MONTH),
    (18 * _MONTH, "1 year {label}", 0),
    (2 * _YEAR, "2 years {label}", 0),
    (_LONG_TIME, "{n} years {label}", _YEAR),
    (float("inf"), "a long while {label}", 0),
)
_BOUNDS: Final[tuple[float, ...]] = tuple(bound for bound, _, _ in _MAGNITUDES)


@lru_cache(maxsize=16)
def resolve_timezone(tz_name: str | None) -> tzinfo:
    """Resolve ``tz_name`` into a ``tzinfo`` instance.

    Accepts IANA names (``Europe/Madrid``) and fixed offsets such as
    ``UTC-05:00``. Unknown or empty names fall back to UTC.
    """

    name = (tz_name or "").strip() or _DEFAULT_TIMEZONE
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        match = _OFFSET_PATTERN.match(name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return timezone.utc


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_aware(value: datetime | None) -> datetime:
    """Return ``value`` as an aware datetime usable for ordering.

    Naive values are interpreted as UTC. ``None`` and the zero datetime are
    mapped to :data:`EPOCH_MIN` so they compare as very old activity.
    """

    if value is None:
        return EPOCH_MIN
    if value.tzinfo is None:
        if value == datetime.min:
            return EPOCH_MIN
        return value.replace(tzinfo=timezone.utc)
    return value


def ensure_utc_naive(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC without ``tzinfo`` for storage."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def relative_time(value: datetime | None, now: datetime | None = None) -> str:
    """Return a human readable label such as ``"3 hours ago"`` for ``value``."""

    then = ensure_aware(value)
    reference = ensure_aware(now) if now is not None else now_utc()
    if then > reference:
        label = "from now"
        delta = then - reference
    else:
        label = "ago"
        delta = reference - then

    seconds = delta.total_seconds()
    _, template, divisor = _MAGNITUDES[bisect_right(_BOUNDS, seconds)]
    if divisor:
        return template.format(n=int(seconds // divisor), label=label)
    return template.format(label=label)


def format_absolute(value: datetime | None, tz: tzinfo | None = None) -> str:
    """Format ``value`` as ``"Jan 2, 2006, 3:04 PM UTC"`` in ``tz``."""

    if value is None:
        return ""
    localized = ensure_aware(value)
    if localized == EPOCH_MIN:
        return ""
    try:
        localized = localized.astimezone(tz or timezone.utc)
    except OverflowError:
        # Values at the edge of the datetime range are labelled like zero timestamps.
        return ""
    hour = localized.hour % 12 or 12
    zone = localized.tzname() or ""
    return (
        f"{localized:%b} {localized.day}, {localized.year}, "
        f"{hour}:{localized:%M} {localized:%p} {zone}"
    ).rstrip()


__all__ = [
    "EPOCH_MIN",
    "ensure_aware",
    "ensure_utc_naive",
    "format_absolute",
    "now_utc",
    "relative_time",
    "resolve_timezone",
]
