"""Local clock helpers driven by the provider's UTC offset in seconds.

The offset is truncated to whole minutes and the clock wraps around midnight
in both directions. Only the wall-clock time is reported; the date is not
tracked.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

MINUTES_PER_DAY = 24 * 60


def _offset_minutes(offset_seconds: int) -> int:
    offset = int(offset_seconds)
    minutes = abs(offset) // 60
    return minutes if offset >= 0 else -minutes


def _twelve_hour_clock(hours: int, minutes: int, offset_seconds: int) -> str:
    total = (hours * 60 + minutes + _offset_minutes(offset_seconds)) % MINUTES_PER_DAY
    hour, minute = divmod(total, 60)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02d} {suffix}"


def convert_unix_to_time(unix: int, offset_seconds: int) -> str:
    """Render a UTC epoch as ``H:MM AM/PM`` in the location's local time."""
    instant = datetime.fromtimestamp(int(unix), tz=timezone.utc)
    return _twelve_hour_clock(instant.hour, instant.minute, offset_seconds)


def get_local_time(offset_seconds: int, now: Optional[datetime] = None) -> str:
    """Current local wall-clock time, derived from the server's UTC clock."""
    now = now or datetime.now(tz=timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return _twelve_hour_clock(now.hour, now.minute, offset_seconds)


def format_timezone(offset_seconds: int) -> str:
    offset = int(offset_seconds)
    sign = "+" if offset >= 0 else "-"
    hours, remainder = divmod(abs(offset), 3600)
    return f"GMT{sign}{hours:02d}:{remainder // 60:02d}"


def local_date(unix: int, offset_seconds: int) -> str:
    """Calendar date (YYYY-MM-DD) of a UTC epoch shifted by the offset."""
    shifted = datetime.fromtimestamp(int(unix) + int(offset_seconds), tz=timezone.utc)
    return shifted.date().isoformat()


__all__ = ["convert_unix_to_time", "format_timezone", "get_local_time", "local_date"]
