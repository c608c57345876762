from __future__ import annotations

from datetime import datetime, timezone

import pytest

from mausam.core.timefmt import convert_unix_to_time, format_timezone, get_local_time, local_date

# 2024-01-01 00:00:00 UTC
MIDNIGHT = 1704067200


def test_half_hour_offset() -> None:
    assert convert_unix_to_time(MIDNIGHT, 19800) == "5:30 AM"


def test_rollover_past_midnight_wraps() -> None:
    assert convert_unix_to_time(MIDNIGHT + 23 * 3600, 7200) == "1:00 AM"


def test_minute_carry_into_next_hour() -> None:
    # 10:45 UTC + 5:30 -> 16:15
    assert convert_unix_to_time(MIDNIGHT + 10 * 3600 + 45 * 60, 19800) == "4:15 PM"


@pytest.mark.parametrize(
    "unix, expected",
    [
        (MIDNIGHT, "12:00 AM"),
        (MIDNIGHT + 12 * 3600, "12:00 PM"),
        (MIDNIGHT + 13 * 3600 + 5 * 60, "1:05 PM"),
    ],
)
def test_twelve_hour_rendering(unix: int, expected: str) -> None:
    assert convert_unix_to_time(unix, 0) == expected


def test_negative_offset_wraps_backwards() -> None:
    # 01:00 UTC in UTC-5 -> 20:00 the previous day
    assert convert_unix_to_time(MIDNIGHT + 3600, -18000) == "8:00 PM"
    # 00:00 UTC in UTC-3:30 -> 20:30
    assert convert_unix_to_time(MIDNIGHT, -12600) == "8:30 PM"


def test_seconds_in_offset_are_dropped() -> None:
    assert convert_unix_to_time(MIDNIGHT, 19859) == "5:30 AM"


@pytest.mark.parametrize(
    "offset, expected",
    [
        (0, "GMT+00:00"),
        (19800, "GMT+05:30"),
        (-18000, "GMT-05:00"),
        (-12600, "GMT-03:30"),
        (45900, "GMT+12:45"),
    ],
)
def test_format_timezone(offset: int, expected: str) -> None:
    assert format_timezone(offset) == expected


def test_local_time_uses_injected_clock() -> None:
    now = datetime(2024, 6, 1, 23, 10, tzinfo=timezone.utc)

    assert get_local_time(7200, now) == "1:10 AM"


def test_local_time_defaults_to_wall_clock() -> None:
    value = get_local_time(0)

    hours, rest = value.split(":")
    assert 1 <= int(hours) <= 12
    assert rest[-2:] in {"AM", "PM"}


def test_local_date_applies_offset() -> None:
    assert local_date(MIDNIGHT - 3600, 0) == "2023-12-31"
    assert local_date(MIDNIGHT - 3600, 7200) == "2024-01-01"
