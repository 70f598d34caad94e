"""Time-slot bucketing tests."""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from conftest import at
from zooco.core.timeslots import local_date, local_zone, resolve_time_slot, time_slot_for
from zooco.schemas.reminder import TimeSlot


@pytest.mark.parametrize(
    "hour, minute, expected",
    [
        (0, 0, TimeSlot.MORNING),
        (11, 59, TimeSlot.MORNING),
        (12, 0, TimeSlot.AFTERNOON),
        (16, 30, TimeSlot.AFTERNOON),
        (16, 59, TimeSlot.AFTERNOON),
        (17, 0, TimeSlot.EVENING),
        (23, 59, TimeSlot.EVENING),
    ],
)
def test_time_slot_boundaries(hour: int, minute: int, expected: TimeSlot) -> None:
    assert time_slot_for(at(hour, minute)) == expected


def test_time_slot_uses_local_hour() -> None:
    paris = ZoneInfo("Europe/Paris")
    # 16:30 UTC is 18:30 in Paris during summer time
    assert time_slot_for(at(16, 30), paris) == TimeSlot.EVENING
    assert time_slot_for(at(16, 30)) == TimeSlot.AFTERNOON


def test_naive_datetime_is_taken_as_local() -> None:
    paris = ZoneInfo("Europe/Paris")
    assert time_slot_for(datetime(2024, 5, 14, 9, 0), paris) == TimeSlot.MORNING


def test_local_date_crosses_midnight() -> None:
    tokyo = ZoneInfo("Asia/Tokyo")
    instant = at(20)  # 05:00 next day in Tokyo
    assert local_date(instant) == instant.date()
    assert local_date(instant, tokyo).day == 15


def test_stored_slot_wins_over_derived(make_reminder) -> None:
    reminder = make_reminder(start_date_time=at(8), time_slot=TimeSlot.NIGHT)
    assert resolve_time_slot(reminder) == TimeSlot.NIGHT


def test_missing_slot_is_derived(make_reminder) -> None:
    reminder = make_reminder(start_date_time=at(19))
    assert reminder.time_slot is None
    assert resolve_time_slot(reminder) == TimeSlot.EVENING


def test_local_zone_resolves_names() -> None:
    assert local_zone("UTC") is timezone.utc
    assert local_zone("Europe/Paris") == ZoneInfo("Europe/Paris")
