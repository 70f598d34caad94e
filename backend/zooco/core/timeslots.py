"""
Time-slot bucketing.

A reminder's slot is either stored explicitly or derived from the hour of its
start date-time in the local zone:

    [0, 12)  -> Morning
    [12, 17) -> Afternoon
    [17, 24) -> Evening

Night is never derived; it only appears when stored explicitly.
"""
from datetime import date, datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from zooco.schemas.reminder import Reminder, TimeSlot

AFTERNOON_START_HOUR = 12
EVENING_START_HOUR = 17


def local_zone(name: Optional[str] = None) -> tzinfo:
    """Resolve an IANA zone name, defaulting to the configured one."""
    if name is None:
        from zooco.config import settings

        name = settings.timezone
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def to_local(dt: datetime, tz: tzinfo = timezone.utc) -> datetime:
    # Naive datetimes are taken to already be local
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def local_date(dt: datetime, tz: tzinfo = timezone.utc) -> date:
    return to_local(dt, tz).date()


def time_slot_for(dt: datetime, tz: tzinfo = timezone.utc) -> TimeSlot:
    hour = to_local(dt, tz).hour
    if hour < AFTERNOON_START_HOUR:
        return TimeSlot.MORNING
    if hour < EVENING_START_HOUR:
        return TimeSlot.AFTERNOON
    return TimeSlot.EVENING


def resolve_time_slot(reminder: Reminder, tz: tzinfo = timezone.utc) -> TimeSlot:
    """The stored slot if there is one, else the slot derived from the start time."""
    if reminder.time_slot is not None:
        return TimeSlot(reminder.time_slot)
    return time_slot_for(reminder.start_date_time, tz)
