"""
Read views over a snapshot of reminders.

Everything here is a pure function of its inputs: nothing is mutated and
nothing raises. Missing filters match everything; empty input gives empty
output.
"""
from datetime import date, timezone, tzinfo
from typing import Dict, Iterable, List, Optional, Tuple

from zooco.core.timeslots import local_date, resolve_time_slot
from zooco.schemas.reminder import Reminder, ReminderStats, ReminderStatus, TimeSlot


def filter_reminders(
    reminders: Iterable[Reminder],
    on: date,
    pet_id: Optional[str] = None,
    category: Optional[str] = None,
    tz: tzinfo = timezone.utc,
) -> List[Reminder]:
    """Reminders starting on the calendar day `on`, optionally narrowed by pet and category."""
    return [
        reminder
        for reminder in reminders
        if local_date(reminder.start_date_time, tz) == on
        and (not pet_id or reminder.pet_id == pet_id)
        and (not category or reminder.category == category)
    ]


def group_by_time_slot(
    reminders: Iterable[Reminder],
    tz: tzinfo = timezone.utc,
) -> Dict[TimeSlot, List[Reminder]]:
    """
    Partition reminders into the fixed time-slot buckets.

    Every slot is present in the result, even when empty. Buckets are sorted
    by start time; `sorted` is stable so ties keep their input order.
    """
    grouped: Dict[TimeSlot, List[Reminder]] = {slot: [] for slot in TimeSlot}
    for reminder in reminders:
        grouped[resolve_time_slot(reminder, tz)].append(reminder)

    return {
        slot: sorted(items, key=lambda r: r.start_date_time.timestamp())
        for slot, items in grouped.items()
    }


def grouped_reminders(
    reminders: Iterable[Reminder],
    on: date,
    pet_id: Optional[str] = None,
    category: Optional[str] = None,
    tz: tzinfo = timezone.utc,
) -> Dict[TimeSlot, List[Reminder]]:
    return group_by_time_slot(filter_reminders(reminders, on, pet_id, category, tz), tz)


def today_counts(
    reminders: Iterable[Reminder],
    today: date,
    tz: tzinfo = timezone.utc,
) -> Tuple[int, int]:
    """Return `(completed, total)` for reminders starting on `today`."""
    todays = [r for r in reminders if local_date(r.start_date_time, tz) == today]
    completed = sum(1 for r in todays if r.status == ReminderStatus.COMPLETED)
    return completed, len(todays)


def completion_rate(completed: int, total: int) -> int:
    """Percentage rounded half up; 0 when there is nothing to complete."""
    if total <= 0:
        return 0
    return (completed * 200 + total) // (total * 2)


def best_streak(reminders: Iterable[Reminder]) -> int:
    return max((r.streak for r in reminders), default=0)


def reminder_stats(
    reminders: Iterable[Reminder],
    today: date,
    tz: tzinfo = timezone.utc,
) -> ReminderStats:
    snapshot = list(reminders)
    completed, total = today_counts(snapshot, today, tz)
    return ReminderStats(
        completed_today=completed,
        total_today=total,
        completion_rate=completion_rate(completed, total),
        best_streak=best_streak(snapshot),
    )
