"""
Core reminder logic: time slots, grouping, completion and the client-side store.
"""
from zooco.core.completion import mark_complete, toggle_completion
from zooco.core.errors import NotFoundError, TransportError, ValidationError, ZoocoError
from zooco.core.grouping import (
    best_streak,
    completion_rate,
    filter_reminders,
    group_by_time_slot,
    grouped_reminders,
    reminder_stats,
    today_counts,
)
from zooco.core.timeslots import resolve_time_slot, time_slot_for

__all__ = [
    "mark_complete",
    "toggle_completion",
    "NotFoundError",
    "TransportError",
    "ValidationError",
    "ZoocoError",
    "best_streak",
    "completion_rate",
    "filter_reminders",
    "group_by_time_slot",
    "grouped_reminders",
    "reminder_stats",
    "today_counts",
    "resolve_time_slot",
    "time_slot_for",
]
