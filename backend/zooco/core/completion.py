"""
Completion and streak transitions.

A reminder is either Pending or Completed and only moves between the two when
the user asks. Each completion adds one to the streak, each un-completion
takes one away (never below zero). `last_completed` is set while the
reminder is completed and cleared when it is un-completed.
"""
from datetime import datetime

from zooco.schemas.reminder import Reminder, ReminderStatus


def _completed(reminder: Reminder, now: datetime) -> Reminder:
    return reminder.model_copy(
        update={
            "status": ReminderStatus.COMPLETED,
            "last_completed": now,
            "streak": reminder.streak + 1,
            "updated_at": now,
        }
    )


def _reopened(reminder: Reminder, now: datetime) -> Reminder:
    return reminder.model_copy(
        update={
            "status": ReminderStatus.PENDING,
            "last_completed": None,
            "streak": max(0, reminder.streak - 1),
            "updated_at": now,
        }
    )


def toggle_completion(reminder: Reminder, now: datetime) -> Reminder:
    """Flip the completion status, returning a new reminder."""
    if reminder.status == ReminderStatus.COMPLETED:
        return _reopened(reminder, now)
    return _completed(reminder, now)


def mark_complete(reminder: Reminder, now: datetime) -> Reminder:
    """One-way completion; an already completed reminder comes back unchanged."""
    if reminder.status == ReminderStatus.COMPLETED:
        return reminder
    return _completed(reminder, now)


def completion_changes(reminder: Reminder) -> dict:
    """The fields a completion transition touches, for a repository update."""
    return {
        "status": reminder.status,
        "last_completed": reminder.last_completed,
        "streak": reminder.streak,
    }
