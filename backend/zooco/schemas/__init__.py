"""
Pydantic schemas for entities and API request/response validation.
"""
from zooco.schemas.pet import (
    Pet,
    PetCreate,
    PetUpdate,
)
from zooco.schemas.reminder import (
    Category,
    Frequency,
    GroupedRemindersResponse,
    Reminder,
    ReminderCreate,
    ReminderResponse,
    ReminderStats,
    ReminderStatus,
    ReminderUpdate,
    TimeSlot,
)

__all__ = [
    # Pet
    "Pet",
    "PetCreate",
    "PetUpdate",
    # Reminder
    "Category",
    "Frequency",
    "GroupedRemindersResponse",
    "Reminder",
    "ReminderCreate",
    "ReminderResponse",
    "ReminderStats",
    "ReminderStatus",
    "ReminderUpdate",
    "TimeSlot",
]
