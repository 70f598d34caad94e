"""
Reminder schemas and enumerations.
"""
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field

from zooco.schemas.pet import Pet


class Category(str, Enum):
    GENERAL = "General"
    LIFESTYLE = "Lifestyle"
    HEALTH = "Health"


class Frequency(str, Enum):
    """Informational only; no occurrences are generated from it."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    CUSTOM = "Custom"


class TimeSlot(str, Enum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"


class ReminderStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


class ReminderCreate(BaseModel):
    title: str = Field(..., min_length=1)
    pet_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("pet_id", "petId", "pet")
    )
    category: Category
    notes: Optional[str] = None
    start_date_time: datetime = Field(
        ..., validation_alias=AliasChoices("start_date_time", "startDateTime", "startDate")
    )
    frequency: Frequency
    # Derived from start_date_time when omitted
    time_slot: Optional[TimeSlot] = Field(
        None, validation_alias=AliasChoices("time_slot", "timeSlot")
    )

    class Config:
        str_strip_whitespace = True


class ReminderUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    pet_id: Optional[str] = Field(
        None, min_length=1, validation_alias=AliasChoices("pet_id", "petId", "pet")
    )
    category: Optional[Category] = None
    notes: Optional[str] = None
    start_date_time: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("start_date_time", "startDateTime", "startDate")
    )
    frequency: Optional[Frequency] = None
    time_slot: Optional[TimeSlot] = Field(
        None, validation_alias=AliasChoices("time_slot", "timeSlot")
    )

    class Config:
        str_strip_whitespace = True


class Reminder(BaseModel):
    """A stored reminder. `id` is assigned by the repository on insert."""

    id: Optional[str] = None
    title: str
    pet_id: str
    category: Category
    notes: Optional[str] = None
    start_date_time: datetime
    frequency: Frequency
    time_slot: Optional[TimeSlot] = None
    status: ReminderStatus = ReminderStatus.PENDING
    last_completed: Optional[datetime] = None
    streak: int = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @property
    def is_completed(self) -> bool:
        return self.status == ReminderStatus.COMPLETED


class ReminderResponse(Reminder):
    """Reminder as served over HTTP, with a read-only pet snapshot."""

    pet: Optional[Pet] = None
    slot: TimeSlot


class GroupedRemindersResponse(BaseModel):
    date: date
    groups: Dict[TimeSlot, List[ReminderResponse]]


class ReminderStats(BaseModel):
    completed_today: int
    total_today: int
    completion_rate: int
    best_streak: int
