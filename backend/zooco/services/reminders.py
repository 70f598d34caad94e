"""
Reminder service: validation, repository access, grouping and completion.
"""
from datetime import date, timezone, tzinfo
from typing import Dict, List, Optional

from zooco.core.clock import Clock, utcnow
from zooco.core.completion import completion_changes, mark_complete, toggle_completion
from zooco.core.errors import NotFoundError
from zooco.core.grouping import grouped_reminders, reminder_stats
from zooco.core.logging import logger
from zooco.core.timeslots import local_date, resolve_time_slot
from zooco.core.validation import (
    Payload,
    validate_reminder_create,
    validate_reminder_update,
)
from zooco.repositories.base import PetRepository, ReminderRepository
from zooco.schemas.pet import Pet
from zooco.schemas.reminder import (
    Category,
    Reminder,
    ReminderResponse,
    ReminderStats,
    ReminderStatus,
    TimeSlot,
)


class ReminderService:
    """
    Operations on reminders.

    The service is the only writer of reminder state: payloads are validated
    before the repository is touched, and completion transitions go through
    the completion engine rather than through plain updates.
    """

    def __init__(
        self,
        reminders: ReminderRepository,
        pets: Optional[PetRepository] = None,
        clock: Clock = utcnow,
        tz: tzinfo = timezone.utc,
    ):
        self.reminders = reminders
        self.pets = pets
        self.tz = tz
        self._clock = clock

    def today(self) -> date:
        return local_date(self._clock(), self.tz)

    async def list_reminders(self) -> List[Reminder]:
        return await self.reminders.list()

    async def list_reminders_for_pet(self, pet_id: str) -> List[Reminder]:
        return await self.reminders.list_by_pet(pet_id)

    async def get_reminder(self, reminder_id: str) -> Reminder:
        reminder = await self.reminders.get(reminder_id)
        if reminder is None:
            logger.warning("Reminder %s not found", reminder_id)
            raise NotFoundError("Reminder not found")
        return reminder

    async def create_reminder(self, payload: Payload) -> Reminder:
        """
        Validate and store a new reminder.

        New reminders start Pending with a zero streak. When no time slot is
        given it stays unset and is derived from the start time on read.

        Raises:
            ValidationError: a required field is missing or malformed.
        """
        data = validate_reminder_create(payload, self.tz)
        now = self._clock()
        reminder = Reminder(
            **data,
            status=ReminderStatus.PENDING,
            streak=0,
            last_completed=None,
            created_at=now,
            updated_at=now,
        )
        stored = await self.reminders.add(reminder)
        logger.info("Created reminder %s for pet %s", stored.id, stored.pet_id)
        return stored

    async def update_reminder(self, reminder_id: str, payload: Payload) -> Reminder:
        """
        Apply a partial patch. Only fields present in the payload change.

        Raises:
            ValidationError: the patch nulls a required field or is malformed.
            NotFoundError: no reminder has this id.
        """
        changes = validate_reminder_update(payload, self.tz)
        try:
            reminder = await self.reminders.update(reminder_id, changes)
        except NotFoundError:
            logger.warning("Cannot update missing reminder %s", reminder_id)
            raise
        logger.info("Updated reminder %s: %s", reminder_id, ", ".join(changes) or "no fields")
        return reminder

    async def delete_reminder(self, reminder_id: str) -> bool:
        removed = await self.reminders.remove(reminder_id)
        if removed:
            logger.info("Deleted reminder %s", reminder_id)
        else:
            logger.warning("Reminder %s already absent, nothing deleted", reminder_id)
        return removed

    async def toggle_reminder(self, reminder_id: str) -> Reminder:
        """Flip Pending/Completed and adjust the streak."""
        current = await self.get_reminder(reminder_id)
        toggled = toggle_completion(current, self._clock())
        reminder = await self.reminders.update(reminder_id, completion_changes(toggled))
        logger.info(
            "Reminder %s is now %s (streak %d)",
            reminder_id,
            reminder.status.value,
            reminder.streak,
        )
        return reminder

    async def complete_reminder(self, reminder_id: str) -> Reminder:
        """Mark a reminder completed; completing it again changes nothing."""
        current = await self.get_reminder(reminder_id)
        if current.is_completed:
            return current
        completed = mark_complete(current, self._clock())
        reminder = await self.reminders.update(reminder_id, completion_changes(completed))
        logger.info("Completed reminder %s (streak %d)", reminder_id, reminder.streak)
        return reminder

    async def grouped_reminders(
        self,
        on: Optional[date] = None,
        pet_id: Optional[str] = None,
        category: Optional[Category] = None,
    ) -> Dict[TimeSlot, List[Reminder]]:
        reminders = await self.reminders.list()
        return grouped_reminders(reminders, on or self.today(), pet_id, category, self.tz)

    async def stats(self, today: Optional[date] = None) -> ReminderStats:
        reminders = await self.reminders.list()
        return reminder_stats(reminders, today or self.today(), self.tz)

    async def to_responses(self, reminders: List[Reminder]) -> List[ReminderResponse]:
        """Attach the current pet snapshot and resolved time slot to each reminder."""
        pets: Dict[str, Pet] = {}
        if self.pets is not None and reminders:
            pets = {pet.id: pet for pet in await self.pets.list()}
        return [
            ReminderResponse(
                **reminder.model_dump(),
                pet=pets.get(reminder.pet_id),
                slot=resolve_time_slot(reminder, self.tz),
            )
            for reminder in reminders
        ]

    async def to_response(self, reminder: Reminder) -> ReminderResponse:
        return (await self.to_responses([reminder]))[0]
