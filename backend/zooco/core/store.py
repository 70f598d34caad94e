"""
Client-side reminder state container.

The store keeps a local copy of the reminders plus the current view filters
(selected day, pet and category) and answers the view queries the UI needs.
It is built once by the application and handed to whoever renders it.

Mutations go through a backend, which is either the in-process
`ReminderService` or the HTTP `ZoocoClient`; both expose the same coroutine
methods. Whatever the backend returns replaces the local copy, so the store
never recomputes streaks on its own. A failed mutation records the error,
notifies listeners, leaves the local reminders untouched and re-raises.
"""
from datetime import date, timezone, tzinfo
from typing import Any, Callable, Dict, List, Optional

from zooco.core.clock import Clock, utcnow
from zooco.core.grouping import (
    best_streak,
    completion_rate,
    filter_reminders,
    group_by_time_slot,
    today_counts,
)
from zooco.core.logging import logger
from zooco.core.timeslots import local_date
from zooco.core.validation import Payload
from zooco.schemas.reminder import Reminder, TimeSlot

Listener = Callable[["ReminderStore"], None]
PersistHook = Callable[[Dict[str, Any]], None]


class ReminderStore:
    def __init__(
        self,
        backend: Any,
        clock: Clock = utcnow,
        tz: tzinfo = timezone.utc,
        persist: Optional[PersistHook] = None,
    ):
        self.backend = backend
        self.tz = tz
        self._clock = clock
        self._persist = persist
        self._listeners: List[Listener] = []

        self.reminders: List[Reminder] = []
        self.selected_date: date = self.today()
        self.selected_pet: Optional[str] = None
        self.selected_category: Optional[str] = None
        self.is_loading = False
        self.error: Optional[str] = None

    def today(self) -> date:
        return local_date(self._clock(), self.tz)

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self, name, value)
        for listener in list(self._listeners):
            listener(self)

    def _save(self) -> None:
        if self._persist is not None:
            self._persist(self.dump_state())

    def _commit(self, reminders: List[Reminder]) -> None:
        self._set(reminders=reminders, is_loading=False)
        self._save()

    def _fail(self, message: str, exc: Exception) -> None:
        detail = getattr(exc, "message", None) or str(exc) or message
        logger.warning("%s: %s", message, detail)
        self._set(error=detail, is_loading=False)

    # Actions

    async def fetch_reminders(self) -> None:
        self._set(is_loading=True, error=None)
        try:
            reminders = await self.backend.list_reminders()
        except Exception as e:
            self._fail("Failed to fetch reminders", e)
            raise
        self._commit(list(reminders))

    async def add_reminder(self, payload: Payload) -> Reminder:
        self._set(is_loading=True, error=None)
        try:
            created = await self.backend.create_reminder(payload)
        except Exception as e:
            self._fail("Failed to add reminder", e)
            raise
        self._commit([*self.reminders, created])
        return created

    async def update_reminder(self, reminder_id: str, payload: Payload) -> Reminder:
        self._set(is_loading=True, error=None)
        try:
            updated = await self.backend.update_reminder(reminder_id, payload)
        except Exception as e:
            self._fail("Failed to update reminder", e)
            raise
        self._commit(self._replaced(reminder_id, updated))
        return updated

    async def delete_reminder(self, reminder_id: str) -> bool:
        self._set(is_loading=True, error=None)
        try:
            removed = await self.backend.delete_reminder(reminder_id)
        except Exception as e:
            self._fail("Failed to delete reminder", e)
            raise
        self._commit([r for r in self.reminders if r.id != reminder_id])
        return removed

    async def toggle_reminder_complete(self, reminder_id: str) -> Optional[Reminder]:
        """Toggle through the backend; unknown ids are ignored."""
        if self._find(reminder_id) is None:
            return None
        self._set(is_loading=True, error=None)
        try:
            updated = await self.backend.toggle_reminder(reminder_id)
        except Exception as e:
            self._fail("Failed to complete reminder", e)
            raise
        self._commit(self._replaced(reminder_id, updated))
        return updated

    async def complete_reminder(self, reminder_id: str) -> Optional[Reminder]:
        if self._find(reminder_id) is None:
            return None
        self._set(is_loading=True, error=None)
        try:
            updated = await self.backend.complete_reminder(reminder_id)
        except Exception as e:
            self._fail("Failed to complete reminder", e)
            raise
        self._commit(self._replaced(reminder_id, updated))
        return updated

    def set_selected_date(self, selected: date) -> None:
        self._set(selected_date=selected)
        self._save()

    def set_selected_pet(self, pet_id: Optional[str]) -> None:
        self._set(selected_pet=pet_id)
        self._save()

    def set_selected_category(self, category: Optional[str]) -> None:
        self._set(selected_category=category)
        self._save()

    # Queries

    def get_filtered_reminders(self) -> List[Reminder]:
        return filter_reminders(
            self.reminders,
            self.selected_date,
            self.selected_pet,
            self.selected_category,
            self.tz,
        )

    def get_grouped_reminders(self) -> Dict[TimeSlot, List[Reminder]]:
        return group_by_time_slot(self.get_filtered_reminders(), self.tz)

    def get_today_completed_count(self) -> int:
        return today_counts(self.reminders, self.today(), self.tz)[0]

    def get_today_total_count(self) -> int:
        return today_counts(self.reminders, self.today(), self.tz)[1]

    def get_completion_rate(self) -> int:
        completed, total = today_counts(self.reminders, self.today(), self.tz)
        return completion_rate(completed, total)

    def get_best_streak(self) -> int:
        return best_streak(self.reminders)

    def get_reminder_streak(self, reminder_id: str) -> int:
        reminder = self._find(reminder_id)
        return reminder.streak if reminder else 0

    # Persistence

    def dump_state(self) -> Dict[str, Any]:
        """JSON-compatible snapshot of the store."""
        return {
            "reminders": [r.model_dump(mode="json") for r in self.reminders],
            "selected_date": self.selected_date.isoformat(),
            "selected_pet": self.selected_pet,
            "selected_category": self.selected_category,
        }

    def load_state(self, snapshot: Dict[str, Any]) -> None:
        """Restore a snapshot produced by `dump_state`."""
        selected = snapshot.get("selected_date")
        self._set(
            reminders=[Reminder.model_validate(r) for r in snapshot.get("reminders", [])],
            selected_date=date.fromisoformat(selected) if selected else self.today(),
            selected_pet=snapshot.get("selected_pet"),
            selected_category=snapshot.get("selected_category"),
        )

    def _find(self, reminder_id: str) -> Optional[Reminder]:
        return next((r for r in self.reminders if r.id == reminder_id), None)

    def _replaced(self, reminder_id: str, updated: Reminder) -> List[Reminder]:
        return [updated if r.id == reminder_id else r for r in self.reminders]
