"""
In-memory repositories.

The backing dict is handed in by whoever builds the repository (the app's
composition root or a test), so no state lives at module level. Dict order is
insertion order, which is the order `list()` reports.
"""
import uuid
from typing import Any, Dict, Generic, List, Optional

from zooco.core.clock import Clock, utcnow
from zooco.core.errors import NotFoundError
from zooco.core.logging import logger
from zooco.repositories.base import (
    IMMUTABLE_FIELDS,
    EntityT,
    PetRepository,
    ReminderRepository,
    Repository,
)
from zooco.schemas.pet import Pet
from zooco.schemas.reminder import Reminder


class _MemoryRepository(Repository[EntityT], Generic[EntityT]):
    _entity_name = "Entity"

    def __init__(
        self,
        storage: Optional[Dict[str, EntityT]] = None,
        clock: Clock = utcnow,
    ):
        self._items: Dict[str, EntityT] = storage if storage is not None else {}
        self._clock = clock

    async def list(self) -> List[EntityT]:
        # Copies, so callers can't mutate stored state
        return [item.model_copy() for item in self._items.values()]

    async def get(self, entity_id: str) -> Optional[EntityT]:
        item = self._items.get(entity_id)
        return item.model_copy() if item else None

    async def add(self, entity: EntityT) -> EntityT:
        entity_id = str(uuid.uuid4())
        while entity_id in self._items:
            entity_id = str(uuid.uuid4())
        stored = entity.model_copy(update={"id": entity_id})
        self._items[entity_id] = stored
        logger.debug("Stored %s %s", self._entity_name, entity_id)
        return stored.model_copy()

    async def update(self, entity_id: str, changes: Dict[str, Any]) -> EntityT:
        current = self._items.get(entity_id)
        if current is None:
            raise NotFoundError(f"{self._entity_name} not found")

        merged = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        merged["updated_at"] = max(self._clock(), current.created_at)
        updated = current.model_copy(update=merged)
        self._items[entity_id] = updated
        return updated.model_copy()

    async def remove(self, entity_id: str) -> bool:
        return self._items.pop(entity_id, None) is not None


class MemoryPetRepository(_MemoryRepository[Pet], PetRepository):
    _entity_name = "Pet"


class MemoryReminderRepository(_MemoryRepository[Reminder], ReminderRepository):
    _entity_name = "Reminder"

    async def list_by_pet(self, pet_id: str) -> List[Reminder]:
        return [r.model_copy() for r in self._items.values() if r.pet_id == pet_id]
