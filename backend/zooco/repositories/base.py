"""
Repository contracts.

A repository owns the authoritative collection of one entity type. Services
and the HTTP layer depend on these contracts only, so the in-memory and SQL
implementations are interchangeable.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from zooco.schemas.pet import Pet
from zooco.schemas.reminder import Reminder

EntityT = TypeVar("EntityT", Pet, Reminder)

# Never changed through `update`
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class Repository(ABC, Generic[EntityT]):
    @abstractmethod
    async def list(self) -> List[EntityT]:
        """All entities, in insertion order."""

    @abstractmethod
    async def get(self, entity_id: str) -> Optional[EntityT]:
        """The entity, or `None` when the id is unknown."""

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        """Assign a fresh id, insert and return the stored entity."""

    @abstractmethod
    async def update(self, entity_id: str, changes: Dict[str, Any]) -> EntityT:
        """
        Merge `changes` into the entity and refresh `updated_at`.

        Raises `NotFoundError` when the id is unknown.
        """

    @abstractmethod
    async def remove(self, entity_id: str) -> bool:
        """Delete the entity; `False` when there was nothing to delete."""


class PetRepository(Repository[Pet]):
    pass


class ReminderRepository(Repository[Reminder]):
    @abstractmethod
    async def list_by_pet(self, pet_id: str) -> List[Reminder]:
        pass
