"""
Pet management service.
"""
from typing import List

from zooco.core.clock import Clock, utcnow
from zooco.core.errors import NotFoundError
from zooco.core.logging import logger
from zooco.core.validation import Payload, validate_pet_create, validate_pet_update
from zooco.repositories.base import PetRepository
from zooco.schemas.pet import Pet


class PetService:
    """CRUD over the pet repository, with payload validation in front of it."""

    def __init__(self, pets: PetRepository, clock: Clock = utcnow):
        self.pets = pets
        self._clock = clock

    async def list_pets(self) -> List[Pet]:
        return await self.pets.list()

    async def get_pet(self, pet_id: str) -> Pet:
        pet = await self.pets.get(pet_id)
        if pet is None:
            logger.warning("Pet %s not found", pet_id)
            raise NotFoundError("Pet not found")
        return pet

    async def create_pet(self, payload: Payload) -> Pet:
        data = validate_pet_create(payload)
        now = self._clock()
        pet = await self.pets.add(Pet(**data, created_at=now, updated_at=now))
        logger.info("Created pet %s (%s)", pet.id, pet.name)
        return pet

    async def update_pet(self, pet_id: str, payload: Payload) -> Pet:
        changes = validate_pet_update(payload)
        pet = await self.pets.update(pet_id, changes)
        logger.info("Updated pet %s: %s", pet_id, ", ".join(changes) or "no fields")
        return pet

    async def delete_pet(self, pet_id: str) -> bool:
        """
        Delete a pet.

        Reminders that reference it are kept; their pet snapshot reads as empty.
        """
        removed = await self.pets.remove(pet_id)
        if removed:
            logger.info("Deleted pet %s", pet_id)
        return removed
