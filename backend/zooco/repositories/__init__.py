"""
Repositories owning the pet and reminder collections.
"""
from zooco.repositories.base import PetRepository, ReminderRepository, Repository
from zooco.repositories.memory import MemoryPetRepository, MemoryReminderRepository

__all__ = [
    "Repository",
    "PetRepository",
    "ReminderRepository",
    "MemoryPetRepository",
    "MemoryReminderRepository",
]
