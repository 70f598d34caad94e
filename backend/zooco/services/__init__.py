"""
Services over the pet and reminder repositories.
"""
from zooco.services.pets import PetService
from zooco.services.reminders import ReminderService

__all__ = [
    "PetService",
    "ReminderService",
]
