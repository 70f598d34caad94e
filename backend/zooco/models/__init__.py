"""
SQLAlchemy models for the ZOOCO database.
"""
from zooco.models.pet import PetRecord
from zooco.models.reminder import ReminderRecord

__all__ = [
    "PetRecord",
    "ReminderRecord",
]
