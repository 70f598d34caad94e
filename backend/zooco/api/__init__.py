"""
API routers for ZOOCO.
"""
from zooco.api import pets, reminders

__all__ = [
    "pets",
    "reminders",
]
