"""ZOOCO: daily pet-care reminders."""

__version__ = "1.0.0"
