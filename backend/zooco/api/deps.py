"""
Dependencies that hand the services built by the app factory to routes.
"""
from fastapi import Request

from zooco.services.pets import PetService
from zooco.services.reminders import ReminderService


def get_pet_service(request: Request) -> PetService:
    return request.app.state.pet_service


def get_reminder_service(request: Request) -> ReminderService:
    return request.app.state.reminder_service
