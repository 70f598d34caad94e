"""
Reminder endpoints: CRUD, completion, and the day view.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from zooco.api.deps import get_reminder_service
from zooco.core.errors import NotFoundError
from zooco.schemas.reminder import (
    Category,
    GroupedRemindersResponse,
    ReminderCreate,
    ReminderResponse,
    ReminderStats,
    ReminderUpdate,
)
from zooco.services.reminders import ReminderService

router = APIRouter()


@router.get("", response_model=List[ReminderResponse])
async def list_reminders(service: ReminderService = Depends(get_reminder_service)):
    """List all reminders in insertion order."""
    return await service.to_responses(await service.list_reminders())


@router.post("", response_model=ReminderResponse, status_code=status.HTTP_201_CREATED)
async def create_reminder(
    reminder_data: ReminderCreate,
    service: ReminderService = Depends(get_reminder_service),
):
    """Create a new reminder. It starts Pending with a zero streak."""
    reminder = await service.create_reminder(reminder_data)
    return await service.to_response(reminder)


@router.get("/grouped", response_model=GroupedRemindersResponse)
async def get_grouped_reminders(
    on: Optional[date] = Query(None, alias="date", description="Day to show, defaults to today"),
    pet_id: Optional[str] = Query(None, description="Only this pet's reminders"),
    category: Optional[Category] = Query(None, description="Only this category"),
    service: ReminderService = Depends(get_reminder_service),
):
    """Reminders for one day, bucketed by time slot and sorted by start time."""
    day = on or service.today()
    grouped = await service.grouped_reminders(day, pet_id, category)
    return GroupedRemindersResponse(
        date=day,
        groups={slot: await service.to_responses(items) for slot, items in grouped.items()},
    )


@router.get("/stats", response_model=ReminderStats)
async def get_reminder_stats(
    today: Optional[date] = Query(None, description="Reference day, defaults to today"),
    service: ReminderService = Depends(get_reminder_service),
):
    """Completed/total counts for today, completion rate and best streak."""
    return await service.stats(today)


@router.get("/pet/{pet_id}", response_model=List[ReminderResponse])
async def list_reminders_for_pet(
    pet_id: str,
    service: ReminderService = Depends(get_reminder_service),
):
    """List the reminders of one pet."""
    return await service.to_responses(await service.list_reminders_for_pet(pet_id))


@router.get("/{reminder_id}", response_model=ReminderResponse)
async def get_reminder(
    reminder_id: str,
    service: ReminderService = Depends(get_reminder_service),
):
    """Get a specific reminder."""
    return await service.to_response(await service.get_reminder(reminder_id))


@router.api_route("/{reminder_id}", methods=["PATCH", "PUT"], response_model=ReminderResponse)
async def update_reminder(
    reminder_id: str,
    reminder_data: ReminderUpdate,
    service: ReminderService = Depends(get_reminder_service),
):
    """Update a reminder. Only the fields sent are changed."""
    reminder = await service.update_reminder(reminder_id, reminder_data)
    return await service.to_response(reminder)


@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reminder(
    reminder_id: str,
    service: ReminderService = Depends(get_reminder_service),
):
    """Delete a reminder."""
    if not await service.delete_reminder(reminder_id):
        raise NotFoundError("Reminder not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{reminder_id}/complete", response_model=ReminderResponse)
async def complete_reminder(
    reminder_id: str,
    service: ReminderService = Depends(get_reminder_service),
):
    """Mark a reminder as completed."""
    return await service.to_response(await service.complete_reminder(reminder_id))


@router.post("/{reminder_id}/toggle", response_model=ReminderResponse)
async def toggle_reminder(
    reminder_id: str,
    service: ReminderService = Depends(get_reminder_service),
):
    """Flip a reminder between Pending and Completed."""
    return await service.to_response(await service.toggle_reminder(reminder_id))
