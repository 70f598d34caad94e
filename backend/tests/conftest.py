from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from zooco.main import create_app
from zooco.repositories.memory import MemoryPetRepository, MemoryReminderRepository
from zooco.schemas.reminder import Category, Frequency, Reminder
from zooco.services.pets import PetService
from zooco.services.reminders import ReminderService

FIXED_NOW = datetime(2024, 5, 14, 9, 30, tzinfo=timezone.utc)


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


def at(hour: int, minute: int = 0, day: int = 14) -> datetime:
    """An instant on the fixture date, in UTC."""
    return datetime(2024, 5, day, hour, minute, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FIXED_NOW)


@pytest.fixture
def make_reminder() -> Callable[..., Reminder]:
    counter = iter(range(1, 10_000))

    def factory(**overrides) -> Reminder:
        values = {
            "id": f"r{next(counter)}",
            "title": "Feed breakfast",
            "pet_id": "pet-1",
            "category": Category.GENERAL,
            "start_date_time": at(8),
            "frequency": Frequency.DAILY,
            "created_at": FIXED_NOW,
            "updated_at": FIXED_NOW,
        }
        values.update(overrides)
        return Reminder(**values)

    return factory


@pytest.fixture
def pet_repository(clock) -> MemoryPetRepository:
    return MemoryPetRepository({}, clock)


@pytest.fixture
def reminder_repository(clock) -> MemoryReminderRepository:
    return MemoryReminderRepository({}, clock)


@pytest.fixture
def pet_service(pet_repository, clock) -> PetService:
    return PetService(pet_repository, clock)


@pytest.fixture
def reminder_service(reminder_repository, pet_repository, clock) -> ReminderService:
    return ReminderService(reminder_repository, pet_repository, clock)


@pytest.fixture
def reminder_payload() -> dict:
    return {
        "title": "Morning walk",
        "pet_id": "pet-1",
        "category": "Lifestyle",
        "start_date_time": "2024-05-14T08:00:00Z",
        "frequency": "Daily",
    }


@pytest.fixture
def client(pet_repository, reminder_repository, clock):
    app = create_app(
        pet_repository=pet_repository,
        reminder_repository=reminder_repository,
        clock=clock,
    )
    with TestClient(app) as test_client:
        yield test_client
