"""SQLAlchemy repository tests against a throwaway SQLite database."""
from datetime import timezone

import pytest
import pytest_asyncio

from conftest import at
from zooco.core.errors import NotFoundError
from zooco.database import create_engine, create_session_factory, create_tables
from zooco.repositories.sql import SqlPetRepository, SqlReminderRepository
from zooco.schemas.pet import Pet
from zooco.schemas.reminder import Category, ReminderStatus, TimeSlot


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'zooco.db'}")
    await create_tables(engine)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def sql_reminders(session_factory, clock) -> SqlReminderRepository:
    return SqlReminderRepository(session_factory, clock)


@pytest.fixture
def sql_pets(session_factory, clock) -> SqlPetRepository:
    return SqlPetRepository(session_factory, clock)


@pytest.mark.asyncio
async def test_round_trip_keeps_values_and_timezones(sql_reminders, make_reminder) -> None:
    stored = await sql_reminders.add(
        make_reminder(
            category=Category.HEALTH,
            start_date_time=at(16, 30),
            time_slot=TimeSlot.NIGHT,
            notes="half a pill",
        )
    )

    loaded = await sql_reminders.get(stored.id)

    assert loaded == stored
    assert loaded.category == Category.HEALTH
    assert loaded.time_slot == TimeSlot.NIGHT
    assert loaded.start_date_time == at(16, 30)
    assert loaded.start_date_time.tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_list_in_insertion_order(sql_reminders, make_reminder) -> None:
    for title in ("c", "a", "b"):
        await sql_reminders.add(make_reminder(title=title))

    assert [r.title for r in await sql_reminders.list()] == ["c", "a", "b"]


@pytest.mark.asyncio
async def test_update_and_completion_fields(sql_reminders, make_reminder, clock) -> None:
    stored = await sql_reminders.add(make_reminder())
    clock.advance(minutes=1)

    updated = await sql_reminders.update(
        stored.id,
        {"status": ReminderStatus.COMPLETED, "streak": 1, "last_completed": clock.now},
    )

    assert updated.status == ReminderStatus.COMPLETED
    assert updated.streak == 1
    assert updated.last_completed == clock.now
    assert updated.updated_at == clock.now
    assert updated.created_at == stored.created_at


@pytest.mark.asyncio
async def test_update_unknown_raises(sql_reminders) -> None:
    with pytest.raises(NotFoundError):
        await sql_reminders.update("missing", {"title": "x"})


@pytest.mark.asyncio
async def test_remove(sql_reminders, make_reminder) -> None:
    stored = await sql_reminders.add(make_reminder())

    assert await sql_reminders.remove("missing") is False
    assert await sql_reminders.remove(stored.id) is True
    assert await sql_reminders.get(stored.id) is None


@pytest.mark.asyncio
async def test_list_by_pet(sql_reminders, make_reminder) -> None:
    await sql_reminders.add(make_reminder(pet_id="rex"))
    await sql_reminders.add(make_reminder(pet_id="tom"))

    assert [r.pet_id for r in await sql_reminders.list_by_pet("tom")] == ["tom"]


@pytest.mark.asyncio
async def test_pets(sql_pets, clock) -> None:
    pet = await sql_pets.add(
        Pet(name="Rex", type="dog", age=3, owner="Sam", created_at=clock.now, updated_at=clock.now)
    )

    assert pet.id
    assert (await sql_pets.get(pet.id)).name == "Rex"
    renamed = await sql_pets.update(pet.id, {"name": "Rexy"})
    assert renamed.name == "Rexy"
    assert renamed.breed is None
