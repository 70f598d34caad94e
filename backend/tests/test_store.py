"""Client-side reminder store tests, backed by the in-process service."""
from datetime import date

import pytest

from conftest import at
from zooco.core.errors import ValidationError
from zooco.core.store import ReminderStore
from zooco.schemas.reminder import ReminderStatus, TimeSlot


@pytest.fixture
def store(reminder_service, clock) -> ReminderStore:
    return ReminderStore(reminder_service, clock)


@pytest.mark.asyncio
async def test_starts_empty_on_today(store) -> None:
    assert store.reminders == []
    assert store.selected_date == date(2024, 5, 14)
    assert store.is_loading is False
    assert store.error is None


@pytest.mark.asyncio
async def test_add_then_fetch(store, reminder_service, reminder_payload) -> None:
    created = await store.add_reminder(reminder_payload)
    assert [r.id for r in store.reminders] == [created.id]

    await reminder_service.create_reminder({**reminder_payload, "title": "Evening walk"})
    await store.fetch_reminders()

    assert [r.title for r in store.reminders] == ["Morning walk", "Evening walk"]
    assert store.is_loading is False


@pytest.mark.asyncio
async def test_failed_add_keeps_state_and_records_error(store, reminder_payload) -> None:
    await store.add_reminder(reminder_payload)
    before = list(store.reminders)

    with pytest.raises(ValidationError):
        await store.add_reminder({**reminder_payload, "title": ""})

    assert store.reminders == before
    assert store.error
    assert store.is_loading is False


@pytest.mark.asyncio
async def test_error_clears_on_next_success(store, reminder_payload) -> None:
    with pytest.raises(ValidationError):
        await store.add_reminder({"title": "Walk"})
    assert store.error

    await store.add_reminder(reminder_payload)
    assert store.error is None


@pytest.mark.asyncio
async def test_toggle_updates_local_copy(store, reminder_payload) -> None:
    created = await store.add_reminder(reminder_payload)

    toggled = await store.toggle_reminder_complete(created.id)

    assert toggled.status == ReminderStatus.COMPLETED
    assert store.reminders[0].streak == 1
    assert store.get_reminder_streak(created.id) == 1

    await store.toggle_reminder_complete(created.id)
    assert store.reminders[0].status == ReminderStatus.PENDING
    assert store.get_reminder_streak(created.id) == 0


@pytest.mark.asyncio
async def test_toggle_unknown_id_is_ignored(store) -> None:
    assert await store.toggle_reminder_complete("missing") is None
    assert await store.complete_reminder("missing") is None
    assert store.error is None


@pytest.mark.asyncio
async def test_complete_is_idempotent(store, reminder_payload) -> None:
    created = await store.add_reminder(reminder_payload)

    await store.complete_reminder(created.id)
    await store.complete_reminder(created.id)

    assert store.reminders[0].status == ReminderStatus.COMPLETED
    assert store.get_best_streak() == 1


@pytest.mark.asyncio
async def test_update_and_delete(store, reminder_payload) -> None:
    created = await store.add_reminder(reminder_payload)

    await store.update_reminder(created.id, {"title": "Long walk"})
    assert store.reminders[0].title == "Long walk"

    assert await store.delete_reminder(created.id) is True
    assert store.reminders == []


@pytest.mark.asyncio
async def test_listeners_are_notified_until_unsubscribed(store, reminder_payload) -> None:
    calls = []
    unsubscribe = store.subscribe(lambda s: calls.append(len(s.reminders)))

    await store.add_reminder(reminder_payload)
    assert calls and calls[-1] == 1

    unsubscribe()
    seen = len(calls)
    store.set_selected_pet("pet-2")
    assert len(calls) == seen


@pytest.mark.asyncio
async def test_persist_hook_receives_snapshot(reminder_service, clock, reminder_payload) -> None:
    snapshots = []
    store = ReminderStore(reminder_service, clock, persist=snapshots.append)

    await store.add_reminder(reminder_payload)

    assert len(snapshots) == 1
    assert snapshots[0]["reminders"][0]["title"] == "Morning walk"
    assert snapshots[0]["selected_date"] == "2024-05-14"

    store.set_selected_date(date(2024, 6, 1))
    store.set_selected_pet("pet-9")
    store.set_selected_category("Health")

    assert len(snapshots) == 4
    assert snapshots[-1]["selected_date"] == "2024-06-01"
    assert snapshots[-1]["selected_pet"] == "pet-9"
    assert snapshots[-1]["selected_category"] == "Health"

    restored = ReminderStore(reminder_service, clock)
    restored.load_state(snapshots[-1])
    assert restored.selected_date == date(2024, 6, 1)
    assert restored.selected_pet == "pet-9"


@pytest.mark.asyncio
async def test_load_state_restores_snapshot(store, reminder_service, clock, reminder_payload) -> None:
    await store.add_reminder(reminder_payload)
    store.set_selected_category("Lifestyle")
    snapshot = store.dump_state()

    restored = ReminderStore(reminder_service, clock)
    restored.load_state(snapshot)

    assert restored.reminders == store.reminders
    assert restored.selected_category == "Lifestyle"
    assert restored.selected_date == date(2024, 5, 14)


@pytest.mark.asyncio
async def test_grouped_view_follows_filters(store, reminder_payload) -> None:
    await store.add_reminder(reminder_payload)
    await store.add_reminder(
        {**reminder_payload, "title": "Dinner", "start_date_time": at(18).isoformat()}
    )
    await store.add_reminder(
        {**reminder_payload, "title": "Vet", "pet_id": "pet-2", "category": "Health"}
    )
    await store.add_reminder(
        {**reminder_payload, "title": "Tomorrow", "start_date_time": at(8, day=15).isoformat()}
    )

    groups = store.get_grouped_reminders()
    assert list(groups) == [TimeSlot.MORNING, TimeSlot.AFTERNOON, TimeSlot.EVENING, TimeSlot.NIGHT]
    assert [r.title for r in groups[TimeSlot.MORNING]] == ["Morning walk", "Vet"]
    assert [r.title for r in groups[TimeSlot.EVENING]] == ["Dinner"]
    assert groups[TimeSlot.AFTERNOON] == []

    store.set_selected_pet("pet-1")
    assert [r.title for r in store.get_grouped_reminders()[TimeSlot.MORNING]] == ["Morning walk"]

    store.set_selected_pet(None)
    store.set_selected_date(date(2024, 5, 15))
    assert [r.title for r in store.get_filtered_reminders()] == ["Tomorrow"]


@pytest.mark.asyncio
async def test_today_counts_and_rate(store, reminder_payload) -> None:
    first = await store.add_reminder(reminder_payload)
    await store.add_reminder({**reminder_payload, "title": "Brush"})
    await store.add_reminder({**reminder_payload, "title": "Groom"})

    await store.toggle_reminder_complete(first.id)

    assert store.get_today_completed_count() == 1
    assert store.get_today_total_count() == 3
    assert store.get_completion_rate() == 33
    assert store.get_best_streak() == 1


def test_rate_is_zero_without_reminders(store) -> None:
    assert store.get_completion_rate() == 0
    assert store.get_best_streak() == 0


@pytest.mark.asyncio
async def test_successful_toggle_clears_previous_error(store, reminder_payload) -> None:
    created = await store.add_reminder(reminder_payload)
    with pytest.raises(ValidationError):
        await store.add_reminder({"title": "Walk"})
    assert store.error

    await store.toggle_reminder_complete(created.id)
    assert store.error is None
    assert store.is_loading is False

    with pytest.raises(ValidationError):
        await store.update_reminder(created.id, {"title": None})
    assert store.error

    await store.complete_reminder(created.id)
    assert store.error is None
