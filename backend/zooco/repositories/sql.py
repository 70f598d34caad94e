"""
SQLAlchemy-backed repositories.

Each operation runs in its own session and commits before returning. Instants
are stored as naive UTC and handed back as aware UTC.
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Type

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from zooco.core.clock import Clock, from_naive_utc, to_naive_utc, utcnow
from zooco.core.errors import NotFoundError
from zooco.core.logging import logger
from zooco.database import Base
from zooco.models.pet import PetRecord
from zooco.models.reminder import ReminderRecord
from zooco.repositories.base import (
    IMMUTABLE_FIELDS,
    EntityT,
    PetRepository,
    ReminderRepository,
    Repository,
)
from zooco.schemas.pet import Pet
from zooco.schemas.reminder import Reminder


def _to_column(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return to_naive_utc(value)
    return value


class _SqlRepository(Repository[EntityT], Generic[EntityT]):
    _record_cls: Type[Base]
    _entity_cls: Type[EntityT]
    _entity_name = "Entity"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Clock = utcnow,
    ):
        self._session_factory = session_factory
        self._clock = clock

    def _columns(self) -> List[str]:
        return [c.key for c in self._record_cls.__table__.columns if c.key != "pk"]

    def _to_entity(self, record: Base) -> EntityT:
        data = {}
        for key in self._columns():
            value = getattr(record, key)
            data[key] = from_naive_utc(value) if isinstance(value, datetime) else value
        return self._entity_cls.model_validate(data)

    async def _load(self, session: AsyncSession, entity_id: str) -> Optional[Base]:
        result = await session.execute(
            select(self._record_cls).where(self._record_cls.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def list(self) -> List[EntityT]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(self._record_cls).order_by(self._record_cls.pk.asc())
            )
            return [self._to_entity(r) for r in result.scalars().all()]

    async def get(self, entity_id: str) -> Optional[EntityT]:
        async with self._session_factory() as session:
            record = await self._load(session, entity_id)
            return self._to_entity(record) if record else None

    async def add(self, entity: EntityT) -> EntityT:
        columns = set(self._columns())
        values = {
            k: _to_column(v)
            for k, v in entity.model_dump().items()
            if k in columns and k != "id"
        }
        record = self._record_cls(id=str(uuid.uuid4()), **values)

        async with self._session_factory() as session:
            session.add(record)
            await session.commit()
            await session.refresh(record)
            logger.debug("Stored %s %s", self._entity_name, record.id)
            return self._to_entity(record)

    async def update(self, entity_id: str, changes: Dict[str, Any]) -> EntityT:
        columns = set(self._columns())

        async with self._session_factory() as session:
            record = await self._load(session, entity_id)
            if record is None:
                raise NotFoundError(f"{self._entity_name} not found")

            for field, value in changes.items():
                if field in columns and field not in IMMUTABLE_FIELDS:
                    setattr(record, field, _to_column(value))
            created_at = from_naive_utc(record.created_at)
            record.updated_at = to_naive_utc(max(self._clock(), created_at))

            await session.commit()
            await session.refresh(record)
            return self._to_entity(record)

    async def remove(self, entity_id: str) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(
                delete(self._record_cls).where(self._record_cls.id == entity_id)
            )
            await session.commit()
            return result.rowcount > 0


class SqlPetRepository(_SqlRepository[Pet], PetRepository):
    _record_cls = PetRecord
    _entity_cls = Pet
    _entity_name = "Pet"


class SqlReminderRepository(_SqlRepository[Reminder], ReminderRepository):
    _record_cls = ReminderRecord
    _entity_cls = Reminder
    _entity_name = "Reminder"

    async def list_by_pet(self, pet_id: str) -> List[Reminder]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ReminderRecord)
                .where(ReminderRecord.pet_id == pet_id)
                .order_by(ReminderRecord.pk.asc())
            )
            return [self._to_entity(r) for r in result.scalars().all()]
