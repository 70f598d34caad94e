"""
Reminder model.
"""
from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from zooco.database import Base


class ReminderRecord(Base):
    __tablename__ = "reminders"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    # No foreign key: reminders may outlive their pet
    pet_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False)  # General, Lifestyle, Health
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    start_date_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    frequency: Mapped[str] = mapped_column(String(20), nullable=False)
    time_slot: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # NULL = derived
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    last_completed: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
