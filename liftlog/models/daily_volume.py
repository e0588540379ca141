"""DailyVolume model - per-user, per-day volume totals feeding the dashboard."""

from __future__ import annotations

import uuid
from datetime import date as date_type

from sqlalchemy import Date, Float, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from liftlog.db.base import Base


class DailyVolume(Base):
    """Sum of reps x weight_kg over all of a user's workouts dated on one UTC day."""

    __tablename__ = "daily_volume"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_daily_volume_user_date"),)

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    volume: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
