"""Profile model - running totals shown on the dashboard."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, Integer
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from liftlog.core.enums import UnitPreference
from liftlog.db.base import Base


class Profile(Base):
    """One row per user; id is the user id issued by the auth provider."""

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    total_workouts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_volume: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    unit_preference: Mapped[UnitPreference] = mapped_column(
        Enum(UnitPreference), nullable=False, default=UnitPreference.KG
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
