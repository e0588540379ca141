"""Exercise models - predefined catalog entries and user-authored exercises."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Enum, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from liftlog.core.enums import ExerciseCategory
from liftlog.db.base import Base


class ExerciseFields:
    """Columns shared by predefined and user-authored exercises.

    The four uses_* flags are the exercise's capability set: which metrics a
    set of this exercise is expected to carry.
    """

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[ExerciseCategory] = mapped_column(
        Enum(ExerciseCategory), default=ExerciseCategory.OTHER, nullable=False
    )
    primary_muscle_group: Mapped[str | None] = mapped_column(String(100), nullable=True)
    secondary_muscle_group: Mapped[str | None] = mapped_column(String(100), nullable=True)

    uses_reps: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    uses_weight: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    uses_duration: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    uses_distance: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )


class Exercise(ExerciseFields, Base):
    """System-owned exercise definition (e.g. Bench Press, Plank)."""

    __tablename__ = "exercises"

    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class UserExercise(ExerciseFields, Base):
    """Exercise authored by, and visible to, a single user."""

    __tablename__ = "user_exercises"

    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
