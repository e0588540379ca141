"""Read side for the dashboard: stored daily volume and the exercise catalog."""

from __future__ import annotations

import uuid
from datetime import date, timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.enums import ExerciseType, TimeRange
from liftlog.models.daily_volume import DailyVolume
from liftlog.models.exercise import Exercise, UserExercise
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.volume import DailyVolumeRecord
from liftlog.services.volume_buckets import lookback_days, window_start


def fetch_since(time_range: TimeRange, today: date) -> date:
    """
    First UTC date to fetch for a range. Covers the lookback window and the
    oldest bucket, plus one day for rows that shift across midnight locally.
    """
    by_lookback = today - timedelta(days=lookback_days(time_range))
    by_bucket = window_start(time_range, today) - timedelta(days=1)
    return min(by_lookback, by_bucket)


async def fetch_volume_records(
    db: AsyncSession,
    user_id: uuid.UUID,
    time_range: TimeRange,
    today: date,
) -> list[DailyVolumeRecord]:
    """daily_volume rows for the user covering the range, oldest first."""
    result = await db.execute(
        select(DailyVolume.date, DailyVolume.volume)
        .where(DailyVolume.user_id == user_id, DailyVolume.date >= fetch_since(time_range, today))
        .order_by(DailyVolume.date)
    )
    return [DailyVolumeRecord(date=row.date, volume=row.volume or 0.0) for row in result.all()]


async def fetch_exercise_catalog(db: AsyncSession, user_id: uuid.UUID) -> list[ExerciseRead]:
    """Predefined exercises (not deleted) followed by the user's own, each tagged with its source."""
    predefined = await db.execute(
        select(Exercise).where(Exercise.is_deleted.is_(False)).order_by(Exercise.name)
    )
    own = await db.execute(
        select(UserExercise).where(UserExercise.user_id == user_id).order_by(UserExercise.name)
    )
    catalog = [
        ExerciseRead.model_validate(ex).model_copy(update={"source": ExerciseType.PREDEFINED})
        for ex in predefined.scalars().all()
    ]
    catalog.extend(
        ExerciseRead.model_validate(ex).model_copy(update={"source": ExerciseType.USER})
        for ex in own.scalars().all()
    )
    return catalog
