"""Profile totals: workouts and volume the dashboard shows without re-aggregating."""

from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.enums import UnitPreference
from liftlog.models.profile import Profile


async def get_profile(db: AsyncSession, user_id: uuid.UUID) -> Profile | None:
    result = await db.execute(select(Profile).where(Profile.id == user_id))
    return result.scalar_one_or_none()


async def get_or_create_profile(db: AsyncSession, user_id: uuid.UUID) -> Profile:
    profile = await get_profile(db, user_id)
    if profile is None:
        profile = Profile(
            id=user_id, total_workouts=0, total_volume=0.0, unit_preference=UnitPreference.KG
        )
        db.add(profile)
        await db.flush()
    return profile


async def apply_workout_totals(
    db: AsyncSession,
    user_id: uuid.UUID,
    workouts_delta: int,
    volume_delta: float,
) -> None:
    """
    Add (or, with negative deltas, remove) a workout from the running totals. Never below 0.
    One upsert, so concurrent saves for the same user cannot lose an increment.
    """
    stmt = (
        pg_insert(Profile)
        .values(
            id=user_id,
            total_workouts=max(0, workouts_delta),
            total_volume=max(0.0, volume_delta),
            unit_preference=UnitPreference.KG,
        )
        .on_conflict_do_update(
            index_elements=["id"],
            set_={
                "total_workouts": func.greatest(Profile.total_workouts + workouts_delta, 0),
                "total_volume": func.greatest(Profile.total_volume + volume_delta, 0.0),
                "updated_at": func.now(),
            },
        )
    )
    await db.execute(stmt)
