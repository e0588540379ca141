"""Persistence for workouts: save a draft, list history, delete.

Saves and deletes commit their own transaction inside the same try block that
maps SQLAlchemyError to PersistenceError, so a failure at commit time is a
retryable 503 like any other. A workout is stored with all of its exercises
and sets or not at all; daily_volume and the profile totals are updated in the
same transaction with single upsert statements.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftlog.core.enums import ExerciseType
from liftlog.core.exceptions import NotFoundError, PersistenceError, WorkoutValidationError
from liftlog.models.daily_volume import DailyVolume
from liftlog.models.exercise import Exercise, UserExercise
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet
from liftlog.schemas.exercise import ExerciseCapability
from liftlog.schemas.workout import (
    NewWorkout,
    UIExercise,
    UISet,
    UIWorkout,
    UIWorkoutExercise,
    WorkoutDraftIn,
    WorkoutExerciseEntry,
    WorkoutSavedRead,
)
from liftlog.services.profile import apply_workout_totals
from liftlog.services.workout_draft import WorkoutDraft

logger = logging.getLogger(__name__)


def set_volume(reps, weight_kg) -> float:
    """reps x weight; either missing counts as 0."""
    return float(reps or 0) * float(weight_kg or 0)


def sets_volume(sets: Iterable) -> float:
    return sum(set_volume(s.reps, s.weight_kg) for s in sets)


def workout_volume(workout: Workout) -> float:
    return sum(sets_volume(we.sets) for we in workout.exercises)


# ── Save ────────────────────────────────────────────────────────────────


async def resolve_capabilities(
    db: AsyncSession,
    user_id: uuid.UUID,
    entries: Sequence[WorkoutExerciseEntry],
) -> list[WorkoutExerciseEntry]:
    """
    Replace client-sent capabilities with the stored ones.
    An exercise that does not exist (or belongs to another user) is a 404.
    """
    predefined_ids = {
        e.predefined_exercise_id
        for e in entries
        if e.exercise_type == ExerciseType.PREDEFINED and e.predefined_exercise_id
    }
    user_ids = {
        e.user_exercise_id for e in entries if e.exercise_type == ExerciseType.USER and e.user_exercise_id
    }
    known: dict[tuple[ExerciseType, uuid.UUID], ExerciseCapability] = {}
    if predefined_ids:
        result = await db.execute(select(Exercise).where(Exercise.id.in_(predefined_ids)))
        for ex in result.scalars().all():
            known[(ExerciseType.PREDEFINED, ex.id)] = ExerciseCapability.model_validate(ex)
    if user_ids:
        result = await db.execute(
            select(UserExercise).where(UserExercise.id.in_(user_ids), UserExercise.user_id == user_id)
        )
        for ex in result.scalars().all():
            known[(ExerciseType.USER, ex.id)] = ExerciseCapability.model_validate(ex)

    resolved = []
    for entry in entries:
        capability = known.get((entry.exercise_type, entry.exercise_id))
        if capability is None:
            raise NotFoundError("Exercise", entry.exercise_id)
        resolved.append(entry.model_copy(update={"capability": capability}))
    return resolved


async def save_draft(db: AsyncSession, user_id: uuid.UUID, draft_in: WorkoutDraftIn) -> WorkoutSavedRead:
    """Validate a client draft against stored capabilities, filter it and save it."""
    entries = await resolve_capabilities(db, user_id, draft_in.exercises)
    draft = WorkoutDraft(entries)
    try:
        payload = draft.to_new_workout(user_id, draft_in.workout_date)
    except WorkoutValidationError:
        logger.warning("Rejected workout draft for user %s: no valid set", user_id)
        raise
    return await save_workout(db, payload)


async def _add_daily_volume(db: AsyncSession, user_id: uuid.UUID, day: date, delta: float) -> None:
    """
    Add delta to the (user, day) total in one statement, never below 0.
    A positive delta upserts the row; a negative one only touches an existing row.
    """
    if delta > 0:
        stmt = (
            pg_insert(DailyVolume)
            .values(id=uuid.uuid4(), user_id=user_id, date=day, volume=delta)
            .on_conflict_do_update(
                index_elements=["user_id", "date"],
                set_={"volume": DailyVolume.volume + delta},
            )
        )
    elif delta < 0:
        stmt = (
            update(DailyVolume)
            .where(DailyVolume.user_id == user_id, DailyVolume.date == day)
            .values(volume=func.greatest(DailyVolume.volume + delta, 0.0))
            .execution_options(synchronize_session=False)
        )
    else:
        return
    await db.execute(stmt)


async def save_workout(db: AsyncSession, payload: NewWorkout) -> WorkoutSavedRead:
    """
    Insert one workout with its exercises and sets (payload is already filtered).
    Commits before returning. Database errors, at flush or commit, are logged and
    re-raised as PersistenceError; get_db then rolls back and the client can
    resubmit the same draft.
    """
    if not payload.exercises:
        raise WorkoutValidationError()
    workout_date = payload.workout_date or datetime.now(timezone.utc).date()
    try:
        workout = Workout(id=uuid.uuid4(), user_id=payload.user_id, workout_date=workout_date)
        set_count = 0
        for ex in payload.exercises:
            we = WorkoutExercise(
                exercise_type=ex.exercise_type,
                predefined_exercise_id=ex.predefined_exercise_id,
                user_exercise_id=ex.user_exercise_id,
                order=ex.order,
                effort_level=ex.effort_level,
            )
            we.sets = [
                WorkoutSet(
                    set_number=s.set_number or i + 1,
                    reps=s.reps,
                    weight_kg=s.weight_kg,
                    duration_seconds=s.duration_seconds,
                    distance_meters=s.distance_meters,
                )
                for i, s in enumerate(ex.sets)
            ]
            set_count += len(we.sets)
            workout.exercises.append(we)
        db.add(workout)
        await db.flush()

        volume = sum(sets_volume(ex.sets) for ex in payload.exercises)
        await _add_daily_volume(db, payload.user_id, workout_date, volume)
        await apply_workout_totals(db, payload.user_id, 1, volume)
        await db.commit()
    except SQLAlchemyError as e:
        logger.exception("Saving workout for user %s failed: %s", payload.user_id, e)
        raise PersistenceError(e.__class__.__name__) from e

    logger.info(
        "Saved workout %s for user %s (%d exercises, %d sets, volume %.1f)",
        workout.id,
        payload.user_id,
        len(payload.exercises),
        set_count,
        volume,
    )
    return WorkoutSavedRead(
        id=workout.id,
        workout_date=workout_date,
        exercise_count=len(payload.exercises),
        set_count=set_count,
        total_volume=volume,
    )


# ── History ─────────────────────────────────────────────────────────────


def _ui_exercise(we: WorkoutExercise) -> UIExercise:
    """Display data from whichever definition the entry points at; defaults if it is gone."""
    source = we.exercise if we.exercise_type == ExerciseType.PREDEFINED else we.user_exercise
    if source is None:
        return UIExercise(source=we.exercise_type)
    return UIExercise(
        id=source.id,
        name=source.name or "Unknown",
        primary_muscle_group=source.primary_muscle_group or "other",
        secondary_muscle_group=source.secondary_muscle_group,
        category=source.category or "other",
        uses_reps=source.uses_reps if source.uses_reps is not None else True,
        uses_weight=source.uses_weight if source.uses_weight is not None else True,
        uses_duration=bool(source.uses_duration),
        uses_distance=bool(source.uses_distance),
        is_deleted=bool(getattr(source, "is_deleted", False)),
        source=we.exercise_type,
    )


def to_ui_workout(workout: Workout, local_offset_minutes: int = 0) -> UIWorkout:
    """Reconcile a stored workout into the history view-model, in the viewer's local time."""
    created = workout.created_at
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    local = created.astimezone(timezone.utc) + timedelta(minutes=local_offset_minutes)

    exercises = [
        UIWorkoutExercise(
            id=we.id,
            workout_id=we.workout_id,
            instance_id=f"{we.id}-{we.order}",
            exercise_type=we.exercise_type,
            predefined_exercise_id=we.predefined_exercise_id,
            user_exercise_id=we.user_exercise_id,
            order=we.order,
            effort_level=we.effort_level,
            created_at=we.created_at,
            exercise=_ui_exercise(we),
            sets=[UISet.model_validate(s) for s in sorted(we.sets, key=lambda s: s.set_number)],
        )
        for we in sorted(workout.exercises, key=lambda we: we.order)
    ]
    return UIWorkout(
        id=workout.id,
        user_id=workout.user_id,
        workout_date=workout.workout_date,
        created_at=workout.created_at,
        date=local.strftime("%Y-%m-%d"),
        time=local.strftime("%I:%M %p"),
        total_volume=workout_volume(workout),
        exercises=exercises,
    )


def _workout_query():
    return select(Workout).options(
        selectinload(Workout.exercises).selectinload(WorkoutExercise.sets),
        selectinload(Workout.exercises).selectinload(WorkoutExercise.exercise),
        selectinload(Workout.exercises).selectinload(WorkoutExercise.user_exercise),
    )


async def list_workouts(
    db: AsyncSession,
    user_id: uuid.UUID,
    skip: int = 0,
    limit: int = 20,
    local_offset_minutes: int = 0,
) -> list[UIWorkout]:
    """The user's workouts, newest first, as history view-models."""
    result = await db.execute(
        _workout_query()
        .where(Workout.user_id == user_id)
        .order_by(Workout.created_at.desc())
        .offset(skip)
        .limit(limit)
    )
    return [to_ui_workout(w, local_offset_minutes) for w in result.scalars().unique().all()]


async def delete_workout(db: AsyncSession, user_id: uuid.UUID, workout_id: uuid.UUID) -> None:
    """Delete a workout and take its volume back out of daily_volume and the profile totals."""
    result = await db.execute(
        select(Workout)
        .where(Workout.id == workout_id, Workout.user_id == user_id)
        .options(selectinload(Workout.exercises).selectinload(WorkoutExercise.sets))
    )
    workout = result.scalar_one_or_none()
    if workout is None:
        raise NotFoundError("Workout", workout_id)
    volume = workout_volume(workout)
    try:
        await _add_daily_volume(db, user_id, workout.workout_date, -volume)
        await apply_workout_totals(db, user_id, -1, -volume)
        await db.delete(workout)
        await db.commit()
    except SQLAlchemyError as e:
        logger.exception("Deleting workout %s failed: %s", workout_id, e)
        raise PersistenceError(e.__class__.__name__) from e
    logger.info("Deleted workout %s for user %s (volume %.1f)", workout_id, user_id, volume)
