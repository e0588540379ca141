"""Workout endpoints: validate a draft, save it, list history, delete."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import SessionContext, get_session_context, get_tz_offset
from liftlog.db.session import get_db
from liftlog.schemas.workout import DraftValidationRead, UIWorkout, WorkoutDraftIn, WorkoutSavedRead
from liftlog.services import workout_store
from liftlog.services.workout_validation import filter_for_save, is_workout_valid, set_validity

router = APIRouter()


@router.post("/validate", response_model=DraftValidationRead)
async def validate_draft(
    payload: WorkoutDraftIn,
    session: SessionContext = Depends(get_session_context),
):
    """
    Check a draft as the user edits it. Uses the capabilities the client sent
    (missing ones require nothing); returns whether Save should be enabled,
    per-set validity, and the exercises that would be saved.
    """
    return DraftValidationRead(
        can_save=is_workout_valid(payload.exercises),
        sets=set_validity(payload.exercises),
        exercises=filter_for_save(payload.exercises),
    )


@router.post("", response_model=WorkoutSavedRead, status_code=201)
async def save_workout(
    payload: WorkoutDraftIn,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Save a draft. Only valid sets are written; 422 if the draft has none."""
    return await workout_store.save_draft(db, session.user_id, payload)


@router.get("", response_model=list[UIWorkout])
async def list_workouts(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    tz_offset_minutes: int = Depends(get_tz_offset),
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Workout history, newest first, with local date/time and total volume."""
    return await workout_store.list_workouts(db, session.user_id, skip, limit, tz_offset_minutes)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its exercises and sets."""
    await workout_store.delete_workout(db, session.user_id, workout_id)
    return None
