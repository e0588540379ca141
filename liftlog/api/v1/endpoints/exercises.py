"""Exercise catalog endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import SessionContext, get_session_context
from liftlog.core.enums import ExerciseType
from liftlog.db.session import get_db
from liftlog.models.exercise import UserExercise
from liftlog.schemas.exercise import ExerciseRead, UserExerciseCreate
from liftlog.services.volume_history import fetch_exercise_catalog

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Predefined exercises followed by the user's own, each with its capability flags."""
    return await fetch_exercise_catalog(db, session.user_id)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: UserExerciseCreate,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Create a user-authored exercise."""
    exercise = UserExercise(user_id=session.user_id, **payload.model_dump())
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return ExerciseRead.model_validate(exercise).model_copy(update={"source": ExerciseType.USER})


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Delete one of the user's exercises. Predefined exercises cannot be deleted."""
    result = await db.execute(
        select(UserExercise).where(UserExercise.id == exercise_id, UserExercise.user_id == session.user_id)
    )
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    await db.delete(exercise)
    return None
