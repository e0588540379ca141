"""Profile endpoints: running totals and unit preference."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import SessionContext, get_session_context
from liftlog.db.session import get_db
from liftlog.schemas.volume import ProfileRead, ProfileUpdate
from liftlog.services.profile import get_or_create_profile, get_profile

router = APIRouter()


@router.get("", response_model=ProfileRead)
async def read_profile(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Totals for the signed-in user; zeros until the first workout is saved."""
    profile = await get_profile(db, session.user_id)
    return ProfileRead.model_validate(profile) if profile else ProfileRead()


@router.patch("", response_model=ProfileRead)
async def update_profile(
    payload: ProfileUpdate,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    profile = await get_or_create_profile(db, session.user_id)
    for k, v in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(profile, k, v)
    await db.flush()
    await db.refresh(profile)
    return profile
