"""Dashboard: profile totals and the volume chart in one round trip."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import SessionContext, get_session_context, get_tz_offset
from liftlog.api.v1.endpoints.volume import build_volume_series, default_time_range
from liftlog.core.enums import TimeRange
from liftlog.db.session import get_db
from liftlog.schemas.volume import DashboardRead, ProfileRead
from liftlog.services.profile import get_profile

router = APIRouter()


@router.get("", response_model=DashboardRead)
async def dashboard(
    time_range: TimeRange | None = Query(None, alias="range"),
    tz_offset_minutes: int = Depends(get_tz_offset),
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    profile = await get_profile(db, session.user_id)
    volume = await build_volume_series(
        db, session, time_range or default_time_range(), tz_offset_minutes
    )
    return DashboardRead(
        profile=ProfileRead.model_validate(profile) if profile else ProfileRead(),
        volume=volume,
    )
