"""Volume chart data: stored daily totals bucketed into the viewer's days, weeks or months."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.deps import SessionContext, get_session_context, get_tz_offset
from liftlog.core.config import get_settings
from liftlog.core.enums import TimeRange
from liftlog.core.exceptions import VolumeDataError
from liftlog.db.session import get_db
from liftlog.schemas.volume import VolumeSeriesRead
from liftlog.services.volume_buckets import bucket, local_today
from liftlog.services.volume_history import fetch_volume_records

logger = logging.getLogger(__name__)
router = APIRouter()


def default_time_range() -> TimeRange:
    return TimeRange(get_settings().default_time_range)


async def build_volume_series(
    db: AsyncSession,
    session: SessionContext,
    time_range: TimeRange,
    tz_offset_minutes: int,
    now: datetime | None = None,
) -> VolumeSeriesRead:
    """Fetch the rows a range needs and bucket them. Unparseable rows become VolumeDataError."""
    now = now or session.now
    try:
        records = await fetch_volume_records(
            db, session.user_id, time_range, local_today(now, tz_offset_minutes)
        )
        buckets = bucket(records, time_range, now, tz_offset_minutes)
    except (ValueError, ValidationError) as e:
        logger.warning("Volume data for user %s could not be parsed: %s", session.user_id, e)
        raise VolumeDataError(str(e)) from e
    return VolumeSeriesRead(
        time_range=time_range,
        tz_offset_minutes=tz_offset_minutes,
        buckets=buckets,
        total_volume=sum(b.volume for b in buckets),
    )


@router.get("", response_model=VolumeSeriesRead)
async def volume_series(
    time_range: TimeRange | None = Query(None, alias="range"),
    now: datetime | None = Query(None, description="End of the window; defaults to the request time."),
    tz_offset_minutes: int = Depends(get_tz_offset),
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """
    7days -> 7 daily buckets, 8weeks -> 8 Monday-start weeks, 12months -> 12 months.
    Always returns the full number of buckets, oldest first.
    """
    return await build_volume_series(
        db, session, time_range or default_time_range(), tz_offset_minutes, now
    )
