"""Request-scoped dependencies shared by the v1 endpoints."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi import Header, Query

from liftlog.core.constants import MAX_TZ_OFFSET_MINUTES, MIN_TZ_OFFSET_MINUTES
from liftlog.core.exceptions import UnauthorizedError


@dataclass(frozen=True)
class SessionContext:
    """Who is asking, and when. Passed explicitly into services instead of read from globals."""

    user_id: uuid.UUID
    now: datetime


def get_session_context(x_user_id: str | None = Header(default=None)) -> SessionContext:
    """Auth is handled upstream; the gateway forwards the signed-in user's id as X-User-Id."""
    if not x_user_id:
        raise UnauthorizedError()
    try:
        user_id = uuid.UUID(x_user_id)
    except ValueError as e:
        raise UnauthorizedError("X-User-Id is not a valid user id") from e
    return SessionContext(user_id=user_id, now=datetime.now(timezone.utc))


def get_tz_offset(
    tz_offset_minutes: int = Query(
        0,
        ge=MIN_TZ_OFFSET_MINUTES,
        le=MAX_TZ_OFFSET_MINUTES,
        description="Viewer's offset from UTC in minutes at request time (UTC-5 is -300).",
    ),
) -> int:
    return tz_offset_minutes
