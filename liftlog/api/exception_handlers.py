"""Turn domain exceptions into ``{"error": {"code", "message", "details"}}`` responses."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from liftlog.core.exceptions import ErrorCode, LiftlogError

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"error": {"code": code, "message": message}}
    if details:
        content["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def liftlog_error_handler(request: Request, exc: LiftlogError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.code.value, exc.details)
    return create_error_response(exc.status_code, exc.code.value, exc.message, exc.details)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return create_error_response(500, ErrorCode.INTERNAL_ERROR.value, "Something went wrong. Please try again.")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LiftlogError, liftlog_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
