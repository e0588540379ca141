"""Domain exceptions mapped to API error responses by liftlog.api.exception_handlers."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    WORKOUT_VALIDATION_ERROR = "WORKOUT_VALIDATION_ERROR"
    VOLUME_DATA_ERROR = "VOLUME_DATA_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


class LiftlogError(Exception):
    """Base for errors the API turns into ``{"error": {...}}`` responses."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(LiftlogError):
    def __init__(self, resource: str, resource_id: Any) -> None:
        super().__init__(
            f"{resource} not found",
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details={"resource": resource, "id": str(resource_id)},
        )


class UnauthorizedError(LiftlogError):
    def __init__(self, message: str = "Missing or invalid user session") -> None:
        super().__init__(message, code=ErrorCode.UNAUTHORIZED, status_code=401)


class WorkoutValidationError(LiftlogError):
    """The draft has no set worth saving."""

    def __init__(self, message: str = "Log at least one complete set before saving.") -> None:
        super().__init__(message, code=ErrorCode.WORKOUT_VALIDATION_ERROR, status_code=422)


class VolumeDataError(LiftlogError):
    """Stored volume rows could not be parsed (e.g. malformed date)."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Failed to load volume data.",
            code=ErrorCode.VOLUME_DATA_ERROR,
            status_code=502,
            details={"reason": reason, "retryable": True},
        )


class PersistenceError(LiftlogError):
    """Writing a workout failed; nothing was committed and the client may resubmit."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Failed to save workout. Please try again.",
            code=ErrorCode.PERSISTENCE_ERROR,
            status_code=503,
            details={"reason": reason, "retryable": True},
        )
