# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DevboxException(Exception):
    """
    Base exception for the Devbox API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "DEVBOX_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Debugger Exceptions
# =============================================================================

class DebuggerError(DevboxException):
    """Raised when the debugpy listener cannot be opened."""

    def __init__(self, host: str, port: int, error: str):
        super().__init__(
            message=f"Failed to start debugger on {host}:{port}: {error}",
            code="DEBUGGER_LISTEN_FAILED",
            status_code=500,
            suggestion=(
                f"Check that nothing else is bound to port {port}, "
                "or set DEBUGGER_PORT / DEBUGGER_ENABLED=false"
            ),
            details={"host": host, "port": port, "error": error}
        )


# =============================================================================
# Smoke Test Exceptions
# =============================================================================

class SmokeTestError(DevboxException):
    """Raised on purpose by the smoke-test router to exercise error handling."""

    def __init__(self, reason: str = "Deliberate failure requested"):
        super().__init__(
            message=reason,
            code="SMOKE_TEST_ERROR",
            status_code=500,
            suggestion="This error is expected; it verifies the error response format",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def devbox_exception_handler(
    request: Request,
    exc: DevboxException
) -> JSONResponse:
    """
    Convert DevboxException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Keeps pydantic's per-field error list so clients can point at the bad input.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
        }
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
