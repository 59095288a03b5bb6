# =============================================================================
# app/routers/smoke_test.py - Smoke Test Endpoints
# =============================================================================
# Small endpoints for checking a freshly built dev environment end to end:
# request routing, body parsing, CORS, the error pipeline and the debugger.
#
# Mounted in main.py under /smoke-test.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from app import __version__
from app.debugger import DebuggerStatus, get_debugger_status
from app.dependencies import SettingsDep
from app.exceptions import SmokeTestError

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class SmokeTestResponse(BaseModel):
    """Smoke test status response."""
    status: str
    environment: str
    version: str


class EchoRequest(BaseModel):
    """Message to echo back."""
    message: str = Field(..., min_length=1, max_length=1000)


class EchoResponse(BaseModel):
    """Echoed message."""
    message: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/", response_model=SmokeTestResponse)
async def smoke_test(settings: SettingsDep):
    """
    Confirm the router is mounted and settings loaded.
    """
    return SmokeTestResponse(
        status="ok",
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/echo", response_model=EchoResponse)
async def echo_query(
    message: Annotated[str, Query(min_length=1, max_length=1000, description="Text to echo")]
):
    """Echo a query-string message."""
    return EchoResponse(message=message)


@router.post("/echo", response_model=EchoResponse)
async def echo_body(request: EchoRequest):
    """Echo a JSON body message."""
    logger.debug(f"Echoing {len(request.message)} chars")
    return EchoResponse(message=request.message)


@router.get("/debugger", response_model=DebuggerStatus)
async def debugger_status(settings: SettingsDep):
    """
    Report the debugpy listener state.

    Handy when the editor refuses to attach: tells you whether the
    listener is open and on which port.
    """
    return get_debugger_status(settings)


@router.get("/error")
async def raise_error():
    """
    Fail on purpose.

    Returns the structured error body (code SMOKE_TEST_ERROR, status 500).
    """
    raise SmokeTestError()
