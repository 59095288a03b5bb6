# =============================================================================
# app/debugger.py - Remote Debugger Listener
# =============================================================================
# Opens a debugpy listener so an editor on the host can attach to the API
# process running inside the devcontainer (host 5678 -> container 5678).
#
# The listener is opened once per process and stays open until the process
# exits. debugpy has no "stop listening" call, so there is no teardown.
#
# Usage:
#   from app.debugger import start_debugger
#   start_debugger(settings)
# =============================================================================

import logging

import debugpy
from pydantic import BaseModel

from app.config import Settings
from app.exceptions import DebuggerError

logger = logging.getLogger(__name__)


class DebuggerStatus(BaseModel):
    """Current state of the debugger listener."""
    enabled: bool
    listening: bool
    host: str
    port: int
    client_connected: bool = False


# Address debugpy actually bound, set once per process
_listen_address: tuple[str, int] | None = None


def start_debugger(config: Settings) -> DebuggerStatus:
    """
    Open the debugpy listener if enabled.

    Never listens in production, whatever DEBUGGER_ENABLED says.
    Safe to call more than once: after the first successful call the
    existing listener is reported and debugpy.listen is not called again.

    Args:
        config: Application settings (DEBUGGER_* fields)

    Returns:
        DebuggerStatus describing the listener

    Raises:
        DebuggerError: If debugpy cannot bind the requested address
    """
    global _listen_address

    if not config.DEBUGGER_ENABLED:
        logger.debug("Debugger disabled (DEBUGGER_ENABLED=false)")
        return get_debugger_status(config)

    if config.is_production:
        # Never expose debugpy on a production deployment
        logger.warning(
            "Debugger not started: DEBUGGER_ENABLED is ignored when ENVIRONMENT=production"
        )
        return get_debugger_status(config)

    if _listen_address is not None:
        logger.debug(f"Debugger already listening on {_listen_address[0]}:{_listen_address[1]}")
        return get_debugger_status(config)

    try:
        _listen_address = debugpy.listen((config.DEBUGGER_HOST, config.DEBUGGER_PORT))
    except (RuntimeError, OSError) as e:
        raise DebuggerError(config.DEBUGGER_HOST, config.DEBUGGER_PORT, str(e)) from e

    logger.info(f"Debugger listening on {_listen_address[0]}:{_listen_address[1]}")

    if config.DEBUGGER_WAIT_FOR_CLIENT:
        logger.info("Waiting for debugger client to attach...")
        # Blocks the event loop on purpose: startup waits for the editor
        debugpy.wait_for_client()
        logger.info("Debugger client attached")

    return get_debugger_status(config)


def get_debugger_status(config: Settings) -> DebuggerStatus:
    """Report whether the listener is open and a client is attached."""
    if _listen_address is None:
        return DebuggerStatus(
            enabled=config.DEBUGGER_ENABLED and not config.is_production,
            listening=False,
            host=config.DEBUGGER_HOST,
            port=config.DEBUGGER_PORT,
        )

    host, port = _listen_address
    return DebuggerStatus(
        enabled=config.DEBUGGER_ENABLED and not config.is_production,
        listening=True,
        host=host,
        port=port,
        client_connected=debugpy.is_client_connected(),
    )


def reset_debugger_state() -> None:
    """Forget the recorded listener. Only meant for tests."""
    global _listen_address
    _listen_address = None
