#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - Development Server Entry Point
# =============================================================================
# Starts uvicorn against app.main:app with host/port from settings.
#
# Usage:
#   poetry run python scripts/start_server.py
#
#   # Or use uvicorn directly
#   poetry run uvicorn app.main:app --host 0.0.0.0 --port 8000 --reload
#
# The debugpy listener opens on DEBUGGER_PORT (5678) during startup.
# With DEBUG=true in development the server auto-reloads; each reload starts a fresh
# worker process that opens its own listener.
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print("Devbox API")
    print("=" * 60)
    print()
    print(f"API:      http://{settings.API_HOST}:{settings.API_PORT}")
    if settings.DEBUGGER_ENABLED:
        print(f"Debugger: {settings.DEBUGGER_HOST}:{settings.DEBUGGER_PORT}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG and settings.is_development,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
