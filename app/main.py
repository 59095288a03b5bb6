# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Devbox API.
# It configures the FastAPI application with middleware, routers, and handlers,
# and opens the debugpy listener on startup.
#
# Usage:
#   poetry run uvicorn app.main:app --host 0.0.0.0 --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import Settings, get_settings, settings
from app.debugger import start_debugger
from app.exceptions import (
    DebuggerError,
    DevboxException,
    devbox_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, smoke_test

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SMOKE_TEST_PREFIX = "/smoke-test"


def create_app(config: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Settings to wire CORS and the debugger from

    Returns:
        Configured FastAPI instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: log config, open the debugger listener
        - Shutdown: log only; the debugger socket lives as long as the process
        """
        logger.info(f"Starting Devbox API in {config.ENVIRONMENT} mode")
        logger.info(f"CORS origins: {config.cors_origins_list}")

        try:
            start_debugger(config)
        except DebuggerError as e:
            # Serve without the debugger rather than refusing to start
            logger.error(f"{e.message}. {e.suggestion}")

        yield

        logger.info("Shutting down Devbox API")

    app = FastAPI(
        title="Devbox API",
        description=(
            "Minimal FastAPI service for the devcontainer: a health check, "
            "a smoke-test router and a remote-debugger listener on port 5678."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
            {
                "name": "Smoke Test",
                "description": "Endpoints for verifying the dev environment",
            },
        ],
    )

    # Route handlers see the same settings the app was built from
    app.dependency_overrides[get_settings] = lambda: config

    # =========================================================================
    # Middleware
    # =========================================================================

    # Wildcard methods and headers; origins and credentials from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(DevboxException, devbox_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        health.router,
        tags=["Health"]
    )

    app.include_router(
        smoke_test.router,
        prefix=SMOKE_TEST_PREFIX,
        tags=["Smoke Test"]
    )

    return app


app = create_app()
