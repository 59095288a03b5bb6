# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a TestClient and settings factory
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ["DEBUGGER_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.debugger import reset_debugger_state
from app.main import app, create_app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """TestClient for the module-level app (debugger disabled)."""
    return TestClient(app)


@pytest.fixture
def make_settings():
    """Build Settings without reading the environment or a .env file."""
    def _make(**overrides) -> Settings:
        values = {
            "ENVIRONMENT": "development",
            "DEBUGGER_ENABLED": False,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def make_client(make_settings):
    """Build a TestClient for an app created from custom settings."""
    def _make(**overrides) -> TestClient:
        return TestClient(create_app(make_settings(**overrides)))
    return _make


@pytest.fixture(autouse=True)
def clean_debugger_state():
    """Each test starts with no recorded debugger listener."""
    reset_debugger_state()
    yield
    reset_debugger_state()
