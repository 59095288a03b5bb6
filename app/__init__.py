# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - debugger.py: debugpy listener for remote attach from the devcontainer
# - routers/: API endpoint definitions (health, smoke test)
# =============================================================================

__version__ = "0.1.0"
