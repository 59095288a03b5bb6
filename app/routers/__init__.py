# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers:
# - health.py: Root health check and liveness probe
# - smoke_test.py: Endpoints for verifying a fresh dev environment
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import smoke_test

__all__ = [
    "health",
    "smoke_test",
]
