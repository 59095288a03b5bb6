# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings


# Type alias for dependency injection
# Tests override get_settings via app.dependency_overrides
SettingsDep = Annotated[Settings, Depends(get_settings)]
