# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Devbox API:
# - test_health.py: Root health check and liveness probe
# - test_cors.py: CORS headers on simple and preflight requests
# - test_smoke_test.py: /smoke-test router and error responses
# - test_debugger.py: debugpy listener lifecycle
# - test_config.py: Settings parsing and validation
# - test_devcontainer.py: Container descriptor
#
# Run tests with: poetry run pytest
# =============================================================================
