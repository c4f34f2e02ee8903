# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the portal service:
# - test_models.py: Unit tests for the admin input schemas
# - test_validation.py: safe_parse, action responses, error sanitizing
# - test_services.py: Location and payment business rules
# - test_portal.py: Portal logout and session endpoints
# - test_config.py: Static settings, image allowlist, body size cap
#
# Run tests with: poetry run pytest
# =============================================================================
