# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Influencer Marketplace:
# - test_models.py: Unit tests for Pydantic model validation
# - test_auth.py: Token validation, public routes and auth middleware
# - test_*_service.py: Business logic against a faked Supabase client
# - test_routers.py: API endpoints through the full app
# - test_websocket.py: Notification fan-out
# - test_client_services.py, test_auth_session.py, test_components.py:
#   The client library
#
# Run tests with: pytest
# =============================================================================
