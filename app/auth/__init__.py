# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Bearer-token authentication for the marketplace API.
#
# - middleware.py: AuthMiddleware rejects unauthenticated requests with 401
# - provider.py: Pluggable token validation (Supabase HS256 JWTs)
# - dependencies.py: get_current_user / require_role for route handlers
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import get_current_user, get_current_user_optional, require_role
from app.auth.middleware import AuthMiddleware, is_public_route
from app.auth.models import AuthUser
from app.auth.provider import AuthProvider, SupabaseJWTProvider, get_auth_provider

__all__ = [
    "get_current_user",
    "get_current_user_optional",
    "require_role",
    "AuthMiddleware",
    "is_public_route",
    "AuthUser",
    "AuthProvider",
    "SupabaseJWTProvider",
    "get_auth_provider",
]
