# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# Tokens are validated once, by AuthMiddleware; these dependencies only read
# the result from request.state.
#
# Usage:
#   from app.auth import get_current_user, require_role, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
#
#   @router.post("/brands-only")
#   async def brands_only(user: AuthUser = Depends(require_role(UserRole.BRAND))):
#       ...
# =============================================================================

import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status

from app.auth.models import AuthUser
from core.models.user import UserRole

logger = logging.getLogger(__name__)


async def get_current_user(request: Request) -> AuthUser:
    """
    Return the user the middleware authenticated.

    Raises:
        HTTPException: 401 if the request carries no authenticated user
    """
    user = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_current_user_optional(request: Request) -> Optional[AuthUser]:
    """
    Return the authenticated user, or None on public routes.

    Useful for endpoints that behave differently for logged-in users.
    """
    return getattr(request.state, "user", None)


def require_role(*roles: UserRole) -> Callable:
    """
    Build a dependency that only admits users with one of `roles`.

    Raises:
        HTTPException: 403 when the user's role is not allowed
    """
    allowed = {UserRole(r) for r in roles}

    async def dependency(user: AuthUser = Depends(get_current_user)) -> AuthUser:
        if user.role not in allowed:
            logger.info(f"User {user.id} with role {user.role.value} denied")
            names = ", ".join(sorted(r.value for r in allowed))
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Only {names} accounts can do this",
            )
        return user

    return dependency
