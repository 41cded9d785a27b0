# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from uuid import UUID
from typing import Optional

from core.models.user import UserRole


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a validated access token.

    This is the minimal user info available from the token itself,
    without querying the database. The middleware stores it on
    request.state.user.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
    role: UserRole = UserRole.BRAND


class TokenPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    The account type lives in app_metadata.role, which only the service
    role can write. user_metadata is editable by the user themself and is
    never trusted for authorization. The top-level role claim is
    Supabase's database role ("authenticated").
    """
    sub: str  # User ID
    email: Optional[str] = None
    aud: str  # Audience (should be "authenticated")
    exp: int  # Expiration timestamp
    iat: Optional[int] = None  # Issued at timestamp
    role: Optional[str] = None  # Database role
    app_metadata: Optional[dict] = None
    user_metadata: Optional[dict] = None
