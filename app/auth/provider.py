# =============================================================================
# app/auth/provider.py - Pluggable Token Validation
# =============================================================================
# The middleware only knows how to find a bearer token; deciding whether the
# token is genuine belongs to an AuthProvider.
#
# Shipped provider:
# - SupabaseJWTProvider: HS256 access tokens signed with SUPABASE_JWT_SECRET
#
# Usage:
#   provider = get_auth_provider()
#   user = await provider.validate_token(token)   # raises ValueError
# =============================================================================

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from uuid import UUID

from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import ValidationError

from app.config import settings
from app.auth.models import AuthUser, TokenPayload
from core.models.user import UserRole

logger = logging.getLogger(__name__)


class AuthProvider(ABC):
    """
    Interface for authentication providers.

    Implementations must:
    1. Validate tokens issued by their auth service
    2. Extract the user identity and role from validated tokens
    3. Raise ValueError for expired, forged or malformed tokens
    """

    @abstractmethod
    async def validate_token(self, token: str) -> AuthUser:
        """
        Validate a token and extract the user.

        Args:
            token: Token string (without "Bearer " prefix)

        Returns:
            AuthUser with id, email and role

        Raises:
            ValueError: If the token is invalid, expired, or unsigned
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the name of this authentication provider."""


class SupabaseJWTProvider(AuthProvider):
    """Validates Supabase access tokens (HS256, audience "authenticated")."""

    algorithm = "HS256"

    def __init__(self, secret: str, audience: str = "authenticated"):
        self.secret = secret
        self.audience = audience

    async def validate_token(self, token: str) -> AuthUser:
        return self.decode(token)

    def decode(self, token: str) -> AuthUser:
        """Synchronous validation, shared with the WebSocket endpoint."""
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
            )
        except ExpiredSignatureError:
            raise ValueError("Token has expired")
        except JWTError as e:
            raise ValueError(f"Invalid token: {e}")

        try:
            payload = TokenPayload(**claims)
        except ValidationError:
            raise ValueError("Invalid token: missing required claims")

        try:
            user_id = UUID(payload.sub)
        except ValueError:
            logger.warning(f"Invalid UUID in token: {payload.sub}")
            raise ValueError("Invalid token: malformed user ID")

        # Only app_metadata is server-controlled; user_metadata is not trusted
        role = (payload.app_metadata or {}).get("role", UserRole.BRAND.value)
        try:
            user_role = UserRole(role)
        except ValueError:
            logger.warning(f"Unknown role '{role}' in token for {user_id}, using brand")
            user_role = UserRole.BRAND

        return AuthUser(id=user_id, email=payload.email, role=user_role)

    def get_provider_name(self) -> str:
        return "supabase"


@lru_cache
def get_auth_provider() -> SupabaseJWTProvider:
    """Provider configured from settings."""
    return SupabaseJWTProvider(
        secret=settings.SUPABASE_JWT_SECRET,
        audience=settings.JWT_AUDIENCE,
    )
