# =============================================================================
# core/services/auth_service.py - Registration & Login
# =============================================================================
# Passwords never touch our tables: sign-up and sign-in are delegated to
# Supabase Auth, which issues the access token. The account's public profile
# is mirrored into public.users so other users can see names and roles.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient
from core.models.user import LoginRequest, RegisterRequest, UserRole
from core.services.user_service import UserService
from app.exceptions import (
    InvalidCredentialsError,
    MarketplaceException,
    UserExistsError,
)

logger = logging.getLogger(__name__)


def _is_duplicate_email_error(error: Exception) -> bool:
    message = str(error).lower()
    return "already registered" in message or "already exists" in message


class AuthService:
    """Service for account creation and sign-in."""

    @staticmethod
    def register(request: RegisterRequest) -> dict[str, Any]:
        """
        Create an account and return {token, user}.

        Raises:
            UserExistsError: If the email is already registered
            MarketplaceException: If the account needs email confirmation
        """
        if SupabaseClient.fetch_user_by_email(request.email):
            raise UserExistsError(request.email)

        auth = SupabaseClient.get_auth_client().auth

        try:
            response = auth.sign_up({
                "email": request.email,
                "password": request.password,
                "options": {"data": {"name": request.name}},
            })
        except Exception as e:
            if _is_duplicate_email_error(e):
                raise UserExistsError(request.email)
            logger.error(f"Sign-up failed for {request.email}: {e}")
            raise MarketplaceException(
                message=f"Registration failed: {e}",
                code="REGISTRATION_FAILED",
                status_code=400,
            )

        if response.user is None:
            raise MarketplaceException(
                message="Registration failed",
                code="REGISTRATION_FAILED",
                status_code=400,
            )

        # The role claim comes from app_metadata, which users can't edit
        SupabaseClient.set_user_role(response.user.id, request.role.value)
        user = UserService.ensure_user(
            response.user.id, request.name, request.email, request.role
        )
        logger.info(f"Registered {request.role.value} account {response.user.id}")

        if response.session is None:
            raise MarketplaceException(
                message="Account created; confirm your email before logging in",
                code="EMAIL_CONFIRMATION_REQUIRED",
                status_code=403,
                suggestion="Follow the link sent to your inbox, then log in",
                details={"user_id": str(response.user.id)},
            )

        # The sign-up session was issued before the role was set
        refreshed = auth.refresh_session(response.session.refresh_token)
        return {"token": refreshed.session.access_token, "user": user}

    @staticmethod
    def login(request: LoginRequest) -> dict[str, Any]:
        """
        Sign in with email and password and return {token, user}.

        Raises:
            InvalidCredentialsError: If the credentials don't match
        """
        auth = SupabaseClient.get_auth_client().auth

        try:
            response = auth.sign_in_with_password({
                "email": request.email,
                "password": request.password,
            })
        except Exception as e:
            logger.info(f"Login failed for {request.email}: {e}")
            raise InvalidCredentialsError()

        if response.session is None or response.user is None:
            raise InvalidCredentialsError()

        user = SupabaseClient.fetch_user(response.user.id)
        if not user:
            # Auth account exists but its public row was never written
            name = (response.user.user_metadata or {}).get("name")
            role = (response.user.app_metadata or {}).get("role", UserRole.BRAND.value)
            user = UserService.ensure_user(
                response.user.id,
                name or request.email.split("@")[0],
                request.email,
                UserRole(role),
            )

        return {"token": response.session.access_token, "user": user}

    @staticmethod
    def me(user_id: str | UUID) -> dict[str, Any]:
        """Public profile of the authenticated user."""
        return UserService.get_user(user_id)
