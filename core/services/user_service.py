# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Reads and updates rows of public.users. Account creation itself happens in
# Supabase Auth (see auth_service.py); this table holds the public profile.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient, SupabaseClientError, USERS_TABLE
from core.models.user import UserRole
from app.exceptions import UserNotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


class UserService:
    """Service for user profile operations."""

    @staticmethod
    def list_users(role: UserRole | None = None) -> list[dict[str, Any]]:
        """
        List users, newest first.

        Args:
            role: Only users with this role, if given
        """
        client = SupabaseClient.get_client()

        try:
            query = client.table(USERS_TABLE).select("*")
            if role:
                query = query.eq("role", UserRole(role).value)
            response = query.order("created_at", desc=True).execute()
            return response.data or []

        except Exception as e:
            logger.error(f"Failed to list users: {e}")
            raise SupabaseClientError(
                message=f"Failed to list users: {e}",
                code="FETCH_FAILED",
            )

    @staticmethod
    def get_user(user_id: str | UUID) -> dict[str, Any]:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no such user
        """
        user = SupabaseClient.fetch_user(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    @staticmethod
    def update_user(
        user_id: str | UUID,
        changes: dict[str, Any],
        actor_id: str | UUID,
        actor_role: UserRole = UserRole.BRAND,
    ) -> dict[str, Any]:
        """
        Update name, bio or avatar of a user.

        Only the user themself or an admin may do this.

        Raises:
            PermissionDeniedError: If the actor is someone else
            UserNotFoundError: If no such user
        """
        if str(actor_id) != str(user_id) and actor_role != UserRole.ADMIN:
            logger.warning(f"User {actor_id} tried to update user {user_id}")
            raise PermissionDeniedError(
                "You can only update your own profile",
                details={"user_id": str(user_id)},
            )

        allowed = {k: v for k, v in changes.items() if k in ("name", "bio", "avatar")}
        if not allowed:
            return UserService.get_user(user_id)

        updated = SupabaseClient.update_row(USERS_TABLE, user_id, allowed)
        if not updated:
            raise UserNotFoundError(str(user_id))

        logger.info(f"Updated user {user_id}: {sorted(allowed)}")
        return updated

    @staticmethod
    def ensure_user(
        user_id: str | UUID,
        name: str,
        email: str | None,
        role: UserRole,
    ) -> dict[str, Any]:
        """Create or refresh the public.users row of an auth account."""
        data = {
            "id": str(user_id),
            "name": name,
            "email": email.lower() if email else None,
            "role": UserRole(role).value,
        }
        return SupabaseClient.upsert_row(USERS_TABLE, data, on_conflict="id")
