# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for fetching:
# - Users (public.users)
# - Influencer and brand profiles
# - Sponsorships
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   sponsorship = SupabaseClient.fetch_sponsorship(sponsorship_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import normalize_uuid

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"

# Table names
USERS_TABLE = "users"
INFLUENCERS_TABLE = "influencer_profiles"
BRANDS_TABLE = "brand_profiles"
SPONSORSHIPS_TABLE = "sponsorships"
CATEGORIES_TABLE = "categories"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages: the suggestion says HOW to fix,
    not just WHAT failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        user = SupabaseClient.fetch_user("550e8400-...")
        profile = SupabaseClient.fetch_influencer_by_user(user["id"])
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def get_auth_client(cls) -> Client:
        """
        Create a short-lived client for Supabase Auth calls.

        Signing in stores the user's session on the client, which would
        replace the service_role credentials on the shared instance, so
        every sign-up / sign-in gets its own anon-key client.
        """
        try:
            return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase auth client: {e}",
                code="AUTH_CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            )

    # -------------------------------------------------------------------------
    # Generic lookups
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_one(
        cls,
        table: str,
        column: str,
        value: str | UUID,
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row where `column` equals `value`.

        Args:
            table: Table name
            column: Column to match on
            value: Value to match (UUIDs are normalized to strings)
            columns: PostgREST select expression

        Returns:
            Row dict, or None if no row matches

        Raises:
            SupabaseClientError: If the query fails for any other reason
        """
        client = cls.get_client()
        value_str = normalize_uuid(value)

        try:
            response = (
                client.table(table)
                .select(columns)
                .eq(column, value_str)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch from {table}: {e}",
                code="FETCH_FAILED",
                details={"table": table, column: value_str}
            )

    @classmethod
    def fetch_many(
        cls,
        table: str,
        column: str,
        values: list[str],
        columns: str = "*",
    ) -> list[dict[str, Any]]:
        """Fetch all rows whose `column` is in `values`."""
        if not values:
            return []

        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .select(columns)
                .in_(column, [normalize_uuid(v) for v in values])
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch from {table}: {e}",
                code="FETCH_FAILED",
                details={"table": table, "count": len(values)}
            )

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_user(cls, user_id: str | UUID) -> dict[str, Any] | None:
        """Fetch a row from public.users by id."""
        return cls.fetch_one(USERS_TABLE, "id", user_id)

    @classmethod
    def fetch_user_by_email(cls, email: str) -> dict[str, Any] | None:
        """Fetch a row from public.users by (lower-cased) email."""
        return cls.fetch_one(USERS_TABLE, "email", email.lower())

    @classmethod
    def set_user_role(cls, user_id: str | UUID, role: str) -> None:
        """
        Store the account type in the auth user's app_metadata.

        app_metadata can only be written with the service_role key, so the
        role claim in access tokens can't be changed by the user.

        Raises:
            SupabaseClientError: If the admin API call fails
        """
        client = cls.get_client()
        user_id_str = normalize_uuid(user_id)

        try:
            client.auth.admin.update_user_by_id(
                user_id_str, {"app_metadata": {"role": role}}
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to set role for user {user_id_str}: {e}",
                code="ROLE_UPDATE_FAILED",
                suggestion="Check that SUPABASE_SERVICE_KEY is the service_role key",
                details={"id": user_id_str, "role": role},
            )

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_influencer(cls, profile_id: str | UUID) -> dict[str, Any] | None:
        """Fetch an influencer profile by its own id."""
        return cls.fetch_one(INFLUENCERS_TABLE, "id", profile_id)

    @classmethod
    def fetch_influencer_by_user(cls, user_id: str | UUID) -> dict[str, Any] | None:
        """Fetch the influencer profile owned by a user."""
        return cls.fetch_one(INFLUENCERS_TABLE, "user_id", user_id)

    @classmethod
    def fetch_brand_by_user(cls, user_id: str | UUID) -> dict[str, Any] | None:
        """Fetch the brand profile owned by a user."""
        return cls.fetch_one(BRANDS_TABLE, "user_id", user_id)

    # -------------------------------------------------------------------------
    # Sponsorships
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_sponsorship(cls, sponsorship_id: str | UUID) -> dict[str, Any] | None:
        """Fetch a sponsorship by id."""
        return cls.fetch_one(SPONSORSHIPS_TABLE, "id", sponsorship_id)

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with generated columns filled in.

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        client = cls.get_client()

        try:
            response = client.table(table).insert(data).execute()

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                details={"table": table}
            )

    @classmethod
    def update_row(
        cls,
        table: str,
        row_id: str | UUID,
        data: dict[str, Any],
        expected: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """
        Update a row by id.

        Args:
            table: Table name
            row_id: Id of the row to update
            data: Columns to write
            expected: Extra column values the row must still have, checked
                in the same UPDATE (compare-and-set)

        Returns:
            The updated row, or None if no row had that id (or it no
            longer matched `expected`)
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            query = client.table(table).update(data).eq("id", row_id_str)
            for column, value in (expected or {}).items():
                query = query.eq(column, value)
            response = query.execute()
            return response.data[0] if response.data else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "id": row_id_str}
            )

    @classmethod
    def upsert_row(
        cls,
        table: str,
        data: dict[str, Any],
        on_conflict: str,
    ) -> dict[str, Any]:
        """Insert or update a row keyed by `on_conflict`."""
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .upsert(data, on_conflict=on_conflict)
                .execute()
            )

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Upsert returned no data",
                code="UPSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to upsert into {table}: {e}",
                code="UPSERT_FAILED",
                details={"table": table, "on_conflict": on_conflict}
            )

    @classmethod
    def delete_rows(cls, table: str, column: str, value: str | UUID) -> int:
        """Delete rows matching `column = value`. Returns the number deleted."""
        client = cls.get_client()
        value_str = normalize_uuid(value)

        try:
            response = client.table(table).delete().eq(column, value_str).execute()
            return len(response.data or [])

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                details={"table": table, column: value_str}
            )
