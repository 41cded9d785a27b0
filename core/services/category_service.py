# =============================================================================
# core/services/category_service.py - Category Business Logic
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError, CATEGORIES_TABLE
from lib.utils import slugify

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for the category lookup table."""

    @staticmethod
    def list_categories() -> list[dict[str, Any]]:
        """All categories, alphabetically."""
        client = SupabaseClient.get_client()

        try:
            response = client.table(CATEGORIES_TABLE).select("*").order("name").execute()
            return response.data or []

        except Exception as e:
            logger.error(f"Failed to list categories: {e}")
            raise SupabaseClientError(
                message=f"Failed to list categories: {e}",
                code="FETCH_FAILED",
            )

    @staticmethod
    def ensure_categories(names: list[str]) -> list[str]:
        """
        Make sure every name exists in the categories table.

        Args:
            names: Category names as entered by a user

        Returns:
            The cleaned names (trimmed, blanks and duplicates removed, order kept)
        """
        cleaned: list[str] = []
        for name in names:
            name = name.strip()
            if name and name not in cleaned:
                cleaned.append(name)

        if not cleaned:
            return []

        existing = SupabaseClient.fetch_many(CATEGORIES_TABLE, "name", cleaned, columns="name")
        known = {row["name"] for row in existing}

        for name in cleaned:
            if name not in known:
                SupabaseClient.upsert_row(
                    CATEGORIES_TABLE,
                    {"name": name, "slug": slugify(name)},
                    on_conflict="slug",
                )
                logger.info(f"Created category '{name}'")

        return cleaned
