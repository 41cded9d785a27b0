# =============================================================================
# core/services/brand_service.py - Brand Profile Business Logic
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient, BRANDS_TABLE
from lib.utils import utcnow_iso
from core.models.brand import BrandProfileUpdate, BrandSocialLinks, REQUIRED_BRAND_FIELDS
from app.exceptions import BrandProfileNotFoundError, MarketplaceException

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = "*, user:users(id, name, email)"

UNKNOWN_BRAND = "Unknown Brand"


def brand_display_name(
    brand: dict[str, Any] | None,
    user: dict[str, Any] | None = None,
) -> str:
    """
    Name shown for a brand.

    Falls back from company name to contact email to the owning user's
    name, and finally to "Unknown Brand".
    """
    brand = brand or {}
    user = user or brand.get("user") or {}
    return (
        brand.get("company_name")
        or brand.get("contact_email")
        or user.get("name")
        or UNKNOWN_BRAND
    )


class BrandService:
    """Service for brand profile operations."""

    @staticmethod
    def get_for_user(user_id: str | UUID) -> dict[str, Any]:
        """
        Get the brand profile owned by a user.

        Raises:
            BrandProfileNotFoundError: If the user has no brand profile
        """
        profile = SupabaseClient.fetch_one(BRANDS_TABLE, "user_id", user_id, PROFILE_COLUMNS)
        if not profile:
            raise BrandProfileNotFoundError(str(user_id))
        return profile

    @staticmethod
    def upsert_for_user(
        user_id: str | UUID,
        update: BrandProfileUpdate,
    ) -> dict[str, Any]:
        """
        Create the user's brand profile, or update it if one exists.

        Social links the request leaves out keep their stored value.

        Raises:
            MarketplaceException: Creating a profile without its required fields
        """
        existing = SupabaseClient.fetch_brand_by_user(user_id)

        sent = update.model_dump(exclude_unset=True, exclude={"social_links"})
        data: dict[str, Any] = {k: v for k, v in sent.items() if v is not None}

        # description and logo can be cleared explicitly
        for field in ("description", "logo_url"):
            if field in sent and sent[field] is None:
                data[field] = ""

        if not existing:
            missing = [f for f in REQUIRED_BRAND_FIELDS if not data.get(f)]
            if missing:
                raise MarketplaceException(
                    message=f"Missing required fields: {', '.join(missing)}",
                    code="BRAND_PROFILE_INCOMPLETE",
                    status_code=400,
                    suggestion="Company name, industry and contact email are required",
                    details={"missing": missing},
                )

        links = BrandSocialLinks(**((existing or {}).get("social_links") or {})).model_dump()
        if update.social_links is not None:
            for network, value in update.social_links.model_dump(exclude_unset=True).items():
                links[network] = value or ""
        data["social_links"] = links

        data["user_id"] = str(user_id)
        data["updated_at"] = utcnow_iso()

        profile = SupabaseClient.upsert_row(BRANDS_TABLE, data, on_conflict="user_id")
        logger.info(
            f"{'Updated' if existing else 'Created'} brand profile "
            f"{profile.get('id')} for user {user_id}"
        )
        return profile

    @staticmethod
    def delete_for_user(user_id: str | UUID) -> None:
        """
        Delete the user's brand profile.

        Raises:
            BrandProfileNotFoundError: If there was nothing to delete
        """
        deleted = SupabaseClient.delete_rows(BRANDS_TABLE, "user_id", user_id)
        if not deleted:
            raise BrandProfileNotFoundError(str(user_id))
        logger.info(f"Deleted brand profile of user {user_id}")
