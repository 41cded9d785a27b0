# =============================================================================
# core/services/influencer_service.py - Influencer Profile Business Logic
# =============================================================================
# Handles:
# - Public search with text, category, tag and follower filters
# - Lookups by profile id, handle, or owning user
# - Create-or-update of the caller's own profile
# =============================================================================

import logging
import re
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient, SupabaseClientError, INFLUENCERS_TABLE
from core.models.influencer import InfluencerProfileUpdate, SOCIAL_NETWORKS
from core.services.category_service import CategoryService
from app.exceptions import (
    HandleRequiredError,
    HandleTakenError,
    InfluencerNotFoundError,
)

logger = logging.getLogger(__name__)

# Profiles are returned with their owner's public fields embedded
PROFILE_COLUMNS = "*, user:users(id, name, email, avatar)"

SORTABLE_FIELDS = {
    "follower_count",
    "average_engagement_rate",
    "created_at",
    "handle",
}
DEFAULT_SORT = "-follower_count"

# Characters with meaning inside a PostgREST or=() filter
_FILTER_SPECIAL = re.compile(r'[,(){}"\\]')


def parse_sort(sort: str | None) -> tuple[str, bool]:
    """
    Turn "-follower_count" into ("follower_count", True).

    Unknown fields fall back to the default ordering.
    """
    sort = (sort or DEFAULT_SORT).strip()
    descending = sort.startswith("-")
    field = sort.lstrip("-+")
    if field not in SORTABLE_FIELDS:
        logger.debug(f"Ignoring unsupported sort field '{field}'")
        return parse_sort(DEFAULT_SORT)
    return field, descending


class InfluencerService:
    """Service for influencer profile operations."""

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    @staticmethod
    def search(
        q: str | None = None,
        categories: list[str] | None = None,
        tags: list[str] | None = None,
        min_followers: int | None = None,
        max_followers: int | None = None,
        page: int = 1,
        limit: int = 20,
        sort: str | None = DEFAULT_SORT,
    ) -> dict[str, Any]:
        """
        Search influencer profiles.

        Args:
            q: Case-insensitive match on handle or bio, or an exact tag
            categories: Profiles in any of these category names
            tags: Profiles with any of these tags
            min_followers / max_followers: Inclusive follower bounds
            page: 1-based page number
            limit: Page size
            sort: Field name, prefixed with "-" for descending

        Returns:
            {"total", "page", "limit", "results"}
        """
        client = SupabaseClient.get_client()

        query = client.table(INFLUENCERS_TABLE).select(PROFILE_COLUMNS, count="exact")

        term = _FILTER_SPECIAL.sub(" ", q or "").strip()
        if term:
            query = query.or_(
                f"handle.ilike.%{term}%,bio.ilike.%{term}%,tags.cs.{{{term}}}"
            )
        if categories:
            query = query.overlaps("categories", categories)
        if tags:
            query = query.overlaps("tags", tags)
        if min_followers is not None:
            query = query.gte("follower_count", min_followers)
        if max_followers is not None:
            query = query.lte("follower_count", max_followers)

        field, descending = parse_sort(sort)
        start = (page - 1) * limit

        try:
            response = (
                query.order(field, desc=descending)
                .range(start, start + limit - 1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Influencer search failed: {e}")
            raise SupabaseClientError(
                message=f"Influencer search failed: {e}",
                code="SEARCH_FAILED",
            )

        results = response.data or []
        total = response.count if response.count is not None else len(results)

        return {"total": total, "page": page, "limit": limit, "results": results}

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @staticmethod
    def get_by_id(profile_id: str | UUID) -> dict[str, Any]:
        profile = SupabaseClient.fetch_one(INFLUENCERS_TABLE, "id", profile_id, PROFILE_COLUMNS)
        if not profile:
            raise InfluencerNotFoundError(str(profile_id))
        return profile

    @staticmethod
    def get_by_handle(handle: str) -> dict[str, Any]:
        profile = SupabaseClient.fetch_one(INFLUENCERS_TABLE, "handle", handle, PROFILE_COLUMNS)
        if not profile:
            raise InfluencerNotFoundError(handle, field="handle")
        return profile

    @staticmethod
    def get_for_user(user_id: str | UUID) -> dict[str, Any]:
        profile = SupabaseClient.fetch_one(INFLUENCERS_TABLE, "user_id", user_id, PROFILE_COLUMNS)
        if not profile:
            raise InfluencerNotFoundError(str(user_id), field="user_id")
        return profile

    # -------------------------------------------------------------------------
    # Create / Update
    # -------------------------------------------------------------------------

    @staticmethod
    def upsert_for_user(
        user_id: str | UUID,
        update: InfluencerProfileUpdate,
    ) -> dict[str, Any]:
        """
        Create the user's profile, or update it if one exists.

        Social links the request leaves out keep their stored value.
        avatar_url is always written; leaving it out clears it.

        Raises:
            HandleRequiredError: Creating a profile without a handle
            HandleTakenError: Handle belongs to another influencer
        """
        existing = SupabaseClient.fetch_influencer_by_user(user_id)

        sent = update.model_dump(exclude_unset=True, exclude=set(SOCIAL_NETWORKS))
        data: dict[str, Any] = {
            k: v for k, v in sent.items() if v is not None and k != "avatar_url"
        }

        if not existing and not data.get("handle"):
            raise HandleRequiredError()

        handle = data.get("handle")
        if handle:
            owner = SupabaseClient.fetch_one(INFLUENCERS_TABLE, "handle", handle, "user_id")
            if owner and str(owner["user_id"]) != str(user_id):
                raise HandleTakenError(handle)

        data["avatar_url"] = update.avatar_url or ""

        links = dict((existing or {}).get("social_links") or {})
        for network in SOCIAL_NETWORKS:
            if network in update.model_fields_set:
                links[network] = getattr(update, network) or ""
            else:
                links.setdefault(network, "")
        data["social_links"] = links

        if "categories" in data:
            data["categories"] = CategoryService.ensure_categories(data["categories"])

        data["user_id"] = str(user_id)

        profile = SupabaseClient.upsert_row(INFLUENCERS_TABLE, data, on_conflict="user_id")
        logger.info(
            f"{'Updated' if existing else 'Created'} influencer profile "
            f"{profile.get('id')} for user {user_id}"
        )
        return profile
