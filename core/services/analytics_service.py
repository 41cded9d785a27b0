# =============================================================================
# core/services/analytics_service.py - Dashboard Counts
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient, SupabaseClientError, SPONSORSHIPS_TABLE
from lib.utils import normalize_uuid
from core.models.analytics import AnalyticsOverview

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Aggregates over the caller's sponsorships."""

    @staticmethod
    def overview(user_id: str | UUID) -> dict[str, Any]:
        """Count the user's sponsorships per side and per status."""
        user_id = normalize_uuid(user_id)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(SPONSORSHIPS_TABLE)
                .select("brand_id, influencer_id, status")
                .or_(f"brand_id.eq.{user_id},influencer_id.eq.{user_id}")
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to load analytics for {user_id}: {e}")
            raise SupabaseClientError(
                message=f"Failed to load analytics: {e}",
                code="FETCH_FAILED",
            )

        overview = AnalyticsOverview()
        for row in response.data or []:
            if normalize_uuid(row["brand_id"]) == user_id:
                overview.as_brand += 1
            if normalize_uuid(row["influencer_id"]) == user_id:
                overview.as_influencer += 1
            status = row.get("status")
            if status in overview.by_status:
                overview.by_status[status] += 1
            overview.total += 1

        return overview.model_dump()
