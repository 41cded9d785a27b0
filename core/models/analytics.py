# =============================================================================
# core/models/analytics.py - Dashboard Analytics Schemas
# =============================================================================

from pydantic import BaseModel, Field

from .sponsorship import SponsorshipStatus


def _empty_counts() -> dict[str, int]:
    return {status.value: 0 for status in SponsorshipStatus}


class AnalyticsOverview(BaseModel):
    """
    Counts of the sponsorships the caller is a party to.

    Example:
        {
            "as_brand": 4,
            "as_influencer": 0,
            "total": 4,
            "by_status": {"pending": 2, "accepted": 1, "rejected": 0,
                          "completed": 1, "cancelled": 0}
        }
    """
    as_brand: int = Field(default=0, ge=0)
    as_influencer: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    by_status: dict[str, int] = Field(default_factory=_empty_counts)
