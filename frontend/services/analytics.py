# =============================================================================
# frontend/services/analytics.py - Dashboard Statistics
# =============================================================================
# get_overview() reads the server's counts; the *_stats helpers derive
# dashboard figures from the caller's sponsorship lists.
# =============================================================================

from typing import Any

import httpx
from pydantic import BaseModel

from frontend.services.common import request
from frontend.services.sponsorship import get_brand_sponsorships, get_my_sponsorships


class InfluencerStats(BaseModel):
    """Dashboard figures for an influencer."""
    active_collaborations: int = 0
    pending_offers: int = 0
    completed_collaborations: int = 0


class BrandStats(BaseModel):
    """Dashboard figures for a brand."""
    active_sponsorships: int = 0
    total_budget: float = 0
    campaigns: int = 0


async def get_overview(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/analytics/overview"""
    return await request("GET", "/analytics/overview", client=client, token=token)


async def get_influencer_stats(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> InfluencerStats:
    """Stats over the offers the caller received."""
    sponsorships = await get_my_sponsorships(token, client=client)

    completed = [s for s in sponsorships if s.get("status") == "completed"]
    return InfluencerStats(
        active_collaborations=sum(
            1 for s in sponsorships if s.get("status") in ("accepted", "completed")
        ),
        pending_offers=sum(1 for s in sponsorships if s.get("status") == "pending"),
        completed_collaborations=len(completed),
    )


async def get_brand_stats(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> BrandStats:
    """Stats over the offers the caller sent."""
    sponsorships = await get_brand_sponsorships(token, client=client)

    return BrandStats(
        active_sponsorships=sum(
            1 for s in sponsorships if s.get("status") in ("accepted", "pending")
        ),
        total_budget=sum(s.get("budget") or 0 for s in sponsorships),
        campaigns=len(sponsorships),
    )
