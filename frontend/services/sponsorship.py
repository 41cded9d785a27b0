# =============================================================================
# frontend/services/sponsorship.py - Sponsorship API Wrappers
# =============================================================================
# All sponsorship routes need a token.
# =============================================================================

from typing import Any

import httpx

from frontend.services.common import request

RESOURCE = "/sponsorships"


async def create_sponsorship(
    sponsorship: dict[str, Any],
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """POST /api/sponsorships (brand accounts)"""
    return await request("POST", RESOURCE, client=client, token=token, json=sponsorship)


async def get_my_sponsorships(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> list[dict[str, Any]]:
    """GET /api/sponsorships/my - offers received as an influencer."""
    return await request("GET", f"{RESOURCE}/my", client=client, token=token)


async def get_brand_sponsorships(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> list[dict[str, Any]]:
    """GET /api/sponsorships/brand/my - offers sent as a brand."""
    return await request("GET", f"{RESOURCE}/brand/my", client=client, token=token)


async def get_open_sponsorships(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> list[dict[str, Any]]:
    """GET /api/sponsorships/open"""
    return await request("GET", f"{RESOURCE}/open", client=client, token=token)


async def get_recent_activities(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> list[dict[str, Any]]:
    """GET /api/sponsorships/activities"""
    return await request("GET", f"{RESOURCE}/activities", client=client, token=token)


async def get_sponsorship(
    sponsorship_id: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/sponsorships/{id}"""
    return await request("GET", f"{RESOURCE}/{sponsorship_id}", client=client, token=token)


async def accept_sponsorship(
    sponsorship_id: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """PATCH /api/sponsorships/{id}/accept"""
    return await request("PATCH", f"{RESOURCE}/{sponsorship_id}/accept", client=client, token=token)


async def reject_sponsorship(
    sponsorship_id: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """PATCH /api/sponsorships/{id}/reject"""
    return await request("PATCH", f"{RESOURCE}/{sponsorship_id}/reject", client=client, token=token)


async def cancel_sponsorship(
    sponsorship_id: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """PUT /api/sponsorships/{id}/cancel"""
    return await request("PUT", f"{RESOURCE}/{sponsorship_id}/cancel", client=client, token=token)


async def complete_sponsorship(
    sponsorship_id: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """PUT /api/sponsorships/{id}/complete"""
    return await request("PUT", f"{RESOURCE}/{sponsorship_id}/complete", client=client, token=token)
