# =============================================================================
# frontend/services/influencer.py - Influencer API Wrappers
# =============================================================================
# Search and public profiles need no token; the /me wrappers do.
# =============================================================================

from typing import Any

import httpx

from frontend.services.common import request

RESOURCE = "/influencers"


async def get_influencers(
    params: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/influencers - first page of results unless params say otherwise."""
    return await request("GET", RESOURCE, client=client, params=params)


async def search_influencers(
    q: str | None = None,
    categories: list[str] | str | None = None,
    tags: list[str] | str | None = None,
    min_followers: int | None = None,
    max_followers: int | None = None,
    page: int | None = None,
    limit: int | None = None,
    sort: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """
    GET /api/influencers with search parameters.

    Returns:
        {"total", "page", "limit", "results"}
    """
    params = {
        "q": q,
        "categories": categories,
        "tags": tags,
        "min_followers": min_followers,
        "max_followers": max_followers,
        "page": page,
        "limit": limit,
        "sort": sort,
    }
    return await request("GET", RESOURCE, client=client, params=params)


async def get_influencer_by_id(
    influencer_id: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/influencers/{id}"""
    return await request("GET", f"{RESOURCE}/{influencer_id}", client=client)


async def get_influencer_by_handle(
    handle: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/influencers/handle/{handle}"""
    return await request("GET", f"{RESOURCE}/handle/{handle}", client=client)


async def get_my_influencer_profile(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/influencers/me"""
    return await request("GET", f"{RESOURCE}/me", client=client, token=token)


async def save_my_influencer_profile(
    profile: dict[str, Any],
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """PUT /api/influencers/me - create or update the caller's profile."""
    return await request("PUT", f"{RESOURCE}/me", client=client, token=token, json=profile)
