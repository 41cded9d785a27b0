# =============================================================================
# frontend/services/brand.py - Brand Profile API Wrappers
# =============================================================================

from typing import Any

import httpx

from frontend.services.common import request

RESOURCE = "/brands"


async def get_my_brand_profile(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/brands/me"""
    return await request("GET", f"{RESOURCE}/me", client=client, token=token)


async def save_my_brand_profile(
    profile: dict[str, Any],
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """PUT /api/brands/me - create or update the caller's brand profile."""
    return await request("PUT", f"{RESOURCE}/me", client=client, token=token, json=profile)


async def delete_my_brand_profile(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """DELETE /api/brands/me"""
    return await request("DELETE", f"{RESOURCE}/me", client=client, token=token)


async def get_brand_profile(
    user_id: str,
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/brands/{user_id}"""
    return await request("GET", f"{RESOURCE}/{user_id}", client=client, token=token)
