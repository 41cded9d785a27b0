# =============================================================================
# frontend/services/user.py - User API Wrappers
# =============================================================================

from typing import Any

import httpx

from frontend.services.common import request

RESOURCE = "/users"


async def get_users(
    token: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[dict[str, Any]]:
    """GET /api/users"""
    return await request("GET", RESOURCE, client=client, token=token)


async def get_user_by_id(
    user_id: str,
    token: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/users/{id}"""
    return await request("GET", f"{RESOURCE}/{user_id}", client=client, token=token)


async def update_user(
    user_id: str,
    user_data: dict[str, Any],
    token: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """PUT /api/users/{id} with user_data as the body."""
    return await request(
        "PUT", f"{RESOURCE}/{user_id}", client=client, token=token, json=user_data
    )
