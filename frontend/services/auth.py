# =============================================================================
# frontend/services/auth.py - Auth API Wrappers
# =============================================================================
# Raw calls; frontend.auth.AuthSession turns failures into AuthError.
# =============================================================================

from typing import Any

import httpx

from frontend.services.common import request

RESOURCE = "/auth"


async def register(
    name: str,
    email: str,
    password: str,
    role: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """POST /api/auth/register -> {"token", "user"}"""
    body = {"name": name, "email": email, "password": password, "role": role}
    return await request("POST", f"{RESOURCE}/register", client=client, json=body)


async def login(
    email: str,
    password: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """POST /api/auth/login -> {"token", "user"}"""
    body = {"email": email, "password": password}
    return await request("POST", f"{RESOURCE}/login", client=client, json=body)


async def get_me(
    token: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET /api/auth/me"""
    return await request("GET", f"{RESOURCE}/me", client=client, token=token)
