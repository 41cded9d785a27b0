# =============================================================================
# frontend/services/category.py - Category API Wrappers
# =============================================================================

from typing import Any

import httpx

from frontend.services.common import request

RESOURCE = "/categories"


async def get_categories(client: httpx.AsyncClient | None = None) -> list[dict[str, Any]]:
    """GET /api/categories"""
    return await request("GET", RESOURCE, client=client)
