# =============================================================================
# frontend/services/common.py - Shared HTTP Plumbing for API Wrappers
# =============================================================================
# Every wrapper is one call to request(): build "{base}/api{path}", send it,
# raise on a non-2xx status, return the parsed JSON body.
#
# Errors are deliberately not translated:
# - httpx.HTTPStatusError for non-2xx responses
# - httpx.TransportError subclasses (ConnectError, TimeoutException, ...)
# =============================================================================

import logging
from typing import Any

import httpx

from frontend.config import ClientSettings

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"


def get_api_base_url() -> str:
    """
    Base URL of the API, without a trailing slash.

    Uses API_URL when it is an absolute http(s) URL, otherwise
    http://localhost:5000.
    """
    url = ClientSettings().API_URL
    if not url:
        return DEFAULT_API_URL

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        parsed = None

    if parsed is None or parsed.scheme not in ("http", "https") or not parsed.host:
        logger.warning(f"Invalid API_URL '{url}', using {DEFAULT_API_URL}")
        return DEFAULT_API_URL

    return url.rstrip("/")


def api_url(path: str = "") -> str:
    """Absolute URL of an API path, e.g. api_url("/users") -> ".../api/users"."""
    return f"{get_api_base_url()}/api{path}"


def auth_headers(token: str | None = None) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop unset query parameters and join list values with commas."""
    cleaned = {}
    for key, value in (params or {}).items():
        if value is None or value == "" or value == []:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        cleaned[key] = value
    return cleaned


async def request(
    method: str,
    path: str,
    *,
    client: httpx.AsyncClient | None = None,
    token: str | None = None,
    json: Any = None,
    params: dict[str, Any] | None = None,
) -> Any:
    """
    Perform one API call and return the parsed JSON body.

    Args:
        method: HTTP method
        path: Path below /api, e.g. "/influencers/42"
        client: Client to send with; a short-lived one is created otherwise
        token: Bearer token for protected routes
        json: Request body
        params: Query parameters

    Raises:
        httpx.HTTPStatusError: Non-2xx response
        httpx.TransportError: Network failure or timeout
    """
    url = api_url(path)
    kwargs: dict[str, Any] = {"headers": auth_headers(token)}
    if json is not None:
        kwargs["json"] = json
    if params:
        kwargs["params"] = clean_params(params)

    if client is None:
        async with httpx.AsyncClient(timeout=ClientSettings().API_TIMEOUT) as own_client:
            response = await own_client.request(method, url, **kwargs)
    else:
        response = await client.request(method, url, **kwargs)

    logger.debug(f"{method} {url} -> {response.status_code}")
    response.raise_for_status()
    return response.json()
