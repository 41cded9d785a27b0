# =============================================================================
# app/auth/middleware.py - Request Authentication Middleware
# =============================================================================
# Every HTTP request passes through AuthMiddleware before reaching a route:
#
# 1. OPTIONS (CORS preflight) and public routes pass straight through
# 2. Otherwise "Authorization: Bearer <token>" is required; a missing or
#    malformed header is answered with 401 and the handler never runs
# 3. The token is checked by the configured AuthProvider
# 4. The resulting AuthUser is stored on request.state.user
#
# Route handlers read the user via app.auth.dependencies.get_current_user.
# =============================================================================

import logging
import re
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.auth.provider import AuthProvider

logger = logging.getLogger(__name__)


# (method or None for any method, full-path pattern)
PUBLIC_ROUTES: list[tuple[str | None, re.Pattern]] = [
    (None, re.compile(r"^/$")),
    (None, re.compile(r"^/health(/.*)?$")),
    (None, re.compile(r"^/docs(/.*)?$")),
    (None, re.compile(r"^/redoc$")),
    (None, re.compile(r"^/openapi\.json$")),
    ("POST", re.compile(r"^/api/auth/login/?$")),
    ("POST", re.compile(r"^/api/auth/register/?$")),
    ("GET", re.compile(r"^/api/categories/?$")),
    ("GET", re.compile(r"^/api/influencers/?$")),
    ("GET", re.compile(r"^/api/influencers/handle/[^/]+/?$")),
    ("GET", re.compile(r"^/api/influencers/(?!me/?$)[^/]+/?$")),
]


def is_public_route(method: str, path: str) -> bool:
    """True if the route may be called without a token."""
    method = method.upper()
    return any(
        (allowed is None or allowed == method) and pattern.match(path)
        for allowed, pattern in PUBLIC_ROUTES
    )


def extract_bearer_token(auth_header: str) -> str:
    """
    Extract token from Authorization header.

    Expected format: "Bearer <token>"

    Raises:
        ValueError: If header format is invalid
    """
    parts = auth_header.split()
    if len(parts) != 2:
        raise ValueError("Authorization header must be 'Bearer <token>'")

    scheme, token = parts
    if scheme.lower() != "bearer":
        raise ValueError("Authorization scheme must be Bearer")

    return token


def _unauthorized(code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": message, "code": code},
        headers={"WWW-Authenticate": "Bearer"},
    )


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Authentication middleware for bearer-token validation.

    The credential scheme is owned by the provider; this class only finds
    the token and decides which routes need one.
    """

    def __init__(self, app, auth_provider: AuthProvider):
        super().__init__(app)
        self.auth_provider = auth_provider
        logger.info(
            f"Initialized AuthMiddleware with provider: {auth_provider.get_provider_name()}"
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path

        if request.method == "OPTIONS" or is_public_route(request.method, path):
            logger.debug(f"Public route accessed: {request.method} {path}")
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if not auth_header:
            logger.warning(f"Missing Authorization header for {request.method} {path}")
            return _unauthorized("MISSING_TOKEN", "No token, authorization denied")

        try:
            token = extract_bearer_token(auth_header)
            user = await self.auth_provider.validate_token(token)
        except ValueError as e:
            logger.warning(f"Token validation failed for {path}: {e}")
            return _unauthorized("INVALID_TOKEN", str(e))

        request.state.user = user
        logger.debug(f"Authenticated user {user.id} for {request.method} {path}")

        return await call_next(request)
