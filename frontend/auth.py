# =============================================================================
# frontend/auth.py - Client Auth Session
# =============================================================================
# AuthSession owns the token and the signed-in user. Pages read
# `is_authenticated` (usually through protected_route) and pass `token` to
# the API wrappers.
#
# Usage:
#   session = AuthSession()
#   await session.login("jane@example.com", "secret123")
#   protected_route(session.is_authenticated, render_dashboard)
# =============================================================================

import logging
from typing import Any, MutableMapping

import httpx

from frontend.services import auth as auth_api

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class AuthError(Exception):
    """Login or signup failed; the message comes from the server when it sent one."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        detail = body.get("detail")
        if isinstance(detail, str) and detail:
            return detail
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            return errors[0].get("msg") or fallback
    return fallback


class AuthSession:
    """
    Token and current user for one client.

    Args:
        storage: Where the token persists between sessions (a dict-like,
            e.g. a shelf or a keyring adapter); in-memory by default
        client: httpx client shared by all auth calls
    """

    def __init__(
        self,
        storage: MutableMapping[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.storage = storage if storage is not None else {}
        self.client = client
        self.token: str | None = self.storage.get(TOKEN_KEY)
        self.user: dict[str, Any] | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None

    def _set_session(self, token: str, user: dict[str, Any]) -> None:
        self.token = token
        self.user = user
        self.storage[TOKEN_KEY] = token

    async def restore(self) -> bool:
        """
        Load the user for a stored token.

        A token the server rejects is discarded. A network failure leaves
        the token in place for a later retry.

        Returns:
            True if the session is authenticated afterwards
        """
        if not self.token:
            return False

        try:
            self.user = await auth_api.get_me(self.token, client=self.client)
        except httpx.HTTPStatusError as e:
            logger.info(f"Stored token rejected ({e.response.status_code}), clearing it")
            self.logout()
        except httpx.TransportError as e:
            logger.warning(f"Could not reach API to restore session: {e}")
            self.user = None

        return self.is_authenticated

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """
        Sign in and remember the token.

        Raises:
            AuthError: The server refused the credentials
            httpx.TransportError: The server couldn't be reached
        """
        try:
            data = await auth_api.login(email, password, client=self.client)
        except httpx.HTTPStatusError as e:
            raise AuthError(
                _error_message(e.response, "Login failed"), e.response.status_code
            ) from e

        self._set_session(data["token"], data["user"])
        logger.info(f"Logged in as {email}")
        return data

    async def signup(self, name: str, email: str, password: str, role: str) -> dict[str, Any]:
        """
        Create an account and sign in with it.

        Raises:
            AuthError: The server refused the registration
            httpx.TransportError: The server couldn't be reached
        """
        try:
            data = await auth_api.register(name, email, password, role, client=self.client)
        except httpx.HTTPStatusError as e:
            raise AuthError(
                _error_message(e.response, "Signup failed"), e.response.status_code
            ) from e

        self._set_session(data["token"], data["user"])
        logger.info(f"Signed up as {email} ({role})")
        return data

    def logout(self) -> None:
        self.token = None
        self.user = None
        self.storage.pop(TOKEN_KEY, None)
