# =============================================================================
# app/websocket/manager.py - Per-User Notification Sockets
# =============================================================================
# Process-local registry of open notification sockets, keyed by user id.
# Events reach it from the Redis listener in app/main.py; a user with several
# tabs open gets the event on each of them.
#
# Usage:
#   from app.websocket import websocket_manager
#   await websocket_manager.connect(user_id, websocket)
#   await websocket_manager.send_to_user(user_id, {"type": "new_sponsorship", ...})
#   websocket_manager.disconnect(user_id, websocket)
# =============================================================================

import asyncio
import logging

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Registry of notification sockets by recipient."""

    def __init__(self):
        self.connections: dict[str, set[WebSocket]] = {}

    async def connect(self, user_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        self.connections.setdefault(user_id, set()).add(websocket)
        logger.info(
            f"Notification socket opened for {user_id} "
            f"({self.get_connection_count(user_id)} for this user)"
        )

    def disconnect(self, user_id: str, websocket: WebSocket) -> None:
        self._forget(user_id, [websocket])
        logger.info(f"Notification socket closed for {user_id}")

    async def send_to_user(self, user_id: str, message: dict) -> int:
        """
        Deliver `message` to every socket the user has open.

        Sockets that fail to send are dropped from the registry.

        Returns:
            int: Number of sockets that received the message
        """
        sockets = list(self.connections.get(user_id, ()))
        if not sockets:
            logger.debug(f"{user_id} is offline, {message.get('type')} not delivered")
            return 0

        results = await asyncio.gather(
            *(ws.send_json(message) for ws in sockets),
            return_exceptions=True,
        )

        dead = [ws for ws, result in zip(sockets, results) if isinstance(result, Exception)]
        if dead:
            logger.warning(f"Dropping {len(dead)} unreachable socket(s) of {user_id}")
            self._forget(user_id, dead)

        return len(sockets) - len(dead)

    def _forget(self, user_id: str, sockets: list[WebSocket]) -> None:
        open_sockets = self.connections.get(user_id)
        if open_sockets is None:
            return
        open_sockets.difference_update(sockets)
        if not open_sockets:
            del self.connections[user_id]

    def get_connection_count(self, user_id: str | None = None) -> int:
        """Sockets for one user, or across all users."""
        if user_id:
            return len(self.connections.get(user_id, ()))
        return sum(len(sockets) for sockets in self.connections.values())

    def get_connected_users(self) -> list[str]:
        return list(self.connections)


websocket_manager = ConnectionManager()
