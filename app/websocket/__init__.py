# =============================================================================
# app/websocket/__init__.py - WebSocket Module
# =============================================================================
# Provides real-time sponsorship notifications.
#
# Usage:
#   # Deliver to a connected user (inside an API process)
#   from app.websocket import websocket_manager
#
#   await websocket_manager.send_to_user(user_id, {"type": "new_sponsorship", ...})
#
#   # Publish from any process; every API process forwards it
#   from app.websocket.broadcast import publish_notification
#
#   publish_notification(user_id, "new_sponsorship", {"sponsorship_id": "..."})
# =============================================================================

from app.websocket.manager import websocket_manager
from app.websocket.broadcast import (
    EVENT_TYPES,
    NOTIFICATION_CHANNEL,
    publish_notification,
)

__all__ = [
    "websocket_manager",
    "publish_notification",
    "EVENT_TYPES",
    "NOTIFICATION_CHANNEL",
]
