# =============================================================================
# app/websocket/broadcast.py - Cross-Process Notification Publishing
# =============================================================================
# Request handlers publish sponsorship events here; every API process runs a
# listener (see app/main.py) that forwards them to the recipient's WebSocket
# connections.
#
# Uses Redis pub/sub for cross-process communication:
# - Services call publish_notification() after a sponsorship changes
# - Each API process subscribes and delivers to its local connections
#
# Events:
#   - new_sponsorship: A brand sent an offer to the influencer
#   - sponsorship_accepted / sponsorship_rejected: Influencer answered
#   - sponsorship_cancelled / sponsorship_completed: Brand closed the offer
# =============================================================================

import json
import logging
from typing import Any
from uuid import UUID

from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

# Redis channel for notification events
NOTIFICATION_CHANNEL = "marketplace:notifications"

NEW_SPONSORSHIP = "new_sponsorship"
SPONSORSHIP_ACCEPTED = "sponsorship_accepted"
SPONSORSHIP_REJECTED = "sponsorship_rejected"
SPONSORSHIP_CANCELLED = "sponsorship_cancelled"
SPONSORSHIP_COMPLETED = "sponsorship_completed"

EVENT_TYPES = frozenset({
    NEW_SPONSORSHIP,
    SPONSORSHIP_ACCEPTED,
    SPONSORSHIP_REJECTED,
    SPONSORSHIP_CANCELLED,
    SPONSORSHIP_COMPLETED,
})


def get_redis_client():
    """Get a Redis client for pub/sub operations."""
    import redis
    from app.config import settings
    return redis.from_url(settings.REDIS_URL)


def publish_notification(
    user_id: str | UUID,
    event_type: str,
    data: dict[str, Any],
) -> bool:
    """
    Publish an event for delivery to one user's WebSocket connections.

    Never raises: a sponsorship change must succeed even when Redis is down.

    Args:
        user_id: Recipient user id
        event_type: One of EVENT_TYPES
        data: JSON-serializable payload

    Returns:
        bool: True if published successfully
    """
    from app.config import settings

    if not settings.NOTIFICATIONS_ENABLED:
        logger.debug(f"Notifications disabled, dropping {event_type} for user {user_id}")
        return False

    try:
        client = get_redis_client()

        message = json.dumps({
            "user_id": normalize_uuid(user_id),
            "type": event_type,
            "data": data,
        }, default=str)

        client.publish(NOTIFICATION_CHANNEL, message)

        logger.debug(f"Published {event_type} event for user {user_id}")
        return True

    except Exception as e:
        logger.error(f"Failed to publish {event_type} event: {e}")
        return False
