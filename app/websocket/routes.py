# =============================================================================
# app/websocket/routes.py - WebSocket Routes
# =============================================================================
# WebSocket endpoint for real-time sponsorship notifications.
#
# Connect: ws://host/ws/notifications?token={jwt}
#
# Events:
#   - {"type": "new_sponsorship", "data": {...sponsorship...}}
#   - {"type": "sponsorship_accepted", "data": {...}}
#   - {"type": "sponsorship_rejected" | "sponsorship_cancelled" |
#      "sponsorship_completed", "data": {...}}
# =============================================================================

import logging
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, Query

from app.auth import AuthUser, get_current_user
from app.auth.provider import get_auth_provider
from app.websocket.manager import websocket_manager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/notifications")
async def notifications_websocket(
    websocket: WebSocket,
    token: str = Query(..., description="JWT token for authentication")
):
    """
    WebSocket endpoint for real-time sponsorship notifications.

    Browsers can't set headers on a WebSocket handshake, so the access token
    travels in the `token` query parameter. Each user receives only the
    events addressed to them.

    Connection URL:
        ws://localhost:5000/ws/notifications?token={jwt}

    Example event:
        {
            "type": "sponsorship_accepted",
            "data": {"id": "550e8400-...", "status": "accepted", ...}
        }
    """
    # 1. Verify token
    try:
        user = get_auth_provider().decode(token)
    except ValueError as e:
        logger.warning(f"WebSocket auth failed: {e}")
        await websocket.close(code=4001, reason="Invalid token")
        return

    user_id = str(user.id)

    # 2. Accept connection and add to manager
    await websocket_manager.connect(user_id, websocket)

    try:
        await websocket.send_json({
            "type": "connected",
            "user_id": user_id,
            "message": "Connected to notifications"
        })

        # Keep connection alive and handle incoming messages
        while True:
            try:
                data = await websocket.receive_text()

                # Handle ping/pong for keepalive
                if data == "ping":
                    await websocket.send_text("pong")
                else:
                    logger.debug(f"WebSocket received: {data[:100]}")

            except WebSocketDisconnect:
                raise
            except Exception as e:
                logger.warning(f"WebSocket receive error: {e}")
                break

    except WebSocketDisconnect:
        logger.info(f"WebSocket client of user {user_id} disconnected")
    finally:
        websocket_manager.disconnect(user_id, websocket)


@router.get("/ws/status")
async def websocket_status(user: AuthUser = Depends(get_current_user)):
    """
    Get WebSocket connection statistics.

    Returns:
        dict: Connection counts
    """
    return {
        "total_connections": websocket_manager.get_connection_count(),
        "connected_users": len(websocket_manager.get_connected_users()),
        "your_connections": websocket_manager.get_connection_count(str(user.id)),
    }
