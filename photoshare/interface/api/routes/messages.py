"""Real-time notification stream."""

import logging

from fastapi import APIRouter, WebSocket

from photoshare.adapter.notification.websocket import WebSocketNotificationHub

logger = logging.getLogger(__name__)

router = APIRouter(tags=["messages"])


@router.websocket("/messages")
async def messages(websocket: WebSocket) -> None:
    """Stream every photo event to the client as JSON.

    Messages look like
    `{"sender": "alice", "receiver": "", "photo_id": "...", "type": "photo_uploaded"}`.
    """
    # The hub is app-scoped; no request scope exists for WebSockets
    container = websocket.app.state.dishka_container
    hub = await container.get(WebSocketNotificationHub)
    await hub.serve(websocket)
