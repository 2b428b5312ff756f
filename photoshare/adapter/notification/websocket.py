"""In-process WebSocket broadcaster.

Every connected client gets its own bounded queue. `send` only enqueues, so
HTTP handlers never wait on a slow client; each connection drains its queue
from its own task.
"""

import asyncio
import logging

from starlette.websockets import WebSocket, WebSocketDisconnect

from photoshare.adapter.error import NotificationError
from photoshare.domain.model.notification import SocketMessage
from photoshare.domain.service.notification import NotificationSender

logger = logging.getLogger(__name__)

QUEUE_SIZE = 100


class WebSocketNotificationHub(NotificationSender):
    """Fans SocketMessages out to all connected WebSocket clients."""

    def __init__(self, queue_size: int = QUEUE_SIZE) -> None:
        self.queue_size = queue_size
        self.connections: dict[WebSocket, asyncio.Queue[SocketMessage]] = {}

    def send(self, message: SocketMessage) -> None:
        payload_type = message.type.value
        for websocket, queue in list(self.connections.items()):
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                # Slow consumer; drop it rather than buffer without bound
                logger.warning(
                    f"Dropping WebSocket client, queue full ({payload_type})"
                )
                self.connections.pop(websocket, None)

    async def serve(self, websocket: WebSocket) -> None:
        """Accept a client and stream messages until it disconnects."""
        queue: asyncio.Queue[SocketMessage] = asyncio.Queue(maxsize=self.queue_size)
        tasks: list[asyncio.Task] = []
        # Registered before the handshake completes so no event is missed
        self.connections[websocket] = queue
        try:
            await websocket.accept()
            logger.info(f"WebSocket client connected ({len(self.connections)} total)")

            tasks = [
                asyncio.create_task(self._write(websocket, queue)),
                asyncio.create_task(self._read(websocket)),
            ]
            await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            self.connections.pop(websocket, None)
            logger.info(
                f"WebSocket client disconnected ({len(self.connections)} remaining)"
            )

    async def _write(self, websocket: WebSocket, queue: asyncio.Queue) -> None:
        while True:
            message = await queue.get()
            try:
                await websocket.send_json(message.model_dump(mode="json"))
            except (WebSocketDisconnect, RuntimeError) as e:
                logger.warning(f"WebSocket send failed: {e}")
                return

    async def _read(self, websocket: WebSocket) -> None:
        # Clients don't talk back; reading only detects disconnects
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            return


class RecordingNotificationSender(NotificationSender):
    """Notification sender for testing.

    Keeps every message in `messages`. Set `fail` to make `send` raise.
    """

    def __init__(self) -> None:
        self.messages: list[SocketMessage] = []
        self.fail = False

    def send(self, message: SocketMessage) -> None:
        if self.fail:
            raise NotificationError("Mock notification failure")
        self.messages.append(message)
