import json
import logging
from typing import Dict, Optional
from uuid import uuid4

from fastapi import WebSocket

logger = logging.getLogger(__name__)

MESSAGE_EVENT = "message"


class MessageRelay:
    """Fan-out of "message" events to every live WebSocket, sender included."""

    def __init__(self):
        self.connections: Dict[str, WebSocket] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        connection_id = uuid4().hex
        self.connections[connection_id] = websocket
        logger.info(f"Socket connected: {connection_id}. Total connections: {len(self.connections)}")
        return connection_id

    def disconnect(self, connection_id: str) -> None:
        if self.connections.pop(connection_id, None) is not None:
            logger.info(f"Socket disconnected: {connection_id}")

    async def handle_frame(self, connection_id: str, raw: str) -> None:
        try:
            frame = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed frame from {connection_id}")
            return

        if not isinstance(frame, dict) or frame.get("event") != MESSAGE_EVENT:
            logger.debug(f"Ignoring unsupported frame from {connection_id}")
            return

        await self.broadcast(frame.get("data"))

    async def broadcast(self, data) -> None:
        frame = {"event": MESSAGE_EVENT, "data": data}

        dropped = []
        for connection_id, connection in list(self.connections.items()):
            try:
                await connection.send_json(frame)
            except Exception as e:
                logger.error(f"Error sending message to {connection_id}: {str(e)}")
                dropped.append(connection_id)

        for connection_id in dropped:
            self.disconnect(connection_id)

    async def close_all(self) -> None:
        for connection_id, connection in list(self.connections.items()):
            try:
                await connection.close(code=1000)
            except Exception as e:
                logger.error(f"Error closing connection {connection_id}: {str(e)}")
        self.connections.clear()


_relay: Optional[MessageRelay] = None


def get_relay() -> MessageRelay:
    global _relay
    if _relay is None:
        _relay = MessageRelay()
        logger.info("Message relay initialized")
    return _relay


async def shutdown_relay() -> None:
    global _relay
    if _relay is None:
        return
    await _relay.close_all()
    _relay = None
    logger.info("Message relay shut down")
