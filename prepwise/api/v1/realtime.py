from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from prepwise.core.config import settings
from prepwise.services.relay import get_relay

router = APIRouter()


@router.websocket(settings.SOCKET_PATH)
async def relay_socket(websocket: WebSocket):
    relay = get_relay()
    connection_id = await relay.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            await relay.handle_frame(connection_id, raw)
    except WebSocketDisconnect:
        pass
    finally:
        relay.disconnect(connection_id)
