"""GET / and /companion - client app page and WebSocket session

A plain GET serves the built client app; an upgrade request on the same
path opens a synchronized session.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, WebSocket
from fastapi.responses import FileResponse

from stepsync_server.config import Settings
from stepsync_server.dependencies import get_settings, get_sync_service
from stepsync_server.services.sync_service import SyncService

logger = logging.getLogger(__name__)

router = APIRouter()

SESSION_PATHS = ("/", "/companion")

# Seconds a closing connection's writer gets to flush its close frame
_WRITER_SHUTDOWN_TIMEOUT = 1.0


async def index(settings: Settings = Depends(get_settings)) -> FileResponse:
    """Serve the built client app"""
    index_file = settings.static_dir / "index.html"
    if not index_file.is_file():
        raise HTTPException(status_code=404, detail="Client app not found")
    return FileResponse(index_file, media_type="text/html")


async def session_socket(
    websocket: WebSocket,
    service: SyncService = Depends(get_sync_service),
) -> None:
    """Run one client session until the client goes away.

    Inbound frames are handled in receipt order on this task; outbound
    frames are written by the connection's own writer task.
    """
    await websocket.accept()
    conn = service.create_connection(websocket)
    service.handler.open(conn)
    writer = asyncio.create_task(conn.run_writer())

    try:
        while conn.is_open:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            frame = message.get("text")
            if frame is None:
                frame = message.get("bytes") or b""
            service.handler.handle_frame(conn, frame)
    finally:
        service.handler.close(conn)
        # writer may still owe the socket a close frame
        try:
            await asyncio.wait_for(writer, timeout=_WRITER_SHUTDOWN_TIMEOUT)
        except asyncio.TimeoutError:
            logger.warning(f"Writer for client {conn.id} did not stop in time")


for _path in SESSION_PATHS:
    router.add_api_route(_path, index, methods=["GET"], include_in_schema=False)
    router.add_api_websocket_route(_path, session_socket)
