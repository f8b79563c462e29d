"""Sync service - owns the shared store and the components around it"""

from __future__ import annotations

import itertools
import logging

from fastapi import status

from stepsync_core.constants.tracks import BASE_TRACK_IDS
from stepsync_core.protocol import DEFAULT_MAX_FRAME_BYTES, MessageCodec
from stepsync_core.state import StateStore
from stepsync_server.config import Settings
from stepsync_server.services.broadcast import Broadcaster
from stepsync_server.services.connection import ClientConnection, FrameSocket
from stepsync_server.services.registry import ConnectionRegistry
from stepsync_server.services.session_handler import SessionHandler

logger = logging.getLogger(__name__)


class SyncService:
    """
    One shared sequencer session.

    Built once per application (in the lifespan) and handed to routes
    through the get_sync_service dependency.
    """

    def __init__(
        self,
        track_ids: tuple[str, ...] = BASE_TRACK_IDS,
        strict_params: bool = False,
        outbound_queue_size: int = 256,
        max_frame_bytes: int = DEFAULT_MAX_FRAME_BYTES,
    ) -> None:
        self._outbound_queue_size = outbound_queue_size
        self._connection_ids = itertools.count(1)
        self.store = StateStore(track_ids)
        self.registry = ConnectionRegistry()
        self.codec = MessageCodec(max_frame_bytes=max_frame_bytes)
        self.broadcaster = Broadcaster(self.registry, self.codec)
        self.handler = SessionHandler(
            self.store,
            self.registry,
            self.broadcaster,
            self.codec,
            strict_params=strict_params,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SyncService":
        return cls(
            track_ids=settings.track_ids,
            strict_params=settings.strict_params,
            outbound_queue_size=settings.outbound_queue_size,
            max_frame_bytes=settings.max_frame_bytes,
        )

    def create_connection(self, websocket: FrameSocket) -> ClientConnection:
        """Wrap a WebSocket under a fresh id; write failures deregister it."""
        return ClientConnection(
            websocket,
            f"c{next(self._connection_ids)}",
            queue_size=self._outbound_queue_size,
            on_write_error=self.handler.close,
        )

    def shutdown(self) -> None:
        """Close every open connection."""
        connections = self.registry.connections()
        for conn in connections:
            self.registry.deregister(conn)
            conn.close(code=status.WS_1001_GOING_AWAY)
        logger.info(f"Sync service stopped ({len(connections)} clients closed)")
