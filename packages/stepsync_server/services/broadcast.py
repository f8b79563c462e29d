"""
Broadcast fan-out.

At-most-once, best-effort delivery of one frame to every registered
connection. A recipient that cannot take the frame is dropped from the
registry and closed; it resynchronises from a fresh snapshot when it
reconnects.
"""

from __future__ import annotations

import logging

from fastapi import status

from stepsync_core.protocol import MessageCodec, OutboundMessage
from stepsync_server.services.connection import ClientConnection
from stepsync_server.services.registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class Broadcaster:
    """Fans serialized messages out to the connection registry"""

    def __init__(self, registry: ConnectionRegistry, codec: MessageCodec) -> None:
        self._registry = registry
        self._codec = codec

    def publish(self, message: OutboundMessage) -> int:
        """
        Queue a message on every registered connection, originator included.

        Never awaits, so the order of publish() calls is the order frames
        reach each connection's queue.

        Returns:
            Number of connections the frame was queued for
        """
        frame = self._codec.encode(message)
        delivered = 0

        def deliver(conn: ClientConnection) -> None:
            nonlocal delivered
            if conn.enqueue(frame):
                delivered += 1
            else:
                self._drop(conn)

        self._registry.for_each(deliver)
        return delivered

    def send_to(self, conn: ClientConnection, message: OutboundMessage) -> bool:
        """Queue a message for a single connection."""
        if conn.enqueue(self._codec.encode(message)):
            return True
        self._drop(conn)
        return False

    def _drop(self, conn: ClientConnection) -> None:
        if self._registry.deregister(conn):
            logger.warning(
                f"Dropping client {conn.id}: outbound queue full or closed "
                f"({conn.pending} frames pending)"
            )
        conn.close(code=status.WS_1013_TRY_AGAIN_LATER)
