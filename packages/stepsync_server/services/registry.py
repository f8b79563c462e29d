"""Connection registry - the set of live client connections"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from stepsync_server.services.connection import ClientConnection

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """
    Live connections keyed by connection id.

    Enumeration always works on a copy taken under the lock, so a
    connection closing mid-broadcast cannot disturb the iteration.
    """

    def __init__(self) -> None:
        self._connections: dict[str, ClientConnection] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)

    def __contains__(self, conn: object) -> bool:
        with self._lock:
            return isinstance(conn, ClientConnection) and self._connections.get(conn.id) is conn

    def register(self, conn: ClientConnection) -> None:
        with self._lock:
            self._connections[conn.id] = conn

    def deregister(self, conn: ClientConnection) -> bool:
        """
        Remove a connection.

        Returns:
            True if it was registered, False if it was already gone
        """
        with self._lock:
            if self._connections.get(conn.id) is not conn:
                return False
            del self._connections[conn.id]
            return True

    def connections(self) -> list[ClientConnection]:
        """Stable copy of the current connections"""
        with self._lock:
            return list(self._connections.values())

    def for_each(self, fn: Callable[[ClientConnection], None]) -> None:
        """Call fn on a stable copy; fn may deregister connections."""
        for conn in self.connections():
            fn(conn)
