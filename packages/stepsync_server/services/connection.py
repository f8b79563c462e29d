"""
Client connection handle.

Wraps one WebSocket with a bounded outbound queue drained by a dedicated
writer task, so a slow socket only ever delays its own frames.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)

# Default outbound queue size per connection
_DEFAULT_QUEUE_SIZE = 256


class FrameSocket(Protocol):
    """The part of a WebSocket the writer needs"""

    async def send_text(self, data: str) -> None: ...

    async def close(self, code: int = 1000, reason: str | None = None) -> None: ...


class ConnectionState(Enum):
    """Session lifecycle of a connection"""
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


class ClientConnection:
    """
    One connected client.

    enqueue() never blocks: it returns False when the connection is closed
    or its queue is full, and the caller decides what to do about it.
    close() is idempotent and safe to call while a send is in flight.
    """

    def __init__(
        self,
        websocket: FrameSocket,
        conn_id: str,
        queue_size: int = _DEFAULT_QUEUE_SIZE,
        on_write_error: Callable[[ClientConnection], None] | None = None,
    ) -> None:
        self.id = conn_id
        self.state = ConnectionState.CONNECTING
        self._ws = websocket
        self._queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=queue_size)
        self._on_write_error = on_write_error
        self._close_code: int | None = None

    def __repr__(self) -> str:
        return f"ClientConnection(id={self.id!r}, state={self.state.value})"

    @property
    def is_open(self) -> bool:
        return self.state is ConnectionState.OPEN

    @property
    def pending(self) -> int:
        """Frames queued but not yet written"""
        return self._queue.qsize()

    def mark_open(self) -> None:
        if self.state is ConnectionState.CONNECTING:
            self.state = ConnectionState.OPEN

    # ----------------------------------------------------------
    # Outbound
    # ----------------------------------------------------------

    def enqueue(self, frame: str) -> bool:
        """Queue a frame for the writer without waiting."""
        if self.state is ConnectionState.CLOSED:
            return False
        try:
            self._queue.put_nowait(frame)
        except asyncio.QueueFull:
            return False
        return True

    def close(self, code: int | None = None) -> None:
        """
        Mark the connection closed and stop its writer.

        Args:
            code: WebSocket close code to send; None when the client
                already went away and there is nothing to close
        """
        if self.state is ConnectionState.CLOSED:
            return
        self.state = ConnectionState.CLOSED
        self._close_code = code
        try:
            self._queue.put_nowait(None)
        except asyncio.QueueFull:
            # writer checks state before each send
            pass

    async def run_writer(self) -> None:
        """Drain the outbound queue into the socket until closed."""
        while True:
            frame = await self._queue.get()
            if frame is None or self.state is ConnectionState.CLOSED:
                break
            try:
                await self._ws.send_text(frame)
            except Exception as e:
                logger.warning(f"Send to client {self.id} failed: {e}")
                self.close()
                if self._on_write_error is not None:
                    self._on_write_error(self)
                return

        if self._close_code is not None:
            try:
                await self._ws.close(code=self._close_code)
            except (RuntimeError, OSError) as e:
                logger.debug(f"Close of client {self.id} failed: {e}")
