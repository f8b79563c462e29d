"""Tests for ClientConnection."""

import asyncio

import pytest

from stepsync_server.services import ClientConnection, ConnectionState

from mocks import MockWebSocket


class TestConnectionState:
    """Lifecycle flags."""

    def test_starts_connecting(self) -> None:
        conn = ClientConnection(MockWebSocket(), "c1")
        assert conn.state is ConnectionState.CONNECTING
        assert conn.is_open is False

    def test_mark_open(self) -> None:
        conn = ClientConnection(MockWebSocket(), "c1")
        conn.mark_open()
        assert conn.is_open is True

    def test_closed_is_terminal(self) -> None:
        conn = ClientConnection(MockWebSocket(), "c1")
        conn.close()
        conn.mark_open()
        assert conn.state is ConnectionState.CLOSED

    def test_keeps_given_id(self) -> None:
        conn = ClientConnection(MockWebSocket(), "c7")
        assert conn.id == "c7"
        assert "c7" in repr(conn)


class TestEnqueue:
    """Non-blocking outbound queue."""

    def test_enqueue_until_full(self) -> None:
        conn = ClientConnection(MockWebSocket(), "c1", queue_size=2)
        assert conn.enqueue("a") is True
        assert conn.enqueue("b") is True
        assert conn.enqueue("c") is False
        assert conn.pending == 2

    def test_send_after_close_is_noop(self) -> None:
        conn = ClientConnection(MockWebSocket(), "c1")
        conn.close()
        assert conn.enqueue("a") is False

    def test_double_close(self) -> None:
        conn = ClientConnection(MockWebSocket(), "c1", queue_size=1)
        conn.enqueue("a")
        conn.close()
        conn.close()
        assert conn.state is ConnectionState.CLOSED


class TestWriter:
    """Writer task."""

    @pytest.mark.asyncio
    async def test_writes_in_order(self) -> None:
        ws = MockWebSocket()
        conn = ClientConnection(ws, "c1")
        conn.mark_open()
        writer = asyncio.create_task(conn.run_writer())

        for frame in ["1", "2", "3"]:
            conn.enqueue(frame)
        while len(ws.sent) < 3:
            await asyncio.sleep(0)

        conn.close()
        await asyncio.wait_for(writer, timeout=1)
        assert ws.sent == ["1", "2", "3"]
        # client-side close: nothing to send
        assert ws.closed_with is None

    @pytest.mark.asyncio
    async def test_close_with_code_closes_socket(self) -> None:
        ws = MockWebSocket()
        conn = ClientConnection(ws, "c1")
        writer = asyncio.create_task(conn.run_writer())
        conn.close(code=1013)
        await asyncio.wait_for(writer, timeout=1)
        assert ws.closed_with == 1013

    @pytest.mark.asyncio
    async def test_write_failure_reports_and_closes(self) -> None:
        failed = []
        ws = MockWebSocket(fail_sends=True)
        conn = ClientConnection(ws, "c1", on_write_error=failed.append)
        conn.mark_open()
        conn.enqueue("frame")

        await asyncio.wait_for(conn.run_writer(), timeout=1)

        assert failed == [conn]
        assert conn.state is ConnectionState.CLOSED
        assert conn.enqueue("later") is False
