"""Tests for ConnectionRegistry."""

import itertools

from stepsync_server.services import ClientConnection, ConnectionRegistry

from mocks import MockWebSocket


_ids = itertools.count(1)


def _conn() -> ClientConnection:
    return ClientConnection(MockWebSocket(), f"c{next(_ids)}")


def test_register_and_len() -> None:
    registry = ConnectionRegistry()
    a, b = _conn(), _conn()
    registry.register(a)
    registry.register(b)
    assert len(registry) == 2
    assert a in registry
    assert registry.connections() == [a, b]


def test_deregister_is_idempotent() -> None:
    registry = ConnectionRegistry()
    a = _conn()
    registry.register(a)
    assert registry.deregister(a) is True
    assert registry.deregister(a) is False
    assert len(registry) == 0


def test_deregister_unknown_connection() -> None:
    registry = ConnectionRegistry()
    assert registry.deregister(_conn()) is False


def test_connections_is_a_copy() -> None:
    registry = ConnectionRegistry()
    a = _conn()
    registry.register(a)
    snapshot = registry.connections()
    registry.deregister(a)
    assert snapshot == [a]
    assert registry.connections() == []


def test_for_each_tolerates_removal_during_iteration() -> None:
    registry = ConnectionRegistry()
    conns = [_conn() for _ in range(3)]
    for conn in conns:
        registry.register(conn)

    visited = []

    def visit(conn: ClientConnection) -> None:
        visited.append(conn)
        # every visit removes all connections
        for other in conns:
            registry.deregister(other)

    registry.for_each(visit)
    assert visited == conns
    assert len(registry) == 0
