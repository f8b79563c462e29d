"""Session services: connections, registry, fan-out and dispatch."""

from stepsync_server.services.broadcast import Broadcaster
from stepsync_server.services.connection import ClientConnection, ConnectionState
from stepsync_server.services.registry import ConnectionRegistry
from stepsync_server.services.session_handler import SessionHandler
from stepsync_server.services.sync_service import SyncService

__all__ = [
    "Broadcaster",
    "ClientConnection",
    "ConnectionRegistry",
    "ConnectionState",
    "SessionHandler",
    "SyncService",
]
