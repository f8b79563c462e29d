"""Test fixtures for stepsync_server tests"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from stepsync_server.config import Settings
from stepsync_server.main import create_app
from stepsync_server.services import ClientConnection, SyncService

from mocks import MockWebSocket


@pytest.fixture
def service() -> SyncService:
    return SyncService()


@pytest.fixture
def extended_service() -> SyncService:
    return SyncService(track_ids=Settings(extended_tracks=True).track_ids)


@pytest.fixture
def connect(service: SyncService) -> Callable[[], ClientConnection]:
    """Open a session on the service over a MockWebSocket."""

    def _connect() -> ClientConnection:
        conn = service.create_connection(MockWebSocket())
        service.handler.open(conn)
        return conn

    return _connect


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    (tmp_path / "index.html").write_text("<!DOCTYPE html><html><body>StepSync</body></html>")
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "app.js").write_text("console.log('stepsync')")
    return tmp_path


@pytest.fixture
def client(static_dir: Path) -> Iterator[TestClient]:
    """Test client with the app lifespan running"""
    app = create_app(Settings(static_dir=static_dir))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def extended_client(static_dir: Path) -> Iterator[TestClient]:
    app = create_app(Settings(static_dir=static_dir, extended_tracks=True, strict_params=True))
    with TestClient(app) as test_client:
        yield test_client
