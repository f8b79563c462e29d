"""Tests for main app endpoints (health, CORS, assets)"""

from fastapi.testclient import TestClient


def test_health_check(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["clients"] == 0
    assert data["tracks"] == ["kick", "snare", "hihat", "openhat"]
    assert data["bpm"] == 120
    assert data["playing"] is False


def test_cors_headers(client: TestClient):
    response = client.get("/api/state", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client: TestClient):
    response = client.options(
        "/api/state",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert "GET" in response.headers["access-control-allow-methods"]


def test_assets_mounted(client: TestClient):
    response = client.get("/assets/app.js")
    assert response.status_code == 200
    assert "stepsync" in response.text


def test_lifespan_gives_fresh_state(static_dir):
    from stepsync_server.config import Settings
    from stepsync_server.main import create_app

    app = create_app(Settings(static_dir=static_dir))
    with TestClient(app) as first:
        with first.websocket_connect("/") as ws:
            ws.receive_json()
            ws.send_json({"type": "transport_control", "action": "play"})
            ws.receive_json()
        assert first.get("/api/state").json()["playing"] is True

    with TestClient(app) as second:
        assert second.get("/api/state").json()["playing"] is False
