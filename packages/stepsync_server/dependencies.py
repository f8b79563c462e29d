"""FastAPI dependencies for the StepSync server."""

from fastapi.requests import HTTPConnection

from stepsync_server.config import Settings
from stepsync_server.services.sync_service import SyncService


def get_sync_service(connection: HTTPConnection) -> SyncService:
    """
    Dependency to get the shared SyncService (HTTP and WebSocket routes).

    Usage:
        @router.get("/api/state")
        async def get_state(service: SyncService = Depends(get_sync_service)):
            return service.store.snapshot()

    Raises:
        RuntimeError: If the app lifespan has not run
    """
    service = getattr(connection.app.state, "sync_service", None)
    if service is None:
        raise RuntimeError("SyncService not initialized. Ensure app lifespan is running.")
    return service


def get_settings(connection: HTTPConnection) -> Settings:
    """Dependency to get the settings the app was created with."""
    return connection.app.state.settings
