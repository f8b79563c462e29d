"""StepSync Server

Shared real-time step sequencer state over WebSockets.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from stepsync_server import __version__
from stepsync_server.config import Settings, settings
from stepsync_server.dependencies import get_sync_service
from stepsync_server.routes import session, state
from stepsync_server.services.sync_service import SyncService

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the global instance)
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        FastAPI lifespan manager.

        Lifecycle:
        1. Create the shared SyncService (fresh default state)
        2. [App runs]
        3. Close every client connection
        """
        service = SyncService.from_settings(app_settings)
        app.state.sync_service = service
        logger.info(f"Sync service started with tracks: {', '.join(service.store.track_ids)}")

        yield

        service.shutdown()
        app.state.sync_service = None

    app = FastAPI(
        title="StepSync",
        version=__version__,
        description="Shared real-time step sequencer state",
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.sync_service = None

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Mount built client assets when present
    assets_dir = app_settings.static_dir / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")

    # Include routers
    app.include_router(state.router, prefix="/api", tags=["state"])
    app.include_router(session.router, tags=["session"])

    @app.get("/health")
    async def health(service: SyncService = Depends(get_sync_service)) -> dict:
        """Health check with session summary"""
        snapshot = service.store.snapshot()
        return {
            "status": "ok",
            "version": app.version,
            "clients": len(service.registry),
            "tracks": list(snapshot["tracks"]),
            "bpm": snapshot["bpm"],
            "playing": snapshot["playing"],
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stepsync_server.main:app",
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
