"""GET /api/state - Read-only state for polling clients"""

from typing import Any

from fastapi import APIRouter, Depends

from stepsync_server.dependencies import get_sync_service
from stepsync_server.services.sync_service import SyncService

router = APIRouter()


@router.get("/state")
async def get_state(
    service: SyncService = Depends(get_sync_service),
) -> dict[str, Any]:
    """Current full sequencer state (same shape as state_update data)"""
    return service.store.snapshot()
