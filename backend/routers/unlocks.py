"""
Unlock refresh route.

The host forwards lifecycle events (ready, login, zone change) here.
"""

from core.dependencies import get_unlock_service
from fastapi import APIRouter, Depends
from schemas.spells import UnlockRefreshRequest, UnlockRefreshResponse
from services.unlock_service import UnlockService

router = APIRouter()


@router.post("/refresh", response_model=UnlockRefreshResponse)
def refresh_unlocks(request: UnlockRefreshRequest, unlock_service: UnlockService = Depends(get_unlock_service)):
    """Re-resolve unlock state for every spell."""
    unlocked = unlock_service.handle_event(request.event)
    return UnlockRefreshResponse(
        event=request.event,
        unlocked_count=unlocked,
        total_count=len(unlock_service.catalog),
        resolver_registered=unlock_service.has_resolver,
    )
