"""
Spell list routes.

Endpoints for the sorted catalog, the visible subset and unlock state.
"""

import logging

from core.dependencies import get_catalog, get_filter_engine, get_unlock_service
from domain.exceptions import ActionNotFoundError
from fastapi import APIRouter, Depends
from schemas.spells import ActionEntry, ActionList, UnlockUpdate
from services.catalog_service import ActionCatalog
from services.display_service import to_action_entry, to_action_list
from services.filter_engine import FilterEngine
from services.unlock_service import UnlockService

logger = logging.getLogger("ActionsRouter")

router = APIRouter()


@router.get("", response_model=ActionList)
def list_actions(catalog: ActionCatalog = Depends(get_catalog)):
    """Get every spell in display order."""
    return to_action_list(catalog.records, total_count=len(catalog))


@router.get("/visible", response_model=ActionList)
def list_visible_actions(
    catalog: ActionCatalog = Depends(get_catalog),
    engine: FilterEngine = Depends(get_filter_engine),
):
    """Get the spells that pass the current filters, in display order."""
    return to_action_list(engine.visible, total_count=len(catalog))


@router.get("/{action_id}", response_model=ActionEntry)
def get_action(action_id: int, catalog: ActionCatalog = Depends(get_catalog)):
    """Get a single spell by action id."""
    record = catalog.get(action_id)
    if record is None:
        raise ActionNotFoundError(action_id)
    return to_action_entry(record)


@router.put("/{action_id}/unlocked", response_model=ActionEntry)
def set_action_unlocked(
    action_id: int,
    update: UnlockUpdate,
    catalog: ActionCatalog = Depends(get_catalog),
    unlock_service: UnlockService = Depends(get_unlock_service),
):
    """Set the unlock state of one spell."""
    if not unlock_service.set_unlocked(action_id, update.is_unlocked):
        raise ActionNotFoundError(action_id)
    logger.debug(f"Action {action_id} unlocked={update.is_unlocked}")
    return to_action_entry(catalog.get(action_id))
