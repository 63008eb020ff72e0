"""
Filter routes.

Every mutation recomputes the visible subset and returns the new panel.
"""

from core.dependencies import get_filter_engine, resolve_category_value
from fastapi import APIRouter, Depends
from schemas.spells import CompoundToggleRequest, FilterPanel, ToggleRequest
from services.display_service import build_filter_panel
from services.filter_engine import FilterEngine

router = APIRouter()


@router.get("", response_model=FilterPanel)
def get_filter_panel(engine: FilterEngine = Depends(get_filter_engine)):
    """Get the filter panel with the current enabled state of every button."""
    return build_filter_panel(engine)


@router.post("/toggle", response_model=FilterPanel)
def toggle_filter(request: ToggleRequest, engine: FilterEngine = Depends(get_filter_engine)):
    """Toggle one category value."""
    engine.toggle(resolve_category_value(request.category, request.value))
    return build_filter_panel(engine)


@router.post("/compound", response_model=FilterPanel)
def toggle_compound_filter(request: CompoundToggleRequest, engine: FilterEngine = Depends(get_filter_engine)):
    """Apply a compound shortcut such as Piercing/Fire."""
    engine.toggle_compound(request.compound)
    return build_filter_panel(engine)


@router.post("/clear", response_model=FilterPanel)
def clear_filters(engine: FilterEngine = Depends(get_filter_engine)):
    """Disable every filter."""
    engine.clear_all()
    return build_filter_panel(engine)
