"""Spellbook schemas for the display client."""

from typing import List, Optional

from domain.value_objects.categories import Category, CompoundFilter
from domain.value_objects.enums import LifecycleEvent
from pydantic import BaseModel, Field

# =============================================================================
# Catalog Schemas
# =============================================================================


class ActionEntry(BaseModel):
    """One spell as shown in the list."""

    action_id: int
    display_number: int
    title: str = Field(..., description="List title, '#<number>: <name>'")
    icon_id: int
    name: str
    description: str
    flavor_text: str
    rank: str
    rank_text: str
    spell_type: str
    target: List[str]
    aspect: List[str]
    effects: List[str]
    cast_time: str
    recast_time: str
    unlock_key: int
    is_unlocked: bool
    icon_strip: List[int] = Field(default_factory=list, description="Category icons, right to left")


class ActionList(BaseModel):
    """A list of spells plus counts."""

    actions: List[ActionEntry]
    visible_count: int
    total_count: int


# =============================================================================
# Filter Schemas
# =============================================================================


class FilterButton(BaseModel):
    """One filter control."""

    key: str
    category: Optional[Category] = None  # None for compound and clear buttons
    label: str
    icon_id: int = 0
    enabled: bool = False
    tooltip: str
    is_compound: bool = False


class FilterGroup(BaseModel):
    """A row of filter controls."""

    name: str
    buttons: List[FilterButton]


class FilterPanel(BaseModel):
    """Full filter panel state."""

    groups: List[FilterGroup]
    active_categories: List[Category]
    visible_count: int
    total_count: int
    missing_icon_id: int


class ToggleRequest(BaseModel):
    """Toggle one category value, e.g. {"category": "aspect", "value": "fire"}."""

    category: Category
    value: str


class CompoundToggleRequest(BaseModel):
    """Apply a compound shortcut, e.g. {"compound": "piercing_fire"}."""

    compound: CompoundFilter


# =============================================================================
# Unlock Schemas
# =============================================================================


class UnlockUpdate(BaseModel):
    """Set the unlock state of one spell."""

    is_unlocked: bool


class UnlockRefreshRequest(BaseModel):
    """Lifecycle event forwarded by the host."""

    event: LifecycleEvent


class UnlockRefreshResponse(BaseModel):
    """Result of an unlock refresh."""

    event: LifecycleEvent
    unlocked_count: int
    total_count: int
    resolver_registered: bool
