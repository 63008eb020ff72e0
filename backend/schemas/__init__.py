"""
Pydantic schemas for API request/response models.

- spells.py: Spell list, filter panel and unlock schemas
"""

from schemas.spells import (
    ActionEntry,
    ActionList,
    CompoundToggleRequest,
    FilterButton,
    FilterGroup,
    FilterPanel,
    ToggleRequest,
    UnlockRefreshRequest,
    UnlockRefreshResponse,
    UnlockUpdate,
)

__all__ = [
    # Spell list
    "ActionEntry",
    "ActionList",
    # Filters
    "FilterButton",
    "FilterGroup",
    "FilterPanel",
    "ToggleRequest",
    "CompoundToggleRequest",
    # Unlocks
    "UnlockUpdate",
    "UnlockRefreshRequest",
    "UnlockRefreshResponse",
]
