"""
Domain layer for the spell catalog.

Structure:
- entities/: Core data models (ActionRecord)
- value_objects/: Closed category enums, their display metadata, lifecycle events
- exceptions.py: Load, lookup and HTTP-facing errors
"""

from .entities import ActionRecord
from .value_objects import (
    COMPOUND_EXPANSIONS,
    DESCRIPTORS,
    Category,
    CategoryDescriptor,
    CategoryValue,
    CompoundFilter,
    LifecycleEvent,
    SpellAspect,
    SpellCast,
    SpellEffect,
    SpellRank,
    SpellRecast,
    SpellTarget,
    SpellType,
    category_of,
    describe,
    filterable_values,
)

__all__ = [
    # Entities
    "ActionRecord",
    # Value objects - categories
    "Category",
    "CategoryDescriptor",
    "CategoryValue",
    "CompoundFilter",
    "SpellType",
    "SpellAspect",
    "SpellTarget",
    "SpellEffect",
    "SpellRank",
    "SpellCast",
    "SpellRecast",
    "DESCRIPTORS",
    "COMPOUND_EXPANSIONS",
    "describe",
    "category_of",
    "filterable_values",
    # Value objects - enums
    "LifecycleEvent",
]
