"""
Domain value objects - immutable types and enums.
"""

from .categories import (
    COMPOUND_EXPANSIONS,
    DESCRIPTORS,
    Category,
    CategoryDescriptor,
    CategoryValue,
    CompoundFilter,
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
from .enums import LifecycleEvent

__all__ = [
    # categories.py
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
    # enums.py
    "LifecycleEvent",
]
