"""
Display model for the spellbook window.

Turns catalog records and filter state into the list entries and filter
panel the client renders. Layout follows the spellbook window:
- Row 1: rank, type, target buttons and the clear button
- Row 2: aspects, then the Piercing/Fire and Blunt/Earth shortcuts
- Row 3: effects
- Rows 4-5: cast and recast text buttons
"""

from enum import Enum
from typing import List, Sequence

from domain.entities.action_record import ActionRecord
from domain.value_objects.categories import (
    Category,
    CompoundFilter,
    describe,
    members,
    split_flags,
)
from schemas.spells import ActionEntry, ActionList, FilterButton, FilterGroup, FilterPanel

from services.flag_composer import EFFECT_COLUMN_ORDER
from services.filter_engine import FilterEngine

MISSING_ICON_ID = 60861
CLEAR_FILTER_ICON_ID = 16005

CAST_TOOLTIP = "{0} cast"
RECAST_TOOLTIP = "{0} cooldown"

ASPECT_SHORTCUTS = (CompoundFilter.PIERCING_FIRE, CompoundFilter.BLUNT_EARTH)


def _key(value: Enum) -> str:
    return value.name.lower()


def action_title(record: ActionRecord) -> str:
    return f"#{record.display_number}: {record.name}"


def icon_strip(record: ActionRecord) -> List[int]:
    """Icons drawn right to left next to a list entry: effects, aspects, target, type.

    Values without an icon show the missing-icon placeholder.
    """
    values: List[Enum] = [effect for effect in EFFECT_COLUMN_ORDER if effect in record.effects]
    values.extend(split_flags(record.aspect))
    values.extend(split_flags(record.target))
    values.append(record.spell_type)
    return [describe(value).icon_id or MISSING_ICON_ID for value in values]


def to_action_entry(record: ActionRecord) -> ActionEntry:
    return ActionEntry(
        action_id=record.action_id,
        display_number=record.display_number,
        title=action_title(record),
        icon_id=record.icon_id or MISSING_ICON_ID,
        name=record.name,
        description=record.description,
        flavor_text=record.flavor_text,
        rank=_key(record.rank),
        rank_text=describe(record.rank).label,
        spell_type=_key(record.spell_type),
        target=[_key(value) for value in split_flags(record.target)],
        aspect=[_key(value) for value in split_flags(record.aspect)],
        effects=[_key(effect) for effect in EFFECT_COLUMN_ORDER if effect in record.effects],
        cast_time=describe(record.cast_time).label,
        recast_time=describe(record.recast_time).label,
        unlock_key=record.unlock_key,
        is_unlocked=record.is_unlocked,
        icon_strip=icon_strip(record),
    )


def to_action_list(records: Sequence[ActionRecord], total_count: int) -> ActionList:
    return ActionList(
        actions=[to_action_entry(record) for record in records],
        visible_count=len(records),
        total_count=total_count,
    )


def _value_button(engine: FilterEngine, category: Category, value: Enum, tooltip_format: str = "{0}") -> FilterButton:
    descriptor = describe(value)
    return FilterButton(
        key=_key(value),
        category=category,
        label=descriptor.label,
        icon_id=descriptor.icon_id,
        enabled=engine.is_enabled(value),
        tooltip=tooltip_format.format(descriptor.label),
    )


def _compound_button(engine: FilterEngine, compound: CompoundFilter) -> FilterButton:
    descriptor = describe(compound)
    return FilterButton(
        key=compound.value,
        label=descriptor.label,
        icon_id=descriptor.icon_id,
        enabled=engine.is_compound_enabled(compound),
        tooltip=descriptor.label,
        is_compound=True,
    )


def _category_buttons(engine: FilterEngine, category: Category, tooltip_format: str = "{0}") -> List[FilterButton]:
    return [
        _value_button(engine, category, value, tooltip_format)
        for value in members(category)
        if describe(value).is_filterable
    ]


def build_filter_panel(engine: FilterEngine) -> FilterPanel:
    """Build the filter panel from the current filter state."""
    clear_button = FilterButton(
        key="clear",
        label="Clear Filters",
        icon_id=CLEAR_FILTER_ICON_ID,
        tooltip="Clear Filters",
    )

    groups = [
        FilterGroup(
            name="general",
            buttons=(
                _category_buttons(engine, Category.RANK)
                + _category_buttons(engine, Category.TYPE)
                + _category_buttons(engine, Category.TARGET)
                + [clear_button]
            ),
        ),
        FilterGroup(
            name="aspect",
            buttons=(
                _category_buttons(engine, Category.ASPECT)
                + [_compound_button(engine, compound) for compound in ASPECT_SHORTCUTS]
            ),
        ),
        FilterGroup(name="effect", buttons=_category_buttons(engine, Category.EFFECT)),
        FilterGroup(name="cast", buttons=_category_buttons(engine, Category.CAST, CAST_TOOLTIP)),
        FilterGroup(name="recast", buttons=_category_buttons(engine, Category.RECAST, RECAST_TOOLTIP)),
    ]

    return FilterPanel(
        groups=groups,
        active_categories=[category for category in Category if engine.is_active(category)],
        visible_count=len(engine.visible),
        total_count=len(engine.catalog),
        missing_icon_id=MISSING_ICON_ID,
    )
