"""
Spell list filtering.

The filter state holds one enabled flag per filterable category value. A
record is visible when, for every category with at least one enabled value,
the record carries at least one of the enabled values (OR within a category,
AND across categories). With nothing enabled, every record is visible.

Threading model:
- Every mutation and the following recompute run under one lock
- Readers get immutable tuple snapshots
"""

import logging
from enum import Enum
from threading import Lock
from typing import Dict, Iterable, List, Tuple

from domain.entities.action_record import ActionRecord
from domain.exceptions import FilterLookupError
from domain.value_objects.categories import (
    COMPOUND_EXPANSIONS,
    Category,
    CategoryValue,
    CompoundFilter,
    category_of,
    filterable_values,
    split_flags,
)

from services.catalog_service import ActionCatalog

logger = logging.getLogger("FilterEngine")


def _record_values(record: ActionRecord, category: Category) -> Iterable[CategoryValue]:
    """The value(s) a record carries in one category."""
    if category == Category.TYPE:
        return (record.spell_type,)
    if category == Category.RANK:
        return (record.rank,)
    if category == Category.CAST:
        return (record.cast_time,)
    if category == Category.RECAST:
        return (record.recast_time,)
    if category == Category.TARGET:
        return split_flags(record.target)
    if category == Category.ASPECT:
        return split_flags(record.aspect)
    return record.effects


class FilterEngine:
    """Holds the filter state and the visible subset of a catalog."""

    def __init__(self, catalog: ActionCatalog):
        self.catalog = catalog
        self._state: Dict[CategoryValue, bool] = {value: False for value in filterable_values()}
        self._lock = Lock()
        self._visible: Tuple[ActionRecord, ...] = catalog.records

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    @property
    def visible(self) -> Tuple[ActionRecord, ...]:
        """Visible records in display order."""
        return self._visible

    @property
    def state(self) -> Dict[CategoryValue, bool]:
        """Copy of the filter state."""
        return dict(self._state)

    def is_enabled(self, value: CategoryValue) -> bool:
        if value not in self._state:
            raise FilterLookupError(value)
        return self._state[value]

    def enabled_values(self, category: Category) -> List[CategoryValue]:
        return [value for value, enabled in self._state.items() if enabled and category_of(value) == category]

    def is_active(self, category: Category) -> bool:
        return any(enabled for value, enabled in self._state.items() if category_of(value) == category)

    def is_compound_enabled(self, compound: CompoundFilter) -> bool:
        return all(self.is_enabled(value) for value in COMPOUND_EXPANSIONS[compound])

    # ------------------------------------------------------------------
    # Predicate
    # ------------------------------------------------------------------

    def matches(self, record: ActionRecord) -> bool:
        """True if the record survives the current filter state."""
        return self._matches(record, self._enabled_by_category())

    def _enabled_by_category(self) -> Dict[Category, frozenset]:
        enabled: Dict[Category, set] = {}
        for value, is_on in self._state.items():
            if is_on:
                enabled.setdefault(category_of(value), set()).add(value)
        return {category: frozenset(values) for category, values in enabled.items()}

    @staticmethod
    def _matches(record: ActionRecord, enabled: Dict[Category, frozenset]) -> bool:
        # Categories with nothing enabled are absent from `enabled` and impose no constraint
        for category, values in enabled.items():
            if not any(value in values for value in _record_values(record, category)):
                return False
        return True

    def _recompute(self) -> None:
        enabled = self._enabled_by_category()
        self._visible = tuple(record for record in self.catalog if self._matches(record, enabled))
        logger.debug(f"Visible actions: {len(self._visible)}/{len(self.catalog)}")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def toggle(self, value: Enum) -> Tuple[ActionRecord, ...]:
        """Flip one value. Values outside the filter state are ignored."""
        with self._lock:
            if value not in self._state:
                logger.debug(f"Ignoring toggle of unfilterable value {value!r}")
                return self._visible
            self._state[value] = not self._state[value]
            self._recompute()
        return self._visible

    def set_enabled(self, value: CategoryValue, enabled: bool) -> Tuple[ActionRecord, ...]:
        with self._lock:
            if value not in self._state:
                raise FilterLookupError(value)
            self._state[value] = enabled
            self._recompute()
        return self._visible

    def toggle_compound(self, compound: CompoundFilter) -> Tuple[ActionRecord, ...]:
        """
        Apply a compound shortcut.

        Enables every flag the compound expands to, or disables them all if
        they are already all enabled.
        """
        with self._lock:
            expansion = COMPOUND_EXPANSIONS[compound]
            enable = not all(self._state[value] for value in expansion)
            for value in expansion:
                self._state[value] = enable
            self._recompute()
        return self._visible

    def clear_all(self) -> Tuple[ActionRecord, ...]:
        """Disable every value. Equivalent to a freshly created filter state."""
        with self._lock:
            for value in self._state:
                self._state[value] = False
            self._recompute()
        return self._visible
