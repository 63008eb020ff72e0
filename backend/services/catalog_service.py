"""
Spell catalog assembly.

Builds the full, sorted spell catalog from the row store in one pass. The
catalog is published only if every row joins and parses; any error aborts
the load.
"""

import logging
from threading import Lock
from typing import Dict, Iterable, Iterator, Optional, Tuple

from domain.entities.action_record import ActionRecord
from domain.exceptions import JoinError, StatsParseError
from domain.value_objects.categories import SpellCast, SpellRecast
from infrastructure.rich_text import RichTextError, decode_plain_text
from infrastructure.row_store import Row, RowStore

from services.flag_composer import compose_effects, compose_target
from services.row_joiner import PRIMARY_SHEET, JoinedRows, iter_joined_rows
from services.stats_parser import parse_stats

logger = logging.getLogger("CatalogService")

EFFECT_COLUMNS = (
    "CauseSlow",
    "CausePetrify",
    "CauseParalysis",
    "CauseInterrupt",
    "CauseBlind",
    "CauseStun",
    "CauseSleep",
    "CauseBind",
    "CauseHeavy",
    "CauseDeath",
)


class ActionCatalog:
    """
    Immutable, display-ordered spell catalog.

    Records are read-only except for is_unlocked, which is written through
    set_unlocked() under a lock.
    """

    def __init__(self, records: Iterable[ActionRecord]):
        self._records: Tuple[ActionRecord, ...] = tuple(records)
        self._by_id: Dict[int, ActionRecord] = {record.action_id: record for record in self._records}
        self._unlock_lock = Lock()

    def __iter__(self) -> Iterator[ActionRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> Tuple[ActionRecord, ...]:
        return self._records

    def get(self, action_id: int) -> Optional[ActionRecord]:
        return self._by_id.get(action_id)

    def set_unlocked(self, action_id: int, is_unlocked: bool) -> bool:
        """
        Update the unlock state of one record.

        Returns:
            True if the record exists, False otherwise
        """
        record = self._by_id.get(action_id)
        if record is None:
            return False
        with self._unlock_lock:
            record.is_unlocked = bool(is_unlocked)
        return True


def _map_time(row: Row, column: str, enum_cls):
    raw = row.get_int(column)
    try:
        return enum_cls(raw)
    except ValueError as e:
        raise StatsParseError(str(raw), f"{column} of {row.sheet}#{row.row_id} is not a known {enum_cls.__name__}") from e


def _text(row: Row, column: str) -> str:
    try:
        return decode_plain_text(row.get_bytes(column))
    except RichTextError as e:
        raise StatsParseError(row.get_str(column), f"{column} of {row.sheet}#{row.row_id}: {e}") from e


def assemble_record(joined: JoinedRows) -> ActionRecord:
    """
    Build one ActionRecord from its joined rows.

    Raises:
        StatsParseError: If stats text or cast/recast values are outside the vocabulary
        JoinError: If a row is missing a required column
        StatsParseError: If a column holds a value of the wrong type
    """
    action, transient, description = joined.action, joined.transient, joined.description

    try:
        stats = parse_stats(transient.get_bytes("Stats"))
        return ActionRecord(
            action_id=action.row_id,
            display_number=transient.get_int("Number"),
            icon_id=action.get_int("Icon"),
            name=_text(action, "Name"),
            description=_text(description, "Description"),
            flavor_text=_text(transient, "Description"),
            rank=stats.rank,
            spell_type=stats.spell_type,
            target=compose_target(transient.get_bool("TargetsEnemy"), transient.get_bool("TargetsSelfOrAlly")),
            aspect=stats.aspect,
            effects=compose_effects([transient.get_bool(column) for column in EFFECT_COLUMNS]),
            cast_time=_map_time(action, "Cast100ms", SpellCast),
            recast_time=_map_time(action, "Recast100ms", SpellRecast),
            unlock_key=action.get_int("UnlockLink"),
        )
    except KeyError as e:
        raise JoinError(PRIMARY_SHEET, joined.primary_id, str(e)) from e
    except StatsParseError:
        raise
    except ValueError as e:
        raise StatsParseError(str(e), f"bad column value for {PRIMARY_SHEET}#{joined.primary_id}") from e


def build_catalog(store: RowStore) -> ActionCatalog:
    """
    Join, parse and sort every spell in the row store.

    Ordering is by (display_number, action_id), so the same rows always give
    the same order.

    Raises:
        JoinError: On a missing related row or duplicate action id
        StatsParseError: On stats text or values outside the vocabulary
    """
    records = []
    seen_ids = set()
    for joined in iter_joined_rows(store):
        record = assemble_record(joined)
        if record.action_id in seen_ids:
            raise JoinError("Action", record.action_id, "action referenced by more than one spellbook entry")
        seen_ids.add(record.action_id)
        records.append(record)

    records.sort(key=lambda record: (record.display_number, record.action_id))
    logger.info(f"Loaded spell catalog with {len(records)} actions")
    return ActionCatalog(records)
