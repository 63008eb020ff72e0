"""
Joins the related sheet rows that make up one spell.

Per spellbook entry (primary sheet AozAction):
- AozAction row -> points at the base Action row
- Action row: name, icon, cast/recast, unlock link
- AozActionTransient row (same id as the primary): number, stats text, flags
- ActionTransient row (same id as the Action row): tooltip description
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from domain.exceptions import JoinError
from infrastructure.row_store import Row, RowStore

logger = logging.getLogger("RowJoiner")

PRIMARY_SHEET = "AozAction"
ACTION_SHEET = "Action"
STATS_SHEET = "AozActionTransient"
DESCRIPTION_SHEET = "ActionTransient"


@dataclass(frozen=True)
class JoinedRows:
    """The three rows behind one spellbook entry."""

    primary_id: int
    action: Row
    transient: Row
    description: Row


def _require_row(store: RowStore, sheet: str, row_id: int, primary_id: int) -> Row:
    row = store.get_row(sheet, row_id)
    if row is None:
        raise JoinError(sheet, row_id, f"referenced by {PRIMARY_SHEET}#{primary_id}")
    return row


def join_rows(store: RowStore, primary_id: int) -> JoinedRows:
    """
    Join the rows for one primary id.

    Raises:
        JoinError: If the primary row or any related row is missing
    """
    primary = store.get_row(PRIMARY_SHEET, primary_id)
    if primary is None:
        raise JoinError(PRIMARY_SHEET, primary_id)

    try:
        action_id = primary.get_int("Action")
    except (KeyError, ValueError) as e:
        raise JoinError(PRIMARY_SHEET, primary_id, str(e)) from e
    if action_id == 0:
        raise JoinError(ACTION_SHEET, action_id, f"{PRIMARY_SHEET}#{primary_id} has no action link")

    return JoinedRows(
        primary_id=primary_id,
        action=_require_row(store, ACTION_SHEET, action_id, primary_id),
        transient=_require_row(store, STATS_SHEET, primary_id, primary_id),
        description=_require_row(store, DESCRIPTION_SHEET, action_id, primary_id),
    )


def iter_joined_rows(store: RowStore) -> Iterator[JoinedRows]:
    """Join every primary row in id order. Row 0 is an unused slot and is skipped."""
    for primary_id in store.row_ids(PRIMARY_SHEET):
        if primary_id == 0:
            continue
        yield join_rows(store, primary_id)
