"""
Row store for game-data sheets.

A sheet is a table of rows keyed by integer id. Each row exposes typed
column accessors. Two implementations are provided:
- InMemoryRowStore: built from plain dicts (tests, scripts)
- YamlRowStore: one YAML file per sheet in a data directory

YAML sheet layout (<data_dir>/<Sheet>.yaml):

    rows:
      1:
        Name: Water Cannon
        Icon: 3252
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

import yaml

from domain.exceptions import ConfigurationError

logger = logging.getLogger("RowStore")


class Row:
    """One sheet row with typed column accessors."""

    def __init__(self, sheet: str, row_id: int, columns: Mapping[str, Any]):
        self.sheet = sheet
        self.row_id = row_id
        self._columns = dict(columns)

    def __repr__(self) -> str:
        return f"Row({self.sheet!r}, {self.row_id})"

    def _get(self, column: str) -> Any:
        if column not in self._columns:
            raise KeyError(f"Column '{column}' missing in {self.sheet}#{self.row_id}")
        return self._columns[column]

    def get_str(self, column: str) -> str:
        value = self._get(column)
        return "" if value is None else str(value)

    def get_bytes(self, column: str) -> bytes:
        """Raw string column as bytes (payloads intact)."""
        value = self._get(column)
        if isinstance(value, bytes):
            return value
        return self.get_str(column).encode("utf-8")

    def get_int(self, column: str) -> int:
        value = self._get(column)
        if isinstance(value, bool):
            return int(value)
        try:
            return int(value or 0)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Column '{column}' in {self.sheet}#{self.row_id} is not an integer: {value!r}") from e

    def get_bool(self, column: str) -> bool:
        value = self._get(column)
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes")
        return bool(value)


class RowStore(Protocol):
    """Read-only access to game-data sheets."""

    def get_row(self, sheet: str, row_id: int) -> Optional[Row]: ...

    def row_ids(self, sheet: str) -> List[int]: ...


class InMemoryRowStore:
    """Row store backed by nested dicts: sheet -> row id -> columns."""

    def __init__(self, sheets: Optional[Mapping[str, Mapping[int, Mapping[str, Any]]]] = None):
        self._sheets: Dict[str, Dict[int, Row]] = {}
        for sheet, rows in (sheets or {}).items():
            self.add_sheet(sheet, rows)

    def add_sheet(self, sheet: str, rows: Mapping[int, Mapping[str, Any]]) -> None:
        self._sheets[sheet] = {int(row_id): Row(sheet, int(row_id), columns or {}) for row_id, columns in rows.items()}

    def get_row(self, sheet: str, row_id: int) -> Optional[Row]:
        return self._sheets.get(sheet, {}).get(row_id)

    def row_ids(self, sheet: str) -> List[int]:
        return sorted(self._sheets.get(sheet, {}).keys())


class YamlRowStore(InMemoryRowStore):
    """Row store that lazily loads <data_dir>/<Sheet>.yaml files."""

    def __init__(self, data_dir: Union[str, Path]):
        super().__init__()
        self.data_dir = Path(data_dir)

    def _ensure_loaded(self, sheet: str) -> None:
        if sheet in self._sheets:
            return

        sheet_file = self.data_dir / f"{sheet}.yaml"
        if not sheet_file.exists():
            raise ConfigurationError(f"Sheet file not found: {sheet_file}")

        with open(sheet_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        rows = data.get("rows")
        if not isinstance(rows, dict):
            raise ConfigurationError(f"Sheet file {sheet_file} has no 'rows' mapping")

        self.add_sheet(sheet, rows)
        logger.debug(f"Loaded sheet '{sheet}' ({len(rows)} rows) from {sheet_file}")

    def get_row(self, sheet: str, row_id: int) -> Optional[Row]:
        self._ensure_loaded(sheet)
        return super().get_row(sheet, row_id)

    def row_ids(self, sheet: str) -> List[int]:
        self._ensure_loaded(sheet)
        return super().row_ids(sheet)
