"""
Services layer for business logic.

This package contains the catalog ingestion pipeline (row joining, stats
parsing, flag composition, record assembly), the filter engine, unlock
handling and the display model.
"""

from .catalog_service import ActionCatalog, assemble_record, build_catalog
from .filter_engine import FilterEngine
from .flag_composer import compose_effects, compose_target
from .row_joiner import JoinedRows, join_rows
from .stats_parser import ParsedStats, parse_stats
from .unlock_service import StaticUnlockResolver, UnlockService

__all__ = [
    "ActionCatalog",
    "assemble_record",
    "build_catalog",
    "FilterEngine",
    "compose_effects",
    "compose_target",
    "JoinedRows",
    "join_rows",
    "ParsedStats",
    "parse_stats",
    "StaticUnlockResolver",
    "UnlockService",
]
