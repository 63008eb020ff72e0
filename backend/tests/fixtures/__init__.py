"""Test fixtures package."""

from tests.fixtures.sheet_fixtures import (
    SAMPLE_ORDER,
    SAMPLE_SPELLS,
    build_sheets,
    sample_sheets,
    sample_store,
    spell,
)

__all__ = [
    "SAMPLE_ORDER",
    "SAMPLE_SPELLS",
    "build_sheets",
    "spell",
    "sample_sheets",
    "sample_store",
]
