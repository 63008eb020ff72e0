"""
Test fixtures for game-data sheets.

Builds in-memory sheets for spells so tests can describe a catalog in a
few lines instead of four tables.
"""

from typing import Any, Dict, Iterable, Optional

import pytest
from domain.value_objects.categories import SpellEffect
from infrastructure.row_store import InMemoryRowStore
from services.catalog_service import EFFECT_COLUMNS
from services.flag_composer import EFFECT_COLUMN_ORDER

Sheets = Dict[str, Dict[int, Dict[str, Any]]]


def spell(
    primary_id: int,
    action_id: int,
    number: int,
    stats: str,
    *,
    name: Optional[str] = None,
    enemy: bool = False,
    self_or_ally: bool = False,
    effects: Iterable[SpellEffect] = (),
    cast: int = 20,
    recast: int = 25,
    icon: int = 3000,
    unlock_key: int = 0,
) -> Dict[str, Any]:
    """Describe one spell as the rows of each sheet."""
    effects = set(effects)
    transient = {
        "Number": number,
        "Stats": stats,
        "Description": f"Flavor text {number}",
        "TargetsEnemy": enemy,
        "TargetsSelfOrAlly": self_or_ally,
    }
    for column, effect in zip(EFFECT_COLUMNS, EFFECT_COLUMN_ORDER):
        transient[column] = effect in effects

    return {
        "primary_id": primary_id,
        "action_id": action_id,
        "AozAction": {"Action": action_id, "Rank": 1},
        "Action": {
            "Name": name or f"Spell {number}",
            "Icon": icon + number,
            "Cast100ms": cast,
            "Recast100ms": recast,
            "UnlockLink": unlock_key or 1000 + number,
        },
        "AozActionTransient": transient,
        "ActionTransient": {"Description": f"Tooltip {number}"},
    }


def build_sheets(*spells: Dict[str, Any]) -> Sheets:
    """Combine spell descriptions into sheet dicts, with the unused row 0 included."""
    sheets: Sheets = {
        "AozAction": {0: {"Action": 0, "Rank": 0}},
        "Action": {},
        "AozActionTransient": {},
        "ActionTransient": {},
    }
    for entry in spells:
        sheets["AozAction"][entry["primary_id"]] = dict(entry["AozAction"])
        sheets["Action"][entry["action_id"]] = dict(entry["Action"])
        sheets["AozActionTransient"][entry["primary_id"]] = dict(entry["AozActionTransient"])
        sheets["ActionTransient"][entry["action_id"]] = dict(entry["ActionTransient"])
    return sheets


SAMPLE_SPELLS = (
    spell(1, 101, 3, "Magical Water ★", name="Water Cannon", enemy=True),
    spell(2, 102, 1, "Physical Blunt ★", name="Flying Frenzy", enemy=True, cast=10),
    spell(3, 103, 2, "Magical Fire ★★", name="Self-destruct", effects=[SpellEffect.FLAT_DAMAGE_AND_DEATH]),
    spell(
        4,
        104,
        5,
        "Physical Piercing ★★★",
        name="Final Sting",
        enemy=True,
        effects=[SpellEffect.PARALYSIS, SpellEffect.SLEEP],
        cast=60,
        recast=600,
    ),
    spell(
        5,
        105,
        4,
        "Magical Piercing/Fire ★★★",
        name="Drill Flame",
        enemy=True,
        self_or_ally=True,
        effects=[SpellEffect.SLOW],
        cast=30,
        recast=900,
    ),
    spell(6, 106, 6, "Magical Unaspected ★", name="Bristle", self_or_ally=True, cast=0),
)

# Action ids in display order (sorted by number)
SAMPLE_ORDER = [102, 103, 101, 105, 104, 106]


@pytest.fixture
def sample_sheets() -> Sheets:
    """Sheets for the six sample spells."""
    return build_sheets(*SAMPLE_SPELLS)


@pytest.fixture
def sample_store(sample_sheets: Sheets) -> InMemoryRowStore:
    """In-memory row store over the sample sheets."""
    return InMemoryRowStore(sample_sheets)
