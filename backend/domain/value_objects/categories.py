"""
Spell category enums and their display metadata.

Every category is a closed enumeration. Display data (icon id, label,
filterable flag) lives in a static descriptor table keyed by enum member
rather than on the members themselves.

Icon ids:
- 0 means "no icon"
- negative ids are synthetic icons shipped with the app, never looked up
  in the game icon table
"""

from dataclasses import dataclass
from enum import Enum, Flag
from typing import Dict, FrozenSet, Iterator, List, Optional, Union


class SpellType(Enum):
    """Damage type of a spell."""

    PHYSICAL = "physical"
    MAGIC = "magic"


class SpellAspect(Flag):
    """Spell aspect bitmask. A spell may carry several aspects at once."""

    UNASPECTED = 1 << 0
    BLUNT = 1 << 1
    PIERCING = 1 << 2
    SLASHING = 1 << 3
    FIRE = 1 << 4
    ICE = 1 << 5
    WIND = 1 << 6
    EARTH = 1 << 7
    LIGHTNING = 1 << 8
    WATER = 1 << 9


class SpellTarget(Flag):
    """Targeting bitmask. UNTARGETABLE is used instead of the empty mask."""

    UNTARGETABLE = 1 << 0
    SELF_OR_ALLY = 1 << 1
    ENEMY = 1 << 2


class SpellEffect(Enum):
    """Additional effects. Order matches the positional boolean columns."""

    SLOW = "slow"
    PETRIFICATION_AND_FREEZE = "petrification_and_freeze"
    PARALYSIS = "paralysis"
    INTERRUPTION = "interruption"
    BLIND = "blind"
    STUN = "stun"
    SLEEP = "sleep"
    BIND = "bind"
    HEAVY = "heavy"
    FLAT_DAMAGE_AND_DEATH = "flat_damage_and_death"


class SpellRank(Enum):
    """Spell rank, 0-based ordinal."""

    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4


class SpellCast(Enum):
    """Cast time in 100ms units."""

    S0 = 0
    S1 = 10
    S1_5 = 15
    S2 = 20
    S3 = 30
    S6 = 60
    S10 = 100


class SpellRecast(Enum):
    """Recast time in 100ms units."""

    S2_5 = 25
    S30 = 300
    S60 = 600
    S90 = 900
    S120 = 1200
    S180 = 1800
    S300 = 3000


class CompoundFilter(Enum):
    """Synthetic combination values. Only used as filter shortcuts, never stored on a record."""

    PIERCING_FIRE = "piercing_fire"
    BLUNT_EARTH = "blunt_earth"
    SELF_ALLY_OR_ENEMY = "self_ally_or_enemy"


class Category(str, Enum):
    """The seven filterable categories."""

    TYPE = "type"
    RANK = "rank"
    CAST = "cast"
    RECAST = "recast"
    TARGET = "target"
    ASPECT = "aspect"
    EFFECT = "effect"

    def __str__(self) -> str:
        return self.value


CategoryValue = Union[SpellType, SpellAspect, SpellTarget, SpellEffect, SpellRank, SpellCast, SpellRecast]

CATEGORY_ENUMS: Dict[Category, type] = {
    Category.TYPE: SpellType,
    Category.RANK: SpellRank,
    Category.CAST: SpellCast,
    Category.RECAST: SpellRecast,
    Category.TARGET: SpellTarget,
    Category.ASPECT: SpellAspect,
    Category.EFFECT: SpellEffect,
}

_ENUM_CATEGORIES: Dict[type, Category] = {enum_cls: category for category, enum_cls in CATEGORY_ENUMS.items()}

RANK_GLYPH = "★"


@dataclass(frozen=True)
class CategoryDescriptor:
    """Display metadata for one category value."""

    label: str
    icon_id: int = 0
    is_filterable: bool = True

    @property
    def has_icon(self) -> bool:
        return self.icon_id != 0

    @property
    def is_synthetic_icon(self) -> bool:
        """True for app-provided icons that must not be looked up in the game icon table."""
        return self.icon_id < 0


DESCRIPTORS: Dict[Enum, CategoryDescriptor] = {
    # Type
    SpellType.PHYSICAL: CategoryDescriptor("Physical", 15050),
    SpellType.MAGIC: CategoryDescriptor("Magical", 15054),
    # Aspect
    SpellAspect.UNASPECTED: CategoryDescriptor("Unaspected", 16018),
    SpellAspect.BLUNT: CategoryDescriptor("Blunt", 15535),
    SpellAspect.PIERCING: CategoryDescriptor("Piercing", 15536),
    SpellAspect.SLASHING: CategoryDescriptor("Slashing", 15537),
    SpellAspect.FIRE: CategoryDescriptor("Fire", 15100),
    SpellAspect.ICE: CategoryDescriptor("Ice", 15101),
    SpellAspect.WIND: CategoryDescriptor("Wind", 15102),
    SpellAspect.EARTH: CategoryDescriptor("Earth", 15103),
    SpellAspect.LIGHTNING: CategoryDescriptor("Lightning", 15104),
    SpellAspect.WATER: CategoryDescriptor("Water", 15105),
    # Target
    SpellTarget.UNTARGETABLE: CategoryDescriptor("Untargetable", 15336),
    SpellTarget.SELF_OR_ALLY: CategoryDescriptor("Targets Self or Ally", 15338),
    SpellTarget.ENEMY: CategoryDescriptor("Targets Enemy", 15339),
    # Effect
    SpellEffect.SLOW: CategoryDescriptor("Slow", 72461),
    SpellEffect.PETRIFICATION_AND_FREEZE: CategoryDescriptor("Petrification/Freeze", 72462),
    SpellEffect.PARALYSIS: CategoryDescriptor("Paralysis", 72463),
    SpellEffect.INTERRUPTION: CategoryDescriptor("Interruption", 72464),
    SpellEffect.BLIND: CategoryDescriptor("Blind", 72465),
    SpellEffect.STUN: CategoryDescriptor("Stun", 72466),
    SpellEffect.SLEEP: CategoryDescriptor("Sleep", 72467),
    SpellEffect.BIND: CategoryDescriptor("Bind", 72468),
    SpellEffect.HEAVY: CategoryDescriptor("Heavy", 72469),
    SpellEffect.FLAT_DAMAGE_AND_DEATH: CategoryDescriptor("Flat Damage/Death", 72470),
    # Rank
    SpellRank.ONE: CategoryDescriptor(RANK_GLYPH * 1, 19381),
    SpellRank.TWO: CategoryDescriptor(RANK_GLYPH * 2, 19382),
    SpellRank.THREE: CategoryDescriptor(RANK_GLYPH * 3, 19383),
    SpellRank.FOUR: CategoryDescriptor(RANK_GLYPH * 4, 19384),
    SpellRank.FIVE: CategoryDescriptor(RANK_GLYPH * 5, 19385),
    # Cast
    SpellCast.S0: CategoryDescriptor("0s"),
    SpellCast.S1: CategoryDescriptor("1s"),
    SpellCast.S1_5: CategoryDescriptor("1.5s"),
    SpellCast.S2: CategoryDescriptor("2s"),
    SpellCast.S3: CategoryDescriptor("3s"),
    SpellCast.S6: CategoryDescriptor("6s"),
    SpellCast.S10: CategoryDescriptor("10s"),
    # Recast
    SpellRecast.S2_5: CategoryDescriptor("2.5s"),
    SpellRecast.S30: CategoryDescriptor("30s"),
    SpellRecast.S60: CategoryDescriptor("60s"),
    SpellRecast.S90: CategoryDescriptor("90s"),
    SpellRecast.S120: CategoryDescriptor("120s"),
    SpellRecast.S180: CategoryDescriptor("180s"),
    SpellRecast.S300: CategoryDescriptor("300s"),
    # Compounds
    CompoundFilter.PIERCING_FIRE: CategoryDescriptor("Piercing/Fire", -2, is_filterable=False),
    CompoundFilter.BLUNT_EARTH: CategoryDescriptor("Blunt/Earth", -3, is_filterable=False),
    CompoundFilter.SELF_ALLY_OR_ENEMY: CategoryDescriptor("Targets Self, Ally, or Enemy", -1, is_filterable=False),
}

# Compound value -> the real flags it stands for
COMPOUND_EXPANSIONS: Dict[CompoundFilter, FrozenSet[CategoryValue]] = {
    CompoundFilter.PIERCING_FIRE: frozenset({SpellAspect.PIERCING, SpellAspect.FIRE}),
    CompoundFilter.BLUNT_EARTH: frozenset({SpellAspect.BLUNT, SpellAspect.EARTH}),
    CompoundFilter.SELF_ALLY_OR_ENEMY: frozenset({SpellTarget.SELF_OR_ALLY, SpellTarget.ENEMY}),
}

# Synthetic icon id -> resource file name
SYNTHETIC_ICON_FILES: Dict[int, str] = {
    -1: "TargetCombined.png",
}


def describe(value: Enum) -> CategoryDescriptor:
    """Return the display descriptor for a category or compound value."""
    return DESCRIPTORS[value]


def category_of(value: Enum) -> Optional[Category]:
    """Return the category a value belongs to, or None for compounds and foreign values."""
    return _ENUM_CATEGORIES.get(type(value))


def members(category: Category) -> List[CategoryValue]:
    """All members of a category in declaration order (single-bit members only for flags)."""
    return list(CATEGORY_ENUMS[category])


def filterable_values() -> Iterator[CategoryValue]:
    """Yield every filterable category value, category by category."""
    for category in Category:
        for value in members(category):
            if describe(value).is_filterable:
                yield value


def split_flags(mask: Flag) -> List[Flag]:
    """Split a flag mask into its single-bit members, in declaration order."""
    return [member for member in type(mask) if member in mask]


def find_value(category: Category, key: str) -> Optional[CategoryValue]:
    """
    Look up a category value by its member name (case-insensitive).

    Used by the HTTP layer to turn request strings into enum members.
    """
    enum_cls = CATEGORY_ENUMS[category]
    return enum_cls.__members__.get(key.upper())
