"""
Spell record model.

One ActionRecord per catalog entry, built once at load time.
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from domain.value_objects.categories import (
    SpellAspect,
    SpellCast,
    SpellEffect,
    SpellRank,
    SpellRecast,
    SpellTarget,
    SpellType,
)

# The only field that may change after construction
MUTABLE_FIELDS = frozenset({"is_unlocked"})


@dataclass(eq=False)
class ActionRecord:
    """
    Normalized spell data.

    Attributes:
        action_id: Unique non-zero id of the base action
        display_number: Spellbook number, used as the sort key
        icon_id: Game icon id of the action
        name: Action name
        description: Tooltip description of the action
        flavor_text: Spellbook flavor text
        rank: Spell rank
        spell_type: Physical or magical
        target: Targeting bitmask, never empty
        aspect: Aspect bitmask
        effects: Additional effects
        cast_time: Cast time bucket
        recast_time: Recast time bucket
        unlock_key: Key used by the unlock resolver
        is_unlocked: Display state owned by the unlock resolver
    """

    action_id: int
    display_number: int
    icon_id: int
    name: str
    description: str
    flavor_text: str
    rank: SpellRank
    spell_type: SpellType
    target: SpellTarget
    aspect: SpellAspect
    effects: FrozenSet[SpellEffect]
    cast_time: SpellCast
    recast_time: SpellRecast
    unlock_key: int = 0
    is_unlocked: bool = False
    _sealed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        if self.action_id == 0:
            raise ValueError("action_id must be non-zero")
        if not self.target:
            raise ValueError(f"Action {self.action_id} has an empty target mask")
        self.effects = frozenset(self.effects)
        self._sealed = True

    def __setattr__(self, name, value):
        if getattr(self, "_sealed", False) and name not in MUTABLE_FIELDS:
            raise AttributeError(f"ActionRecord.{name} is read-only after load")
        super().__setattr__(name, value)
