"""
Composes positional boolean columns into target and effect values.
"""

from typing import FrozenSet, Sequence, Tuple

from domain.value_objects.categories import SpellEffect, SpellTarget

# Effect for each positional boolean, in column order
EFFECT_COLUMN_ORDER: Tuple[SpellEffect, ...] = (
    SpellEffect.SLOW,
    SpellEffect.PETRIFICATION_AND_FREEZE,
    SpellEffect.PARALYSIS,
    SpellEffect.INTERRUPTION,
    SpellEffect.BLIND,
    SpellEffect.STUN,
    SpellEffect.SLEEP,
    SpellEffect.BIND,
    SpellEffect.HEAVY,
    SpellEffect.FLAT_DAMAGE_AND_DEATH,
)


def compose_target(targets_enemy: bool, targets_self_or_ally: bool) -> SpellTarget:
    """Combine the two targeting columns. No flag set means UNTARGETABLE, never an empty mask."""
    target = SpellTarget(0)
    if targets_enemy:
        target |= SpellTarget.ENEMY
    if targets_self_or_ally:
        target |= SpellTarget.SELF_OR_ALLY
    if not target:
        target = SpellTarget.UNTARGETABLE
    return target


def compose_effects(flags: Sequence[bool]) -> FrozenSet[SpellEffect]:
    """
    Map the ten effect columns onto the effects they stand for.

    Raises:
        ValueError: If the number of flags does not match the effect columns
    """
    if len(flags) != len(EFFECT_COLUMN_ORDER):
        raise ValueError(f"Expected {len(EFFECT_COLUMN_ORDER)} effect flags, got {len(flags)}")
    return frozenset(effect for effect, enabled in zip(EFFECT_COLUMN_ORDER, flags) if enabled)
