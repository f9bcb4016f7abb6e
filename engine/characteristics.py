"""Characteristic totals, bonuses and trait-derived stat adjustments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from engine.errors import MissingCharacteristic
from engine.modifiers import aggregate_modifiers
from models.characters import DerivedCharacteristic, DerivedStats

if TYPE_CHECKING:
    from models.characters import Actor


def characteristic_bonus(total: int) -> int:
    """Tens digit of a characteristic total (e.g. 43 -> 4).

    Uses floor division, so a negative total rounds toward negative
    infinity (-5 -> -1).
    """
    return total // 10


def derive_characteristics(actor: Actor) -> DerivedStats:
    """Recompute every derived stat from the actor's base values and traits.

    Nothing is cached: call this again after any change to base values,
    traits or trait modifiers. The actor is not modified.

    Args:
        actor: Snapshot of the actor.

    Returns:
        A fresh DerivedStats block.
    """
    modifiers = aggregate_modifiers(actor.items)

    characteristics = {}
    for key, char in actor.characteristics.items():
        modifier = modifiers.get(key, 0)
        total = char.value + modifier
        characteristics[key] = DerivedCharacteristic(
            value=char.value,
            modifier=modifier,
            total=total,
            bonus=characteristic_bonus(total),
        )

    wounds_modifier = None
    effective_max_wounds = None
    if actor.wounds is not None:
        wounds_modifier = modifiers["wounds"]
        effective_max_wounds = actor.wounds.max + wounds_modifier

    return DerivedStats(
        characteristics=characteristics,
        initiative_bonus=modifiers["initiative"],
        wounds_modifier=wounds_modifier,
        effective_max_wounds=effective_max_wounds,
    )


def get_characteristic(derived: DerivedStats, key: str) -> DerivedCharacteristic:
    """Look up a derived characteristic.

    Raises:
        MissingCharacteristic: If the actor has no data for ``key``.
    """
    char = derived.characteristics.get(key)
    if char is None:
        raise MissingCharacteristic(key)
    return char
