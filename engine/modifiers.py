"""Trait modifier aggregation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from config import CHARACTERISTICS, MODIFIABLE_STATS
from models.items import ItemType

if TYPE_CHECKING:
    from models.items import Item, Trait

logger = logging.getLogger(__name__)


def aggregate_modifiers(items: Iterable[Item]) -> dict[str, int]:
    """Sum every trait's modifier entries, keyed by stat.

    Args:
        items: The actor's items, in any order. Only traits contribute.

    Returns:
        Mapping of each modifiable stat (the nine characteristics,
        "initiative" and "wounds") to its summed modifier. Stats no
        trait touches are present with 0.
    """
    modifiers = {stat: 0 for stat in MODIFIABLE_STATS}

    for item in items:
        if item.type != ItemType.TRAIT:
            continue
        for mod in item.modifiers:
            if mod.stat not in modifiers:
                logger.debug(f"Ignoring unknown stat '{mod.stat}' on trait '{item.name}'")
                continue
            modifiers[mod.stat] += mod.value

    return modifiers


def modifier_summary(trait: Trait) -> str:
    """Format a trait's modifiers for display, e.g. "Strength +10, wounds +2"."""
    parts = []
    for mod in trait.modifiers:
        label = CHARACTERISTICS.get(mod.stat, mod.stat)
        sign = "+" if mod.value >= 0 else ""
        parts.append(f"{label} {sign}{mod.value}")
    return ", ".join(parts)
