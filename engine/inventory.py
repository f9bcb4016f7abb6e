"""Carried inventory weight."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from models.characters import InventoryEntry

_CENT = Decimal("0.01")


def _round_weight(value: float) -> float:
    """Round to two decimals, halves away from zero (0.125 -> 0.13)."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def carried_weight(inventory: Iterable[InventoryEntry]) -> tuple[list[float], float]:
    """Weight of each inventory line and the total carried.

    Each line is quantity x unit weight rounded to two decimals; the
    total is the rounded sum of the rounded lines.

    Returns:
        (line_weights, total_weight) tuple.
    """
    lines = [_round_weight(entry.quantity * entry.weight) for entry in inventory]
    return lines, _round_weight(sum(lines))
