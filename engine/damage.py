"""Damage formula substitution and evaluation for weapons and powers."""

from __future__ import annotations

import logging
import random
import re
from typing import TYPE_CHECKING, Mapping

from engine.characteristics import derive_characteristics
from engine.dice import roll
from engine.errors import UnparseableDamageFormula
from models.items import ItemType
from models.rolls import DamageResult

if TYPE_CHECKING:
    from models.characters import Actor
    from models.items import Item

logger = logging.getLogger(__name__)

# Bonus token -> characteristic key
BONUS_TOKENS = {
    "SB": "s",
    "WPB": "wp",
    "TB": "t",
    "AgB": "ag",
    "IntB": "int",
    "PerB": "per",
    "FelB": "fel",
    "WSB": "ws",
    "BSB": "bs",
}

# Longest first, so "WSB" and "BSB" are never read as "W" + "SB"
_TOKEN_RE = re.compile(
    "|".join(sorted(BONUS_TOKENS, key=len, reverse=True)),
    re.IGNORECASE,
)
_TOKEN_KEYS = {token.lower(): key for token, key in BONUS_TOKENS.items()}


def substitute_bonuses(formula: str, bonuses: Mapping[str, int]) -> str:
    """Replace every characteristic bonus token with its value.

    Tokens are case-insensitive. A token whose characteristic is missing
    from ``bonuses`` is left as written.

    Args:
        formula: Damage formula, e.g. "1d10+SB".
        bonuses: Characteristic key -> bonus.

    Returns:
        The formula with tokens replaced, e.g. "1d10+4".
    """
    def _replace(match: re.Match) -> str:
        key = _TOKEN_KEYS[match.group(0).lower()]
        if key not in bonuses:
            return match.group(0)
        return str(bonuses[key])

    return _TOKEN_RE.sub(_replace, formula)


def evaluate_formula(
    formula: str,
    bonuses: Mapping[str, int] | None = None,
    rng: random.Random | None = None,
) -> tuple[str, int, list[int]]:
    """Substitute bonuses (when given) and roll the formula.

    Returns:
        (resolved_formula, total, individual_rolls) tuple.

    Raises:
        UnparseableDamageFormula: If the result is not valid dice notation.
    """
    resolved = substitute_bonuses(formula, bonuses) if bonuses is not None else formula
    try:
        result = roll(resolved, rng=rng)
    except ValueError as exc:
        raise UnparseableDamageFormula(formula, resolved) from exc
    return resolved, result.total, result.rolls


def evaluate_damage(
    item: Item,
    actor: Actor | None = None,
    rng: random.Random | None = None,
) -> DamageResult | None:
    """Roll damage for a weapon or power.

    Bonus tokens are only substituted when the item has an owning actor;
    an unowned item with tokens in its formula fails to parse.

    Args:
        item: The weapon or power.
        actor: The owning actor, if any.
        rng: Optional Random instance for seeded/testing rolls.

    Returns:
        DamageResult, or None if the item deals no damage.

    Raises:
        UnparseableDamageFormula: If the formula cannot be rolled.
    """
    if item.type not in (ItemType.WEAPON, ItemType.POWER):
        return None
    if not item.damage.strip():
        return None

    bonuses = derive_characteristics(actor).bonuses() if actor is not None else None
    resolved, total, rolls = evaluate_formula(item.damage, bonuses, rng=rng)
    logger.debug(f"Damage for {item.name}: {item.damage} -> {resolved} = {total}")

    return DamageResult(
        item_name=item.name,
        formula=item.damage,
        resolved=resolved,
        total=total,
        rolls=rolls,
        penetration=item.penetration,
        notes=item.notes,
    )
