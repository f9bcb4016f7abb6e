"""Dice rolling utilities for the Rogue Trader engine."""

import random
import re

from pydantic import BaseModel

from config import MAX_DICE_PER_TERM

# One signed term: "1d10", "d5", "+2d10", "- 3", "+-1"
_TERM_RE = re.compile(r"\s*((?:[+-]\s*)*)(?:(\d*)d(\d+)|(\d+))\s*", re.IGNORECASE)


class DiceResult(BaseModel):
    """Result of a dice roll."""
    total: int
    rolls: list[int]                # Every individual die, in formula order
    modifier: int                   # Sum of the flat terms
    notation: str


def parse(notation: str) -> list[tuple[int, int, int]]:
    """Split dice notation into (sign, count, sides) terms.

    Flat numbers are returned with ``sides == 0`` and the number as count.

    Raises:
        ValueError: If the notation is not a sum/difference of dice and numbers.
    """
    terms: list[tuple[int, int, int]] = []
    pos = 0
    while pos < len(notation):
        match = _TERM_RE.match(notation, pos)
        if not match:
            raise ValueError(f"Invalid dice notation: {notation}")
        sign_str, count, sides, constant = match.groups()
        if terms and not sign_str:
            raise ValueError(f"Invalid dice notation: {notation}")
        sign = -1 if sign_str.count("-") % 2 else 1

        if constant is not None:
            terms.append((sign, int(constant), 0))
        else:
            num_dice = int(count) if count else 1
            die_size = int(sides)
            if die_size < 1:
                raise ValueError(f"Invalid die size in: {notation}")
            if num_dice > MAX_DICE_PER_TERM:
                raise ValueError(f"Too many dice in: {notation}")
            terms.append((sign, num_dice, die_size))
        pos = match.end()

    if not terms:
        raise ValueError(f"Invalid dice notation: {notation!r}")
    return terms


def roll(notation: str, rng: random.Random | None = None) -> DiceResult:
    """Parse and roll dice notation like '1d10+4', '2d10-1+1d5', 'd100'.

    Args:
        notation: Dice notation string (e.g. "1d10+4").
        rng: Optional Random instance for seeded/testing rolls.

    Returns:
        DiceResult with total, individual rolls, modifier, and notation.
    """
    rng = rng or random.Random()
    notation = notation.strip()

    rolls: list[int] = []
    dice_total = 0
    modifier = 0
    for sign, count, sides in parse(notation):
        if sides == 0:
            modifier += sign * count
            continue
        term_rolls = [rng.randint(1, sides) for _ in range(count)]
        rolls.extend(term_rolls)
        dice_total += sign * sum(term_rolls)

    return DiceResult(
        total=dice_total + modifier,
        rolls=rolls,
        modifier=modifier,
        notation=notation,
    )


def roll_d100(rng: random.Random | None = None) -> int:
    """Roll percentile dice: a uniform result from 1 to 100."""
    rng = rng or random.Random()
    return rng.randint(1, 100)
