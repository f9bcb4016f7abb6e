"""Rogue Trader d100 rules: test resolution, degrees, hit locations, initiative."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from config import (
    CHARACTERISTICS,
    COMBAT_ACTIONS,
    HIT_LOCATIONS,
    INITIATIVE_DIE,
    TEST_DIFFICULTY,
)
from engine.characteristics import derive_characteristics, get_characteristic
from engine.dice import roll, roll_d100
from engine.errors import MissingCharacteristic, SkillUnusable
from engine.skills import (
    custom_skill_definition,
    custom_skill_entry,
    get_skill_definition,
    get_specialization_definition,
    resolve_skill_target,
    skill_base,
    training_bonus,
)
from models.items import AttackType, ItemType, PowerRollType
from models.rolls import HitLocation, InitiativeResult, RollOutcome, TestResult

if TYPE_CHECKING:
    from models.characters import Actor, DerivedStats, SkillEntry
    from models.rolls import SkillDefinition

logger = logging.getLogger(__name__)


def calculate_degrees(roll_value: int, target: int) -> int:
    """Degrees of success or failure: whole tens between roll and target.

    Args:
        roll_value: The d100 result.
        target: The target number.

    Returns:
        The number of degrees (e.g. 2 for target 50, roll 71).
    """
    return abs(target - roll_value) // 10


def classify_outcome(roll_value: int, target: int) -> RollOutcome:
    """Classify a d100 roll against a target. Rolling exactly the target succeeds."""
    return RollOutcome(
        roll=roll_value,
        target=target,
        is_success=roll_value <= target,
        degrees=calculate_degrees(roll_value, target),
    )


def roll_against_target(target: int, rng: random.Random | None = None) -> RollOutcome:
    """Roll one d100 and classify it against the target.

    Args:
        target: The target number.
        rng: Optional Random instance for seeded/testing rolls.

    Returns:
        RollOutcome with the roll, success flag and degrees.
    """
    roll_value = roll_d100(rng=rng)
    outcome = classify_outcome(roll_value, target)
    logger.debug(
        f"d100 vs {target}: {roll_value} "
        f"({'success' if outcome.is_success else 'failure'}, {outcome.degrees} degrees)"
    )
    return outcome


def reverse_roll(roll_value: int) -> int:
    """Swap the tens and units digits of a d100 roll (34 -> 43, 100 -> 1).

    A roll whose reversal is 0 (only possible for multiples of ten
    reversed to "00") counts as 100.
    """
    if roll_value == 100:
        return 1
    reversed_value = (roll_value % 10) * 10 + roll_value // 10
    if reversed_value == 0:
        return 100
    return reversed_value


def resolve_hit_location(roll_value: int) -> HitLocation:
    """Find where an attack roll lands on the target.

    Args:
        roll_value: The attack's d100 roll (1-100), not yet reversed.

    Returns:
        HitLocation with key, label and the reversed roll.

    Raises:
        ValueError: If the roll is outside 1-100.
    """
    if not 1 <= roll_value <= 100:
        raise ValueError(f"Roll must be between 1 and 100, got {roll_value}")

    reversed_value = reverse_roll(roll_value)
    for key, (low, high, label) in HIT_LOCATIONS.items():
        if low <= reversed_value <= high:
            return HitLocation(key=key, label=label, reversed=reversed_value)

    # Unreachable for rolls in 1-100
    return HitLocation(key="body", label=HIT_LOCATIONS["body"][2], reversed=reversed_value)


def attack_type_for(characteristic: str) -> AttackType:
    """Weapon Skill attacks are melee; anything else is treated as ranged."""
    return AttackType.MELEE if characteristic == "ws" else AttackType.RANGED


def situational_modifier(
    difficulty: str | None = None,
    combat_action: str | None = None,
    attack_type: AttackType | None = None,
    extra: int = 0,
) -> int:
    """Sum the roll-time modifiers chosen for a test.

    Args:
        difficulty: Key into the test difficulty table.
        combat_action: Key into the combat actions table.
        attack_type: Restricts which combat actions are allowed.
        extra: Free modifier added on top.

    Returns:
        The combined modifier.

    Raises:
        ValueError: If a key is unknown or the combat action does not
            apply to the attack type.
    """
    total = extra

    if difficulty is not None:
        if difficulty not in TEST_DIFFICULTY:
            raise ValueError(f"Unknown test difficulty: {difficulty}")
        total += TEST_DIFFICULTY[difficulty][0]

    if combat_action is not None:
        if combat_action not in COMBAT_ACTIONS:
            raise ValueError(f"Unknown combat action: {combat_action}")
        modifier, label, applies_to = COMBAT_ACTIONS[combat_action]
        if attack_type is not None and applies_to not in ("both", attack_type.value):
            raise ValueError(f"{label} cannot be used for a {attack_type.value} attack")
        total += modifier

    return total


def _signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def _run_test(
    label: str,
    characteristic: str,
    base: int,
    modifier: int,
    breakdown: list[str],
    is_attack: bool,
    rng: random.Random | None,
) -> TestResult:
    """Roll the d100 for a prepared test and build its result record."""
    if modifier:
        breakdown = breakdown + [f"{_signed(modifier)} (Modifier)"]
    target = base + modifier
    outcome = roll_against_target(target, rng=rng)

    hit_location = None
    if is_attack and outcome.is_success:
        hit_location = resolve_hit_location(outcome.roll)

    result = TestResult(
        label=label,
        characteristic=characteristic,
        base=base,
        modifier=modifier,
        target=target,
        outcome=outcome,
        is_attack=is_attack,
        hit_location=hit_location,
        breakdown=breakdown,
    )
    logger.info(
        f"{label}: rolled {outcome.roll} vs {target} - "
        f"{'Success' if outcome.is_success else 'Failure'} by {outcome.degrees}"
        + (f", hit {hit_location.label}" if hit_location else "")
    )
    return result


def roll_characteristic_test(
    actor: Actor,
    characteristic: str,
    modifier: int = 0,
    is_attack: bool = False,
    label: str | None = None,
    rng: random.Random | None = None,
) -> TestResult | None:
    """Roll a straight characteristic test.

    Args:
        actor: The actor making the test.
        characteristic: Characteristic key, e.g. "ag".
        modifier: Roll-time modifier (difficulty, combat action, extra).
        is_attack: Determine hit location on a success.
        label: Title for the result; defaults to "<Characteristic> Test".
        rng: Optional Random instance for seeded/testing rolls.

    Returns:
        TestResult, or None if the actor lacks the characteristic.
    """
    derived = derive_characteristics(actor)
    try:
        char = get_characteristic(derived, characteristic)
    except MissingCharacteristic as exc:
        logger.warning(f"{actor.name}: {exc}; no roll made")
        return None

    char_label = CHARACTERISTICS.get(characteristic, characteristic)
    return _run_test(
        label=label or f"{char_label} Test",
        characteristic=characteristic,
        base=char.total,
        modifier=modifier,
        breakdown=[f"{char.total} ({char_label})"],
        is_attack=is_attack,
        rng=rng,
    )


def _roll_skill(
    actor: Actor,
    derived: DerivedStats,
    definition: SkillDefinition,
    entry: SkillEntry,
    label: str,
    modifier: int,
    rng: random.Random | None,
) -> TestResult | None:
    """Shared path for standard, specialization and custom skill tests."""
    try:
        char = get_characteristic(derived, definition.characteristic)
    except MissingCharacteristic as exc:
        logger.warning(f"{actor.name}: {exc}; no roll made")
        return None

    try:
        base = resolve_skill_target(definition, entry, char.total)
    except SkillUnusable as exc:
        logger.warning(f"{actor.name}: {exc}")
        raise

    char_label = CHARACTERISTICS.get(definition.characteristic, definition.characteristic)
    if entry.trained:
        breakdown = [f"{char.total} ({char_label})"]
    else:
        breakdown = [f"{skill_base(char.total, False)} (Half {char_label})"]
    bonus = training_bonus(entry)
    if bonus:
        breakdown.append(f"+{bonus} (Training)")
    if entry.modifier:
        breakdown.append(f"{_signed(entry.modifier)} (Skill Mod)")

    return _run_test(
        label=label,
        characteristic=definition.characteristic,
        base=base,
        modifier=modifier,
        breakdown=breakdown,
        is_attack=False,
        rng=rng,
    )


def roll_skill_test(
    actor: Actor,
    skill: str,
    modifier: int = 0,
    rng: random.Random | None = None,
) -> TestResult | None:
    """Roll a standard skill test.

    Returns:
        TestResult, or None if the skill, the actor's entry for it, or
        its characteristic is missing.

    Raises:
        SkillUnusable: If the skill is advanced and cannot be used untrained.
    """
    definition = get_skill_definition(skill)
    if definition is None:
        logger.warning(f"Unknown skill '{skill}'; no roll made")
        return None
    entry = actor.skills.get(skill)
    if entry is None:
        logger.warning(f"{actor.name} has no entry for skill '{skill}'; no roll made")
        return None

    derived = derive_characteristics(actor)
    return _roll_skill(
        actor, derived, definition, entry, f"{definition.label} Test", modifier, rng,
    )


def roll_specialization_test(
    actor: Actor,
    specialization: str,
    index: int,
    modifier: int = 0,
    rng: random.Random | None = None,
) -> TestResult | None:
    """Roll a test for one named instance of a specialization skill.

    Raises:
        SkillUnusable: If the instance is untrained and not marked basic.
    """
    definition = get_specialization_definition(specialization)
    if definition is None:
        logger.warning(f"Unknown specialization '{specialization}'; no roll made")
        return None
    entries = actor.specializations.get(specialization, [])
    if not 0 <= index < len(entries):
        logger.warning(
            f"{actor.name} has no {definition.label} entry at index {index}; no roll made"
        )
        return None

    entry = entries[index]
    definition = definition.model_copy(
        update={"label": f"{definition.label} ({entry.name})"}
    )
    derived = derive_characteristics(actor)
    return _roll_skill(
        actor, derived, definition, entry, f"{definition.label} Test", modifier, rng,
    )


def roll_custom_skill_test(
    actor: Actor,
    item_id: str,
    modifier: int = 0,
    rng: random.Random | None = None,
) -> TestResult | None:
    """Roll a test for a free-text skill item the actor owns."""
    item = actor.get_item(item_id)
    if item is None or item.type != ItemType.SKILL:
        logger.warning(f"{actor.name} has no skill item '{item_id}'; no roll made")
        return None

    definition = custom_skill_definition(item)
    char_label = CHARACTERISTICS.get(item.characteristic, item.characteristic)
    derived = derive_characteristics(actor)
    return _roll_skill(
        actor,
        derived,
        definition,
        custom_skill_entry(item),
        f"{item.name} ({char_label})",
        modifier,
        rng,
    )


def roll_weapon_attack(
    actor: Actor,
    item_id: str,
    modifier: int = 0,
    rng: random.Random | None = None,
) -> TestResult | None:
    """Roll an attack with an owned weapon: WS for melee, BS for ranged."""
    item = actor.get_item(item_id)
    if item is None or item.type != ItemType.WEAPON:
        logger.warning(f"{actor.name} has no weapon '{item_id}'; no roll made")
        return None

    characteristic = "ws" if item.attack_type == AttackType.MELEE else "bs"
    return roll_characteristic_test(
        actor,
        characteristic,
        modifier=modifier,
        is_attack=True,
        label=f"{item.name} Attack",
        rng=rng,
    )


def roll_power_test(
    actor: Actor,
    item_id: str,
    modifier: int = 0,
    rng: random.Random | None = None,
) -> TestResult | None:
    """Roll a test for an owned power.

    The power's own modifier is added to the characteristic; attack
    powers determine hit location on a success.
    """
    item = actor.get_item(item_id)
    if item is None or item.type != ItemType.POWER:
        logger.warning(f"{actor.name} has no power '{item_id}'; no roll made")
        return None

    derived = derive_characteristics(actor)
    try:
        char = get_characteristic(derived, item.characteristic)
    except MissingCharacteristic as exc:
        logger.warning(f"{actor.name}: {exc}; no roll made")
        return None

    is_attack = item.roll_type == PowerRollType.ATTACK
    char_label = CHARACTERISTICS.get(item.characteristic, item.characteristic)
    breakdown = [f"{char.total} ({char_label})"]
    if item.modifier:
        breakdown.append(f"{_signed(item.modifier)} (Power)")

    return _run_test(
        label=f"{item.name} (Attack)" if is_attack else item.name,
        characteristic=item.characteristic,
        base=char.total + item.modifier,
        modifier=modifier,
        breakdown=breakdown,
        is_attack=is_attack,
        rng=rng,
    )


def roll_initiative(actor: Actor, rng: random.Random | None = None) -> InitiativeResult | None:
    """Roll initiative: 1d10 + Agility Bonus + initiative bonus from traits.

    Returns:
        InitiativeResult, or None if the actor has no Agility.
    """
    derived = derive_characteristics(actor)
    try:
        agility = get_characteristic(derived, "ag")
    except MissingCharacteristic as exc:
        logger.warning(f"{actor.name}: {exc}; no initiative rolled")
        return None

    die = roll(INITIATIVE_DIE, rng=rng).total
    total = die + agility.bonus + derived.initiative_bonus
    logger.info(
        f"{actor.name} initiative: {die} + AgB {agility.bonus} "
        f"+ {derived.initiative_bonus} = {total}"
    )
    return InitiativeResult(
        roll=die,
        agility_bonus=agility.bonus,
        initiative_bonus=derived.initiative_bonus,
        total=total,
    )
