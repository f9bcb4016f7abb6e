"""Skill usability and target number resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from config import SKILLS, SPECIALIZATIONS
from engine.errors import SkillUnusable
from models.characters import SkillEntry
from models.rolls import SkillDefinition, SkillState, SkillSummary

if TYPE_CHECKING:
    from models.characters import Actor, DerivedStats
    from models.items import SkillItem


def get_skill_definition(key: str) -> SkillDefinition | None:
    """Look up a standard skill. Returns None for unknown keys."""
    if key not in SKILLS:
        return None
    characteristic, is_advanced, label = SKILLS[key]
    return SkillDefinition(
        key=key, label=label, characteristic=characteristic, is_advanced=is_advanced,
    )


def get_specialization_definition(key: str) -> SkillDefinition | None:
    """Look up a specialization skill. Returns None for unknown keys."""
    if key not in SPECIALIZATIONS:
        return None
    characteristic, is_advanced, label = SPECIALIZATIONS[key]
    return SkillDefinition(
        key=key, label=label, characteristic=characteristic, is_advanced=is_advanced,
    )


def custom_skill_definition(item: SkillItem) -> SkillDefinition:
    """Custom skill items are free-text and never advanced."""
    return SkillDefinition(
        key=item.id, label=item.name, characteristic=item.characteristic,
    )


def custom_skill_entry(item: SkillItem) -> SkillEntry:
    """The training fields of a custom skill item as a SkillEntry."""
    return SkillEntry(
        trained=item.trained,
        plus10=item.plus10,
        plus20=item.plus20,
        modifier=item.modifier,
    )


def skill_state(is_advanced: bool, trained: bool, is_basic: bool) -> SkillState:
    """Classify a skill by training.

    Only UNTRAINED_ADVANCED_LOCKED cannot be tested.
    """
    if trained:
        return SkillState.TRAINED
    if not is_advanced:
        return SkillState.UNTRAINED_BASIC
    if is_basic:
        return SkillState.UNTRAINED_ADVANCED_UNLOCKED
    return SkillState.UNTRAINED_ADVANCED_LOCKED


def training_bonus(entry: SkillEntry) -> int:
    """+10 and +20 skill advances. Both may apply."""
    bonus = 0
    if entry.plus10:
        bonus += 10
    if entry.plus20:
        bonus += 20
    return bonus


def skill_base(char_total: int, trained: bool) -> int:
    """Full characteristic when trained, half (rounded down) otherwise."""
    return char_total if trained else char_total // 2


def resolve_skill_target(
    definition: SkillDefinition,
    entry: SkillEntry,
    char_total: int,
    situational_modifier: int = 0,
) -> int:
    """Compute the target number for a skill test.

    Shared by standard skills, specialization instances and custom skill
    items.

    Args:
        definition: The skill's static definition.
        entry: The actor's training in the skill.
        char_total: Total of the skill's characteristic.
        situational_modifier: Difficulty or other roll-time modifier.

    Returns:
        The target number.

    Raises:
        SkillUnusable: If the skill is advanced, untrained and not marked basic.
    """
    state = skill_state(definition.is_advanced, entry.trained, entry.is_basic)
    if state == SkillState.UNTRAINED_ADVANCED_LOCKED:
        raise SkillUnusable(definition.label)

    return (
        skill_base(char_total, entry.trained)
        + training_bonus(entry)
        + entry.modifier
        + situational_modifier
    )


def _summarize(
    definition: SkillDefinition,
    entry: SkillEntry,
    derived: DerivedStats,
) -> SkillSummary:
    """Build one sheet row. A missing characteristic counts as 0."""
    char = derived.characteristics.get(definition.characteristic)
    char_total = char.total if char is not None else 0
    state = skill_state(definition.is_advanced, entry.trained, entry.is_basic)

    target = None
    if state != SkillState.UNTRAINED_ADVANCED_LOCKED:
        target = resolve_skill_target(definition, entry, char_total)

    return SkillSummary(
        key=definition.key,
        label=definition.label,
        characteristic=definition.characteristic,
        is_advanced=definition.is_advanced,
        is_basic=entry.is_basic,
        trained=entry.trained,
        state=state,
        target=target,
    )


def skill_table(actor: Actor, derived: DerivedStats) -> dict[str, SkillSummary]:
    """Every standard skill with its state and usable target.

    Skills the actor has no entry for are treated as untrained.
    """
    table = {}
    for key in SKILLS:
        entry = actor.skills.get(key) or SkillEntry()
        table[key] = _summarize(get_skill_definition(key), entry, derived)
    return table


def specialization_table(actor: Actor, derived: DerivedStats) -> list[SkillSummary]:
    """Every specialization instance the actor has, in sheet order."""
    rows = []
    for key, entries in actor.specializations.items():
        definition = get_specialization_definition(key)
        if definition is None:
            continue
        for index, entry in enumerate(entries):
            row = _summarize(definition, entry, derived)
            row.name = entry.name
            row.index = index
            rows.append(row)
    return rows
