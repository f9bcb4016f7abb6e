"""Skill definitions and roll result models."""

from enum import Enum

from pydantic import BaseModel


class SkillState(str, Enum):
    """Whether, and how, a skill can be tested."""
    TRAINED = "trained"
    UNTRAINED_BASIC = "untrained_basic"
    UNTRAINED_ADVANCED_UNLOCKED = "untrained_advanced_unlocked"  # is_basic override
    UNTRAINED_ADVANCED_LOCKED = "untrained_advanced_locked"      # Cannot be rolled


class SkillDefinition(BaseModel):
    """Static description of a skill or specialization."""
    key: str
    label: str
    characteristic: str
    is_advanced: bool = False


class SkillSummary(BaseModel):
    """A skill row as shown on a character sheet."""
    key: str
    label: str
    characteristic: str
    is_advanced: bool
    is_basic: bool
    trained: bool
    state: SkillState
    target: int | None = None       # None when the skill cannot be used
    name: str | None = None         # Specialization instance name
    index: int | None = None        # Position in the specialization list


class RollOutcome(BaseModel):
    """A single d100 roll classified against a target number."""
    roll: int
    target: int
    is_success: bool
    degrees: int


class HitLocation(BaseModel):
    """Where an attack landed."""
    key: str
    label: str
    reversed: int                   # The digit-reversed roll used for lookup


class TestResult(BaseModel):
    """The full record of a characteristic, skill, attack or power test."""
    label: str                      # e.g. "Agility Test", "Lasgun Attack"
    characteristic: str
    base: int                       # Target before the roll-time modifier
    modifier: int                   # Roll-time modifier (difficulty, action, extra)
    target: int
    outcome: RollOutcome
    is_attack: bool = False
    hit_location: HitLocation | None = None
    breakdown: list[str] = []       # Human-readable target composition


class DamageResult(BaseModel):
    """Result of evaluating a weapon or power damage formula."""
    item_name: str
    formula: str                    # As written on the item
    resolved: str                   # After bonus substitution
    total: int
    rolls: list[int]
    penetration: int = 0
    notes: str = ""


class InitiativeResult(BaseModel):
    """An initiative roll: 1d10 + Agility Bonus + trait bonus."""
    roll: int
    agility_bonus: int
    initiative_bonus: int
    total: int
