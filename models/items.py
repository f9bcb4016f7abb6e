"""Item data models: traits, weapons, powers, custom skills and gear."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class ItemType(str, Enum):
    """The closed set of item kinds an actor can own."""
    TRAIT = "trait"
    WEAPON = "weapon"
    POWER = "power"
    SKILL = "skill"
    GEAR = "gear"


class AttackType(str, Enum):
    """How a weapon is used; picks the characteristic for the attack test."""
    MELEE = "melee"                 # Weapon Skill
    RANGED = "ranged"               # Ballistic Skill


class PowerRollType(str, Enum):
    """What kind of test a power calls for."""
    ATTACK = "attack"               # Combat actions apply, hit location on success
    SKILL = "skill"                 # Test difficulty applies
    OTHER = "other"                 # Flat test, no situational table


class TraitModifier(BaseModel):
    """One stat adjustment granted by a trait."""
    stat: str = "ws"                # Characteristic key, "initiative" or "wounds"
    value: int = 0


class BaseItem(BaseModel):
    """Fields shared by every item."""
    id: str
    name: str
    description: str = ""


class Trait(BaseItem):
    """A talent, trait or condition that modifies stats."""
    type: Literal["trait"] = "trait"
    modifiers: list[TraitModifier] = []


class Weapon(BaseItem):
    """A melee or ranged weapon."""
    type: Literal["weapon"] = "weapon"
    attack_type: AttackType = AttackType.MELEE
    damage: str = "1d10"            # May contain bonus tokens, e.g. "1d10+SB"
    penetration: int = 0
    notes: str = ""


class Power(BaseItem):
    """A psychic power or other special ability."""
    type: Literal["power"] = "power"
    characteristic: str = "wp"
    roll_type: PowerRollType = PowerRollType.SKILL
    modifier: int = 0               # Built-in modifier to the test
    damage: str = ""
    penetration: int = 0
    notes: str = ""


class SkillItem(BaseItem):
    """A free-text custom skill, always treated as basic."""
    type: Literal["skill"] = "skill"
    characteristic: str = "int"
    trained: bool = True
    plus10: bool = False
    plus20: bool = False
    modifier: int = 0


class Gear(BaseItem):
    """Carried equipment with no rules effect."""
    type: Literal["gear"] = "gear"


Item = Annotated[
    Union[Trait, Weapon, Power, SkillItem, Gear],
    Field(discriminator="type"),
]
