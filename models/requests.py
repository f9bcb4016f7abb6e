"""Request bodies for the rules HTTP endpoints."""

from pydantic import BaseModel

from config import DEFAULT_COMBAT_ACTION, DEFAULT_DIFFICULTY
from models.characters import Actor


class ActorRequest(BaseModel):
    """Any request that only needs the actor snapshot."""
    actor: Actor


class SituationalModifiers(BaseModel):
    """Roll-time modifiers chosen by the player."""
    difficulty: str | None = DEFAULT_DIFFICULTY         # Key into the test difficulty table
    combat_action: str | None = DEFAULT_COMBAT_ACTION   # Key into the combat actions table
    modifier: int = 0                                   # Free extra modifier


class CharacteristicTestRequest(SituationalModifiers):
    """Request a characteristic test."""
    actor: Actor
    characteristic: str
    is_attack: bool = False


class SkillTestRequest(SituationalModifiers):
    """Request a skill test."""
    actor: Actor
    skill: str


class SpecializationTestRequest(SituationalModifiers):
    """Request a test of one specialization instance."""
    actor: Actor
    specialization: str
    index: int


class ItemRequest(SituationalModifiers):
    """Request a roll against an owned item (custom skill, weapon, power, damage)."""
    actor: Actor
    item_id: str
