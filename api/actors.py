"""Derived stat block endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from engine.characteristics import derive_characteristics
from engine.inventory import carried_weight
from engine.modifiers import modifier_summary
from engine.skills import skill_table, specialization_table
from models.characters import DerivedStats
from models.items import ItemType
from models.requests import ActorRequest
from models.rolls import SkillSummary

router = APIRouter()


class TraitSummary(BaseModel):
    """A trait and its formatted modifiers."""
    id: str
    name: str
    summary: str


class ActorSheet(BaseModel):
    """Everything a sheet renderer needs that is computed from the actor."""
    derived: DerivedStats
    skills: dict[str, SkillSummary]
    specializations: list[SkillSummary]
    traits: list[TraitSummary]
    inventory_weights: list[float]
    carried_weight: float


@router.post("/derive", response_model=ActorSheet)
def derive_actor(body: ActorRequest) -> ActorSheet:
    """Recompute the actor's derived stats and sheet tables."""
    actor = body.actor
    derived = derive_characteristics(actor)
    lines, total = carried_weight(actor.inventory)

    return ActorSheet(
        derived=derived,
        skills=skill_table(actor, derived),
        specializations=specialization_table(actor, derived),
        traits=[
            TraitSummary(id=item.id, name=item.name, summary=modifier_summary(item))
            for item in actor.items
            if item.type == ItemType.TRAIT
        ],
        inventory_weights=lines,
        carried_weight=total,
    )
