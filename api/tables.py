"""Read-only endpoints for the static rules tables."""

from fastapi import APIRouter

from config import (
    CHARACTERISTICS,
    COMBAT_ACTIONS,
    HIT_LOCATIONS,
    POWER_ROLL_TYPES,
    SKILLS,
    SPECIALIZATIONS,
    TEST_DIFFICULTY,
)
from engine.skills import get_skill_definition, get_specialization_definition

router = APIRouter()


@router.get("/characteristics")
def list_characteristics() -> dict[str, str]:
    """Characteristic key -> label."""
    return dict(CHARACTERISTICS)


@router.get("/skills")
def list_skills() -> list[dict]:
    """Every standard skill with its characteristic and advanced flag."""
    return [get_skill_definition(key).model_dump() for key in SKILLS]


@router.get("/specializations")
def list_specializations() -> list[dict]:
    """Every specialization skill."""
    return [get_specialization_definition(key).model_dump() for key in SPECIALIZATIONS]


@router.get("/difficulties")
def list_difficulties() -> list[dict]:
    """Test difficulty bands, easiest first."""
    return [
        {"key": key, "modifier": modifier, "label": label}
        for key, (modifier, label) in TEST_DIFFICULTY.items()
    ]


@router.get("/combat-actions")
def list_combat_actions(attack_type: str | None = None) -> list[dict]:
    """Combat actions, optionally only those usable with an attack type."""
    return [
        {"key": key, "modifier": modifier, "label": label, "type": applies_to}
        for key, (modifier, label, applies_to) in COMBAT_ACTIONS.items()
        if attack_type is None or applies_to in ("both", attack_type)
    ]


@router.get("/hit-locations")
def list_hit_locations() -> list[dict]:
    """Hit location bands over the reversed d100 roll."""
    return [
        {"key": key, "range": [low, high], "label": label}
        for key, (low, high, label) in HIT_LOCATIONS.items()
    ]


@router.get("/power-roll-types")
def list_power_roll_types() -> dict[str, str]:
    """Power roll type key -> label."""
    return dict(POWER_ROLL_TYPES)
