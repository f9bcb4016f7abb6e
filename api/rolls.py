"""Test, damage, initiative and hit location endpoints."""

import random
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request

from engine.damage import evaluate_damage
from engine.errors import SkillUnusable, UnparseableDamageFormula
from engine.rules import (
    attack_type_for,
    resolve_hit_location,
    roll_characteristic_test,
    roll_custom_skill_test,
    roll_initiative,
    roll_power_test,
    roll_skill_test,
    roll_specialization_test,
    roll_weapon_attack,
    situational_modifier,
)
from models.items import AttackType, ItemType, PowerRollType
from models.requests import (
    ActorRequest,
    CharacteristicTestRequest,
    ItemRequest,
    SituationalModifiers,
    SkillTestRequest,
    SpecializationTestRequest,
)
from models.rolls import DamageResult, HitLocation, InitiativeResult, TestResult

router = APIRouter()

T = TypeVar("T")


def get_rng(request: Request) -> random.Random | None:
    """The app-wide Random instance, if one was configured."""
    return getattr(request.app.state, "rng", None)


def _modifier(body: SituationalModifiers, attack_type: AttackType | None = None) -> int:
    """Attacks use combat actions; everything else uses test difficulty."""
    try:
        if attack_type is not None:
            return situational_modifier(
                combat_action=body.combat_action,
                attack_type=attack_type,
                extra=body.modifier,
            )
        return situational_modifier(difficulty=body.difficulty, extra=body.modifier)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def _found(result: T | None, detail: str) -> T:
    """Turn a no-op (None) engine result into a 404."""
    if result is None:
        raise HTTPException(status_code=404, detail=detail)
    return result


@router.post("/characteristic", response_model=TestResult)
def characteristic_test(
    body: CharacteristicTestRequest,
    rng: random.Random | None = Depends(get_rng),
) -> TestResult:
    """Roll a characteristic test, or an attack when is_attack is set."""
    attack_type = attack_type_for(body.characteristic) if body.is_attack else None
    result = roll_characteristic_test(
        body.actor,
        body.characteristic,
        modifier=_modifier(body, attack_type),
        is_attack=body.is_attack,
        rng=rng,
    )
    return _found(result, f"Actor has no characteristic '{body.characteristic}'")


@router.post("/skill", response_model=TestResult)
def skill_test(
    body: SkillTestRequest,
    rng: random.Random | None = Depends(get_rng),
) -> TestResult:
    """Roll a standard skill test."""
    modifier = _modifier(body)
    try:
        result = roll_skill_test(body.actor, body.skill, modifier=modifier, rng=rng)
    except SkillUnusable as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return _found(result, f"Skill '{body.skill}' cannot be rolled for this actor")


@router.post("/specialization", response_model=TestResult)
def specialization_test(
    body: SpecializationTestRequest,
    rng: random.Random | None = Depends(get_rng),
) -> TestResult:
    """Roll a test for one specialization instance."""
    modifier = _modifier(body)
    try:
        result = roll_specialization_test(
            body.actor, body.specialization, body.index, modifier=modifier, rng=rng,
        )
    except SkillUnusable as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return _found(
        result,
        f"Specialization '{body.specialization}' #{body.index} cannot be rolled for this actor",
    )


@router.post("/custom-skill", response_model=TestResult)
def custom_skill_test(
    body: ItemRequest,
    rng: random.Random | None = Depends(get_rng),
) -> TestResult:
    """Roll a test for a custom skill item."""
    result = roll_custom_skill_test(
        body.actor, body.item_id, modifier=_modifier(body), rng=rng,
    )
    return _found(result, f"Skill item '{body.item_id}' cannot be rolled")


@router.post("/attack", response_model=TestResult)
def weapon_attack(
    body: ItemRequest,
    rng: random.Random | None = Depends(get_rng),
) -> TestResult:
    """Roll an attack with a weapon."""
    weapon = body.actor.get_item(body.item_id)
    if weapon is None or weapon.type != ItemType.WEAPON:
        raise HTTPException(status_code=404, detail=f"Weapon '{body.item_id}' not found")

    result = roll_weapon_attack(
        body.actor, body.item_id, modifier=_modifier(body, weapon.attack_type), rng=rng,
    )
    return _found(result, "Actor lacks the characteristic for this attack")


@router.post("/power", response_model=TestResult)
def power_test(
    body: ItemRequest,
    rng: random.Random | None = Depends(get_rng),
) -> TestResult:
    """Roll a power: combat actions for attacks, difficulty for skills."""
    power = body.actor.get_item(body.item_id)
    if power is None or power.type != ItemType.POWER:
        raise HTTPException(status_code=404, detail=f"Power '{body.item_id}' not found")

    if power.roll_type == PowerRollType.ATTACK:
        modifier = _modifier(body, attack_type_for(power.characteristic))
    elif power.roll_type == PowerRollType.SKILL:
        modifier = _modifier(body)
    else:
        modifier = body.modifier

    result = roll_power_test(body.actor, body.item_id, modifier=modifier, rng=rng)
    return _found(result, f"Actor has no characteristic '{power.characteristic}'")


@router.post("/damage", response_model=DamageResult)
def damage(
    body: ItemRequest,
    rng: random.Random | None = Depends(get_rng),
) -> DamageResult:
    """Roll damage for a weapon or power the actor owns."""
    item = body.actor.get_item(body.item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item '{body.item_id}' not found")
    try:
        result = evaluate_damage(item, body.actor, rng=rng)
    except UnparseableDamageFormula as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return _found(result, f"{item.name} has no damage formula")


@router.post("/initiative", response_model=InitiativeResult)
def initiative(
    body: ActorRequest,
    rng: random.Random | None = Depends(get_rng),
) -> InitiativeResult:
    """Roll initiative for the actor."""
    result = roll_initiative(body.actor, rng=rng)
    return _found(result, "Actor has no Agility")


@router.get("/hit-location/{roll}", response_model=HitLocation)
def hit_location(roll: int) -> HitLocation:
    """Look up the hit location for an attack roll."""
    try:
        return resolve_hit_location(roll)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
