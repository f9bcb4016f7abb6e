"""Tests for damage formula substitution and evaluation."""

import random

import pytest

from engine.damage import evaluate_damage, evaluate_formula, substitute_bonuses
from engine.errors import UnparseableDamageFormula
from models.characters import Actor, Characteristic
from models.items import Gear, Power, Trait, TraitModifier, Weapon

BONUSES = {
    "ws": 4, "bs": 3, "s": 3, "t": 5, "ag": 4,
    "int": 2, "per": 6, "wp": 7, "fel": 1,
}


def _make_actor(**kwargs) -> Actor:
    """Helper to create a test actor with S 35 (SB 3) and WP 42 (WPB 4)."""
    return Actor(
        id="a1",
        name="Sister Hespera",
        characteristics={
            "ws": Characteristic(value=40),
            "bs": Characteristic(value=30),
            "s": Characteristic(value=35),
            "t": Characteristic(value=31),
            "wp": Characteristic(value=42),
        },
        **kwargs,
    )


class TestSubstituteBonuses:
    """Tests for substitute_bonuses()."""

    def test_strength_bonus(self):
        assert substitute_bonuses("1d10+SB", BONUSES) == "1d10+3"

    def test_case_insensitive(self):
        assert substitute_bonuses("1d10+sb+Wpb", BONUSES) == "1d10+3+7"

    def test_every_occurrence(self):
        assert substitute_bonuses("SB+SB", BONUSES) == "3+3"

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("SB", "3"), ("WPB", "7"), ("TB", "5"), ("AgB", "4"), ("IntB", "2"),
            ("PerB", "6"), ("FelB", "1"), ("WSB", "4"), ("BSB", "3"),
        ],
    )
    def test_each_token(self, token, expected):
        assert substitute_bonuses(f"1d5+{token}", BONUSES) == f"1d5+{expected}"

    def test_wsb_not_read_as_sb(self):
        bonuses = dict(BONUSES, ws=9, s=1)
        assert substitute_bonuses("WSB", bonuses) == "9"

    def test_bsb_not_read_as_sb(self):
        bonuses = dict(BONUSES, bs=8, s=1)
        assert substitute_bonuses("1d10+BSB", bonuses) == "1d10+8"

    def test_no_tokens(self):
        assert substitute_bonuses("2d10+2", BONUSES) == "2d10+2"

    def test_missing_characteristic_left_in_place(self):
        assert substitute_bonuses("1d10+FelB", {"s": 3}) == "1d10+FelB"

    def test_negative_bonus(self):
        assert substitute_bonuses("1d10+SB", {"s": -1}) == "1d10+-1"


class TestEvaluateFormula:
    """Tests for evaluate_formula()."""

    def test_substitutes_and_rolls(self):
        check_rng = random.Random(5)
        expected = check_rng.randint(1, 10) + 3
        resolved, total, rolls = evaluate_formula("1d10+SB", BONUSES, rng=random.Random(5))
        assert resolved == "1d10+3"
        assert total == expected
        assert len(rolls) == 1

    def test_range(self):
        rng = random.Random(1)
        totals = [evaluate_formula("1d10+SB", BONUSES, rng=rng)[1] for _ in range(200)]
        assert min(totals) >= 4
        assert max(totals) <= 13

    def test_negative_bonus_subtracts(self):
        check_rng = random.Random(4)
        expected = check_rng.randint(1, 10) - 1
        resolved, total, _ = evaluate_formula("1d10+SB", {"s": -1}, rng=random.Random(4))
        assert resolved == "1d10+-1"
        assert total == expected

    def test_no_bonuses_leaves_tokens(self):
        with pytest.raises(UnparseableDamageFormula) as exc_info:
            evaluate_formula("1d10+SB")
        assert exc_info.value.resolved == "1d10+SB"

    def test_garbage(self):
        with pytest.raises(UnparseableDamageFormula):
            evaluate_formula("lots", BONUSES)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            evaluate_formula("1d10+", BONUSES)


class TestEvaluateDamage:
    """Tests for evaluate_damage()."""

    def test_weapon_with_owner(self):
        weapon = Weapon(id="w1", name="Chainsword", damage="1d10+SB", penetration=2, notes="Tearing")
        actor = _make_actor(items=[weapon])
        result = evaluate_damage(weapon, actor, rng=random.Random(8))
        assert result.formula == "1d10+SB"
        assert result.resolved == "1d10+3"
        assert 4 <= result.total <= 13
        assert result.penetration == 2
        assert result.notes == "Tearing"
        assert result.item_name == "Chainsword"

    def test_trait_bonus_flows_into_damage(self):
        weapon = Weapon(id="w1", name="Power Fist", damage="2d10+SB")
        actor = _make_actor(items=[
            weapon,
            Trait(id="t1", name="Unnatural Strength", modifiers=[TraitModifier(stat="s", value=20)]),
        ])
        assert evaluate_damage(weapon, actor).resolved == "2d10+5"

    def test_power_damage(self):
        power = Power(id="p1", name="Smite", damage="1d10+WPB")
        result = evaluate_damage(power, _make_actor(items=[power]))
        assert result.resolved == "1d10+4"

    def test_unowned_with_token_fails(self):
        weapon = Weapon(id="w1", name="Chainsword", damage="1d10+SB")
        with pytest.raises(UnparseableDamageFormula):
            evaluate_damage(weapon)

    def test_unowned_plain_formula(self):
        weapon = Weapon(id="w1", name="Autogun", damage="1d10+2")
        result = evaluate_damage(weapon, rng=random.Random(2))
        assert result.resolved == "1d10+2"
        assert 3 <= result.total <= 12

    def test_empty_damage_is_noop(self):
        power = Power(id="p1", name="Precognition")
        assert evaluate_damage(power, _make_actor()) is None

    def test_non_damage_item_is_noop(self):
        assert evaluate_damage(Gear(id="g1", name="Auspex"), _make_actor()) is None
        assert evaluate_damage(Trait(id="t1", name="Hardy"), _make_actor()) is None
