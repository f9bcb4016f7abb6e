"""Tests for dice rolling utilities."""

import random

import pytest

from engine.dice import DiceResult, parse, roll, roll_d100


class TestParse:
    """Tests for parse()."""

    def test_single_term(self):
        assert parse("1d10") == [(1, 1, 10)]

    def test_implicit_count(self):
        assert parse("d100") == [(1, 1, 100)]

    def test_mixed_terms(self):
        assert parse("2d10 + 3 - 1d5") == [(1, 2, 10), (1, 3, 0), (-1, 1, 5)]

    def test_upper_case_d(self):
        assert parse("1D10+2") == [(1, 1, 10), (1, 2, 0)]

    def test_flat_number(self):
        assert parse("7") == [(1, 7, 0)]


class TestRoll:
    """Tests for the roll() function."""

    def test_basic_roll(self):
        """Roll 1d10 with a seeded RNG produces expected result."""
        rng = random.Random(42)
        result = roll("1d10", rng=rng)
        assert isinstance(result, DiceResult)
        assert len(result.rolls) == 1
        assert 1 <= result.rolls[0] <= 10
        assert result.modifier == 0
        assert result.total == result.rolls[0]

    def test_multiple_dice(self):
        """Roll 3d10 produces 3 individual rolls."""
        rng = random.Random(42)
        result = roll("3d10", rng=rng)
        assert len(result.rolls) == 3
        assert all(1 <= r <= 10 for r in result.rolls)
        assert result.total == sum(result.rolls)

    def test_positive_modifier(self):
        """Roll 1d10+4 adds modifier correctly."""
        rng = random.Random(42)
        result = roll("1d10+4", rng=rng)
        assert result.modifier == 4
        assert result.total == result.rolls[0] + 4

    def test_negative_modifier(self):
        """Roll 1d10-2 subtracts modifier correctly."""
        rng = random.Random(42)
        result = roll("1d10-2", rng=rng)
        assert result.modifier == -2
        assert result.total == result.rolls[0] - 2

    def test_several_dice_terms(self):
        """Dice terms are summed or subtracted in order."""
        rng = random.Random(7)
        check_rng = random.Random(7)
        first = [check_rng.randint(1, 10) for _ in range(2)]
        second = check_rng.randint(1, 5)

        result = roll("2d10 - 1d5 + 3", rng=rng)
        assert result.rolls == first + [second]
        assert result.total == sum(first) - second + 3

    def test_sign_runs(self):
        """A substituted negative bonus reads as subtraction."""
        rng = random.Random(42)
        result = roll("1d10+-1", rng=rng)
        assert result.modifier == -1
        assert result.total == result.rolls[0] - 1

    def test_whitespace_allowed(self):
        rng = random.Random(42)
        result = roll(" 1d10 + 4 + 0 ", rng=rng)
        assert result.modifier == 4
        assert result.notation == "1d10 + 4 + 0"

    def test_notation_stored(self):
        """Notation string is preserved in result."""
        result = roll("2d10+3")
        assert result.notation == "2d10+3"

    def test_invalid_notation(self):
        """Invalid notation raises ValueError."""
        with pytest.raises(ValueError):
            roll("bad")
        with pytest.raises(ValueError):
            roll("2d")
        with pytest.raises(ValueError):
            roll("1d10+")
        with pytest.raises(ValueError):
            roll("1d10 4")
        with pytest.raises(ValueError):
            roll("")

    def test_unsubstituted_token_is_invalid(self):
        with pytest.raises(ValueError):
            roll("1d10+SB")

    def test_zero_sided_die_rejected(self):
        with pytest.raises(ValueError):
            roll("1d0")

    def test_dice_count_capped(self):
        with pytest.raises(ValueError, match="Too many dice"):
            roll("1000d10")

    def test_seeded_determinism(self):
        """Same seed produces same results."""
        result1 = roll("4d10", rng=random.Random(123))
        result2 = roll("4d10", rng=random.Random(123))
        assert result1.rolls == result2.rolls
        assert result1.total == result2.total


class TestRollD100:
    """Tests for roll_d100()."""

    def test_in_range(self):
        rng = random.Random(42)
        results = [roll_d100(rng=rng) for _ in range(500)]
        assert min(results) >= 1
        assert max(results) <= 100

    def test_matches_single_draw(self):
        """One uniform draw from 1-100 per roll."""
        check_rng = random.Random(99)
        expected = check_rng.randint(1, 100)
        assert roll_d100(rng=random.Random(99)) == expected
