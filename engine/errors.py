"""Exceptions raised by the rules engine."""


class RulesError(Exception):
    """Base class for rules engine errors."""


class SkillUnusable(RulesError):
    """An advanced skill was tested untrained without a basic override."""

    def __init__(self, skill_name: str):
        self.skill_name = skill_name
        super().__init__(f"{skill_name} is an advanced skill and requires training.")


class MissingCharacteristic(RulesError):
    """A referenced characteristic has no data on the actor."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Actor has no characteristic '{key}'")


class UnparseableDamageFormula(RulesError, ValueError):
    """A damage formula is not a valid dice expression after substitution."""

    def __init__(self, formula: str, resolved: str | None = None):
        self.formula = formula
        self.resolved = resolved if resolved is not None else formula
        super().__init__(f"Invalid damage formula: {self.resolved!r} (from {formula!r})")
