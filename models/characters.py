"""Actor data models and derived characteristic blocks."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from config import CHARACTERISTICS
from models.items import Item


class ActorType(str, Enum):
    """Kinds of actor; both derive characteristics the same way."""
    CHARACTER = "character"
    NPC = "npc"


class Characteristic(BaseModel):
    """Stored (base) value of a single characteristic."""
    value: int = Field(default=0, ge=0)


class Wounds(BaseModel):
    """Current and maximum wounds before trait adjustments."""
    value: int = 0
    max: int = 0


class SkillEntry(BaseModel):
    """An actor's training in one skill."""
    trained: bool = False
    is_basic: bool = False          # Lets an advanced skill be used untrained
    plus10: bool = False
    plus20: bool = False
    modifier: int = 0               # Misc bonus or penalty


class SpecializationEntry(SkillEntry):
    """One named instance of a specialization, e.g. Forbidden Lore (Xenos)."""
    name: str = ""


class InventoryEntry(BaseModel):
    """A line in the actor's carried inventory."""
    name: str = ""
    quantity: float = 1
    weight: float = 0               # Weight of a single unit in kg


class Actor(BaseModel):
    """A read-only snapshot of a character or NPC."""
    id: str
    name: str
    type: ActorType = ActorType.CHARACTER
    characteristics: dict[str, Characteristic] = {}  # May be sparse
    wounds: Wounds | None = None
    skills: dict[str, SkillEntry] = {}
    specializations: dict[str, list[SpecializationEntry]] = {}
    items: list[Item] = []
    inventory: list[InventoryEntry] = []

    @field_validator("characteristics")
    @classmethod
    def known_characteristics(cls, v):
        unknown = sorted(set(v) - set(CHARACTERISTICS))
        if unknown:
            raise ValueError(f"Unknown characteristics: {', '.join(unknown)}")
        return v

    def get_item(self, item_id: str) -> Item | None:
        """Look up an owned item by id. Returns None if not found."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None


class DerivedCharacteristic(BaseModel):
    """A characteristic after trait modifiers have been applied."""
    value: int
    modifier: int
    total: int
    bonus: int                      # Tens digit of total


class DerivedStats(BaseModel):
    """Everything recomputed from an actor's base values and traits."""
    characteristics: dict[str, DerivedCharacteristic] = {}
    initiative_bonus: int = 0
    wounds_modifier: int | None = None      # None when the actor has no wounds block
    effective_max_wounds: int | None = None

    def bonuses(self) -> dict[str, int]:
        """Characteristic key -> bonus, for damage formula substitution."""
        return {key: char.bonus for key, char in self.characteristics.items()}
