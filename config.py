"""Server-wide configuration and static rules tables for the Rogue Trader engine."""

import os
from types import MappingProxyType

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
DICE_SEED = os.environ.get("DICE_SEED")  # Set for reproducible rolls (testing/demo)

CHARACTERISTICS = MappingProxyType({
    "ws": "Weapon Skill",
    "bs": "Ballistic Skill",
    "s": "Strength",
    "t": "Toughness",
    "ag": "Agility",
    "int": "Intelligence",
    "per": "Perception",
    "wp": "Willpower",
    "fel": "Fellowship",
})

# Everything a trait modifier entry may target
MODIFIABLE_STATS = tuple(CHARACTERISTICS) + ("initiative", "wounds")

# Skills: (characteristic, advanced?, label)
SKILLS = MappingProxyType({
    "acrobatics": ("ag", False, "Acrobatics"),
    "awareness": ("per", False, "Awareness"),
    "barter": ("fel", False, "Barter"),
    "blather": ("fel", False, "Blather"),
    "carouse": ("t", False, "Carouse"),
    "charm": ("fel", False, "Charm"),
    "chem_use": ("int", True, "Chem-Use"),
    "climb": ("s", False, "Climb"),
    "command": ("fel", False, "Command"),
    "concealment": ("ag", False, "Concealment"),
    "contortionist": ("ag", False, "Contortionist"),
    "deceive": ("fel", False, "Deceive"),
    "demolition": ("int", True, "Demolition"),
    "disguise": ("fel", False, "Disguise"),
    "dodge": ("ag", False, "Dodge"),
    "evaluate": ("int", False, "Evaluate"),
    "gamble": ("int", False, "Gamble"),
    "inquiry": ("fel", False, "Inquiry"),
    "interrogation": ("wp", True, "Interrogation"),
    "intimidate": ("s", False, "Intimidate"),
    "invocation": ("wp", True, "Invocation"),
    "lip_reading": ("per", True, "Lip Reading"),
    "literacy": ("int", True, "Literacy"),
    "logic": ("int", False, "Logic"),
    "medicae": ("int", True, "Medicae"),
    "pilot": ("ag", True, "Pilot"),
    "psyniscience": ("per", True, "Psyniscience"),
    "scrutiny": ("per", False, "Scrutiny"),
    "search": ("per", False, "Search"),
    "security": ("int", True, "Security"),
    "shadowing": ("ag", True, "Shadowing"),
    "silent_move": ("ag", False, "Silent Move"),
    "sleight_of_hand": ("ag", True, "Sleight of Hand"),
    "survival": ("int", False, "Survival"),
    "swim": ("s", False, "Swim"),
    "tech_use": ("int", True, "Tech-Use"),
    "tracking": ("int", True, "Tracking"),
    "wrangling": ("int", True, "Wrangling"),
})

# Specializations admit several named entries, e.g. Forbidden Lore (Xenos)
SPECIALIZATIONS = MappingProxyType({
    "ciphers": ("int", True, "Ciphers"),
    "common_lore": ("int", True, "Common Lore"),
    "drive": ("ag", True, "Drive"),
    "forbidden_lore": ("int", True, "Forbidden Lore"),
    "navigation": ("int", True, "Navigation"),
    "performer": ("fel", True, "Performer"),
    "scholastic_lore": ("int", True, "Scholastic Lore"),
    "secret_tongue": ("int", True, "Secret Tongue"),
    "speak_language": ("int", True, "Speak Language"),
    "trade": ("int", True, "Trade"),
})

# Test difficulty: (modifier, label)
TEST_DIFFICULTY = MappingProxyType({
    "trivial": (60, "Trivial"),
    "elementary": (50, "Elementary"),
    "simple": (40, "Simple"),
    "easy": (30, "Easy"),
    "routine": (20, "Routine"),
    "ordinary": (10, "Ordinary"),
    "challenging": (0, "Challenging"),
    "difficult": (-10, "Difficult"),
    "hard": (-20, "Hard"),
    "very_hard": (-30, "Very Hard"),
    "arduous": (-40, "Arduous"),
    "punishing": (-50, "Punishing"),
    "hellish": (-60, "Hellish"),
})
DEFAULT_DIFFICULTY = "challenging"

# Combat actions: (modifier, label, applies to "melee" / "ranged" / "both")
COMBAT_ACTIONS = MappingProxyType({
    "standard": (0, "Standard Attack", "both"),
    "aim_half": (10, "Aim (Half)", "both"),
    "aim_full": (20, "Aim (Full)", "both"),
    "all_out_attack": (20, "All Out Attack", "melee"),
    "charge": (10, "Charge", "melee"),
    "called_shot": (-20, "Called Shot", "both"),
    "guarded_action": (-10, "Guarded Action", "both"),
    "semi_auto": (10, "Semi-Auto Burst", "ranged"),
    "full_auto": (20, "Full Auto Burst", "ranged"),
    "suppressing_fire": (-20, "Suppressing Fire", "ranged"),
})
DEFAULT_COMBAT_ACTION = "standard"

# Hit locations: (low, high, label), looked up against the reversed roll
HIT_LOCATIONS = MappingProxyType({
    "head": (1, 10, "Head"),
    "right_arm": (11, 20, "Right Arm"),
    "left_arm": (21, 30, "Left Arm"),
    "body": (31, 70, "Body"),
    "right_leg": (71, 85, "Right Leg"),
    "left_leg": (86, 100, "Left Leg"),
})

POWER_ROLL_TYPES = MappingProxyType({
    "attack": "Attack",
    "skill": "Skill",
    "other": "Other",
})

INITIATIVE_DIE = "1d10"
MAX_DICE_PER_TERM = 100  # Upper bound on NdM counts in a formula
