# little_kai/domain/types.py
from enum import Enum
from typing import Optional


class MenuChoice(str, Enum):
    """Enum whose declaration order is the numbering shown on screen (1-based)."""

    @classmethod
    def from_choice(cls, choice: int) -> Optional["MenuChoice"]:
        members = list(cls)
        if 1 <= choice <= len(members):
            return members[choice - 1]
        return None


class NoodleType(MenuChoice):
    # Values aligned with the JSON keys of data/menu_config.json
    EGG = "EGG"
    UDON = "UDON"
    WHEAT = "WHEAT"


class IngredientType(MenuChoice):
    CHICKEN = "CHICKEN"
    PEANUTS = "PEANUTS"
    PORK = "PORK"
    TUNA = "TUNA"


class SauceType(MenuChoice):
    BITTERSWEET = "BITTERSWEET"
    RED_PEPPER = "RED_PEPPER"
    SATE = "SATE"
    TERIYAKI = "TERIYAKI"


MAX_SPICINESS = 4
