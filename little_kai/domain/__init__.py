"""
Domain objects for Little Kai.

The domain layer holds the noodle bar catalogue and the layered dish
model (noodles, ingredient layers, sauce layer). Everything here is
immutable and free of console I/O to ease unit testing.
"""

from .types import IngredientType, NoodleType, SauceType, MAX_SPICINESS
from .menu import Menu, MenuEntry, SauceEntry, load_menu_config
from .dish import (
    Dish,
    IngredientLayer,
    Noodles,
    SauceLayer,
    cost,
    describe,
    spiciness,
)

__all__ = [
    "IngredientType",
    "NoodleType",
    "SauceType",
    "MAX_SPICINESS",
    "Menu",
    "MenuEntry",
    "SauceEntry",
    "load_menu_config",
    "Dish",
    "IngredientLayer",
    "Noodles",
    "SauceLayer",
    "cost",
    "describe",
    "spiciness",
]
