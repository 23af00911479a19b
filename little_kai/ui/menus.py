"""Numbered menus read from stdin, one integer per prompt."""

from typing import Optional

from little_kai.console_style import bold
from little_kai.data import get_MENU
from little_kai.domain.dish import Dish
from little_kai.domain.menu import Menu
from little_kai.domain.types import MAX_SPICINESS, IngredientType, NoodleType, SauceType
from little_kai.ui.results_view import format_price, print_cart
from little_kai.utils import get_input

PROMPT = "> "


def _ask(low: int, high: int) -> int:
    choice = get_input(
        input_message=PROMPT,
        fn_validation=lambda x: low <= x <= high,
        error_message=f"⚠️ Pick a number between {low} and {high}.",
    )
    print()
    return choice


def choose_noodles(menu: Optional[Menu] = None) -> int:
    menu = menu or get_MENU()
    print(bold("> Choose your noodles!\n"))
    for i, kind in enumerate(NoodleType, 1):
        entry = menu.noodle(kind)
        print(f"{i}> {entry.label + ':':<16}{format_price(entry.price):>7}")
    return _ask(1, len(NoodleType))


def choose_ingredient(dish: Dish, menu: Optional[Menu] = None) -> int:
    menu = menu or get_MENU()
    print_cart(dish.cost())
    print(bold("> Choose your ingredient!\n"))
    for i, kind in enumerate(IngredientType, 1):
        entry = menu.ingredient(kind)
        print(f"{i}> {entry.label + ':':<16}{format_price(entry.price):>7}")
    print("\n0> No more ingredients")
    return _ask(0, len(IngredientType))


def choose_sauce(menu: Optional[Menu] = None) -> int:
    menu = menu or get_MENU()
    print(bold("> Choose your sauce!\n"))
    for i, kind in enumerate(SauceType, 1):
        entry = menu.sauce(kind)
        print(
            f"{i}> {entry.label + ':':<20}{format_price(entry.price):>7}"
            f"  {entry.spiciness} out of {MAX_SPICINESS} spiciness"
        )
    print("\n0> No sauce")
    return _ask(0, len(SauceType))
