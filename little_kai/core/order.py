import logging
from typing import Callable, List, Optional

from pydantic import BaseModel

from little_kai.domain.dish import (
    Dish,
    IngredientLayer,
    Noodles,
    SauceLayer,
    describe,
    spiciness,
)
from little_kai.domain.menu import Menu
from little_kai.domain.types import IngredientType, NoodleType, SauceType

logger = logging.getLogger(__name__)


class OrderSummary(BaseModel):
    """What gets printed at the end of an order."""

    layers: List[str]
    total: float
    spiciness: Optional[int] = None
    out_of_control: bool = False

    @property
    def has_sauce(self) -> bool:
        return self.spiciness is not None


def select_base(choice: int, menu: Optional[Menu] = None) -> Noodles:
    """1 -> egg, 2 -> udon, anything else -> wheat noodles."""
    kind = NoodleType.from_choice(choice)
    if kind is None:
        logger.debug("Noodle choice %r out of range, defaulting to wheat", choice)
        kind = NoodleType.WHEAT
    return Noodles.from_menu(kind, menu)


def add_ingredients(
    dish: Dish,
    prompt_fn: Callable[[Dish], int],
    menu: Optional[Menu] = None,
) -> Dish:
    """Wrap ``dish`` with one ingredient per answer of ``prompt_fn``.

    ``prompt_fn`` receives the dish built so far and returns a menu number;
    0 or any number outside the ingredient menu ends the selection.
    """
    current = dish
    while True:
        kind = IngredientType.from_choice(prompt_fn(current))
        if kind is None:
            return current
        current = IngredientLayer.wrap(current, kind, menu)


def apply_sauce(dish: Dish, choice: int, menu: Optional[Menu] = None) -> Dish:
    """Wrap once with the chosen sauce; 0 or an unknown number leaves the dish as is."""
    kind = SauceType.from_choice(choice)
    if kind is None:
        return dish
    return SauceLayer.wrap(dish, kind, menu)


def summarize(dish: Dish) -> OrderSummary:
    level = spiciness(dish)
    return OrderSummary(
        layers=describe(dish),
        total=dish.cost(),
        spiciness=level,
        out_of_control=isinstance(dish, SauceLayer) and dish.out_of_control,
    )


def report(dish: Dish) -> OrderSummary:
    from little_kai.ui.results_view import print_order_summary

    summary = summarize(dish)
    print_order_summary(summary)
    return summary


def build_order(
    choose_noodles: Callable[[], int],
    choose_ingredient: Callable[[Dish], int],
    choose_sauce: Callable[[], int],
    menu: Optional[Menu] = None,
) -> Dish:
    """Run the whole order flow: noodles, ingredients, then sauce."""
    dish = select_base(choose_noodles(), menu)
    dish = add_ingredients(dish, choose_ingredient, menu)
    dish = apply_sauce(dish, choose_sauce(), menu)
    logger.info("Order built: %s (%.2f)", " + ".join(describe(dish)), dish.cost())
    return dish
