# little_kai/domain/dish.py
"""
Layered model of a noodle order.

A dish is one of three shapes:

- ``Noodles``: the base, a leaf carrying its own price;
- ``IngredientLayer``: wraps noodles or another ingredient layer and adds a price;
- ``SauceLayer``: wraps noodles or an ingredient layer, adds a price and a
  spiciness level. Its ``inner`` type excludes sauces, so a dish holds at most
  one sauce and it is always the outermost layer.

Layers are frozen: wrapping builds a new object around the previous one.
"""

import logging
from typing import Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from little_kai.domain.menu import Menu
from little_kai.domain.types import (
    MAX_SPICINESS,
    IngredientType,
    NoodleType,
    SauceType,
)

logger = logging.getLogger(__name__)


def _menu_or_default(menu: Optional[Menu]) -> Menu:
    if menu is not None:
        return menu
    from little_kai.data import get_MENU

    return get_MENU()


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    price: float = Field(ge=0)

    def cost(self) -> float:
        return self.price


class Noodles(Item):
    kind: NoodleType

    @classmethod
    def from_menu(cls, kind: NoodleType, menu: Optional[Menu] = None) -> "Noodles":
        entry = _menu_or_default(menu).noodle(kind)
        return cls(kind=kind, label=entry.label, price=entry.price)


class IngredientLayer(Item):
    kind: IngredientType
    inner: Union[Noodles, "IngredientLayer"]

    def cost(self) -> float:
        return self.price + self.inner.cost()

    @classmethod
    def wrap(
        cls,
        inner: Union[Noodles, "IngredientLayer"],
        kind: IngredientType,
        menu: Optional[Menu] = None,
    ) -> "IngredientLayer":
        entry = _menu_or_default(menu).ingredient(kind)
        logger.debug("Adding %s (%.2f) on top of %s", kind.value, entry.price, inner.label)
        return cls(kind=kind, label=entry.label, price=entry.price, inner=inner)


class SauceLayer(Item):
    kind: SauceType
    spiciness: int = Field(ge=0, le=MAX_SPICINESS)
    inner: Union[Noodles, IngredientLayer]

    def cost(self) -> float:
        return self.price + self.inner.cost()

    @property
    def out_of_control(self) -> bool:
        return self.spiciness == MAX_SPICINESS

    @classmethod
    def wrap(
        cls,
        inner: Union[Noodles, IngredientLayer],
        kind: SauceType,
        menu: Optional[Menu] = None,
    ) -> "SauceLayer":
        entry = _menu_or_default(menu).sauce(kind)
        logger.debug("Adding %s (%.2f, spiciness %d)", kind.value, entry.price, entry.spiciness)
        return cls(
            kind=kind,
            label=entry.label,
            price=entry.price,
            spiciness=entry.spiciness,
            inner=inner,
        )


Dish = Union[Noodles, IngredientLayer, SauceLayer]


def cost(dish: Dish) -> float:
    """Total price: own price plus everything it wraps."""
    return dish.cost()


def spiciness(dish: Dish) -> Optional[int]:
    """Spiciness of the dish, only defined when a sauce is the outer layer."""
    if isinstance(dish, SauceLayer):
        return dish.spiciness
    return None


def layers(dish: Dish) -> Iterator[Item]:
    """Walk the layers from the outermost one down to the noodles."""
    current = dish
    while True:
        yield current
        if isinstance(current, Noodles):
            return
        current = current.inner


def base_of(dish: Dish) -> Noodles:
    return list(layers(dish))[-1]


def describe(dish: Dish) -> List[str]:
    """Labels from the noodles outwards, e.g. ['Egg Noodles', 'Chicken']."""
    return [layer.label for layer in reversed(list(layers(dish)))]
