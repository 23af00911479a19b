"""
Catalogue of the noodle bar: what can be ordered, at which price.

The data itself lives in ``data/menu_config.json``; this module only
describes its shape and validates it with Pydantic.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from little_kai.domain.types import (
    MAX_SPICINESS,
    IngredientType,
    NoodleType,
    SauceType,
)

logger = logging.getLogger(__name__)


class MenuEntry(BaseModel):
    label: str
    price: float = Field(ge=0)


class SauceEntry(MenuEntry):
    spiciness: int = Field(ge=0, le=MAX_SPICINESS)


class Menu(BaseModel):
    noodles: Dict[NoodleType, MenuEntry]
    ingredients: Dict[IngredientType, MenuEntry]
    sauces: Dict[SauceType, SauceEntry]

    @model_validator(mode="after")
    def _every_choice_is_priced(self) -> "Menu":
        for section, enum_cls in (
            ("noodles", NoodleType),
            ("ingredients", IngredientType),
            ("sauces", SauceType),
        ):
            missing = [m.value for m in enum_cls if m not in getattr(self, section)]
            if missing:
                raise ValueError(f"{section}: no entry for {', '.join(missing)}")
        return self

    def noodle(self, kind: NoodleType) -> MenuEntry:
        return self.noodles[kind]

    def ingredient(self, kind: IngredientType) -> MenuEntry:
        return self.ingredients[kind]

    def sauce(self, kind: SauceType) -> SauceEntry:
        return self.sauces[kind]


def load_menu_config(filepath: Union[str, Path]) -> Menu:
    """Charge le catalogue depuis un fichier JSON et le valide.

    Paramètres
    ----------
    filepath : str | Path
        Chemin vers le fichier JSON du catalogue.

    Retour
    ------
    Menu
        Catalogue validé (prix et piquant de chaque choix).

    Lève
    ----
    FileNotFoundError
        Si le fichier n'existe pas.
    ValueError
        Si le JSON n'est pas un objet ou ne respecte pas le modèle Menu.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Menu config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)

    if not isinstance(raw_data, dict):
        raise ValueError(f"{path} must contain a JSON object at its root")

    try:
        menu = Menu.model_validate(raw_data)
    except ValidationError as e:
        raise ValueError(f"Validation error for menu config {path.name}: {e}")

    logger.debug(
        "Loaded menu from %s (%d noodles, %d ingredients, %d sauces)",
        path,
        len(menu.noodles),
        len(menu.ingredients),
        len(menu.sauces),
    )
    return menu
