import pytest

from little_kai.domain.menu import load_menu_config
from little_kai.domain.types import IngredientType, NoodleType, SauceType


def test_shipped_menu_prices_every_choice(menu):
    assert set(menu.noodles) == set(NoodleType)
    assert set(menu.ingredients) == set(IngredientType)
    assert set(menu.sauces) == set(SauceType)

    assert menu.noodle(NoodleType.EGG).price == pytest.approx(3.75)
    assert menu.ingredient(IngredientType.CHICKEN).price == pytest.approx(3.50)
    assert menu.ingredient(IngredientType.PEANUTS).price == pytest.approx(2.50)
    assert menu.sauce(SauceType.RED_PEPPER).spiciness == 4


def test_menu_numbering_follows_declaration_order():
    assert NoodleType.from_choice(1) == NoodleType.EGG
    assert IngredientType.from_choice(4) == IngredientType.TUNA
    assert SauceType.from_choice(2) == SauceType.RED_PEPPER
    assert SauceType.from_choice(0) is None
    assert IngredientType.from_choice(5) is None
    assert NoodleType.from_choice(-1) is None


def test_load_round_trips_a_copy(raw_menu, write_menu):
    menu = load_menu_config(write_menu(raw_menu))
    assert menu.noodle(NoodleType.UDON).label == "Udon Noodles"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_menu_config(tmp_path / "nope.json")


def test_root_must_be_an_object(write_menu):
    with pytest.raises(ValueError, match="JSON object"):
        load_menu_config(write_menu([1, 2, 3]))


def test_every_enum_member_needs_an_entry(raw_menu, write_menu):
    del raw_menu["sauces"]["SATE"]
    with pytest.raises(ValueError, match="SATE"):
        load_menu_config(write_menu(raw_menu))


def test_unknown_key_is_rejected(raw_menu, write_menu):
    raw_menu["ingredients"]["TOFU"] = {"label": "Tofu", "price": 2.0}
    with pytest.raises(ValueError):
        load_menu_config(write_menu(raw_menu))


def test_negative_price_is_rejected(raw_menu, write_menu):
    raw_menu["noodles"]["EGG"]["price"] = -1
    with pytest.raises(ValueError):
        load_menu_config(write_menu(raw_menu))


def test_spiciness_above_four_is_rejected(raw_menu, write_menu):
    raw_menu["sauces"]["RED_PEPPER"]["spiciness"] = 5
    with pytest.raises(ValueError):
        load_menu_config(write_menu(raw_menu))
