import json

import pytest

from little_kai.data import MENU_CONFIG_PATH, get_MENU


@pytest.fixture
def menu():
    return get_MENU()


@pytest.fixture
def raw_menu():
    """The shipped catalogue as a plain dict, to derive broken variants from."""
    with MENU_CONFIG_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def write_menu(tmp_path):
    def _write(data, name="menu.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with scripted answers; EOFError once they run out."""

    def _feed(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
