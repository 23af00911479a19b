"""
Point d'entrée data avec chargement retardé.
Expose des getters plutôt que des objets globaux calculés à l'import.
"""

from functools import lru_cache
from pathlib import Path

MENU_CONFIG_PATH = Path(__file__).resolve().parent / "menu_config.json"


@lru_cache(maxsize=None)
def get_MENU():
    from little_kai.domain.menu import load_menu_config

    return load_menu_config(MENU_CONFIG_PATH)
