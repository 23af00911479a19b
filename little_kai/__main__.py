import logging
import sys

from little_kai.core.order import build_order, report
from little_kai.ui.menus import choose_ingredient, choose_noodles, choose_sauce
from little_kai.ui.results_view import print_banner


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s"
    )
    print_banner()
    try:
        dish = build_order(choose_noodles, choose_ingredient, choose_sauce)
    except (EOFError, KeyboardInterrupt):
        print("\n> Order cancelled.")
        return 1
    report(dish)
    return 0


if __name__ == "__main__":
    sys.exit(main())
