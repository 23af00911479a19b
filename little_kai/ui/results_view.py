# little_kai/ui/results_view.py

from little_kai.console_style import banner, bold, cyan, green, red
from little_kai.core.order import OrderSummary
from little_kai.domain.types import MAX_SPICINESS

SHOP_NAME = "Little Kai"
OUT_OF_CONTROL_MARKER = "OUT OF CONTROOOL !_!"


def format_price(x: float) -> str:
    """Format a price in dollars, two decimals: 3.5 -> '3.50 $'."""
    return f"{x:.2f} $"


def print_banner() -> None:
    print(cyan(banner(SHOP_NAME)))
    print()


def print_cart(total: float) -> None:
    print(f"> Your cart is: {format_price(total)}")


def print_order_summary(summary: OrderSummary) -> None:
    print(bold(f"> Your order is: {format_price(summary.total)}"))
    print(f"> With: {' + '.join(summary.layers)}")

    if summary.has_sauce:
        marker = f" {red(OUT_OF_CONTROL_MARKER)}" if summary.out_of_control else ""
        print(f"> Spiciness is: {summary.spiciness} out of {MAX_SPICINESS}{marker}")
    else:
        print("> Without sauce")

    print(green("> Enjoy your noodles! :D"))
