"""
Order building for Little Kai.

``order`` turns menu choices into a layered dish and reports its price
and spiciness.
"""

from .order import (
    OrderSummary,
    add_ingredients,
    apply_sauce,
    build_order,
    report,
    select_base,
    summarize,
)

__all__ = [
    "OrderSummary",
    "add_ingredients",
    "apply_sauce",
    "build_order",
    "report",
    "select_base",
    "summarize",
]
