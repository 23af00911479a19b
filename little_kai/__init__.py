"""
Little Kai package

A small noodle bar ordering program. The customer picks noodles, adds
ingredients one by one and finishes with an optional sauce; the order is
modelled as layers wrapped around the noodles, each adding its price.
The package separates the domain model, catalogue data, order building
and the console user interface into distinct subpackages.
"""

__all__ = ["core", "domain", "data", "ui"]
