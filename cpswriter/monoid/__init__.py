"""
Monoids
=======

Accumulator descriptions for writer layers:
- Monoid: record of (empty, combine)
- Log: ordered list of entries
- Sum / Product: numeric accumulators
"""

from .log import Log
from .numeric import Product, Sum
from .protocol import Combinable, Monoid

__all__ = (
    "Combinable",
    "Log",
    "Monoid",
    "Product",
    "Sum",
)
