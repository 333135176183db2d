"""backpack_engine.components
=================================

Aggregate import surface for the frozen value types the engine stores and
passes around::

    from backpack_engine.components import Item, Stack, Tier

``Item`` is the add request, ``Stack`` the stored entry, and the tier types
describe how quantities map to glyphs. None of them carry behavior beyond
small derived helpers; state changes live in ``backpack_engine.systems``.
"""

from .item import Item
from .stack import Stack
from .tier import Bounded, Exact, OpenEnded, RangeSpec, Tier, parse_range

__all__ = [
    "Bounded",
    "Exact",
    "Item",
    "OpenEnded",
    "RangeSpec",
    "Stack",
    "Tier",
    "parse_range",
]
