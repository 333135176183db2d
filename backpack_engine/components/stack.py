"""Stack component.

One entry of the backpack: an item identity plus how many of it are held.
Stacks are frozen; changing a quantity produces a new ``Stack`` via
:meth:`Stack.with_quantity`, which keeps ``added_at`` from the original
insertion.
"""

from dataclasses import dataclass, replace
from typing import Any

from pyrsistent.typing import PMap

from backpack_engine.errors import InvalidQuantityError
from backpack_engine.types import Category, ItemID


@dataclass(frozen=True)
class Stack:
    """Immutable inventory entry.

    Attributes:
        item_id: Identifier shared by every unit in the stack.
        category: Key used for tier (glyph) resolution.
        display_name: Label fixed at first insertion.
        quantity: Units held, always at least 1.
        metadata: Deep-frozen opaque fields from the originating item.
        added_at: Clock reading at first insertion; stacking does not touch it.
    """

    item_id: ItemID
    category: Category
    display_name: str
    quantity: int
    metadata: PMap[str, Any]
    added_at: float

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise InvalidQuantityError(self.quantity)

    def with_quantity(self, quantity: int) -> "Stack":
        """Return a copy holding ``quantity`` units."""
        return replace(self, quantity=quantity)
