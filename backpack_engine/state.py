"""Immutable backpack ``Backpack`` state.

The whole inventory at one instant is a frozen :class:`Backpack`. Systems in
:mod:`backpack_engine.systems.inventory` are pure functions that take a
``Backpack`` and return a new one; nothing mutates in place. The stateful
:class:`backpack_engine.engine.InventoryEngine` simply holds the latest
``Backpack`` and swaps it after each successful operation.

Design notes:

* ``stacks`` is a persistent vector (``pyrsistent.PVector``) so handing it to
  callers as a snapshot cannot leak a mutable alias of engine state.
* Insertion order of ``stacks`` is observable and preserved by every system;
  removals close the gap without reordering the survivors.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from backpack_engine.components import Stack
from backpack_engine.types import ItemID

DEFAULT_MAX_SLOTS = 32


@dataclass(frozen=True)
class Backpack:
    """Frozen inventory snapshot.

    Attributes:
        max_slots (int): Maximum number of distinct stacks.
        stacks (PVector[Stack]): Stacks in insertion order.
    """

    max_slots: int = DEFAULT_MAX_SLOTS
    stacks: PVector[Stack] = pvector()

    def __post_init__(self) -> None:
        if self.max_slots < 1:
            raise ValueError(f"max_slots must be >= 1, got {self.max_slots}")

    @property
    def count(self) -> int:
        """Number of distinct stacks held."""
        return len(self.stacks)

    @property
    def is_full(self) -> bool:
        return len(self.stacks) >= self.max_slots

    def index_of(self, item_id: ItemID) -> Optional[int]:
        """Position of the stack for ``item_id`` or ``None``."""
        for index, stack in enumerate(self.stacks):
            if stack.item_id == item_id:
                return index
        return None

    def get(self, item_id: ItemID) -> Optional[Stack]:
        index = self.index_of(item_id)
        return None if index is None else self.stacks[index]
