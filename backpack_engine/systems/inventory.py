"""Inventory systems.

Pure transition functions over :class:`~backpack_engine.state.Backpack`. Each
takes the previous state plus request arguments and returns the next state
together with the stack the caller cares about. Failures raise a
:class:`~backpack_engine.errors.BackpackError` before anything is built, so a
failed call never yields a partially updated state.

Stacking rules:

1. An id already present has its quantity increased. This is allowed even
   when every slot is taken; capacity limits distinct stacks, not units.
2. A new id is appended at the end if a slot is free, otherwise the add is
   rejected with :class:`~backpack_engine.errors.BackpackFullError`.
3. Removing at least the held quantity deletes the stack; removing less
   decrements it in place.
"""

from dataclasses import replace
from typing import Optional, Tuple

from pyrsistent import freeze, pvector

from backpack_engine.components import Item, Stack
from backpack_engine.errors import BackpackFullError, ItemNotFoundError
from backpack_engine.state import Backpack
from backpack_engine.types import ItemID
from backpack_engine.utils.category import DEFAULT_SEPARATOR, derive_category
from backpack_engine.utils.validation import check_item, check_quantity


def add_item_system(
    state: Backpack,
    item: Item,
    quantity: int,
    added_at: float,
    separator: str = DEFAULT_SEPARATOR,
) -> Tuple[Backpack, Stack]:
    """Add ``quantity`` units of ``item``.

    Args:
        state:
            Current backpack.
        item:
            Item being added. Only its id is consulted when stacking; the
            display name and metadata of an existing stack are kept.
        quantity:
            Units to add, at least 1.
        added_at:
            Timestamp recorded if a new stack is created.
        separator:
            Delimiter used to derive a category when ``item.category`` is unset.

    Returns:
        Tuple[Backpack, Stack]
            The new state and the resulting (new or grown) stack.

    Raises:
        InvalidItemError: Missing id or display name.
        InvalidQuantityError: ``quantity`` is not a positive integer.
        BackpackFullError: ``item`` is new and no slot is free.
    """
    check_item(item)
    check_quantity(quantity)

    index = state.index_of(item.item_id)
    if index is not None:
        existing = state.stacks[index]
        grown = existing.with_quantity(existing.quantity + quantity)
        return replace(state, stacks=state.stacks.set(index, grown)), grown

    if state.is_full:
        raise BackpackFullError(item.item_id, state.max_slots)

    category = item.category or derive_category(item.item_id, separator)
    stack = Stack(
        item_id=item.item_id,
        category=category,
        display_name=item.display_name,
        quantity=quantity,
        metadata=freeze(dict(item.metadata)),
        added_at=added_at,
    )
    return replace(state, stacks=state.stacks.append(stack)), stack


def remove_item_system(
    state: Backpack, item_id: ItemID, quantity: int
) -> Tuple[Backpack, Optional[Stack]]:
    """Remove up to ``quantity`` units of ``item_id``.

    Returns:
        Tuple[Backpack, Stack | None]
            The new state and the remaining stack, or ``None`` if the stack was
            removed entirely.

    Raises:
        InvalidQuantityError: ``quantity`` is not a positive integer.
        ItemNotFoundError: No stack with ``item_id`` exists.
    """
    check_quantity(quantity)
    index = state.index_of(item_id)
    if index is None:
        raise ItemNotFoundError(item_id)

    current = state.stacks[index]
    if quantity >= current.quantity:
        return replace(state, stacks=state.stacks.delete(index)), None

    remaining = current.with_quantity(current.quantity - quantity)
    return replace(state, stacks=state.stacks.set(index, remaining)), remaining


def clear_system(state: Backpack) -> Tuple[Backpack, int]:
    """Drop every stack. Returns the new state and how many stacks were held."""
    return replace(state, stacks=pvector()), state.count
