"""Argument validation shared by systems."""

from backpack_engine.components import Item
from backpack_engine.errors import InvalidItemError, InvalidQuantityError


def check_quantity(quantity: object) -> int:
    """Return ``quantity`` if it is an int >= 1, else raise.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityError(quantity)
    return quantity


def check_item(item: Item) -> Item:
    """Return ``item`` if both its id and display name are non-empty strings."""
    if not isinstance(item.item_id, str) or not item.item_id:
        raise InvalidItemError("Invalid item: needs a non-empty id")
    if not isinstance(item.display_name, str) or not item.display_name:
        raise InvalidItemError(f"Invalid item {item.item_id!r}: needs a non-empty name")
    return item
