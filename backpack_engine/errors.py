"""Engine failure taxonomy.

Every failure raised by the engine derives from :class:`BackpackError` and
carries a :class:`~backpack_engine.types.FailureKind` so the command boundary
can report it without inspecting exception types. Validation failures also
subclass ``ValueError`` and lookup failures ``KeyError`` so plain Python
callers can catch them the usual way.
"""

from backpack_engine.types import FailureKind, ItemID


class BackpackError(Exception):
    """Base class for all engine-level failures."""

    kind: FailureKind


class InvalidItemError(BackpackError, ValueError):
    """Item is missing its id or display name."""

    kind = FailureKind.INVALID_ITEM


class InvalidQuantityError(BackpackError, ValueError):
    """Quantity is not a positive integer."""

    kind = FailureKind.INVALID_QUANTITY

    def __init__(self, quantity: object) -> None:
        super().__init__(f"quantity must be a positive integer, got {quantity!r}")
        self.quantity = quantity


class BackpackFullError(BackpackError):
    """A new stack was requested while every slot is occupied."""

    kind = FailureKind.BACKPACK_FULL

    def __init__(self, item_id: ItemID, max_slots: int) -> None:
        super().__init__(f"Backpack is full ({max_slots} slots), cannot add {item_id!r}")
        self.item_id = item_id
        self.max_slots = max_slots


class ItemNotFoundError(BackpackError, KeyError):
    """No stack with the requested id exists."""

    kind = FailureKind.ITEM_NOT_FOUND

    def __init__(self, item_id: ItemID) -> None:
        super().__init__(f"Item {item_id!r} not found")
        self.item_id = item_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])
