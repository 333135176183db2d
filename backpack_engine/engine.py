"""Stateful inventory engine.

:class:`InventoryEngine` is the single owner of a backpack. It keeps the
latest immutable :class:`~backpack_engine.state.Backpack`, runs the pure
systems from :mod:`backpack_engine.systems.inventory`, commits the returned
state, and only then tells the :class:`~backpack_engine.notifier.Notifier`.

Notification is best-effort. A notifier that raises is logged and ignored; the
committed state is never rolled back because the host could not be reached.

Operations run to completion synchronously. If commands are ever delivered
from more than one thread, wrap each mutating call in one lock: the
compute-then-commit sequence is check-then-act on ``state``.

Usage::

    engine = InventoryEngine(max_slots=2, notifier=MessageNotifier(send))
    engine.add_item(Item("gold", "Gold Coin"), 5)
    engine.remove_item("gold", 2)
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pyrsistent import thaw
from pyrsistent.typing import PVector

from backpack_engine.components import Item, Stack
from backpack_engine.errors import BackpackFullError
from backpack_engine.notifier import Notifier, NullNotifier, TaskNames
from backpack_engine.state import DEFAULT_MAX_SLOTS, Backpack
from backpack_engine.systems.inventory import (
    add_item_system,
    clear_system,
    remove_item_system,
)
from backpack_engine.types import Clock, ItemID, TaskTargetState
from backpack_engine.utils.category import DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventorySnapshot:
    """Read-only view of the backpack at one instant.

    Attributes:
        items: Stacks in insertion order.
        count: Number of stacks.
        max_slots: Configured capacity.
    """

    items: PVector[Stack]
    count: int
    max_slots: int


@dataclass(frozen=True)
class ClearResult:
    """Outcome of :meth:`InventoryEngine.clear_backpack`."""

    cleared_count: int


def stack_to_dict(stack: Stack) -> Dict[str, Any]:
    """JSON-friendly serialization of a stack."""
    return {
        "id": stack.item_id,
        "name": stack.display_name,
        "category": stack.category,
        "quantity": stack.quantity,
        "metadata": thaw(stack.metadata),
        "addedAt": stack.added_at,
    }


def inventory_to_dict(snapshot: InventorySnapshot) -> Dict[str, Any]:
    """JSON-friendly serialization of a snapshot (``getInventory`` reply)."""
    return {
        "items": [stack_to_dict(stack) for stack in snapshot.items],
        "count": snapshot.count,
        "maxSlots": snapshot.max_slots,
    }


class InventoryEngine:
    """Owner of a single backpack.

    Args:
        max_slots: Maximum number of distinct stacks.
        notifier: Receiver of lifecycle notifications. Defaults to a no-op.
        task_names: Task name builder (controls the task prefix).
        clock: Timestamp source for ``Stack.added_at``.
        separator: Delimiter used to derive categories from item ids.
    """

    def __init__(
        self,
        max_slots: int = DEFAULT_MAX_SLOTS,
        notifier: Optional[Notifier] = None,
        task_names: Optional[TaskNames] = None,
        clock: Clock = time.monotonic,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self._state = Backpack(max_slots=max_slots)
        self._notifier: Notifier = notifier if notifier is not None else NullNotifier()
        self._task_names = task_names if task_names is not None else TaskNames()
        self._clock = clock
        self._separator = separator

    @property
    def state(self) -> Backpack:
        """Current immutable backpack state."""
        return self._state

    @property
    def max_slots(self) -> int:
        return self._state.max_slots

    def add_item(self, item: Item, quantity: int = 1) -> Stack:
        """Add ``quantity`` units of ``item``, stacking onto an existing id.

        Returns:
            Stack: The new or grown stack.

        Raises:
            InvalidItemError: ``item`` lacks an id or display name.
            InvalidQuantityError: ``quantity`` is not a positive integer.
            BackpackFullError: ``item`` is new and every slot is taken. The
                ``backpack_full`` task is sent before raising.
        """
        try:
            state, stack = add_item_system(
                self._state, item, quantity, self._clock(), self._separator
            )
        except BackpackFullError:
            logger.debug("Backpack full, rejected %s", item.item_id)
            self._notify(self._task_names.full(), TaskTargetState.NOT_ACTIVE_TO_ACTIVE)
            raise

        stacked = state.count == self._state.count
        self._state = state
        if stacked:
            logger.debug(
                "Stacked %s: +%d (total: %d)", stack.display_name, quantity, stack.quantity
            )
        else:
            logger.debug("Added %s x%d", stack.display_name, quantity)

        self._notify(
            self._task_names.item_added(item.item_id),
            TaskTargetState.NOT_ACTIVE_TO_COMPLETED,
        )
        return stack

    def remove_item(self, item_id: ItemID, quantity: int = 1) -> Optional[Stack]:
        """Remove up to ``quantity`` units of ``item_id``.

        Returns:
            Stack | None: The remaining stack, or ``None`` if it was removed
            entirely.

        Raises:
            InvalidQuantityError: ``quantity`` is not a positive integer.
            ItemNotFoundError: No stack with ``item_id`` exists.
        """
        previous = self._state.get(item_id)
        state, remaining = remove_item_system(self._state, item_id, quantity)
        self._state = state
        if remaining is None:
            name = previous.display_name if previous is not None else item_id
            logger.debug("Removed all %s", name)
        else:
            logger.debug(
                "Removed %d %s (%d left)", quantity, remaining.display_name, remaining.quantity
            )

        self._notify(
            self._task_names.item_removed(item_id), TaskTargetState.ACTIVE_TO_COMPLETED
        )
        return remaining

    def get_item(self, item_id: ItemID) -> Optional[Stack]:
        """Stack for ``item_id`` or ``None``. Stacks are immutable."""
        return self._state.get(item_id)

    def get_inventory(self) -> InventorySnapshot:
        """Immutable snapshot of all stacks."""
        state = self._state
        return InventorySnapshot(
            items=state.stacks, count=state.count, max_slots=state.max_slots
        )

    def clear_backpack(self) -> ClearResult:
        """Drop every stack. Always succeeds."""
        state, cleared = clear_system(self._state)
        self._state = state
        logger.debug("Cleared %d items", cleared)
        self._notify(self._task_names.cleared(), TaskTargetState.ACTIVE_TO_COMPLETED)
        return ClearResult(cleared_count=cleared)

    def _notify(self, task_name: str, target_state: TaskTargetState) -> None:
        try:
            self._notifier.notify(task_name, target_state)
        except Exception:
            logger.exception("Failed to send task %s", task_name)
