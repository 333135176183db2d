"""Outbound task notifications.

The engine reports lifecycle events (item added, item removed, backpack full,
backpack cleared) to the host as *task* transitions: a task name plus a
:class:`~backpack_engine.types.TaskTargetState`. Anything with a matching
``notify`` method satisfies :class:`Notifier`; the engine never checks for a
host at call time, an absent host is simply a :class:`NullNotifier`.

Task names are built by :class:`TaskNames` from a configurable prefix::

    backpack_full
    backpack_item_added_<item_id>
    backpack_item_removed_<item_id>
    backpack_cleared

On the wire each notification is a JSON object
``{"TaskName": ..., "TaskTargetState": "Set<TargetState>"}``, the shape the
host SDK's message bridge consumes.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Protocol

from backpack_engine.types import ItemID, TaskTargetState

logger = logging.getLogger(__name__)

DEFAULT_TASK_PREFIX = "backpack"
WIRE_STATE_PREFIX = "Set"


class Notifier(Protocol):
    def notify(self, task_name: str, target_state: TaskTargetState) -> None: ...


@dataclass(frozen=True)
class TaskNotification:
    """One outbound task transition."""

    task_name: str
    target_state: TaskTargetState

    def to_message(self) -> Dict[str, Any]:
        return {
            "TaskName": self.task_name,
            "TaskTargetState": f"{WIRE_STATE_PREFIX}{self.target_state.value}",
        }

    def to_json(self) -> str:
        return json.dumps(self.to_message(), ensure_ascii=False)


@dataclass(frozen=True)
class TaskNames:
    """Task name builder for a given prefix."""

    prefix: str = DEFAULT_TASK_PREFIX

    def full(self) -> str:
        return f"{self.prefix}_full"

    def item_added(self, item_id: ItemID) -> str:
        return f"{self.prefix}_item_added_{item_id}"

    def item_removed(self, item_id: ItemID) -> str:
        return f"{self.prefix}_item_removed_{item_id}"

    def cleared(self) -> str:
        return f"{self.prefix}_cleared"


class NullNotifier:
    """Notifier that discards everything (no host attached)."""

    def notify(self, task_name: str, target_state: TaskTargetState) -> None:
        return None


class MessageNotifier:
    """Serialize notifications to JSON and hand them to ``send``.

    ``send`` is the host bridge, e.g. an SDK ``sendMessage`` binding or a
    function writing lines to a socket. Errors raised by ``send`` propagate;
    the engine decides how to treat them.
    """

    def __init__(self, send: Callable[[str], None]) -> None:
        self._send = send

    def notify(self, task_name: str, target_state: TaskTargetState) -> None:
        notification = TaskNotification(task_name, target_state)
        self._send(notification.to_json())
        logger.debug("Sent task: %s -> %s", task_name, target_state.value)
