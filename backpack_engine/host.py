"""Host message boundary.

:class:`CommandHandler` is what a host transport calls for every inbound
message. It decodes the message, dispatches the command to an
:class:`~backpack_engine.engine.InventoryEngine`, and reports the result as a
:class:`CommandOutcome`. It never raises for a bad or rejected command: engine
failures and malformed messages are logged and turned into failed outcomes so
the listening loop keeps running.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from backpack_engine.actions import MUTATING_ACTIONS
from backpack_engine.commands import (
    AddItemCommand,
    ClearBackpackCommand,
    Command,
    GetInventoryCommand,
    MalformedCommand,
    RemoveItemCommand,
    UnknownCommand,
    decode_command,
)
from backpack_engine.engine import InventoryEngine, inventory_to_dict
from backpack_engine.errors import BackpackError
from backpack_engine.types import FailureKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    """Result of handling one command.

    Attributes:
        action: Action name as received.
        ok: ``True`` if the engine accepted the command.
        failure: Failure category when ``ok`` is ``False`` (``None`` for an
            ignored unknown action).
        detail: Human readable message for logs.
        result: Engine return value on success (stack, snapshot, ...).
    """

    action: str
    ok: bool
    failure: Optional[FailureKind] = None
    detail: str = ""
    result: Any = None


class CommandHandler:
    """Decode and dispatch host messages to an engine."""

    def __init__(self, engine: InventoryEngine) -> None:
        self.engine = engine

    def handle_message(self, message: object) -> Optional[CommandOutcome]:
        """Handle one raw host message.

        Returns:
            CommandOutcome | None: ``None`` for foreign traffic that was
            skipped without decoding.
        """
        decoded = decode_command(message)
        if decoded is None:
            return None
        if isinstance(decoded, MalformedCommand):
            logger.warning("Dropped malformed message: %s", decoded.reason)
            return CommandOutcome(
                action="",
                ok=False,
                failure=FailureKind.MALFORMED_COMMAND,
                detail=decoded.reason,
            )
        if isinstance(decoded, UnknownCommand):
            logger.warning("Unknown action: %s", decoded.action)
            return CommandOutcome(
                action=decoded.action, ok=False, detail="unknown action"
            )
        return self.dispatch(decoded)

    def dispatch(self, command: Command) -> CommandOutcome:
        """Run a decoded command against the engine."""
        action = command.action.value
        try:
            result = self._execute(command)
        except BackpackError as exc:
            if exc.kind is FailureKind.BACKPACK_FULL:
                logger.info("Error executing action %s: %s", action, exc)
            else:
                logger.warning("Error executing action %s: %s", action, exc)
            return CommandOutcome(action=action, ok=False, failure=exc.kind, detail=str(exc))
        if command.action in MUTATING_ACTIONS:
            logger.debug("%s ok, %d stacks held", action, self.engine.state.count)
        return CommandOutcome(action=action, ok=True, result=result)

    def _execute(self, command: Command) -> Any:
        engine = self.engine
        if isinstance(command, AddItemCommand):
            return engine.add_item(command.item, command.quantity)
        if isinstance(command, RemoveItemCommand):
            return engine.remove_item(command.item_id, command.quantity)
        if isinstance(command, ClearBackpackCommand):
            return engine.clear_backpack()
        if isinstance(command, GetInventoryCommand):
            snapshot = engine.get_inventory()
            logger.info("Current inventory: %s", inventory_to_dict(snapshot))
            return snapshot
        raise TypeError(f"Unsupported command: {command!r}")
