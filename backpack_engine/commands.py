"""Inbound command decoding.

Host messages arrive as JSON text or already-parsed mappings of the form
``{"action": <name>, ...payload}``. :func:`decode_command` turns one message
into exactly one of:

* a typed command (:class:`AddItemCommand`, :class:`RemoveItemCommand`,
  :class:`ClearBackpackCommand`, :class:`GetInventoryCommand`);
* :class:`UnknownCommand` for a well-formed message naming an action this
  engine does not implement;
* :class:`MalformedCommand` when the message cannot be read as a command;
* ``None`` for foreign traffic that is not addressed to the backpack at all
  (already-parsed mappings with a truthy ``target``, as browser tooling posts
  on the same channel). JSON text is never treated as foreign traffic.

Only shape is checked here. Domain rules (non-empty names, positive
quantities, capacity) belong to the engine, so e.g. an empty item id decodes
fine and fails later with ``InvalidItem``.
"""

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Union

from pyrsistent import freeze
from pyrsistent.typing import PMap

from backpack_engine.actions import Action
from backpack_engine.components import Item
from backpack_engine.types import ItemID

DEFAULT_QUANTITY = 1
NESTED_TOO_DEEPLY = "message nested too deeply"

_ITEM_FIELDS = frozenset({"id", "name", "displayName", "category", "metadata"})


@dataclass(frozen=True)
class AddItemCommand:
    item: Item
    quantity: int = DEFAULT_QUANTITY
    action: ClassVar[Action] = Action.ADD_ITEM


@dataclass(frozen=True)
class RemoveItemCommand:
    item_id: ItemID
    quantity: int = DEFAULT_QUANTITY
    action: ClassVar[Action] = Action.REMOVE_ITEM


@dataclass(frozen=True)
class ClearBackpackCommand:
    action: ClassVar[Action] = Action.CLEAR_BACKPACK


@dataclass(frozen=True)
class GetInventoryCommand:
    action: ClassVar[Action] = Action.GET_INVENTORY


@dataclass(frozen=True)
class UnknownCommand:
    """Well-formed message with an unrecognized action."""

    action: str


@dataclass(frozen=True)
class MalformedCommand:
    """Message that could not be decoded.

    Attributes:
        reason: Human readable explanation, for logs.
        raw: The message as received.
    """

    reason: str
    raw: Any = None


Command = Union[
    AddItemCommand, RemoveItemCommand, ClearBackpackCommand, GetInventoryCommand
]
DecodeResult = Union[Command, UnknownCommand, MalformedCommand]


class _DecodeError(Exception):
    pass


def decode_command(message: object) -> Optional[DecodeResult]:
    """Decode one host message.

    Args:
        message: JSON text, ``bytes`` holding JSON text, or a mapping.

    Returns:
        DecodeResult | None: The decoded command, an unknown/malformed marker,
        or ``None`` if the message is foreign traffic to ignore.
    """
    if isinstance(message, (bytes, bytearray)):
        try:
            message = message.decode("utf-8")
        except UnicodeDecodeError:
            return MalformedCommand("message is not valid UTF-8", message)

    if isinstance(message, Mapping) and message.get("target"):
        return None

    data: object = message
    if isinstance(message, str):
        try:
            data = json.loads(message)
        except RecursionError:
            return MalformedCommand(NESTED_TOO_DEEPLY, message)
        except ValueError:
            return MalformedCommand("non-JSON string", message)

    if not isinstance(data, Mapping):
        return MalformedCommand(f"expected an object, got {type(data).__name__}", message)

    action = data.get("action")
    if not isinstance(action, str) or not action:
        return MalformedCommand("missing action", message)

    try:
        return _decode_payload(action, data)
    except _DecodeError as exc:
        return MalformedCommand(f"{action}: {exc}", message)
    except RecursionError:
        return MalformedCommand(NESTED_TOO_DEEPLY, message)


def _decode_payload(action: str, data: Mapping[str, Any]) -> DecodeResult:
    if action == Action.ADD_ITEM:
        return AddItemCommand(
            item=_decode_item(data.get("item")),
            quantity=_decode_quantity(data.get("quantity")),
        )
    if action == Action.REMOVE_ITEM:
        item_id = data.get("itemId")
        if not isinstance(item_id, str) or not item_id:
            raise _DecodeError("itemId must be a non-empty string")
        return RemoveItemCommand(
            item_id=item_id, quantity=_decode_quantity(data.get("quantity"))
        )
    if action == Action.CLEAR_BACKPACK:
        return ClearBackpackCommand()
    if action == Action.GET_INVENTORY:
        return GetInventoryCommand()
    return UnknownCommand(action)


def _decode_item(raw: object) -> Item:
    if not isinstance(raw, Mapping):
        raise _DecodeError("item must be an object")

    item_id = _optional_str(raw, "id") or ""
    name = _optional_str(raw, "name") or _optional_str(raw, "displayName") or ""
    category = _optional_str(raw, "category") or None

    metadata = raw.get("metadata")
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, Mapping):
        raise _DecodeError("item.metadata must be an object")
    extra = {key: value for key, value in raw.items() if key not in _ITEM_FIELDS}

    merged: PMap[str, Any] = freeze({**extra, **metadata})
    return Item(item_id=item_id, display_name=name, category=category, metadata=merged)


def _optional_str(raw: Mapping[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _DecodeError(f"item.{key} must be a string")
    return value


def _decode_quantity(raw: object) -> int:
    if raw is None:
        return DEFAULT_QUANTITY
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise _DecodeError("quantity must be an integer")
    return raw
