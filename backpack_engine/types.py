"""Common type aliases and enumerations.

``ItemID`` and ``Category`` are plain strings supplied by the host. The two
string enums here appear on the wire (task target states) or in failure
reports, so their values are stable and must not be renamed.
"""

from enum import StrEnum
from typing import Callable

ItemID = str
Category = str
Glyph = str

Clock = Callable[[], float]


class TaskTargetState(StrEnum):
    """Host task transitions requested by outbound notifications."""

    NOT_ACTIVE_TO_ACTIVE = "NotActiveToActive"
    NOT_ACTIVE_TO_COMPLETED = "NotActiveToCompleted"
    ACTIVE_TO_COMPLETED = "ActiveToCompleted"


class FailureKind(StrEnum):
    """Failure categories reported by the engine and the command boundary."""

    INVALID_ITEM = "InvalidItem"
    INVALID_QUANTITY = "InvalidQuantity"
    BACKPACK_FULL = "BackpackFull"
    ITEM_NOT_FOUND = "ItemNotFound"
    MALFORMED_COMMAND = "MalformedCommand"
