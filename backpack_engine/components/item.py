"""Item request payload.

``Item`` is what a caller hands to
:meth:`backpack_engine.engine.InventoryEngine.add_item`. It is deliberately
unvalidated: an empty id or display name is reported by the engine as an
``InvalidItem`` failure rather than rejected at construction, so that decoded
host payloads reach the engine and fail there with a proper report.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from backpack_engine.types import Category, ItemID


@dataclass(frozen=True)
class Item:
    """Identity and display data for an item being added.

    Attributes:
        item_id: Stable identifier, unique per item definition.
        display_name: Human readable label.
        category: Explicit tier category. ``None`` derives it from ``item_id``.
        metadata: Opaque extra fields, carried through untouched.
    """

    item_id: ItemID
    display_name: str
    category: Optional[Category] = None
    metadata: PMap[str, Any] = pmap()
