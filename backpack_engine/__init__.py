"""Quantity-stacking backpack engine.

The common entry points are re-exported here::

    from backpack_engine import InventoryEngine, Item, TierResolver

See :mod:`backpack_engine.engine` for the stateful owner,
:mod:`backpack_engine.systems.inventory` for the stacking rules and
:mod:`backpack_engine.renderer.glyph` for quantity tiers.
"""

from backpack_engine.components import Item, Stack
from backpack_engine.config import BackpackConfig, build_engine, build_resolver
from backpack_engine.engine import ClearResult, InventoryEngine, InventorySnapshot
from backpack_engine.errors import (
    BackpackError,
    BackpackFullError,
    InvalidItemError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from backpack_engine.host import CommandHandler, CommandOutcome
from backpack_engine.notifier import MessageNotifier, Notifier, NullNotifier
from backpack_engine.renderer.glyph import DEFAULT_GLYPH, TierResolver

__all__ = [
    "BackpackConfig",
    "BackpackError",
    "BackpackFullError",
    "ClearResult",
    "CommandHandler",
    "CommandOutcome",
    "DEFAULT_GLYPH",
    "InvalidItemError",
    "InvalidQuantityError",
    "InventoryEngine",
    "InventorySnapshot",
    "Item",
    "ItemNotFoundError",
    "MessageNotifier",
    "Notifier",
    "NullNotifier",
    "Stack",
    "TierResolver",
    "build_engine",
    "build_resolver",
]
