"""Category derivation from item ids.

Item ids are conventionally written ``<category><separator><variant>``
(``"gold-1"``, ``"ore-cave"``). When a caller does not supply an explicit
category, the engine derives one from the id with :func:`derive_category`.

An id without a separator is its own category, so ``"gold"`` resolves with
the gold tiers exactly like ``"gold-1"`` does. The corollary is that a
multi-word category containing the separator (``"health-potion"``) can never
be derived from an id and must be passed explicitly.
"""

from backpack_engine.types import Category, ItemID

DEFAULT_SEPARATOR = "-"


def derive_category(item_id: ItemID, separator: str = DEFAULT_SEPARATOR) -> Category:
    """Return the part of ``item_id`` before the first ``separator``.

    Args:
        item_id: Item identifier.
        separator: Non-empty delimiter between category and variant.

    Returns:
        Category: The prefix, or the whole id when no separator is present.

    Raises:
        ValueError: If ``separator`` is empty.
    """
    if not separator:
        raise ValueError("separator must be non-empty")
    return item_id.split(separator, 1)[0]
