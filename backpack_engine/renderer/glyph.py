"""Quantity-tier glyph tables and resolution.

A tier table maps a category to an ordered list of :class:`Tier`. Order is
significant: ranges may overlap and the first declared match wins, so tables
are plain lists rather than mappings keyed by range.

Resolution order for ``TierResolver.resolve(category, quantity)``:

1. Unknown category: :data:`DEFAULT_GLYPH`.
2. An :class:`Exact` tier equal to ``quantity``, wherever it is declared.
3. The first :class:`Bounded` or :class:`OpenEnded` tier containing
   ``quantity``, in declaration order.
4. The ``Exact(1)`` tier if the category has one, else :data:`DEFAULT_GLYPH`.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from backpack_engine.components import Exact, Stack, Tier, parse_range
from backpack_engine.types import Category, Glyph, ItemID
from backpack_engine.utils.category import DEFAULT_SEPARATOR, derive_category

DEFAULT_GLYPH: Glyph = "📦"

TierTable = Mapping[Category, Sequence[Tier]]


def tier_table_from_mapping(
    sprites: Mapping[Category, Sequence[Tuple[str, Glyph]]],
) -> PMap[Category, PVector[Tier]]:
    """Build a tier table from ``(range_key, glyph)`` pairs per category.

    Range keys use :func:`~backpack_engine.components.parse_range` notation
    (``"1"``, ``"2-4"``, ``"100+"``). Pair order becomes tier order.
    """
    return pmap(
        {
            category: pvector(Tier(parse_range(key), glyph) for key, glyph in pairs)
            for category, pairs in sprites.items()
        }
    )


def _coin_tiers(*glyphs: Glyph) -> List[Tuple[str, Glyph]]:
    """Seven-step progression shared by currencies and gems."""
    keys = ["1", "2-4", "5-9", "10-24", "25-49", "50-99", "100+"]
    return list(zip(keys, glyphs, strict=True))


def _food_tiers(*glyphs: Glyph) -> List[Tuple[str, Glyph]]:
    """Three-step progression for consumables."""
    return list(zip(["1", "2-5", "6+"], glyphs, strict=True))


TIBIA_TIER_TABLE = tier_table_from_mapping(
    {
        "gold": _coin_tiers("🪙", "🪙🪙", "💰", "💰💰", "💰💰💰", "🏆", "👑"),
        "silver": _coin_tiers("⚪", "⚪⚪", "⚫", "⚫⚫", "⚫⚫⚫", "🔘", "💿"),
        "diamonds": _coin_tiers("💎", "💎💎", "💎💎💎", "💠", "💠💠", "💠💠💠", "🔷"),
        "ore": _coin_tiers("⛏️", "🪨", "🪨🪨", "🗿", "🗿🗿", "⛰️", "🏔️"),
        "sapphire": _coin_tiers("💙", "💙💙", "🔵", "🔵🔵", "🔵🔵🔵", "🔷", "💠"),
        "health-potion": _food_tiers("🧪", "🧪🧪", "🧪🧪🧪"),
        "meat": _food_tiers("🥩", "🥩🥩", "🍖"),
        "berries": _food_tiers("🫐", "🫐🫐", "🍇"),
        "cheese": _food_tiers("🧀", "🧀🧀", "🧈"),
    }
)

DEFAULT_TIER_TABLE: TierTable = TIBIA_TIER_TABLE

GLYPH_TABLE_REGISTRY: Dict[str, TierTable] = {
    "tibia": TIBIA_TIER_TABLE,
}


class TierResolver:
    """Resolve display glyphs from a tier table.

    Stateless apart from its configuration; safe to share.
    """

    def __init__(
        self,
        table: TierTable = DEFAULT_TIER_TABLE,
        default_glyph: Glyph = DEFAULT_GLYPH,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self.table = table
        self.default_glyph = default_glyph
        self.separator = separator

    def resolve(self, category: Category, quantity: int) -> Glyph:
        """Glyph for ``quantity`` units of ``category``."""
        tiers = self.table.get(category)
        if tiers is None:
            return self.default_glyph

        for tier in tiers:
            if isinstance(tier.spec, Exact) and tier.spec.matches(quantity):
                return tier.glyph

        for tier in tiers:
            if not isinstance(tier.spec, Exact) and tier.spec.matches(quantity):
                return tier.glyph

        fallback = self._exact_one(tiers)
        return fallback if fallback is not None else self.default_glyph

    def resolve_item(self, item_id: ItemID, quantity: int) -> Glyph:
        """Glyph for an item id, deriving its category from the id."""
        return self.resolve(derive_category(item_id, self.separator), quantity)

    def resolve_stack(self, stack: Stack) -> Glyph:
        """Glyph for a stored stack, using its recorded category."""
        return self.resolve(stack.category, stack.quantity)

    @staticmethod
    def _exact_one(tiers: Sequence[Tier]) -> Optional[Glyph]:
        for tier in tiers:
            if tier.spec == Exact(1):
                return tier.glyph
        return None
