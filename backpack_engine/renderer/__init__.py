"""Rendering subpackage.

Turns stack quantities into display glyphs. Nothing here draws; a display
layer asks :class:`~backpack_engine.renderer.glyph.TierResolver` which glyph
to show for a category and quantity and renders it however it likes.

See :mod:`backpack_engine.renderer.glyph` for the tier tables, the table
registry and the resolution algorithm.
"""

from .glyph import (
    DEFAULT_GLYPH,
    DEFAULT_TIER_TABLE,
    GLYPH_TABLE_REGISTRY,
    TIBIA_TIER_TABLE,
    TierResolver,
    TierTable,
    tier_table_from_mapping,
)

__all__ = [
    "DEFAULT_GLYPH",
    "DEFAULT_TIER_TABLE",
    "GLYPH_TABLE_REGISTRY",
    "TIBIA_TIER_TABLE",
    "TierResolver",
    "TierTable",
    "tier_table_from_mapping",
]
