"""Backpack configuration.

:class:`BackpackConfig` gathers every tunable of a backpack instance.
Hosts usually hand over an options object using their own camelCase names
(``maxSlots``, ``taskPrefix``); :meth:`BackpackConfig.from_mapping` accepts
those as well as the snake_case field names and ignores anything else.

``build_engine`` and ``build_resolver`` turn a config into the runtime
objects.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from backpack_engine.engine import InventoryEngine
from backpack_engine.notifier import DEFAULT_TASK_PREFIX, Notifier, TaskNames
from backpack_engine.renderer.glyph import GLYPH_TABLE_REGISTRY, TierResolver
from backpack_engine.state import DEFAULT_MAX_SLOTS
from backpack_engine.utils.category import DEFAULT_SEPARATOR

_ALIASES = {
    "maxSlots": "max_slots",
    "taskPrefix": "task_prefix",
    "categorySeparator": "category_separator",
    "glyphTable": "glyph_table",
}


@dataclass(frozen=True)
class BackpackConfig:
    """Backpack settings.

    Attributes:
        max_slots: Maximum number of distinct stacks.
        task_prefix: Prefix of every outbound task name.
        category_separator: Delimiter between category and variant in item ids.
        glyph_table: Name of a table in ``GLYPH_TABLE_REGISTRY``.
        debug: Enable debug logging in the command-line host.
    """

    max_slots: int = DEFAULT_MAX_SLOTS
    task_prefix: str = DEFAULT_TASK_PREFIX
    category_separator: str = DEFAULT_SEPARATOR
    glyph_table: str = "tibia"
    debug: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_slots, bool) or not isinstance(self.max_slots, int):
            raise ValueError(f"max_slots must be an integer, got {self.max_slots!r}")
        if self.max_slots < 1:
            raise ValueError(f"max_slots must be >= 1, got {self.max_slots}")
        if not self.task_prefix:
            raise ValueError("task_prefix must be non-empty")
        if not self.category_separator:
            raise ValueError("category_separator must be non-empty")
        if self.glyph_table not in GLYPH_TABLE_REGISTRY:
            raise ValueError(f"Unknown glyph table {self.glyph_table!r}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "BackpackConfig":
        """Build a config from host options; ``None`` values keep defaults."""
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name in known and value is not None:
                values[name] = value
        return cls(**values)


def build_resolver(config: BackpackConfig) -> TierResolver:
    return TierResolver(
        table=GLYPH_TABLE_REGISTRY[config.glyph_table],
        separator=config.category_separator,
    )


def build_engine(
    config: BackpackConfig, notifier: Optional[Notifier] = None
) -> InventoryEngine:
    return InventoryEngine(
        max_slots=config.max_slots,
        notifier=notifier,
        task_names=TaskNames(config.task_prefix),
        separator=config.category_separator,
    )
