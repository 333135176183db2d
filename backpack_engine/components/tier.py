"""Quantity tier components.

A tier pairs a quantity range with the glyph shown while a stack's quantity
falls in that range. Three range shapes exist:

* :class:`Exact` matches a single quantity and takes priority over ranges.
* :class:`Bounded` matches ``low <= quantity <= high``.
* :class:`OpenEnded` matches ``quantity >= low``.

Tier lists are ordered; the resolver relies on declaration order to break
ties between overlapping ranges.
"""

from dataclasses import dataclass
from typing import Union

from backpack_engine.types import Glyph


@dataclass(frozen=True)
class Exact:
    """Single quantity."""

    value: int

    def matches(self, quantity: int) -> bool:
        return quantity == self.value


@dataclass(frozen=True)
class Bounded:
    """Inclusive range ``[low, high]``."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Bounded range low > high: {self.low} > {self.high}")

    def matches(self, quantity: int) -> bool:
        return self.low <= quantity <= self.high


@dataclass(frozen=True)
class OpenEnded:
    """Lower-bounded range ``[low, inf)``."""

    low: int

    def matches(self, quantity: int) -> bool:
        return quantity >= self.low


RangeSpec = Union[Exact, Bounded, OpenEnded]


@dataclass(frozen=True)
class Tier:
    """Range and the glyph displayed for it.

    Attributes:
        spec: Quantity range this tier covers.
        glyph: Display string (usually one or more emoji).
    """

    spec: RangeSpec
    glyph: Glyph


def parse_range(key: str) -> RangeSpec:
    """Parse a compact range key.

    Accepts ``"5"`` (exact), ``"2-4"`` (bounded) and ``"100+"`` (open-ended),
    the notation sprite sheets are commonly authored in.

    Raises:
        ValueError: If ``key`` is not one of the three shapes.
    """
    text = key.strip()
    try:
        if text.endswith("+"):
            return OpenEnded(int(text[:-1]))
        if "-" in text:
            low, high = text.split("-", 1)
            return Bounded(int(low), int(high))
        return Exact(int(text))
    except ValueError as exc:
        raise ValueError(f"Invalid tier range {key!r}") from exc
