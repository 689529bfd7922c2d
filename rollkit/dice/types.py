"""Dice system type definitions.

Immutable dataclasses for dice descriptors, selections, and roll results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SelectionMode(str, Enum):
    """Which dice a selector keeps or drops."""

    KEEP_HIGHEST = "kh"
    KEEP_LOWEST = "kl"
    DROP_HIGHEST = "dh"
    DROP_LOWEST = "dl"


@dataclass(frozen=True)
class Selection:
    """A keep/drop selector like kh1 or dl1.

    Attributes:
        mode: Keep or drop, highest or lowest.
        count: How many dice the selector keeps or drops.
    """

    mode: SelectionMode
    count: int

    @property
    def is_keep(self) -> bool:
        """True for kh/kl selectors."""
        return self.mode in (SelectionMode.KEEP_HIGHEST, SelectionMode.KEEP_LOWEST)

    @property
    def is_drop(self) -> bool:
        """True for dh/dl selectors."""
        return not self.is_keep

    @property
    def highest(self) -> bool:
        """True when the selector ranks dice from the highest value down."""
        return self.mode in (SelectionMode.KEEP_HIGHEST, SelectionMode.DROP_HIGHEST)

    @property
    def notation(self) -> str:
        """Selector as written in dice notation, e.g. 'kh1'."""
        return f"{self.mode.value}{self.count}"


@dataclass(frozen=True)
class DiceDescriptor:
    """A validated dice expression like 2d20kh1+5.

    Only the parser builds descriptors from user input, so every instance
    that reaches the roller already satisfies the count/sides/selection bounds.

    Attributes:
        count: Number of dice to roll.
        sides: Faces per die.
        modifier: Flat modifier added to the kept dice.
        selection: Optional keep/drop selector.
    """

    count: int
    sides: int
    modifier: int = 0
    selection: Selection | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form for JSON output and persistence by callers."""
        data: dict[str, Any] = {
            "count": self.count,
            "sides": self.sides,
            "modifier": self.modifier,
            "selection": None,
        }
        if self.selection is not None:
            data["selection"] = {
                "mode": self.selection.mode.value,
                "count": self.selection.count,
            }
        return data


@dataclass(frozen=True)
class DieOutcome:
    """A single die as rolled."""

    value: int
    kept: bool = True


@dataclass(frozen=True)
class RollResult:
    """Result of executing a dice descriptor.

    Attributes:
        descriptor: The descriptor that was rolled.
        outcomes: Every die in roll order, kept and dropped alike.
        subtotal: Sum of the kept dice.
        modifier: The modifier applied.
        total: subtotal plus modifier.
    """

    descriptor: DiceDescriptor
    outcomes: tuple[DieOutcome, ...]
    subtotal: int
    modifier: int
    total: int

    @property
    def values(self) -> tuple[int, ...]:
        """All die values in roll order."""
        return tuple(o.value for o in self.outcomes)

    @property
    def kept_values(self) -> tuple[int, ...]:
        """Values of kept dice in roll order."""
        return tuple(o.value for o in self.outcomes if o.kept)

    @property
    def dropped_values(self) -> tuple[int, ...]:
        """Values of dropped dice in roll order."""
        return tuple(o.value for o in self.outcomes if not o.kept)

    @property
    def has_dropped(self) -> bool:
        """Check if any die was excluded by a selector."""
        return any(not o.kept for o in self.outcomes)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form for JSON output and persistence by callers."""
        return {
            "descriptor": self.descriptor.to_dict(),
            "outcomes": [{"value": o.value, "kept": o.kept} for o in self.outcomes],
            "subtotal": self.subtotal,
            "modifier": self.modifier,
            "total": self.total,
        }
