from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


MULTIPLIER_RANGE = range(-128, 128)
SIDES_RANGE = range(1, 256)
MODIFIER_RANGE = range(-128, 128)


@dataclass(frozen=True)
class DieRollTerm:
    """Roll ``abs(multiplier)`` dice; a negative multiplier negates the sum."""

    multiplier: int
    sides: int

    def __str__(self) -> str:
        return f"{self.multiplier}d{self.sides}"


@dataclass(frozen=True)
class ModifierTerm:
    value: int

    def __str__(self) -> str:
        return f"{self.value:+d}"


Term: TypeAlias = DieRollTerm | ModifierTerm


@dataclass(frozen=True)
class EvaluatedTerm:
    term: Term
    values: tuple[int, ...]

    @property
    def subtotal(self) -> int:
        if isinstance(self.term, ModifierTerm):
            return self.term.value
        total = sum(self.values)
        # Negate once after summing, never per die.
        return -total if self.term.multiplier < 0 else total

    def render(self) -> str:
        if isinstance(self.term, ModifierTerm):
            return str(self.term)
        return f"{self.term}[{', '.join(str(v) for v in self.values)}]"
