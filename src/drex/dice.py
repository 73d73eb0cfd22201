from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from .errors import InvalidRange
from .models import EvaluatedTerm, ModifierTerm, Term
from .parser import normalize_expression, parse_terms
from .rng import RandomSource, system_source


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Roll:
    """Outcome of one evaluation of a die roll expression."""

    expression: str
    terms: tuple[EvaluatedTerm, ...]
    total: int
    source: RandomSource = field(default=system_source, repr=False, compare=False)

    def render(self) -> str:
        return "".join(t.render() for t in self.terms) + f" (Total: {self.total})"

    def __str__(self) -> str:
        return self.render()

    def reroll_sequence(self) -> Iterator[Roll]:
        """Yield fresh rolls of the same expression, forever.

        Every step draws new values from ``self.source``; nothing is cached.
        Bound it yourself, e.g. ``itertools.islice(roll.reroll_sequence(), 6)``.
        """

        while True:
            yield roll_dice(self.expression, source=self.source)

    def __iter__(self) -> Iterator[Roll]:
        return self.reroll_sequence()

    def to_dict(self) -> dict[str, Any]:
        terms: list[dict[str, Any]] = []
        for t in self.terms:
            if isinstance(t.term, ModifierTerm):
                entry: dict[str, Any] = {"type": "modifier", "value": t.term.value}
            else:
                entry = {"type": "die", "multiplier": t.term.multiplier, "sides": t.term.sides}
            entry.update(term=str(t.term), values=list(t.values), subtotal=calculate(t))
            terms.append(entry)

        return {
            "expression": self.expression,
            "terms": terms,
            "total": self.total,
            "display": self.render(),
        }


def evaluate_term(term: Term, source: RandomSource | None = None) -> EvaluatedTerm:
    if isinstance(term, ModifierTerm):
        return EvaluatedTerm(term=term, values=(term.value,))

    draw = system_source if source is None else source
    values = tuple(draw(1, term.sides) for _ in range(abs(term.multiplier)))
    return EvaluatedTerm(term=term, values=values)


def calculate(evaluated: EvaluatedTerm) -> int:
    """Signed contribution of one evaluated term to the total."""

    return evaluated.subtotal


def roll_dice(text: str, source: RandomSource | None = None) -> Roll:
    """Evaluate a die roll expression such as ``"2d6 + 6 + 4d10"``.

    Raises :class:`~drex.errors.NoTermsFound` when nothing in ``text`` looks
    like a term and :class:`~drex.errors.MalformedTerm` when a term is out of
    range. No roll is returned unless every term parses.
    """

    draw = system_source if source is None else source
    expression = normalize_expression(text)
    terms = parse_terms(expression)

    evaluated = tuple(evaluate_term(t, draw) for t in terms)
    total = sum(calculate(e) for e in evaluated)

    roll = Roll(expression=expression, terms=evaluated, total=total, source=draw)
    logger.debug("rolled %s", roll)
    return roll


def roll_range(low: int, high: int, source: RandomSource | None = None) -> int:
    if low > high:
        raise InvalidRange(low, high)
    draw = system_source if source is None else source
    return draw(low, high)


evaluate_expression = roll_dice
evaluate_range = roll_range


__all__ = [
    "Roll",
    "calculate",
    "evaluate_expression",
    "evaluate_range",
    "evaluate_term",
    "roll_dice",
    "roll_range",
]
