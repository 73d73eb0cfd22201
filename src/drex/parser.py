from __future__ import annotations

import logging
import re

from .errors import MalformedTerm, NoTermsFound
from .models import MODIFIER_RANGE, MULTIPLIER_RANGE, SIDES_RANGE, DieRollTerm, ModifierTerm, Term


logger = logging.getLogger(__name__)

# Die roll alternative first so "3d6" is not split into "3" and "6".
_TERM_RE = re.compile(r"[+-]?[0-9]+[dD][0-9]+|[+-]?[0-9]+")

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_SEPARATOR_RE = re.compile(r"[dD]")


def normalize_expression(text: str) -> str:
    return "".join(text.split())


def _parse_int(token: str, raw: str, pattern: re.Pattern[str], allowed: range, what: str) -> int:
    if not pattern.fullmatch(raw):
        raise MalformedTerm(token, f"{what} '{raw}' is not an integer")
    digits = raw.lstrip("+-").lstrip("0") or "0"
    # Digit runs wider than any allowed value never reach int().
    if len(digits) > len(str(max(-allowed.start, allowed.stop - 1))):
        raise MalformedTerm(token, f"{what} is outside {allowed.start}..{allowed.stop - 1}")
    value = -int(digits) if raw.startswith("-") else int(digits)
    if value not in allowed:
        raise MalformedTerm(
            token, f"{what} {value} is outside {allowed.start}..{allowed.stop - 1}"
        )
    return value


def parse_term(token: str) -> Term:
    """Parse one token such as ``3d6``, ``-1D4``, ``+7`` or ``-2``."""

    if _SEPARATOR_RE.search(token):
        parts = _SEPARATOR_RE.split(token)
        if len(parts) != 2:
            raise MalformedTerm(token, "expected exactly one 'd' separator")
        multiplier = _parse_int(token, parts[0], _SIGNED_RE, MULTIPLIER_RANGE, "multiplier")
        sides = _parse_int(token, parts[1], _UNSIGNED_RE, SIDES_RANGE, "sides")
        return DieRollTerm(multiplier=multiplier, sides=sides)

    return ModifierTerm(value=_parse_int(token, token, _SIGNED_RE, MODIFIER_RANGE, "modifier"))


def tokenize(expression: str) -> list[str]:
    """Extract raw term tokens in order of appearance.

    Text matching neither a die roll nor a modifier is skipped, so
    ``"3d6andapotato"`` yields ``["3d6"]``. An empty list is left for the
    caller to reject.
    """

    tokens: list[str] = []
    for m in _TERM_RE.finditer(expression):
        logger.debug("matched token %r at %d..%d", m.group(0), m.start(), m.end())
        tokens.append(m.group(0))
    return tokens


def parse_terms(expression: str) -> list[Term]:
    tokens = tokenize(expression)
    if not tokens:
        raise NoTermsFound(expression)
    return [parse_term(tok) for tok in tokens]
