from __future__ import annotations


class DiceError(ValueError):
    """User-facing evaluation errors (fail-fast, no partial roll)."""


class MalformedTerm(DiceError):
    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        super().__init__(
            f"[MALFORMED_TERM] Could not read term '{token}': {reason}. Example: '3d6', '-1d4' or '+2'."
        )


class NoTermsFound(DiceError):
    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(
            f"[NO_TERMS_FOUND] No dice or modifiers found in '{expression}'. Example: '3d6+4' or '2d10-1d4+7'."
        )


class InvalidRange(DiceError):
    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        super().__init__(
            f"[INVALID_RANGE] Lower bound {low} is greater than upper bound {high}. Example: low=1, high=20."
        )
