from __future__ import annotations

import logging
import sys

from mcp.server.fastmcp import FastMCP

from .config import load_settings
from .dice import roll_dice as _roll_dice
from .dice import roll_range as _roll_range
from .errors import DiceError
from .rng import RandomSource, seeded_source, system_source


logger = logging.getLogger(__name__)

mcp = FastMCP("drex")

_source: RandomSource = system_source


@mcp.tool()
def roll_dice(text: str):
    """Roll a die roll expression such as '3d6+4' or '2d10 - 1d4 + 7'.

    Input: text (string)
    Output: structured JSON with every term's values, the total and a display line

    Raises a hard error (exception) on invalid input.
    """

    try:
        return _roll_dice(text, source=_source).to_dict()
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


@mcp.tool()
def roll_range(low: int, high: int):
    """Pick a uniformly distributed integer between low and high, inclusive."""

    try:
        value = _roll_range(low, high, source=_source)
    except DiceError as e:
        raise ValueError(str(e)) from None
    return {"low": low, "high": high, "value": value}


def run() -> None:
    global _source

    settings = load_settings()
    # stdout carries the stdio transport.
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    if settings.seed is not None:
        logger.info("using seeded random source (seed=%d)", settings.seed)
        _source = seeded_source(settings.seed)

    mcp.run()


if __name__ == "__main__":
    run()
