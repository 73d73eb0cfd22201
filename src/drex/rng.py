"""Uniform integer sources used for every die draw.

A source is any callable ``(low, high) -> int`` returning a uniformly
distributed integer in ``[low, high]`` inclusive. Evaluation never touches a
module-global generator; callers pass a source or get :func:`system_source`.
"""

from __future__ import annotations

import random
import secrets
from typing import Callable, TypeAlias


RandomSource: TypeAlias = Callable[[int, int], int]


_SYSTEM_RANDOM = secrets.SystemRandom()


def system_source(low: int, high: int) -> int:
    return _SYSTEM_RANDOM.randint(low, high)


def seeded_source(seed: int) -> RandomSource:
    """Reproducible source for replays; not safe to share across threads."""

    rng = random.Random(seed)
    return rng.randint
