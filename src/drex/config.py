"""Server settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    seed: int | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    log_level = env.get("DREX_LOG_LEVEL", "").strip().upper() or "WARNING"

    raw_seed = env.get("DREX_SEED", "").strip()
    seed = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(f"DREX_SEED must be an integer, got {raw_seed!r}") from None

    return Settings(log_level=log_level, seed=seed)
