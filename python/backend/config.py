"""Game-wide constants and environment-driven settings."""

from __future__ import annotations

import os
from typing import Final

GRID_SIZES: Final[tuple[int, ...]] = (3, 4, 5)
MIN_SIZE: Final[int] = 3
MAX_SIZE: Final[int] = max(GRID_SIZES)
DEFAULT_SIZE: Final[int] = 3

# The shuffle performs ``size * SHUFFLE_STEPS_PER_SIZE`` slides (3 -> 60, 5 -> 100).
SHUFFLE_STEPS_PER_SIZE: Final[int] = 20

CLOCK_TICK_MS: Final[int] = 1000

# Deepest optimal solution of any 3×3 position.
SOLVER_MAX_DEPTH: Final[int] = 31


def env_str(name: str, *, default: str) -> str:
    """Return a stripped environment variable, or *default* when unset/blank."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


LOG_LEVEL: Final[str] = env_str("SLIDE_LOG_LEVEL", default="WARNING").upper()

__all__ = [
    "CLOCK_TICK_MS",
    "DEFAULT_SIZE",
    "GRID_SIZES",
    "LOG_LEVEL",
    "MAX_SIZE",
    "MIN_SIZE",
    "SHUFFLE_STEPS_PER_SIZE",
    "SOLVER_MAX_DEPTH",
    "env_str",
]
