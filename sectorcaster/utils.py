"""Small helpers shared by the game: state flags, random ranges, guarded division."""

from __future__ import annotations

import enum
import random

_DIVISION_EPSILON = 0.0001


class GameState(enum.Enum):
    """The state the main loop is in."""

    PLAYING = enum.auto()
    PAUSED = enum.auto()
    MAP = enum.auto()
    MENU = enum.auto()
    QUIT = enum.auto()


def rand_range(min_value: int, max_value: int) -> int:
    """Return a random integer in ``[0, max_value - min_value - 1)``.

    Raises ValueError when that range is empty.
    """
    span = max_value - min_value - 1
    if span <= 0:
        raise ValueError(
            f"empty random range for min={min_value!r}, max={max_value!r}"
        )
    return random.randrange(span)


def safe_divide(
    numerator: float, denominator: float, fallback: float = 1.0
) -> float:
    """Divide, returning ``fallback`` when the denominator is too close to zero."""
    if abs(denominator) < _DIVISION_EPSILON:
        return fallback
    return numerator / denominator