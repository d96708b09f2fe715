"""Plain geometric value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y