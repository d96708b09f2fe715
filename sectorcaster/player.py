"""The player: position, height and view angle, driven by held keys."""

from __future__ import annotations

import enum
import math
from typing import Container

from sectorcaster.geometry import Vec2


class Key(enum.Enum):
    """Logical keys the player responds to."""

    FORWARD = "w"
    BACKWARD = "s"
    STRAFE_LEFT = "a"
    STRAFE_RIGHT = "d"
    RISE = "space"
    SINK = "lshift"
    TURN_LEFT = "q"
    TURN_RIGHT = "e"


class Player:
    """A camera that walks, strafes, rises and turns."""

    SPEED = 150.0
    ELEVATION_SPEED = 50000.0
    ROTATION_SPEED = 4.0

    def __init__(self, x: float, y: float, z: float, angle: float) -> None:
        self.position = Vec2(x, y)
        self.z = z
        self.angle = angle

    def __repr__(self) -> str:
        return (
            f"Player(x={self.position.x!r}, y={self.position.y!r}, "
            f"z={self.z!r}, angle={self.angle!r})"
        )

    def _move(self, heading: float, distance: float) -> None:
        self.position.x += distance * math.cos(heading)
        self.position.y += distance * math.sin(heading)

    def update(self, keys: Container[Key], delta_time: float) -> None:
        """Advance the player by ``delta_time`` seconds given the held keys."""
        step = self.SPEED * delta_time
        side = self.angle + math.pi / 2
        if Key.FORWARD in keys:
            self._move(self.angle, step)
        if Key.BACKWARD in keys:
            self._move(self.angle, -step)
        if Key.STRAFE_LEFT in keys:
            self._move(side, step)
        if Key.STRAFE_RIGHT in keys:
            self._move(side, -step)
        if Key.RISE in keys:
            self.z += self.ELEVATION_SPEED * delta_time
        if Key.SINK in keys:
            self.z -= self.ELEVATION_SPEED * delta_time
        if Key.TURN_LEFT in keys:
            self.angle += self.ROTATION_SPEED * delta_time
        if Key.TURN_RIGHT in keys:
            self.angle -= self.ROTATION_SPEED * delta_time