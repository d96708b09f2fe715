"""Software sector renderer: projects walls into a flat pixel buffer."""

from __future__ import annotations

import enum
import itertools
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from sectorcaster.geometry import Vec2
from sectorcaster.player import Player
from sectorcaster.utils import safe_divide

PLANE_WIDTH = 1024
FIELD_OF_VIEW = 250.0
_COLOR_MASK = 0xFFFFFFFF

_sector_ids = itertools.count(1)


class QuadType(enum.Enum):
    """What a projected quad stands for."""

    FLOOR = enum.auto()
    WALL = enum.auto()
    CEILING = enum.auto()


def _zero_column() -> List[int]:
    return [0] * PLANE_WIDTH


@dataclass
class Plane:
    """Per-column top and bottom screen rows of a floor or ceiling span."""

    t: List[int] = field(default_factory=_zero_column)
    b: List[int] = field(default_factory=_zero_column)

    def _zero(self) -> None:
        self.t[:] = _zero_column()
        self.b[:] = _zero_column()


def _trunc_half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return int(value / 2)


@dataclass
class Quad:
    """A screen-space trapezoid between columns ``ax`` and ``bx``."""

    ax: int
    bx: int
    at: int
    ab: int
    bt: int
    bb: int
    color: int
    type: QuadType
    plane: Optional[Plane] = None

    def __post_init__(self) -> None:
        self.ax = int(self.ax)
        self.bx = int(self.bx)
        self.at = int(self.at)
        self.ab = int(self.ab)
        self.bt = int(self.bt)
        self.bb = int(self.bb)

    def swap_points(self) -> None:
        """Exchange the left and right edges."""
        self.ax, self.bx = self.bx, self.ax
        self.at, self.bt = self.bt, self.at
        self.ab, self.bb = self.bb, self.ab

    def interpolation(self) -> Optional[Tuple[float, float]]:
        """Return per-column change of height and centre, or None if zero-width."""
        width = abs(self.ax - self.bx)
        if not width:
            return None
        a_height = self.ab - self.at
        b_height = self.bb - self.bt
        delta_height = (b_height - a_height) / width
        y_center_a = self.ab - _trunc_half(a_height)
        y_center_b = self.bb - _trunc_half(b_height)
        delta_elevation = (y_center_b - y_center_a) / width
        return delta_height, delta_elevation


@dataclass
class Wall:
    """A wall segment; with both portal heights given it is a portal."""

    a: Vec2
    b: Vec2
    portal_top_height: Optional[float] = None
    portal_bot_height: Optional[float] = None

    def __post_init__(self) -> None:
        if (self.portal_top_height is None) != (self.portal_bot_height is None):
            raise ValueError("a portal needs both a top and a bottom height")

    @property
    def is_portal(self) -> bool:
        return self.portal_top_height is not None


@dataclass
class Sector:
    """A closed room: walls plus its height, elevation and colours."""

    height: int
    elevation: int
    color: int
    ceil_color: int
    floor_color: int
    walls: List[Wall] = field(default_factory=list)
    id: int = field(init=False, default_factory=lambda: next(_sector_ids))
    portals_floor: Plane = field(init=False, default_factory=Plane)
    portals_ceil: Plane = field(init=False, default_factory=Plane)
    floor: Plane = field(init=False, default_factory=Plane)
    ceil: Plane = field(init=False, default_factory=Plane)

    def add_wall(self, wall: Wall) -> None:
        """Append a wall to the sector."""
        self.walls.append(wall)

    def reset_planes(self) -> None:
        """Zero every floor and ceiling span."""
        for plane in (self.ceil, self.floor, self.portals_ceil, self.portals_floor):
            plane._zero()


Presenter = Callable[[Sequence[int]], None]


class Renderer:
    """Draws queued sectors into ``screen_buffer``, one int colour per pixel."""

    def __init__(self, width: int, height: int, present: Optional[Presenter] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("renderer size must be positive")
        if width > PLANE_WIDTH:
            raise ValueError(f"renderer width may not exceed {PLANE_WIDTH}")
        self.width = width
        self.height = height
        self.present = present
        self.screen_buffer: List[int] = [0] * (width * height)
        self.sector_queue: List[Sector] = []

    def render(self, player: Player) -> None:
        """Draw all sectors and hand the buffer to the presenter, if any."""
        self.draw_sectors(player)
        if self.present is not None:
            self.present(self.screen_buffer)

    def queue_sector(self, sector: Sector) -> None:
        """Add a sector to the list drawn each frame."""
        self.sector_queue.append(sector)

    def draw_point(self, x: int, y: int, color: int) -> None:
        """Set one pixel, silently ignoring points outside the buffer."""
        if x < 0 or x > self.width or y < 0 or y >= self.height:
            return
        index = self.width * y + x
        if index >= self.width * self.height:
            return
        self.screen_buffer[index] = color & _COLOR_MASK

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line between two points, endpoints included."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = int((dx if dx > dy else -dy) / 2)
        while True:
            self.draw_point(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = err
            if e2 > -dx:
                err -= dy
                x0 += sx
            if e2 < dy:
                err += dx
                y0 += sy

    def clear(self) -> None:
        """Black out the whole buffer."""
        self.screen_buffer[:] = [0] * (self.width * self.height)

    def clip_behind_player(
        self, ax: float, ay: float, bx: float, by: float
    ) -> Tuple[float, float]:
        """Move point A along the segment towards B onto the near clipping line."""
        px1, py1 = 1.0, 1.0
        px2, py2 = 200.0, 1.0
        a = (px1 - px2) * (ay - py2) - (py1 - py2) * (ax - px2)
        b = (py1 - py2) * (ax - bx) - (px1 - px2) * (ay - by)
        t = safe_divide(a, b)
        return ax - t * (bx - ax), ay - t * (by - ay)

    def rasterize(self, quad: Quad) -> None:
        """Fill a wall quad, or record a floor or ceiling quad into its plane."""
        if quad.type is QuadType.WALL and quad.ax > quad.bx:
            return
        is_back = False
        if quad.type is not QuadType.WALL and quad.ax > quad.bx:
            is_back = True
            quad.swap_points()

        interp = quad.interpolation()
        # A step of exactly (-1, -1) doubles as the "no width" marker.
        if interp is None or interp == (-1.0, -1.0):
            return
        delta_height, delta_elevation = interp

        for i, x in enumerate(range(quad.ax, quad.bx), start=1):
            if x < 0 or x > self.width - 1:
                continue
            dh = delta_height * i
            y1 = int(quad.at - dh / 2 + delta_elevation)
            y2 = int(quad.ab + dh / 2 + delta_elevation)
            y1 = max(min(y1, self.height), 0)
            y2 = max(min(y2, self.height), 0)

            if quad.type is QuadType.WALL or quad.plane is None:
                if quad.type is QuadType.WALL:
                    self.draw_line(x, y1, x, y2, quad.color)
                continue
            value = y1 if quad.type is QuadType.CEILING else y2
            column = quad.plane.b if is_back else quad.plane.t
            column[x] = value

    def draw_sectors(self, player: Player) -> None:
        """Project and draw every queued sector from the player's view."""
        half_w = float(self.width // 2)
        half_h = float(self.height // 2)
        fov = FIELD_OF_VIEW
        self.clear()

        sin_a = math.sin(player.angle)
        cos_a = math.cos(player.angle)

        for sector in self.sector_queue:
            sector.reset_planes()
            for wall in sector.walls:
                dx1 = wall.a.x - player.position.x
                dy1 = wall.a.y - player.position.y
                dx2 = wall.b.x - player.position.x
                dy2 = wall.b.y - player.position.y

                wx1 = dx1 * sin_a - dy1 * cos_a
                wz1 = dx1 * cos_a + dy1 * sin_a
                wx2 = dx2 * sin_a - dy2 * cos_a
                wz2 = dx2 * cos_a + dy2 * sin_a

                if wz1 < 0 and wz2 < 0:
                    continue
                if wz1 < 0:
                    wx1, wz1 = self.clip_behind_player(wx1, wz1, wx2, wz2)
                elif wz2 < 0:
                    wx2, wz2 = self.clip_behind_player(wx2, wz2, wx1, wz1)

                if wz1 <= 1:
                    wz1 += 1
                if wz2 <= 1:
                    wz2 += 1
                if wz1 == 0 or wz2 == 0:
                    continue

                wh1 = sector.height / wz1 * fov
                wh2 = sector.height / wz2 * fov
                sx1 = wx1 / wz1 * fov + half_w
                sx2 = wx2 / wz2 * fov + half_w
                sy1 = (self.height + player.z) / wz1 - sector.elevation / wz1 * fov + half_h
                sy2 = (self.height + player.z) / wz2 - sector.elevation / wz2 * fov + half_h

                if wall.is_portal:
                    pth1 = wall.portal_top_height / wz1 * fov
                    pth2 = wall.portal_top_height / wz2 * fov
                    pbh1 = wall.portal_bot_height / wz1 * fov
                    pbh2 = wall.portal_bot_height / wz2 * fov
                    self._draw_portal(sector, sx1, sx2, sy1, sy2, wh1, wh2,
                                      pth1, pth2, pbh1, pbh2)
                else:
                    top = Quad(sx1, sx2, sy1 - wh1, sy1, sy2 - wh2, sy2,
                               sector.ceil_color, QuadType.CEILING, sector.ceil)
                    self.rasterize(top)
                    top.plane = sector.floor
                    top.type = QuadType.FLOOR
                    top.color = sector.color
                    self.rasterize(top)

            self._fill_planes(sector, player)

    def _draw_portal(self, sector: Sector, sx1: float, sx2: float, sy1: float,
                     sy2: float, wh1: float, wh2: float, pth1: float, pth2: float,
                     pbh1: float, pbh2: float) -> None:
        top = Quad(sx1, sx2, sy1 - wh1, sy1 - wh1 + pth1, sy2 - wh2,
                   sy2 - wh2 + pth2, sector.ceil_color, QuadType.CEILING,
                   sector.portals_ceil)
        bottom = Quad(sx1, sx2, sy1 - pbh1, sy1, sy2 - pbh2, sy2,
                      sector.floor_color, QuadType.FLOOR, sector.portals_floor)
        passes = (
            (top, sector.portals_floor, sector.floor_color),
            (bottom, sector.portals_ceil, sector.ceil_color),
        )
        for quad, second_plane, second_color in passes:
            self.rasterize(quad)
            quad.plane = second_plane
            quad.type = QuadType.FLOOR
            quad.color = second_color
            self.rasterize(quad)
            quad.plane = None
            quad.type = QuadType.WALL
            quad.color = sector.color
            self.rasterize(quad)

    def _fill_planes(self, sector: Sector, player: Player) -> None:
        columns = zip(
            sector.ceil.t, sector.ceil.b,
            sector.portals_ceil.t, sector.portals_ceil.b,
            sector.portals_floor.t, sector.portals_floor.b,
        )
        for x, (cy1, cy2, pcy1, pcy2, pfy1, pfy2) in enumerate(columns):
            if x == 0:
                continue
            if (player.z > sector.elevation + sector.height
                    and cy1 > cy2 and cy1 and cy2):
                self.draw_line(x, cy1, x, cy2, sector.ceil_color)
            if player.z < sector.elevation and pfy1 < pfy2 and (pfy1 or pfy2):
                self.draw_line(x, pfy1, x, pfy2, sector.color)
            if pcy1 > pcy2 and pcy1 and pcy2:
                self.draw_line(x, pcy1, x, pcy2, sector.ceil_color)
            if pfy1 < pfy2 and (pfy1 or pfy2):
                self.draw_line(x, pfy1, x, pfy2, sector.color)