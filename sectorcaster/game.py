"""The game window, its main loop and the built-in level."""

from __future__ import annotations

import argparse
import math
import sys
from array import array
from typing import List, Optional, Sequence, Set

import pygame

from sectorcaster.geometry import Vec2
from sectorcaster.player import Key, Player
from sectorcaster.renderer import Renderer, Sector, Wall
from sectorcaster.utils import GameState

_PIXEL_TYPECODE = next(code for code in "IL" if array(code).itemsize == 4)

_KEY_BINDINGS = {
    pygame.K_w: Key.FORWARD,
    pygame.K_s: Key.BACKWARD,
    pygame.K_a: Key.STRAFE_LEFT,
    pygame.K_d: Key.STRAFE_RIGHT,
    pygame.K_SPACE: Key.RISE,
    pygame.K_LSHIFT: Key.SINK,
    pygame.K_q: Key.TURN_LEFT,
    pygame.K_e: Key.TURN_RIGHT,
}


def _closed_walls(corners, portal_heights=None) -> List[Wall]:
    heights = portal_heights or (None, None)
    return [
        Wall(Vec2(*start), Vec2(*end), *heights)
        for start, end in zip(corners, corners[1:] + corners[:1])
    ]


def build_level() -> List[Sector]:
    """Return the two sectors of the built-in level."""
    red = Sector(10, 1, 0xD6382D, 0xF54236, 0x9C2921)
    green = Sector(80, 0, 0x29BA48, 0x43F068, 0x209138)
    for wall in _closed_walls([(0, 220), (100, 220), (100, 240), (0, 240)]):
        red.add_wall(wall)
    for wall in _closed_walls([(-30, 120), (40, 120), (40, 190), (-30, 190)],
                              (20.0, 10.0)):
        green.add_wall(wall)
    return [red, green]


class Game:
    """A window, a player and a renderer, run at a fixed frame rate."""

    def __init__(self, width: int = 960, height: int = 480, target_fps: int = 60,
                 sectors: Optional[Sequence[Sector]] = None) -> None:
        if target_fps <= 0:
            raise ValueError("target_fps must be positive")
        self.width = width
        self.height = height
        self.target_fps = float(target_fps)
        self.target_frametime = 1.0 / self.target_fps
        self.delta_time = self.target_frametime
        self.game_state = GameState.PLAYING
        self.debug = False
        self.frame_start = 0
        self.keys: Set[Key] = set()

        pygame.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption("doom clone")

        self.player = Player(40.0, 40.0, height * 10, math.pi / 2)
        self.renderer = Renderer(width, height, present=self._present)
        for sector in (build_level() if sectors is None else sectors):
            self.renderer.queue_sector(sector)

    def _present(self, buffer: Sequence[int]) -> None:
        raw = array(_PIXEL_TYPECODE, buffer)
        if sys.byteorder == "big":
            raw.byteswap()
        data = raw.tobytes()
        rgb = bytearray(len(buffer) * 3)
        rgb[0::3] = data[0::4]
        rgb[1::3] = data[1::4]
        rgb[2::3] = data[2::4]
        frame = pygame.image.frombuffer(bytes(rgb), (self.width, self.height), "RGB")
        self.window.blit(frame, (0, 0))
        pygame.display.flip()

    def run(self) -> int:
        """Run frames until the window is closed; return the exit status."""
        try:
            while self.game_state is not GameState.QUIT:
                self.start_frame()
                self.update()
                self.draw()
                self.end_frame()
        finally:
            pygame.quit()
        return 0

    def poll_input(self) -> None:
        """Handle at most one pending event."""
        event = pygame.event.poll()
        if event.type == pygame.KEYDOWN:
            key = _KEY_BINDINGS.get(event.key)
            if key is not None:
                self.keys.add(key)
        elif event.type == pygame.KEYUP:
            key = _KEY_BINDINGS.get(event.key)
            if key is not None:
                self.keys.discard(key)
        elif event.type == pygame.QUIT:
            self.game_state = GameState.QUIT

    def update(self) -> None:
        """Read input and move the player."""
        self.poll_input()
        self.player.update(self.keys, self.delta_time)

    def draw(self) -> None:
        """Render the current frame to the window."""
        self.renderer.render(self.player)

    def start_frame(self) -> None:
        """Remember when the frame began."""
        self.frame_start = pygame.time.get_ticks()

    def end_frame(self) -> None:
        """Sleep off what is left of the frame budget."""
        elapsed = (pygame.time.get_ticks() - self.frame_start) / 1000.0
        if elapsed < self.target_frametime:
            pygame.time.delay(int((self.target_frametime - elapsed) * 1000.0))
        self.delta_time = self.target_frametime


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(description="Sector-based first-person viewer.")
    parser.add_argument("--width", type=int, default=960)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--fps", type=int, default=60)
    args = parser.parse_args(argv)
    return Game(args.width, args.height, args.fps).run()


if __name__ == "__main__":
    raise SystemExit(main())