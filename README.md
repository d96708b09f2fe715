# sectorcaster

A small software renderer for sector-based levels. It draws each level column
by column into a flat pixel buffer and shows the result in a pygame window. A
level is a list of sectors. Each sector is a polygon of walls with a height, an
elevation, and wall, ceiling and floor colours. A wall is either solid or a
portal with a top and a bottom opening height.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
sectorcaster
```

This opens a 960×480 window titled "doom clone" that runs at 60 frames per
second and shows the built-in demo level. Close the window to quit.

Options:

| Option     | Default | Meaning                       |
|------------|---------|-------------------------------|
| `--width`  | 960     | window width in pixels (≤ 1024) |
| `--height` | 480     | window height in pixels       |
| `--fps`    | 60      | target frames per second      |

### Controls

| Key         | Action                  |
|-------------|-------------------------|
| W / S       | move forward / backward |
| A / D       | strafe left / right     |
| Q / E       | turn left / right       |
| Space       | raise the view          |
| Left Shift  | lower the view          |

## Using it as a library

The modules can also be used on their own:

- `sectorcaster.geometry.Vec2`: a mutable 2D point that unpacks as `x, y`.
- `sectorcaster.player.Player` and `sectorcaster.player.Key`: a camera with a
  position, a height `z` and a heading `angle`. `Player.update(keys, delta_time)`
  moves it according to the `Key` members found in `keys`.
- `sectorcaster.renderer.Wall`, `Sector`, `Quad`, `Plane`, `QuadType`: level
  geometry and the screen-space shapes it is split into. A `Wall` becomes a
  portal when both `portal_top_height` and `portal_bot_height` are given;
  giving only one raises `ValueError`.
- `sectorcaster.renderer.Renderer(width, height, present=None)`: owns
  `screen_buffer`, a list of integer colours, one per pixel. Sectors are added
  with `queue_sector(sector)` and drawn with `draw_sectors(player)`.
  `render(player)` draws them and then passes the buffer to the `present`
  callable, if one was given. Widths above 1024 and non-positive sizes raise
  `ValueError`. `draw_point`, `draw_line` and `clear` work on the buffer
  directly.
- `sectorcaster.game.build_level()`: returns the two demo sectors.
- `sectorcaster.game.Game`: the window, input handling and fixed-rate frame
  loop; `run()` returns 0 once the window is closed.
- `sectorcaster.utils.safe_divide`, `rand_range` and `GameState`: small helpers.

```python
from sectorcaster.game import build_level
from sectorcaster.player import Player
from sectorcaster.renderer import Renderer

renderer = Renderer(320, 200)
for sector in build_level():
    renderer.queue_sector(sector)

player = Player(40.0, 40.0, 2000.0, 1.5708)
renderer.draw_sectors(player)
pixels = renderer.screen_buffer
```

## What it does not do

This is a renderer and a walk-through viewer, not a full game. There is no
collision with walls, no textures, no level loading from files (the only level
is the one `build_level()` returns), and no pause screen, map or menu, even
though `GameState` has members for them: the main loop only ever plays or quits.