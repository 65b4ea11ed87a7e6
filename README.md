# nightcastle

A small side-scrolling castle game built on pygame. It opens a window,
loads textures and sprite tables from a game data directory and draws the
tile-based background map of the intro scene, 60 frames a second at most,
until the window is closed.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Running

```
nightcastle
nightcastle --base-dir path/to/game --frames 600
```

- `--base-dir` — the directory that holds the game data (default: the
  current directory).
- `--frames` — stop after this many frames instead of running until the
  window is closed.

The command exits with status 1 and a message on standard error if a
sprite table or the intro map cannot be read. Textures that cannot be
loaded are skipped; sprites cut from them are simply not drawn.

## Game data

Paths are relative to the base directory:

- `gamedata/Resources/simonTEX.png`, `gamedata/Resources/Background/start_game.png`,
  `Data/Map/intro/intro.png` and `gamedata/Resources/Map/intro/intro_tilesheet.png`
  — textures. Magenta (255, 0, 255) is transparent in the first, the colour
  (1, 1, 1) in the others.
- `gamedata/Resources/simonTextData.txt` and
  `gamedata/Resources/Map/intro/intro_tilesheetINFO.txt` — sprite tables:
  whitespace-separated `id left top right bottom` records. Reading stops
  at the first value that is not an integer.
- `gamedata/Resources/Map/intro/IntroBGMap.txt` — the intro map: the row
  and column counts, then one sprite id per tile, row by row.

## Using the pieces

- `nightcastle.sprites` — `TextureStore` (loads images with a colour key,
  raises `TextureError`), `SpriteSheet` and `Sprite`.
- `nightcastle.graphics` — `Graphics`, which blits texture regions onto a
  surface with a tint (`set_color`), alpha and horizontal flip.
- `nightcastle.background_map` — `parse_tile_matrix` and `BackgroundMap`.
- `nightcastle.camera` — `Camera`, which follows a target's horizontal
  movement once it passes the camera centre, stays between its corner
  blocks (`set_corner_block`) and can be locked.
- `nightcastle.grid` — `GridContainer`, `GridManager` and `ObjectManager`;
  containers drop objects whose state is `ObjectState.DIE` on update.
- `nightcastle.ground` — `Ground` blocks; a breakable block that is burnt
  dies and, if it carries an item id, hands a new `Item` to its `spawn`
  callback.
- `nightcastle.item` — `Item`, which falls under its own gravity, and
  `random_item_id`.
- `nightcastle.loaders` — `parse_sprite_records`, `parse_object_records`
  (kinds from 30 up carry a direction), `read_sprite_file`, `read_objects`
  (places a `Ground` block for every record) and `ResourceLoader`.
- `nightcastle.hud` — `VisualFigures`, a countdown from 300 by one per
  second unless stopped.
- `nightcastle.state` — `GameState` flags and `StageState` respawn points.
- `nightcastle.scenes` — `SceneManager`, `IntroScene` and `MenuScene`.
- `nightcastle.world` and `nightcastle.app` — `GameWorld` and `GamePanel`,
  which tie everything into the running game.

```python
from nightcastle.background_map import parse_tile_matrix

matrix = parse_tile_matrix("2 3\n1 2 3\n4 5 6\n")
# [[1, 2, 3], [4, 5, 6]]
```

## What it does not do

This is an early engine rather than a playable game. There is no keyboard
or controller input, no collision handling, no enemies, no sound and no
score display. `Simon` stands still and is not drawn in the intro scene,
so the camera has nothing to follow and stays where it starts. The menu
scene exists but the game starts straight in the intro and never moves on
to another scene.