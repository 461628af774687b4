# crownflame

Building blocks for a small top-down 2D game: scene descriptions, a scene
validator, scene templates, a plain-text scene file format, scene transition
timing, a persistent settings file with window placement, and tile maps.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
python -m pytest
```

## Modules

### `crownflame.scene_data`

Dataclasses describing a scene: `SceneDefinition` holds a `WorldSettings`,
`CameraSettings`, `TilemapSettings`, `PlayerSpawn`, and lists of
`ObstacleData`, `CollectibleData` and `EnemyData`, plus `next_scene` and
`transition_trigger` (default `"manual"`). `MovementPattern` is an `IntEnum`
(`HORIZONTAL`, `VERTICAL`, `CIRCULAR`, `PATROL`). An `EnemyData` without
patrol points gets points 100 units to the left and right of its spawn.
`SceneTransition` pairs a `TransitionType` with a duration and a fade colour.

### `crownflame.validator`

`validate_scene(scene)` runs every check and returns a `ValidationResult`.
Its `issues` are `ValidationIssue`s with a `Severity` (`ERROR` or `WARNING`),
a message and a location such as `"obstacle[2]"`. Any error sets `is_valid`
to `False`; `error_count()` and `warning_count()` count them. Checks cover
the scene name and trigger, world and camera values, the player spawn,
obstacle sizes and bounds, collectibles and enemies (bounds, speed, radius,
patrol points, placement inside obstacles), overlapping obstacles,
collectibles closer than 50 units, and a straight-line reachability test
from the spawn. The helpers `is_point_in_obstacle`, `obstacles_overlap` and
`is_collectible_reachable` are public.

### `crownflame.templates`

`available_templates()` lists the `TemplateInfo`s in display order.
`create_from_template(template_type, scene_name="", rng=None)` builds a scene
for a `TemplateType` (an empty name becomes `"New Scene"`). Each template
also has its own builder (`create_empty`, `create_tutorial`, `create_maze`,
`create_arena`, `create_platformer`, `create_collection_challenge`,
`create_enemy_gauntlet`, `create_obstacle_course`), and the layout helpers
(`create_border_walls`, `create_grid_collectibles`, `create_basic_enemies`
and so on), `random_color` and `is_point_free` are public too. Functions that
place things or pick colours at random take a `random.Random`; pass a seeded
one for repeatable scenes.

### `crownflame.scene_file`

`dumps_scene` / `loads_scene` convert between a `SceneDefinition` and the
sectioned `key=value` text format (`[SCENE]`, `[WORLD]`, `[CAMERA]`,
`[PLAYER]`, `[OBSTACLES]`, `[COLLECTIBLES]`, `[ENEMIES]`); `save_scene` and
`load_scene` do the same with files. Lines starting with `#` are ignored and
absent fields keep their defaults. Bad numbers or unknown movement patterns
raise `SceneDefinitionError`. `create_default_scene(name)` returns a small
sample scene, and `validate_scene_definition` raises `SceneDefinitionError`
for an empty name or non-positive world size.

### `crownflame.transitions`

`TransitionState.update(delta_time)` advances a running transition and
returns `True` once it has finished. `overlay(screen_width, screen_height)`
gives the rectangle and colour to draw over the scene (or `None` for an
instant transition). `fade_alpha(progress)` and `slide_offset(...)` are the
underlying formulas.

### `crownflame.settings`

`Settings(filename="resources/settings.cfg")` is a `key=value` file, sorted
by key when saved. Creating it loads the file, or writes one with default
window settings if it cannot be read. `set(key, value)` stores a value and
`get(key, default)` reads it back converted to the type of `default`. Used as
a context manager it saves on exit. Window helpers: `save_window_settings`,
`window_settings()` (a `WindowGeometry`), `has_window_settings`,
`last_monitor_index` / `set_last_monitor_index`, `save_monitor_settings(window,
monitors)` and `restore_monitor_settings(monitors)`, which returns where to
put the window on the remembered monitor, clamped to its bounds, or `None`
on first run. `best_monitor_index(window, monitors)` picks the monitor a
window overlaps most.

### `crownflame.tiles` and `crownflame.tilemap`

`Tile` holds an id, name, texture region, solid/walkable flags, tint and
opacity. `Tileset` registers one image file per tile, looked up by id or
name with `get_tile`; `load_grass_tileset(resources_path)` loads the
standard grass tiles from `<resources_path>/textures/tiles/` and skips those
it cannot read.

`TileMap` is a grid of tile ids with world placement: `set_tile`, `get_tile`
(−1 outside the map), `fill`, `fill_rect`, `create_grass_map(rng)`,
`tile_to_world`, `world_to_tile`, `is_tile_solid`, `is_position_blocked`,
`visible_tile_range` and `format_map`. `TileMapManager` keeps named tilesets
and maps with one current map; missing names raise `KeyError`.

## Example

```python
import random

from crownflame.templates import TemplateType, create_from_template
from crownflame.validator import validate_scene
from crownflame.scene_file import save_scene, load_scene

scene = create_from_template(TemplateType.TUTORIAL, "intro", random.Random(1))
result = validate_scene(scene)
print(result.error_count(), result.warning_count())

save_scene(scene, "intro.scene")
loaded = load_scene("intro.scene")
print(loaded.name, len(loaded.obstacles))
```

## What it does not do

- Nothing here draws, opens windows, plays audio or runs a game loop. The
  package handles data and rules; a renderer of your choice draws the scene,
  the transition overlays and the tiles.
- `Settings` does not query the system for windows or monitors; you pass in
  `WindowGeometry` and `MonitorInfo` values.
- Tile images are read as raw bytes and not decoded.
- The scene file format keeps positions, sizes, enemy patterns and speeds,
  but not colours, patrol points, circle radii, camera start position,
  background colour or tilemap settings; those come back as defaults.