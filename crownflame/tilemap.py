"""Grids of tile ids laid out in world space, and a registry of maps and tilesets."""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Iterator

from crownflame.scene_data import Vec2
from crownflame.tiles import Tile, Tileset

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 64
INVALID_TILE = -1
STONE_PATH_TILE = 20
DEFAULT_RESOURCES_PATH = "resources"

_PRINT_MAX_ROWS = 20
_PRINT_MAX_COLS = 40


class TileMap:
    """A rectangular grid of tile ids drawn from one tileset."""

    def __init__(
        self, width: int = 0, height: int = 0, tileset: Tileset | None = None
    ) -> None:
        self.tileset = tileset
        self.width = width
        self.height = height
        self.tile_pixel_width = DEFAULT_TILE_SIZE
        self.tile_pixel_height = DEFAULT_TILE_SIZE
        self.name = ""
        self.world_position: Vec2 = (0.0, 0.0)
        if tileset is not None:
            self.tile_pixel_width = tileset.tile_width
            self.tile_pixel_height = tileset.tile_height
        self._tiles: list[list[int]] = [[0] * width for _ in range(height)]

    def __iter__(self) -> Iterator[list[int]]:
        """Rows of tile ids, top to bottom (copies)."""
        return (list(row) for row in self._tiles)

    def initialize(self, width: int, height: int, tileset: Tileset | None) -> None:
        """Resize the map and bind it to a tileset; existing tiles are kept."""
        if tileset is None:
            raise ValueError("Cannot initialize TileMap with null tileset")
        self.tileset = tileset
        self.width = width
        self.height = height
        self.tile_pixel_width = tileset.tile_width
        self.tile_pixel_height = tileset.tile_height
        old = self._tiles
        resized: list[list[int]] = []
        for y in range(height):
            row = list(old[y][:width]) if y < len(old) else []
            row.extend([0] * (width - len(row)))
            resized.append(row)
        self._tiles = resized

    def clear(self) -> None:
        self._tiles = []
        self.width = 0
        self.height = 0

    def set_tile(self, x: int, y: int, tile_id: int) -> None:
        """Set one tile; coordinates outside the map are ignored."""
        if self.is_valid_coordinate(x, y):
            self._tiles[y][x] = tile_id

    def get_tile(self, x: int, y: int) -> int:
        """The tile id at a cell, or -1 outside the map."""
        if self.is_valid_coordinate(x, y):
            return self._tiles[y][x]
        return INVALID_TILE

    def get_tile_object(self, x: int, y: int) -> Tile | None:
        if self.tileset is None or not self.is_valid_coordinate(x, y):
            return None
        return self.tileset.get_tile(self._tiles[y][x])

    def fill(self, tile_id: int) -> None:
        for row in self._tiles:
            row[:] = [tile_id] * len(row)

    def fill_rect(self, x: int, y: int, width: int, height: int, tile_id: int) -> None:
        """Fill a rectangle of cells, clipped to the map."""
        end_x = min(x + width, self.width)
        end_y = min(y + height, self.height)
        for ty in range(max(y, 0), end_y):
            row = self._tiles[ty]
            for tx in range(max(x, 0), end_x):
                row[tx] = tile_id

    def create_grass_map(self, rng: random.Random | None = None) -> int:
        """Fill with varied grass and scatter stone paths; return the path count."""
        if self.tileset is None:
            raise ValueError("Cannot create grass map without tileset")
        rng = rng if rng is not None else random.Random()

        for row in self._tiles:
            for x in range(len(row)):
                if rng.randint(1, 100) <= 85:
                    row[x] = rng.randint(0, 5)
                else:
                    row[x] = rng.randint(20, 25)

        num_paths = (self.width * self.height) // 200
        for _ in range(num_paths):
            start_x = rng.randint(1, max(1, self.width - 2))
            start_y = rng.randint(1, max(1, self.height - 2))
            length = rng.randint(3, 8)
            direction = rng.randint(0, 3)
            for j in range(length):
                px, py = start_x, start_y
                if direction == 0:
                    px = start_x + j
                elif direction == 1:
                    py = start_y + j
                elif direction == 2:
                    px, py = start_x + j, start_y + j
                else:
                    px, py = start_x + j, start_y - j
                self.set_tile(px, py, STONE_PATH_TILE)

        logger.info(
            "Created grass map of size %dx%d with %d stone paths",
            self.width,
            self.height,
            num_paths,
        )
        return num_paths

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_to_world(self, tile_x: int, tile_y: int) -> Vec2:
        """World position of a tile's top-left corner."""
        ox, oy = self.world_position
        return (
            ox + float(tile_x * self.tile_pixel_width),
            oy + float(tile_y * self.tile_pixel_height),
        )

    def world_to_tile(self, world_pos: Vec2) -> tuple[int, int]:
        """Tile coordinates containing a world position (truncated toward zero)."""
        ox, oy = self.world_position
        wx, wy = world_pos
        return (
            int((wx - ox) / self.tile_pixel_width),
            int((wy - oy) / self.tile_pixel_height),
        )

    def is_tile_solid(self, x: int, y: int) -> bool:
        tile = self.get_tile_object(x, y)
        return tile.is_solid if tile is not None else False

    def is_position_blocked(self, world_pos: Vec2) -> bool:
        return self.is_tile_solid(*self.world_to_tile(world_pos))

    def visible_tile_range(
        self, camera_pos: Vec2, screen_size: Vec2
    ) -> tuple[int, int, int, int]:
        """Tiles seen by a camera centred on ``camera_pos``, padded by one tile.

        Returns (min_x, min_y, max_x, max_y), clamped to the map.
        """
        cx, cy = camera_pos
        sw, sh = screen_size
        min_x, min_y = self.world_to_tile((cx - sw * 0.5, cy - sh * 0.5))
        max_x, max_y = self.world_to_tile((cx + sw * 0.5, cy + sh * 0.5))
        return (
            max(0, min_x - 1),
            max(0, min_y - 1),
            min(self.width - 1, max_x + 1),
            min(self.height - 1, max_y + 1),
        )

    def format_map(self) -> str:
        """A readable dump of the map, limited to 20 rows of 40 tiles."""
        ox, oy = self.world_position
        lines = [
            f"=== TileMap: {self.name} ===",
            f"Size: {self.width}x{self.height}",
            f"Tile size: {self.tile_pixel_width}x{self.tile_pixel_height}",
            f"World position: ({ox:g}, {oy:g})",
        ]
        for row in self._tiles[:_PRINT_MAX_ROWS]:
            lines.append("".join(f"{tile_id:02d} " for tile_id in row[:_PRINT_MAX_COLS]))
        if self.height > _PRINT_MAX_ROWS or self.width > _PRINT_MAX_COLS:
            lines.append("... (map truncated for display)")
        return "\n".join(lines)


class TileMapManager:
    """Named tilesets and tile maps, with one map marked as current."""

    def __init__(self) -> None:
        self.tilesets: dict[str, Tileset] = {}
        self.tile_maps: dict[str, TileMap] = {}
        self.current_map: TileMap | None = None

    def load_tileset(
        self,
        name: str,
        image_path: str | os.PathLike[str],
        tile_width: int,
        tile_height: int,
    ) -> Tileset:
        """Register an empty tileset under ``name``; tiles are added one image at a time."""
        tileset = Tileset(name=name)
        self.tilesets[name] = tileset
        logger.info("Created empty tileset: %s (individual tile loading mode)", name)
        return tileset

    def load_grass_tileset(
        self, resources_path: str | os.PathLike[str] = DEFAULT_RESOURCES_PATH
    ) -> Tileset:
        tileset = Tileset()
        tileset.load_grass_tileset(resources_path)
        self.tilesets["grass"] = tileset
        logger.info("Loaded grass tileset with %d tiles", len(tileset))
        return tileset

    def get_tileset(self, name: str) -> Tileset | None:
        return self.tilesets.get(name)

    def create_tile_map(
        self, name: str, width: int, height: int, tileset_name: str
    ) -> TileMap:
        tileset = self.get_tileset(tileset_name)
        if tileset is None:
            raise KeyError(
                f"Cannot create tile map '{name}': tileset '{tileset_name}' not found"
            )
        tile_map = TileMap(width, height, tileset)
        tile_map.name = name
        self.tile_maps[name] = tile_map
        logger.info("Created tile map: %s (%dx%d)", name, width, height)
        return tile_map

    def get_tile_map(self, name: str) -> TileMap | None:
        return self.tile_maps.get(name)

    def set_current_map(self, name: str) -> TileMap:
        tile_map = self.get_tile_map(name)
        if tile_map is None:
            raise KeyError(f"Cannot set current map: '{name}' not found")
        self.current_map = tile_map
        return tile_map

    def create_default_grass_map(
        self,
        map_name: str,
        width: int = 50,
        height: int = 50,
        resources_path: str | os.PathLike[str] = DEFAULT_RESOURCES_PATH,
        rng: random.Random | None = None,
    ) -> TileMap:
        """Create a grass map, loading the grass tileset first if needed.

        The map becomes current if no map is current yet.
        """
        if self.get_tileset("grass") is None:
            self.load_grass_tileset(resources_path)
        tile_map = self.create_tile_map(map_name, width, height, "grass")
        tile_map.create_grass_map(rng)
        if self.current_map is None:
            self.current_map = tile_map
        return tile_map

    def is_position_blocked(self, world_pos: Vec2) -> bool:
        if self.current_map is None:
            return False
        return self.current_map.is_position_blocked(world_pos)

    def is_tile_solid(self, world_pos: Vec2) -> bool:
        if self.current_map is None:
            return False
        return self.current_map.is_tile_solid(*self.current_map.world_to_tile(world_pos))

    def clear_all(self) -> None:
        self.current_map = None
        self.tile_maps.clear()
        self.tilesets.clear()

    def reset_current_map(self, rng: random.Random | None = None) -> None:
        """Regenerate the current map's grass in place."""
        if self.current_map is None:
            raise LookupError("Cannot reset current map: no current map set")
        self.current_map.create_grass_map(rng)

    def reset_map(self, map_name: str, rng: random.Random | None = None) -> None:
        tile_map = self.get_tile_map(map_name)
        if tile_map is None:
            raise KeyError(f"Cannot reset map '{map_name}': map not found")
        tile_map.create_grass_map(rng)

    def tileset_names(self) -> list[str]:
        return list(self.tilesets)

    def tile_map_names(self) -> list[str]:
        return list(self.tile_maps)