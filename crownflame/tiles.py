"""Tiles and tilesets built from one image file per tile."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from crownflame.scene_data import Color, Vec2

logger = logging.getLogger(__name__)

WHITE: Color = (1.0, 1.0, 1.0, 1.0)

# (id, name, file name, solid)
GRASS_TILES: tuple[tuple[int, str, str, bool], ...] = (
    (0, "Basic Grass", "grass_basic.png", False),
    (1, "Dense Grass", "grass_dense.png", False),
    (2, "Tall Grass", "grass_tall.png", False),
    (3, "Grass with Flowers", "grass_flowers.png", False),
    (4, "Dark Grass", "grass_dark.png", False),
    (5, "Light Grass", "grass_light.png", False),
    (10, "Top Edge", "grass_edge_top.png", False),
    (11, "Right Edge", "grass_edge_right.png", False),
    (12, "Bottom Edge", "grass_edge_bottom.png", False),
    (13, "Left Edge", "grass_edge_left.png", False),
    (14, "Top-Left Corner", "grass_corner_top_left.png", False),
    (15, "Top-Right Corner", "grass_corner_top_right.png", False),
    (20, "Stone Path", "grass_stone_path.png", False),
    (21, "Dirt Patches", "grass_dirt_patches.png", False),
    (22, "Worn Grass", "grass_worn.png", False),
    (23, "Grass Transition", "grass_transition.png", False),
    (24, "Rocky Grass", "grass_rocky.png", False),
    (25, "Flower Patch", "grass_flower_patch.png", False),
)


class TileLoadError(OSError):
    """A tile image could not be loaded."""


@dataclass
class Tile:
    """One tile: its identity, texture region and gameplay flags."""

    id: int = 0
    name: str = "Unknown"
    texture_coords: Vec2 = (0.0, 0.0)
    texture_size: Vec2 = (1.0, 1.0)
    is_solid: bool = False
    is_walkable: bool = True
    tint_color: Color = WHITE
    opacity: float = 1.0

    def set_properties(self, solid: bool, walkable: bool) -> None:
        self.is_solid = solid
        self.is_walkable = walkable

    def set_visual_properties(self, tint: Color = WHITE, alpha: float = 1.0) -> None:
        self.tint_color = tint
        self.opacity = alpha

    def texture_quad(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Texture corners: top-left, top-right, bottom-left, bottom-right."""
        x, y = self.texture_coords
        w, h = self.texture_size
        return (x, y), (x + w, y), (x, y + h), (x + w, y + h)


@dataclass(frozen=True)
class TileTexture:
    """The image data a tile is drawn from."""

    path: Path
    data: bytes


@dataclass
class Tileset:
    """Tiles looked up by id or by name, each with its own texture."""

    name: str = ""
    tile_width: int = 64
    tile_height: int = 64
    _tiles: list[Tile] = field(default_factory=list, repr=False)
    _by_id: dict[int, Tile] = field(default_factory=dict, repr=False)
    _by_name: dict[str, Tile] = field(default_factory=dict, repr=False)
    _textures: dict[str, TileTexture] = field(default_factory=dict, repr=False)

    def __len__(self) -> int:
        return len(self._tiles)

    def load_tile_from_file(
        self, tile_id: int, name: str, image_path: str | os.PathLike[str]
    ) -> Tile:
        """Load a tile image and register a tile covering all of it."""
        if tile_id in self._by_id:
            logger.warning("Tile ID %d already exists, overwriting.", tile_id)
        path = Path(image_path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise TileLoadError(f"Failed to load tile image: {path}") from exc
        if not data:
            raise TileLoadError(f"Failed to load tile image: {path}")

        tile = Tile(tile_id, name, (0.0, 0.0), (1.0, 1.0))
        self._tiles.append(tile)
        self._by_id[tile_id] = tile
        self._by_name[name] = tile
        self._textures[name] = TileTexture(path, data)
        logger.info("Loaded tile: %s (ID: %d) from %s", name, tile_id, path)
        return tile

    def load_grass_tileset(self, resources_path: str | os.PathLike[str]) -> int:
        """Replace all tiles with the grass tiles found under ``resources_path``.

        Images that cannot be loaded are skipped; returns how many loaded.
        """
        self.name = "Grass Tileset"
        self._tiles.clear()
        self._by_id.clear()
        self._by_name.clear()
        self._textures.clear()
        directory = Path(resources_path) / "textures" / "tiles"
        for tile_id, name, filename, solid in GRASS_TILES:
            try:
                tile = self.load_tile_from_file(tile_id, name, directory / filename)
            except TileLoadError as exc:
                logger.error("%s", exc)
                continue
            tile.set_properties(solid, True)
        logger.info("Set up %d grass tiles from individual PNG files", len(self._tiles))
        return len(self._tiles)

    def add_tile(
        self, tile_id: int, name: str, image_path: str | os.PathLike[str]
    ) -> Tile | None:
        """Load a tile, returning None instead of raising if the image fails."""
        try:
            self.load_tile_from_file(tile_id, name, image_path)
        except TileLoadError as exc:
            logger.error("%s", exc)
            return None
        return self.get_tile(tile_id)

    def get_tile(self, key: int | str) -> Tile | None:
        """Look a tile up by id (int) or by name (str)."""
        if isinstance(key, str):
            return self._by_name.get(key)
        return self._by_id.get(key)

    def tile_texture(self, name: str) -> TileTexture | None:
        return self._textures.get(name)

    def all_tiles(self) -> list[Tile]:
        return list(self._tiles)

    def describe(self) -> str:
        lines = [f"=== Tileset: {self.name} ===", f"Total tiles: {len(self._tiles)}"]
        lines.extend(f"ID: {tile.id}, Name: {tile.name}" for tile in self._tiles)
        return "\n".join(lines)