"""Plain data describing a scene: world, camera, objects and transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

Vec2 = tuple[float, float]
Color = tuple[float, float, float, float]


class MovementPattern(IntEnum):
    """How an enemy moves; the integer values are used in scene files."""

    HORIZONTAL = 0
    VERTICAL = 1
    CIRCULAR = 2
    PATROL = 3


@dataclass
class PlayerSpawn:
    x: float = 100.0
    y: float = 100.0


@dataclass
class ObstacleData:
    x: float = 0.0
    y: float = 0.0
    width: float = 50.0
    height: float = 50.0
    color: Color = (0.8, 0.2, 0.2, 1.0)


@dataclass
class CollectibleData:
    x: float = 0.0
    y: float = 0.0
    color: Color = (1.0, 1.0, 0.0, 1.0)


@dataclass
class EnemyData:
    """Enemy spawn data; patrol points default to 100 units either side of the spawn."""

    x: float = 0.0
    y: float = 0.0
    pattern: MovementPattern = MovementPattern.HORIZONTAL
    speed: float = 100.0
    patrol_point1: Vec2 | None = None
    patrol_point2: Vec2 | None = None
    radius: float = 50.0

    def __post_init__(self) -> None:
        self.pattern = MovementPattern(self.pattern)
        if self.patrol_point1 is None:
            self.patrol_point1 = (self.x - 100.0, self.y)
        if self.patrol_point2 is None:
            self.patrol_point2 = (self.x + 100.0, self.y)


@dataclass
class CameraSettings:
    follow_speed: float = 5.0
    follow_enabled: bool = True
    start_position: Vec2 = (0.0, 0.0)


@dataclass
class WorldSettings:
    width: float = 2000.0
    height: float = 1500.0
    background_color: Color = (0.1, 0.1, 0.15, 1.0)
    background_music: str = ""


@dataclass
class TilemapSettings:
    tileset_name: str = ""
    tile_data: list[list[int]] = field(default_factory=list)
    tile_width: int = 64
    tile_height: int = 64
    enabled: bool = False


@dataclass
class SceneDefinition:
    """Everything needed to build a scene."""

    name: str = "Untitled Scene"
    description: str = ""
    world: WorldSettings = field(default_factory=WorldSettings)
    camera: CameraSettings = field(default_factory=CameraSettings)
    tilemap: TilemapSettings = field(default_factory=TilemapSettings)
    player_spawn: PlayerSpawn = field(default_factory=PlayerSpawn)
    obstacles: list[ObstacleData] = field(default_factory=list)
    collectibles: list[CollectibleData] = field(default_factory=list)
    enemies: list[EnemyData] = field(default_factory=list)
    next_scene: str = ""
    transition_trigger: str = "manual"


class TransitionType(Enum):
    INSTANT = "instant"
    FADE_TO_BLACK = "fade_to_black"
    SLIDE_LEFT = "slide_left"
    SLIDE_RIGHT = "slide_right"
    SLIDE_UP = "slide_up"
    SLIDE_DOWN = "slide_down"


@dataclass
class SceneTransition:
    type: TransitionType = TransitionType.FADE_TO_BLACK
    duration: float = 1.0
    fade_color: Color = (0.0, 0.0, 0.0, 1.0)