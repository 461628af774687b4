"""Ready-made scene layouts to start new scenes from."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from crownflame.scene_data import (
    Color,
    CollectibleData,
    EnemyData,
    MovementPattern,
    ObstacleData,
    SceneDefinition,
    Vec2,
)

WALL_COLOR: Color = (0.5, 0.5, 0.5, 1.0)
GROUND_COLOR: Color = (0.4, 0.2, 0.1, 1.0)


class TemplateType(Enum):
    EMPTY = "empty"
    TUTORIAL = "tutorial"
    MAZE = "maze"
    ARENA = "arena"
    PLATFORMER = "platformer"
    COLLECTION_CHALLENGE = "collection_challenge"
    ENEMY_GAUNTLET = "enemy_gauntlet"
    OBSTACLE_COURSE = "obstacle_course"


@dataclass(frozen=True)
class TemplateInfo:
    name: str
    description: str
    type: TemplateType


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def available_templates() -> list[TemplateInfo]:
    """All templates, in the order they are offered to the user."""
    return [
        TemplateInfo("Empty Scene", "Blank scene with just a player spawn", TemplateType.EMPTY),
        TemplateInfo(
            "Tutorial",
            "Simple scene with basic obstacles and collectibles",
            TemplateType.TUTORIAL,
        ),
        TemplateInfo(
            "Maze", "Complex maze with walls and scattered collectibles", TemplateType.MAZE
        ),
        TemplateInfo("Arena", "Open combat area with strategic obstacles", TemplateType.ARENA),
        TemplateInfo(
            "Platformer",
            "Platform-style layout with jumping challenges",
            TemplateType.PLATFORMER,
        ),
        TemplateInfo(
            "Collection Challenge",
            "Many collectibles scattered throughout",
            TemplateType.COLLECTION_CHALLENGE,
        ),
        TemplateInfo("Enemy Gauntlet", "Progressive enemy encounters", TemplateType.ENEMY_GAUNTLET),
        TemplateInfo(
            "Obstacle Course", "Skill-based navigation challenge", TemplateType.OBSTACLE_COURSE
        ),
    ]


def create_from_template(
    template_type: TemplateType,
    scene_name: str = "",
    rng: random.Random | None = None,
) -> SceneDefinition:
    """Build a scene from a template; an empty name becomes "New Scene"."""
    name = scene_name or "New Scene"
    builders: dict[TemplateType, Callable[[str, random.Random | None], SceneDefinition]] = {
        TemplateType.EMPTY: lambda n, _r: create_empty(n),
        TemplateType.TUTORIAL: create_tutorial,
        TemplateType.MAZE: create_maze,
        TemplateType.ARENA: create_arena,
        TemplateType.PLATFORMER: create_platformer,
        TemplateType.COLLECTION_CHALLENGE: create_collection_challenge,
        TemplateType.ENEMY_GAUNTLET: create_enemy_gauntlet,
        TemplateType.OBSTACLE_COURSE: create_obstacle_course,
    }
    builder = builders.get(template_type, lambda n, _r: create_empty(n))
    return builder(name, rng)


def create_empty(name: str) -> SceneDefinition:
    scene = SceneDefinition(name=name)
    scene.description = "A blank scene ready for customization"
    scene.transition_trigger = "manual"
    scene.next_scene = ""
    scene.world.width = 1600.0
    scene.world.height = 1200.0
    scene.world.background_music = ""
    scene.camera.follow_enabled = True
    scene.camera.follow_speed = 5.0
    scene.player_spawn.x = scene.world.width / 2
    scene.player_spawn.y = scene.world.height / 2
    return scene


def create_tutorial(name: str, rng: random.Random | None = None) -> SceneDefinition:
    rng = _rng(rng)
    scene = create_empty(name)
    scene.description = "Tutorial level with basic obstacles and collectibles"
    scene.transition_trigger = "collectibles_complete"

    scene.obstacles = create_border_walls(scene.world.width, scene.world.height)
    scene.obstacles.append(ObstacleData(400, 300, 200, 50, random_color(rng)))
    scene.obstacles.append(ObstacleData(1000, 600, 50, 200, random_color(rng)))
    scene.obstacles.append(ObstacleData(600, 800, 150, 100, random_color(rng)))

    for x, y in ((300, 200), (1200, 300), (800, 700), (500, 1000)):
        scene.collectibles.append(CollectibleData(x, y, random_color(rng)))

    scene.enemies.append(
        EnemyData(
            1000,
            400,
            MovementPattern.PATROL,
            100.0,
            patrol_point1=(1000, 400),
            patrol_point2=(1200, 400),
        )
    )

    scene.player_spawn.x = 150
    scene.player_spawn.y = 150
    return scene


def create_maze(name: str, rng: random.Random | None = None) -> SceneDefinition:
    rng = _rng(rng)
    scene = create_empty(name)
    scene.description = "Navigate through a complex maze"
    scene.transition_trigger = "collectibles_complete"
    scene.world.width = 2000.0
    scene.world.height = 1600.0

    scene.obstacles = create_maze_walls(scene.world.width, scene.world.height, rng)
    scene.collectibles = create_random_collectibles(
        scene.world.width, scene.world.height, 8, rng
    )
    scene.enemies = create_basic_enemies(scene.world.width, scene.world.height, 3, rng)

    scene.player_spawn.x = 100
    scene.player_spawn.y = 100
    return scene


def create_arena(name: str, rng: random.Random | None = None) -> SceneDefinition:
    rng = _rng(rng)
    scene = create_empty(name)
    scene.description = "Combat arena with strategic cover"
    scene.transition_trigger = "enemies_defeat"
    scene.world.width = 1800.0
    scene.world.height = 1400.0

    scene.obstacles = create_border_walls(scene.world.width, scene.world.height)
    scene.obstacles.extend(
        create_arena_obstacles(scene.world.width, scene.world.height, rng)
    )
    scene.enemies = create_arena_enemies(scene.world.width, scene.world.height)
    scene.collectibles = create_random_collectibles(
        scene.world.width, scene.world.height, 3, rng
    )

    scene.player_spawn.x = scene.world.width / 2
    scene.player_spawn.y = scene.world.height / 2
    return scene


def create_platformer(name: str, rng: random.Random | None = None) -> SceneDefinition:
    rng = _rng(rng)
    scene = create_empty(name)
    scene.description = "Platform-style challenges and jumps"
    scene.transition_trigger = "collectibles_complete"
    scene.world.width = 2400.0
    scene.world.height = 1200.0

    scene.obstacles = create_platformer_obstacles(scene.world.width, scene.world.height, rng)
    scene.collectibles = create_path_collectibles(scene.world.width, scene.world.height, rng)

    scene.enemies.append(
        EnemyData(
            600,
            800,
            MovementPattern.PATROL,
            80.0,
            patrol_point1=(500, 800),
            patrol_point2=(700, 800),
        )
    )
    scene.enemies.append(EnemyData(1200, 600, MovementPattern.CIRCULAR, 60.0, radius=100.0))

    scene.player_spawn.x = 100
    scene.player_spawn.y = 1000
    return scene


def create_collection_challenge(
    name: str, rng: random.Random | None = None
) -> SceneDefinition:
    rng = _rng(rng)
    scene = create_empty(name)
    scene.description = "Collect all items scattered throughout"
    scene.transition_trigger = "collectibles_complete"
    scene.world.width = 2000.0
    scene.world.height = 1800.0

    scene.obstacles = create_border_walls(scene.world.width, scene.world.height)
    scene.collectibles = create_grid_collectibles(
        scene.world.width, scene.world.height, 20, rng
    )
    scene.enemies = create_basic_enemies(scene.world.width, scene.world.height, 5, rng)

    scene.player_spawn.x = scene.world.width / 2
    scene.player_spawn.y = scene.world.height / 2
    return scene


def create_enemy_gauntlet(name: str, rng: random.Random | None = None) -> SceneDefinition:
    rng = _rng(rng)
    scene = create_empty(name)
    scene.description = "Defeat waves of increasingly difficult enemies"
    scene.transition_trigger = "enemies_defeat"
    scene.world.width = 1600.0
    scene.world.height = 1200.0

    scene.obstacles = create_border_walls(scene.world.width, scene.world.height)
    scene.obstacles.append(ObstacleData(400, 300, 100, 100, random_color(rng)))
    scene.obstacles.append(ObstacleData(1100, 600, 100, 100, random_color(rng)))
    scene.obstacles.append(ObstacleData(700, 800, 200, 50, random_color(rng)))

    scene.enemies = create_gauntlet_enemies(scene.world.width, scene.world.height)
    scene.collectibles = create_random_collectibles(
        scene.world.width, scene.world.height, 4, rng
    )

    scene.player_spawn.x = 200
    scene.player_spawn.y = 200
    return scene


def create_obstacle_course(name: str, rng: random.Random | None = None) -> SceneDefinition:
    rng = _rng(rng)
    scene = create_empty(name)
    scene.description = "Navigate through challenging obstacles"
    scene.transition_trigger = "collectibles_complete"
    scene.world.width = 2400.0
    scene.world.height = 1000.0

    scene.obstacles = create_border_walls(scene.world.width, scene.world.height)
    for i in range(8):
        x = 200 + i * 250
        y = 200 + (i % 2) * 400
        scene.obstacles.append(ObstacleData(x, y, 80, 400, random_color(rng)))

    for i in range(6):
        scene.collectibles.append(CollectibleData(300 + i * 350, 500, random_color(rng)))

    scene.enemies.append(
        EnemyData(
            800,
            400,
            MovementPattern.PATROL,
            120.0,
            patrol_point1=(800, 200),
            patrol_point2=(800, 700),
        )
    )
    scene.enemies.append(EnemyData(1400, 500, MovementPattern.CIRCULAR, 80.0, radius=150.0))

    scene.player_spawn.x = 100
    scene.player_spawn.y = 500
    return scene


def create_border_walls(
    world_width: float, world_height: float, thickness: float = 20.0
) -> list[ObstacleData]:
    """Four walls along the edges of the world: top, bottom, left, right."""
    return [
        ObstacleData(0, 0, world_width, thickness, WALL_COLOR),
        ObstacleData(0, world_height - thickness, world_width, thickness, WALL_COLOR),
        ObstacleData(0, 0, thickness, world_height, WALL_COLOR),
        ObstacleData(world_width - thickness, 0, thickness, world_height, WALL_COLOR),
    ]


def create_maze_walls(
    world_width: float, world_height: float, rng: random.Random | None = None
) -> list[ObstacleData]:
    rng = _rng(rng)
    walls = create_border_walls(world_width, world_height)
    cell_size = 200.0
    cols = int(world_width / cell_size)
    rows = int(world_height / cell_size)
    for row in range(1, rows - 1, 2):
        for col in range(1, cols - 1, 2):
            x = col * cell_size
            y = row * cell_size
            if (row + col) % 3 == 0:
                walls.append(ObstacleData(x, y, cell_size, 30, random_color(rng)))
            if (row + col) % 4 == 0:
                walls.append(ObstacleData(x, y, 30, cell_size, random_color(rng)))
    return walls


def create_arena_obstacles(
    world_width: float, world_height: float, rng: random.Random | None = None
) -> list[ObstacleData]:
    rng = _rng(rng)
    return [
        ObstacleData(world_width / 2 - 50, world_height / 2 - 50, 100, 100, random_color(rng)),
        ObstacleData(200, 200, 150, 80, random_color(rng)),
        ObstacleData(world_width - 350, 200, 150, 80, random_color(rng)),
        ObstacleData(200, world_height - 280, 150, 80, random_color(rng)),
        ObstacleData(world_width - 350, world_height - 280, 150, 80, random_color(rng)),
    ]


def create_platformer_obstacles(
    world_width: float, world_height: float, rng: random.Random | None = None
) -> list[ObstacleData]:
    rng = _rng(rng)
    obstacles = [ObstacleData(0, world_height - 50, world_width, 50, GROUND_COLOR)]
    for i in range(1, 8):
        x = i * 300
        y = world_height - 200 - (i % 3) * 150
        obstacles.append(ObstacleData(x, y, 200, 30, random_color(rng)))
    obstacles.append(ObstacleData(800, 400, 30, 400, random_color(rng)))
    obstacles.append(ObstacleData(1600, 200, 30, 600, random_color(rng)))
    return obstacles


def create_grid_collectibles(
    world_width: float,
    world_height: float,
    count: int,
    rng: random.Random | None = None,
) -> list[CollectibleData]:
    """Up to ``count`` collectibles on an evenly spaced grid."""
    rng = _rng(rng)
    if count <= 0:
        return []
    cols = int(math.sqrt(count))
    rows = (count + cols - 1) // cols
    spacing_x = (world_width - 200) / (cols + 1)
    spacing_y = (world_height - 200) / (rows + 1)
    collectibles: list[CollectibleData] = []
    for row in range(rows):
        for col in range(cols):
            if len(collectibles) >= count:
                return collectibles
            x = 100 + (col + 1) * spacing_x
            y = 100 + (row + 1) * spacing_y
            collectibles.append(CollectibleData(x, y, random_color(rng)))
    return collectibles


def create_random_collectibles(
    world_width: float,
    world_height: float,
    count: int,
    rng: random.Random | None = None,
) -> list[CollectibleData]:
    """Collectibles placed at random, at least 100 units inside the world edges."""
    rng = _rng(rng)
    collectibles = []
    for _ in range(count):
        x = rng.uniform(100, world_width - 100)
        y = rng.uniform(100, world_height - 100)
        collectibles.append(CollectibleData(x, y, random_color(rng)))
    return collectibles


def create_path_collectibles(
    world_width: float, world_height: float, rng: random.Random | None = None
) -> list[CollectibleData]:
    """Ten collectibles along a sine wave across the world."""
    rng = _rng(rng)
    collectibles = []
    for i in range(10):
        x = 200 + i * (world_width - 400) / 9
        y = world_height / 2 + math.sin(i * 0.5) * 200
        collectibles.append(CollectibleData(x, y, random_color(rng)))
    return collectibles


def create_basic_enemies(
    world_width: float,
    world_height: float,
    count: int,
    rng: random.Random | None = None,
) -> list[EnemyData]:
    """Alternating patrolling and circling enemies at random positions."""
    rng = _rng(rng)
    enemies = []
    for i in range(count):
        x = rng.uniform(200, world_width - 200)
        y = rng.uniform(200, world_height - 200)
        if i % 2 == 0:
            dx = rng.uniform(-200, 200)
            dy = rng.uniform(-200, 200)
            enemies.append(
                EnemyData(
                    x,
                    y,
                    MovementPattern.PATROL,
                    80.0,
                    patrol_point1=(x, y),
                    patrol_point2=(x + dx, y + dy),
                )
            )
        else:
            enemies.append(
                EnemyData(x, y, MovementPattern.CIRCULAR, 60.0, radius=rng.uniform(80, 150))
            )
    return enemies


def create_gauntlet_enemies(world_width: float, world_height: float) -> list[EnemyData]:
    return [
        EnemyData(
            400, 300, MovementPattern.PATROL, 150.0,
            patrol_point1=(300, 300), patrol_point2=(500, 300),
        ),
        EnemyData(
            1200, 600, MovementPattern.PATROL, 150.0,
            patrol_point1=(1100, 600), patrol_point2=(1300, 600),
        ),
        EnemyData(600, 400, MovementPattern.CIRCULAR, 100.0, radius=120.0),
        EnemyData(1000, 800, MovementPattern.CIRCULAR, 120.0, radius=150.0),
        EnemyData(800, 200, MovementPattern.HORIZONTAL, 0.0),
        EnemyData(800, 1000, MovementPattern.HORIZONTAL, 0.0),
    ]


def create_arena_enemies(world_width: float, world_height: float) -> list[EnemyData]:
    return [
        EnemyData(200, 200, MovementPattern.HORIZONTAL, 0.0),
        EnemyData(world_width - 200, 200, MovementPattern.HORIZONTAL, 0.0),
        EnemyData(200, world_height - 200, MovementPattern.HORIZONTAL, 0.0),
        EnemyData(world_width - 200, world_height - 200, MovementPattern.HORIZONTAL, 0.0),
        EnemyData(
            world_width / 2, 200, MovementPattern.PATROL, 100.0,
            patrol_point1=(300, 200), patrol_point2=(world_width - 300, 200),
        ),
        EnemyData(
            world_width / 2, world_height - 200, MovementPattern.PATROL, 100.0,
            patrol_point1=(300, world_height - 200),
            patrol_point2=(world_width - 300, world_height - 200),
        ),
    ]


def random_color(rng: random.Random | None = None) -> Color:
    """An opaque colour with each channel between 0.3 and 0.9."""
    rng = _rng(rng)
    return (rng.uniform(0.3, 0.9), rng.uniform(0.3, 0.9), rng.uniform(0.3, 0.9), 1.0)


def is_point_free(
    point: Vec2, obstacles: Sequence[ObstacleData], radius: float = 30.0
) -> bool:
    """True if the point is at least ``radius`` away from every obstacle's box."""
    x, y = point
    return not any(
        o.x - radius <= x <= o.x + o.width + radius
        and o.y - radius <= y <= o.y + o.height + radius
        for o in obstacles
    )