"""Checks a scene definition for errors and likely mistakes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from crownflame.scene_data import (
    CollectibleData,
    MovementPattern,
    ObstacleData,
    PlayerSpawn,
    SceneDefinition,
    Vec2,
)

KNOWN_TRIGGERS = ("collectibles_complete", "enemies_defeat", "manual")


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationIssue:
    severity: Severity
    message: str
    location: str = ""


@dataclass
class ValidationResult:
    """Issues found in a scene; any error makes the scene invalid."""

    is_valid: bool = True
    issues: list[ValidationIssue] = field(default_factory=list)

    def add_error(self, message: str, location: str = "") -> None:
        self.issues.append(ValidationIssue(Severity.ERROR, message, location))
        self.is_valid = False

    def add_warning(self, message: str, location: str = "") -> None:
        self.issues.append(ValidationIssue(Severity.WARNING, message, location))

    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is Severity.ERROR)

    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is Severity.WARNING)


def is_point_in_obstacle(point: Vec2, obstacle: ObstacleData) -> bool:
    """True if the point lies within the obstacle, edges included."""
    x, y = point
    return (
        obstacle.x <= x <= obstacle.x + obstacle.width
        and obstacle.y <= y <= obstacle.y + obstacle.height
    )


def obstacles_overlap(a: ObstacleData, b: ObstacleData) -> bool:
    """True if two obstacles overlap or touch."""
    return not (
        a.x + a.width < b.x
        or b.x + b.width < a.x
        or a.y + a.height < b.y
        or b.y + b.height < a.y
    )


def is_collectible_reachable(
    collectible: CollectibleData,
    player_spawn: PlayerSpawn,
    obstacles: Sequence[ObstacleData],
) -> bool:
    """Sample the straight line from the spawn to the collectible for obstacles."""
    samples = 20
    px, py = player_spawn.x, player_spawn.y
    cx, cy = collectible.x, collectible.y
    for i in range(samples + 1):
        t = i / samples
        point = (px + (cx - px) * t, py + (cy - py) * t)
        if any(is_point_in_obstacle(point, obstacle) for obstacle in obstacles):
            return False
    return True


def _validate_basic(scene: SceneDefinition, result: ValidationResult) -> None:
    if not scene.name:
        result.add_error("Scene name cannot be empty", "scene.name")
    if len(scene.name) > 50:
        result.add_warning("Scene name is very long (>50 characters)", "scene.name")
    if not scene.transition_trigger:
        result.add_warning("No transition trigger specified", "scene.transitionTrigger")
    elif scene.transition_trigger not in KNOWN_TRIGGERS:
        result.add_warning(
            "Unknown transition trigger: " + scene.transition_trigger,
            "scene.transitionTrigger",
        )


def _validate_world(scene: SceneDefinition, result: ValidationResult) -> None:
    world = scene.world
    if world.width <= 0 or world.height <= 0:
        result.add_error("World dimensions must be positive", "world")
    if world.width < 800 or world.height < 600:
        result.add_warning("World is smaller than default screen size (800x600)", "world")
    if world.width > 10000 or world.height > 10000:
        result.add_warning("Very large world size may impact performance", "world")
    if scene.camera.follow_speed <= 0:
        result.add_error("Camera follow speed must be positive", "camera.followSpeed")
    if scene.camera.follow_speed > 50:
        result.add_warning(
            "Very high camera follow speed may cause motion sickness",
            "camera.followSpeed",
        )


def _validate_player_spawn(scene: SceneDefinition, result: ValidationResult) -> None:
    spawn = scene.player_spawn
    if (
        spawn.x < 0
        or spawn.y < 0
        or spawn.x > scene.world.width
        or spawn.y > scene.world.height
    ):
        result.add_error("Player spawns outside world bounds", "playerSpawn")
    center = (spawn.x + 25, spawn.y + 25)
    for i, obstacle in enumerate(scene.obstacles):
        if is_point_in_obstacle(center, obstacle):
            result.add_error(f"Player spawns inside obstacle {i}", "playerSpawn")


def _validate_obstacles(scene: SceneDefinition, result: ValidationResult) -> None:
    world = scene.world
    for i, obstacle in enumerate(scene.obstacles):
        location = f"obstacle[{i}]"
        if obstacle.width <= 0 or obstacle.height <= 0:
            result.add_error("Obstacle dimensions must be positive", location)
        if (
            obstacle.x < 0
            or obstacle.y < 0
            or obstacle.x + obstacle.width > world.width
            or obstacle.y + obstacle.height > world.height
        ):
            result.add_warning("Obstacle extends outside world bounds", location)
        if obstacle.width < 10 or obstacle.height < 10:
            result.add_warning("Very small obstacle may be hard to see", location)
        if obstacle.width > world.width * 0.5 or obstacle.height > world.height * 0.5:
            result.add_warning(
                "Very large obstacle may block too much of the world", location
            )


def _validate_collectibles(scene: SceneDefinition, result: ValidationResult) -> None:
    if not scene.collectibles and scene.transition_trigger == "collectibles_complete":
        result.add_error(
            "Scene completion requires collectibles but none are defined",
            "collectibles",
        )
    world = scene.world
    for i, collectible in enumerate(scene.collectibles):
        location = f"collectible[{i}]"
        if (
            collectible.x < 0
            or collectible.y < 0
            or collectible.x > world.width
            or collectible.y > world.height
        ):
            result.add_warning("Collectible is outside world bounds", location)
        center = (collectible.x + 15, collectible.y + 15)
        for j, obstacle in enumerate(scene.obstacles):
            if is_point_in_obstacle(center, obstacle):
                result.add_error(f"Collectible is inside obstacle {j}", location)
    if len(scene.collectibles) > 50:
        result.add_warning(
            "Large number of collectibles may impact performance", "collectibles"
        )


def _validate_enemies(scene: SceneDefinition, result: ValidationResult) -> None:
    if not scene.enemies and scene.transition_trigger == "enemies_defeat":
        result.add_error(
            "Scene completion requires defeating enemies but none are defined",
            "enemies",
        )
    world = scene.world
    for i, enemy in enumerate(scene.enemies):
        location = f"enemy[{i}]"
        if enemy.x < 0 or enemy.y < 0 or enemy.x > world.width or enemy.y > world.height:
            result.add_warning("Enemy spawns outside world bounds", location)
        if enemy.speed <= 0:
            result.add_error("Enemy speed must be positive", location)
        if enemy.speed > 1000:
            result.add_warning("Very high enemy speed may make game unplayable", location)
        center = (enemy.x + 25, enemy.y + 25)
        for j, obstacle in enumerate(scene.obstacles):
            if is_point_in_obstacle(center, obstacle):
                result.add_warning(f"Enemy spawns inside obstacle {j}", location)
        if enemy.pattern is MovementPattern.CIRCULAR and enemy.radius <= 0:
            result.add_error("Circular movement pattern requires positive radius", location)
        if (
            enemy.pattern is MovementPattern.PATROL
            and enemy.patrol_point1 == enemy.patrol_point2
        ):
            result.add_warning("Patrol points are identical - enemy won't move", location)
    if len(scene.enemies) > 20:
        result.add_warning("Large number of enemies may impact performance", "enemies")


def _validate_overlaps(scene: SceneDefinition, result: ValidationResult) -> None:
    obstacles = scene.obstacles
    for i, first in enumerate(obstacles):
        for j in range(i + 1, len(obstacles)):
            if obstacles_overlap(first, obstacles[j]):
                result.add_warning(f"Obstacles {i} and {j} overlap", "obstacles")
    collectibles = scene.collectibles
    for i, first in enumerate(collectibles):
        for j in range(i + 1, len(collectibles)):
            second = collectibles[j]
            if math.hypot(first.x - second.x, first.y - second.y) < 50.0:
                result.add_warning(
                    f"Collectibles {i} and {j} are very close", "collectibles"
                )


def _validate_reachability(scene: SceneDefinition, result: ValidationResult) -> None:
    for i, collectible in enumerate(scene.collectibles):
        if not is_collectible_reachable(collectible, scene.player_spawn, scene.obstacles):
            result.add_warning(
                f"Collectible {i} may not be reachable", f"collectible[{i}]"
            )


def validate_scene(scene: SceneDefinition) -> ValidationResult:
    """Run every check on the scene and collect the issues found."""
    result = ValidationResult()
    _validate_basic(scene, result)
    _validate_world(scene, result)
    _validate_player_spawn(scene, result)
    _validate_obstacles(scene, result)
    _validate_collectibles(scene, result)
    _validate_enemies(scene, result)
    _validate_overlaps(scene, result)
    _validate_reachability(scene, result)
    return result