"""Reading and writing scenes in the sectioned ``key=value`` text format."""

from __future__ import annotations

import os
from pathlib import Path

from crownflame.scene_data import (
    CollectibleData,
    EnemyData,
    MovementPattern,
    ObstacleData,
    SceneDefinition,
)

_LIST_SECTIONS = frozenset({"OBSTACLES", "COLLECTIBLES", "ENEMIES"})


class SceneDefinitionError(ValueError):
    """A scene definition is malformed or fails basic checks."""


def _fmt(value: float) -> str:
    # Six significant digits, like the default stream formatting of floats.
    return format(float(value), ".6g")


def _parse_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise SceneDefinitionError(f"Invalid number: {text!r}") from None


def _parse_numbers(line: str) -> list[float]:
    tokens = line.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    return [_parse_float(token) for token in tokens]


def dumps_scene(definition: SceneDefinition) -> str:
    """Render a scene definition in the scene file format."""
    lines = [
        "[SCENE]",
        f"name={definition.name}",
        f"description={definition.description}",
        f"nextScene={definition.next_scene}",
        f"transitionTrigger={definition.transition_trigger}",
        "",
        "[WORLD]",
        f"width={_fmt(definition.world.width)}",
        f"height={_fmt(definition.world.height)}",
        f"backgroundMusic={definition.world.background_music}",
        "",
        "[CAMERA]",
        f"followSpeed={_fmt(definition.camera.follow_speed)}",
        f"followEnabled={'true' if definition.camera.follow_enabled else 'false'}",
        "",
        "[PLAYER]",
        f"spawnX={_fmt(definition.player_spawn.x)}",
        f"spawnY={_fmt(definition.player_spawn.y)}",
        "",
        "[OBSTACLES]",
    ]
    lines.extend(
        ",".join(_fmt(v) for v in (o.x, o.y, o.width, o.height))
        for o in definition.obstacles
    )
    lines.extend(["", "[COLLECTIBLES]"])
    lines.extend(f"{_fmt(c.x)},{_fmt(c.y)}" for c in definition.collectibles)
    lines.extend(["", "[ENEMIES]"])
    lines.extend(
        f"{_fmt(e.x)},{_fmt(e.y)},{int(e.pattern)},{_fmt(e.speed)}"
        for e in definition.enemies
    )
    return "\n".join(lines) + "\n"


def _apply_key(definition: SceneDefinition, section: str, key: str, value: str) -> None:
    if section == "SCENE":
        if key == "name":
            definition.name = value
        elif key == "description":
            definition.description = value
        elif key == "nextScene":
            definition.next_scene = value
        elif key == "transitionTrigger":
            definition.transition_trigger = value
    elif section == "WORLD":
        if key == "width":
            definition.world.width = _parse_float(value)
        elif key == "height":
            definition.world.height = _parse_float(value)
        elif key == "backgroundMusic":
            definition.world.background_music = value
    elif section == "CAMERA":
        if key == "followSpeed":
            definition.camera.follow_speed = _parse_float(value)
        elif key == "followEnabled":
            definition.camera.follow_enabled = value == "true"
    elif section == "PLAYER":
        if key == "spawnX":
            definition.player_spawn.x = _parse_float(value)
        elif key == "spawnY":
            definition.player_spawn.y = _parse_float(value)


def _apply_list_line(definition: SceneDefinition, section: str, line: str) -> None:
    values = _parse_numbers(line)
    if section == "OBSTACLES":
        if len(values) >= 4:
            definition.obstacles.append(ObstacleData(*values[:4]))
    elif section == "COLLECTIBLES":
        if len(values) >= 2:
            definition.collectibles.append(CollectibleData(values[0], values[1]))
    elif section == "ENEMIES" and len(values) >= 4:
        try:
            pattern = MovementPattern(int(values[2]))
        except ValueError:
            raise SceneDefinitionError(
                f"Unknown movement pattern: {values[2]!r}"
            ) from None
        definition.enemies.append(EnemyData(values[0], values[1], pattern, values[3]))


def loads_scene(text: str) -> SceneDefinition:
    """Parse a scene from text; fields that are absent keep their defaults."""
    definition = SceneDefinition()
    section = ""
    for line in text.split("\n"):
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1]
            continue
        if "=" in line and section not in _LIST_SECTIONS:
            key, _, value = line.partition("=")
            _apply_key(definition, section, key, value)
        elif section in _LIST_SECTIONS:
            _apply_list_line(definition, section, line)
    return definition


def save_scene(definition: SceneDefinition, path: str | os.PathLike[str]) -> None:
    """Write a scene definition to a file."""
    Path(path).write_text(dumps_scene(definition), encoding="utf-8")


def load_scene(path: str | os.PathLike[str]) -> SceneDefinition:
    """Read a scene definition from a file."""
    return loads_scene(Path(path).read_text(encoding="utf-8"))


def create_default_scene(name: str) -> SceneDefinition:
    """A small scene with a couple of each kind of object."""
    scene = SceneDefinition(name=name)
    scene.description = "Default scene created by SceneManager"
    scene.obstacles.append(ObstacleData(300.0, 200.0, 80.0, 80.0))
    scene.obstacles.append(ObstacleData(500.0, 300.0, 60.0, 120.0))
    scene.collectibles.append(CollectibleData(450.0, 150.0))
    scene.collectibles.append(CollectibleData(150.0, 250.0))
    scene.enemies.append(EnemyData(400.0, 300.0, MovementPattern.HORIZONTAL))
    scene.enemies.append(EnemyData(700.0, 450.0, MovementPattern.VERTICAL))
    scene.transition_trigger = "collectibles_complete"
    return scene


def validate_scene_definition(definition: SceneDefinition) -> None:
    """Raise SceneDefinitionError unless the scene can be loaded at all."""
    if not definition.name:
        raise SceneDefinitionError("Scene definition has empty name!")
    if definition.world.width <= 0 or definition.world.height <= 0:
        raise SceneDefinitionError("Scene world dimensions must be positive!")