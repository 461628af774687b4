from crownflame.scene_data import (
    CollectibleData,
    EnemyData,
    MovementPattern,
    ObstacleData,
    PlayerSpawn,
    SceneDefinition,
)
from crownflame.validator import (
    Severity,
    ValidationResult,
    is_collectible_reachable,
    is_point_in_obstacle,
    obstacles_overlap,
    validate_scene,
)


def _messages(result, severity):
    return [(i.message, i.location) for i in result.issues if i.severity is severity]


def test_default_scene_is_clean():
    result = validate_scene(SceneDefinition())
    assert result.is_valid
    assert result.issues == []


def test_result_counts_and_validity():
    result = ValidationResult()
    result.add_warning("w")
    assert result.is_valid
    result.add_error("e", "here")
    assert not result.is_valid
    assert result.error_count() + result.warning_count() == len(result.issues)
    assert result.issues[-1].location == "here"
    assert result.issues[-1].severity is Severity.ERROR


def test_empty_name_is_error():
    result = validate_scene(SceneDefinition(name=""))
    assert not result.is_valid
    assert ("Scene name cannot be empty", "scene.name") in _messages(result, Severity.ERROR)


def test_unknown_trigger_is_warning():
    scene = SceneDefinition(transition_trigger="foo")
    result = validate_scene(scene)
    assert result.is_valid
    assert ("Unknown transition trigger: foo", "scene.transitionTrigger") in _messages(
        result, Severity.WARNING
    )


def test_collectible_trigger_without_collectibles():
    scene = SceneDefinition(transition_trigger="collectibles_complete")
    result = validate_scene(scene)
    assert (
        "Scene completion requires collectibles but none are defined",
        "collectibles",
    ) in _messages(result, Severity.ERROR)


def test_enemy_trigger_without_enemies():
    scene = SceneDefinition(transition_trigger="enemies_defeat")
    result = validate_scene(scene)
    assert not result.is_valid
    assert result.issues[0].location == "enemies"


def test_negative_world_is_error():
    scene = SceneDefinition()
    scene.world.width = -5.0
    result = validate_scene(scene)
    assert ("World dimensions must be positive", "world") in _messages(result, Severity.ERROR)


def test_player_inside_obstacle():
    scene = SceneDefinition(obstacles=[ObstacleData(100.0, 100.0, 100.0, 100.0)])
    result = validate_scene(scene)
    assert ("Player spawns inside obstacle 0", "playerSpawn") in _messages(
        result, Severity.ERROR
    )


def test_enemy_speed_and_radius_errors():
    scene = SceneDefinition(
        enemies=[
            EnemyData(500.0, 500.0, MovementPattern.HORIZONTAL, 0.0),
            EnemyData(900.0, 900.0, MovementPattern.CIRCULAR, 50.0, radius=0.0),
        ]
    )
    errors = _messages(validate_scene(scene), Severity.ERROR)
    assert ("Enemy speed must be positive", "enemy[0]") in errors
    assert ("Circular movement pattern requires positive radius", "enemy[1]") in errors


def test_identical_patrol_points_warn():
    enemy = EnemyData(500.0, 500.0, MovementPattern.PATROL, 80.0, (1.0, 1.0), (1.0, 1.0))
    result = validate_scene(SceneDefinition(enemies=[enemy]))
    assert ("Patrol points are identical - enemy won't move", "enemy[0]") in _messages(
        result, Severity.WARNING
    )


def test_overlapping_obstacles_warn():
    scene = SceneDefinition(
        obstacles=[ObstacleData(500.0, 500.0), ObstacleData(520.0, 520.0)]
    )
    result = validate_scene(scene)
    assert ("Obstacles 0 and 1 overlap", "obstacles") in _messages(result, Severity.WARNING)


def test_close_collectibles_warn():
    scene = SceneDefinition(
        collectibles=[CollectibleData(500.0, 500.0), CollectibleData(510.0, 500.0)]
    )
    result = validate_scene(scene)
    assert ("Collectibles 0 and 1 are very close", "collectibles") in _messages(
        result, Severity.WARNING
    )


def test_unreachable_collectible_warns():
    scene = SceneDefinition(
        player_spawn=PlayerSpawn(100.0, 100.0),
        collectibles=[CollectibleData(500.0, 100.0)],
        obstacles=[ObstacleData(300.0, 50.0, 20.0, 100.0)],
    )
    result = validate_scene(scene)
    assert ("Collectible 0 may not be reachable", "collectible[0]") in _messages(
        result, Severity.WARNING
    )


def test_reachability_helper():
    spawn = PlayerSpawn(100.0, 100.0)
    target = CollectibleData(500.0, 100.0)
    wall = ObstacleData(300.0, 50.0, 20.0, 100.0)
    assert not is_collectible_reachable(target, spawn, [wall])
    assert is_collectible_reachable(target, spawn, [])


def test_point_in_obstacle_edges_inclusive():
    obstacle = ObstacleData(10.0, 20.0, 30.0, 40.0)
    assert is_point_in_obstacle((obstacle.x + obstacle.width, obstacle.y), obstacle)
    assert is_point_in_obstacle((obstacle.x, obstacle.y + obstacle.height), obstacle)
    assert not is_point_in_obstacle((obstacle.x - 0.5, obstacle.y), obstacle)


def test_obstacles_overlap_touching_and_symmetric():
    a = ObstacleData(0.0, 0.0, 10.0, 10.0)
    touching = ObstacleData(10.0, 0.0, 10.0, 10.0)
    apart = ObstacleData(10.5, 0.0, 10.0, 10.0)
    assert obstacles_overlap(a, touching) and obstacles_overlap(touching, a)
    assert not obstacles_overlap(a, apart) and not obstacles_overlap(apart, a)