import random

import pytest

from crownflame import templates
from crownflame.scene_data import MovementPattern, ObstacleData
from crownflame.templates import TemplateType


def test_available_templates_order_and_types():
    infos = templates.available_templates()
    assert [info.type for info in infos] == list(TemplateType)
    assert infos[0].name == "Empty Scene"
    assert infos[-1].name == "Obstacle Course"
    assert infos[3].description == "Open combat area with strategic obstacles"


def test_empty_name_defaults_to_new_scene():
    scene = templates.create_from_template(TemplateType.EMPTY, "")
    assert scene.name == "New Scene"


def test_create_empty():
    scene = templates.create_empty("Blank")
    assert scene.name == "Blank"
    assert scene.description == "A blank scene ready for customization"
    assert scene.transition_trigger == "manual"
    assert (scene.world.width, scene.world.height) == (1600.0, 1200.0)
    assert (scene.player_spawn.x, scene.player_spawn.y) == (
        scene.world.width / 2,
        scene.world.height / 2,
    )
    assert scene.obstacles == [] and scene.enemies == [] and scene.collectibles == []


@pytest.mark.parametrize(
    "template_type, trigger, size",
    [
        (TemplateType.TUTORIAL, "collectibles_complete", (1600.0, 1200.0)),
        (TemplateType.MAZE, "collectibles_complete", (2000.0, 1600.0)),
        (TemplateType.ARENA, "enemies_defeat", (1800.0, 1400.0)),
        (TemplateType.PLATFORMER, "collectibles_complete", (2400.0, 1200.0)),
        (TemplateType.COLLECTION_CHALLENGE, "collectibles_complete", (2000.0, 1800.0)),
        (TemplateType.ENEMY_GAUNTLET, "enemies_defeat", (1600.0, 1200.0)),
        (TemplateType.OBSTACLE_COURSE, "collectibles_complete", (2400.0, 1000.0)),
    ],
)
def test_template_world_and_trigger(template_type, trigger, size):
    scene = templates.create_from_template(template_type, "Level", random.Random(1))
    assert scene.name == "Level"
    assert scene.transition_trigger == trigger
    assert (scene.world.width, scene.world.height) == size


@pytest.mark.parametrize("template_type", list(TemplateType))
def test_seeded_templates_are_reproducible(template_type):
    first = templates.create_from_template(template_type, "S", random.Random(42))
    second = templates.create_from_template(template_type, "S", random.Random(42))
    assert first == second


def test_tutorial_contents():
    scene = templates.create_tutorial("T", random.Random(3))
    assert len(scene.obstacles) == 7
    assert len(scene.collectibles) == 4
    assert len(scene.enemies) == 1
    enemy = scene.enemies[0]
    assert enemy.pattern is MovementPattern.PATROL
    assert enemy.patrol_point1 == (1000, 400)
    assert enemy.patrol_point2 == (1200, 400)
    assert (scene.player_spawn.x, scene.player_spawn.y) == (150, 150)


def test_border_walls():
    walls = templates.create_border_walls(1600, 1200)
    assert [(w.x, w.y, w.width, w.height) for w in walls] == [
        (0, 0, 1600, 20),
        (0, 1180, 1600, 20),
        (0, 0, 20, 1200),
        (1580, 0, 20, 1200),
    ]
    assert all(w.color == (0.5, 0.5, 0.5, 1.0) for w in walls)


def test_maze_walls_start_with_border_and_use_cells():
    walls = templates.create_maze_walls(2000, 1600, random.Random(0))
    assert walls[:4] == templates.create_border_walls(2000, 1600)
    inner = walls[4:]
    assert inner
    for wall in inner:
        assert (wall.width, wall.height) in {(200.0, 30), (30, 200.0)}
        assert wall.x % 200 == 0 and wall.y % 200 == 0


def test_arena_obstacles_central_pillar():
    obstacles = templates.create_arena_obstacles(1800, 1400, random.Random(0))
    assert len(obstacles) == 5
    pillar = obstacles[0]
    assert pillar.x + pillar.width / 2 == 900
    assert pillar.y + pillar.height / 2 == 700


def test_platformer_obstacles_ground_first():
    obstacles = templates.create_platformer_obstacles(2400, 1200, random.Random(0))
    ground = obstacles[0]
    assert (ground.x, ground.y, ground.width, ground.height) == (0, 1150, 2400, 50)
    assert ground.color == (0.4, 0.2, 0.1, 1.0)
    assert len(obstacles) == 10


@pytest.mark.parametrize("count", [1, 2, 5, 20, 7])
def test_grid_collectibles_count_and_bounds(count):
    items = templates.create_grid_collectibles(2000, 1800, count, random.Random(0))
    assert len(items) == count
    for item in items:
        assert 100 < item.x < 1900
        assert 100 < item.y < 1700


def test_grid_collectibles_zero():
    assert templates.create_grid_collectibles(2000, 1800, 0, random.Random(0)) == []


def test_random_collectibles_within_margin():
    items = templates.create_random_collectibles(1000, 800, 50, random.Random(7))
    assert len(items) == 50
    assert all(100 <= c.x <= 900 and 100 <= c.y <= 700 for c in items)


def test_path_collectibles_span_world():
    items = templates.create_path_collectibles(2400, 1200, random.Random(0))
    assert len(items) == 10
    assert items[0].x == 200
    assert items[-1].x == pytest.approx(2200)
    assert items[0].y == 600


def test_basic_enemies_alternate_patterns():
    enemies = templates.create_basic_enemies(2000, 1600, 5, random.Random(9))
    patterns = [e.pattern for e in enemies]
    assert patterns == [
        MovementPattern.PATROL,
        MovementPattern.CIRCULAR,
        MovementPattern.PATROL,
        MovementPattern.CIRCULAR,
        MovementPattern.PATROL,
    ]
    for enemy in enemies:
        assert 200 <= enemy.x <= 1800 and 200 <= enemy.y <= 1400
        if enemy.pattern is MovementPattern.PATROL:
            assert enemy.speed == 80.0
            assert enemy.patrol_point1 == (enemy.x, enemy.y)
        else:
            assert enemy.speed == 60.0
            assert 80 <= enemy.radius <= 150


def test_gauntlet_enemies():
    enemies = templates.create_gauntlet_enemies(1600, 1200)
    assert len(enemies) == 6
    assert enemies[2].radius == 120.0
    assert [e.speed for e in enemies[4:]] == [0.0, 0.0]


def test_arena_enemies_patrol_span():
    enemies = templates.create_arena_enemies(1800, 1400)
    assert len(enemies) == 6
    assert enemies[4].patrol_point2 == (1500, 200)
    assert enemies[5].patrol_point1 == (300, 1200)


def test_random_color_range():
    rng = random.Random(11)
    for _ in range(100):
        r, g, b, a = templates.random_color(rng)
        assert 0.3 <= r <= 0.9 and 0.3 <= g <= 0.9 and 0.3 <= b <= 0.9
        assert a == 1.0


def test_is_point_free():
    obstacles = [ObstacleData(100, 100, 50, 50)]
    assert templates.is_point_free((0, 0), obstacles) is True
    assert templates.is_point_free((125, 125), obstacles) is False
    assert templates.is_point_free((75, 125), obstacles) is False
    assert templates.is_point_free((75, 125), obstacles, radius=10) is True
    assert templates.is_point_free((500, 500), []) is True


def test_obstacle_course_layout():
    scene = templates.create_obstacle_course("Course", random.Random(5))
    course = scene.obstacles[4:]
    assert len(course) == 8
    assert [o.y for o in course[:2]] == [200, 600]
    assert all(c.y == 500 for c in scene.collectibles)
    assert scene.enemies[1].radius == 150.0