import pytest

from crownflame.scene_data import MovementPattern, SceneDefinition
from crownflame.scene_file import (
    SceneDefinitionError,
    create_default_scene,
    dumps_scene,
    load_scene,
    loads_scene,
    save_scene,
    validate_scene_definition,
)


def test_default_scene_contents():
    scene = create_default_scene("start")
    assert scene.name == "start"
    assert scene.description == "Default scene created by SceneManager"
    assert scene.transition_trigger == "collectibles_complete"
    assert len(scene.obstacles) == 2
    assert len(scene.collectibles) == 2
    assert [e.pattern for e in scene.enemies] == [
        MovementPattern.HORIZONTAL,
        MovementPattern.VERTICAL,
    ]


def test_round_trip_default_scene():
    scene = create_default_scene("level1")
    assert loads_scene(dumps_scene(scene)) == scene


def test_dumps_layout():
    text = dumps_scene(SceneDefinition(name="demo"))
    assert text.startswith("[SCENE]\nname=demo\n")
    assert "\n[WORLD]\nwidth=2000\nheight=1500\n" in text
    assert "followEnabled=true" in text
    assert text.endswith("[ENEMIES]\n")


def test_enemy_line_uses_pattern_number():
    scene = create_default_scene("x")
    lines = dumps_scene(scene).splitlines()
    enemy_lines = lines[lines.index("[ENEMIES]") + 1:]
    assert enemy_lines == ["400,300,0,100", "700,450,1,100"]


def test_loads_skips_comments_and_keeps_defaults():
    text = "# comment\n[SCENE]\nname=abc\n\n[CAMERA]\nfollowEnabled=no\n"
    scene = loads_scene(text)
    assert scene.name == "abc"
    assert scene.camera.follow_enabled is False
    assert scene.world == SceneDefinition().world


def test_loads_lists():
    text = "[ENEMIES]\n10,20,3,55\n1,2\n[COLLECTIBLES]\n5,6\n[OBSTACLES]\n1,2,3\n"
    scene = loads_scene(text)
    assert len(scene.enemies) == 1
    enemy = scene.enemies[0]
    assert enemy.pattern is MovementPattern.PATROL
    assert (enemy.x, enemy.y, enemy.speed) == (10.0, 20.0, 55.0)
    assert [(c.x, c.y) for c in scene.collectibles] == [(5.0, 6.0)]
    assert scene.obstacles == []


def test_value_with_equals_sign():
    scene = loads_scene("[SCENE]\ndescription=a=b\n")
    assert scene.description == "a=b"


def test_bad_number_raises():
    with pytest.raises(SceneDefinitionError):
        loads_scene("[WORLD]\nwidth=wide\n")


def test_bad_pattern_raises():
    with pytest.raises(SceneDefinitionError):
        loads_scene("[ENEMIES]\n1,2,9,4\n")


def test_save_and_load(tmp_path):
    path = tmp_path / "level.scene"
    scene = create_default_scene("saved")
    save_scene(scene, path)
    assert load_scene(path) == scene


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "absent.scene")


def test_validate_scene_definition():
    validate_scene_definition(create_default_scene("ok"))
    with pytest.raises(SceneDefinitionError):
        validate_scene_definition(SceneDefinition(name=""))
    bad = SceneDefinition(name="bad")
    bad.world.height = 0
    with pytest.raises(SceneDefinitionError):
        validate_scene_definition(bad)