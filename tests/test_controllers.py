import pytest
from pygame.math import Vector2

from timmy.controllers import EnemyAI, PlayerController
from timmy.gameobject import GameObject
from timmy.render import SpriteRenderer


def _with_sprite(name):
    obj = GameObject(name)
    sprite = obj.add_component(SpriteRenderer())
    sprite.add_animation("Idle", "sheet.png", 0, 0, 16, 32, 2, 0.5, True)
    sprite.add_animation("Walk", "sheet.png", 0, 32, 16, 32, 4, 0.15, True)
    return obj, sprite


def test_move_is_normalised():
    obj, _ = _with_sprite("player")
    controller = obj.add_component(PlayerController(100.0))
    controller.move((1, 1), 1.0)
    assert obj.position.length() == pytest.approx(100.0)
    assert obj.position.x == pytest.approx(obj.position.y)


def test_move_left_walks_and_flips():
    obj, sprite = _with_sprite("player")
    controller = obj.add_component(PlayerController(50.0))
    controller.move((-1, 0), 0.5)
    assert obj.position.x == pytest.approx(-25.0)
    assert sprite.current_clip == "Walk"
    assert sprite.flip_x is True


def test_no_movement_plays_idle():
    obj, sprite = _with_sprite("player")
    controller = obj.add_component(PlayerController(50.0))
    controller.move((1, 0), 0.1)
    controller.move((0, 0), 0.1)
    assert sprite.current_clip == "Idle"


def test_update_without_keys_stays_idle():
    obj, sprite = _with_sprite("player")
    controller = obj.add_component(PlayerController(50.0))
    controller.update(0.1)
    assert obj.position == Vector2(0, 0)
    assert sprite.current_clip == "Idle"


def test_enemy_chases_target():
    target = GameObject("player")
    target.position = Vector2(100, 0)
    enemy, sprite = _with_sprite("knight")
    enemy.add_component(EnemyAI(target, 10.0))
    enemy.update(1.0)
    assert enemy.position.x == pytest.approx(10.0)
    assert enemy.position.y == 0
    assert sprite.current_clip == "Walk"
    assert sprite.flip_x is False


def test_enemy_faces_left_when_target_left():
    target = GameObject("player")
    target.position = Vector2(-100, 0)
    enemy, sprite = _with_sprite("knight")
    enemy.add_component(EnemyAI(target, 10.0))
    enemy.update(1.0)
    assert enemy.position.x < 0
    assert sprite.flip_x is True


def test_enemy_on_target_is_idle():
    target = GameObject("player")
    enemy, sprite = _with_sprite("knight")
    enemy.add_component(EnemyAI(target, 10.0))
    sprite.play("Walk")
    enemy.update(1.0)
    assert enemy.position == Vector2(0, 0)
    assert sprite.current_clip == "Idle"