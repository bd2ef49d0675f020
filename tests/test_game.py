from unittest import mock

import pygame
import pytest
from pygame.math import Vector2

from timmy.camera import CameraManager
from timmy.game import NUM_SHOCKWAVES, GameManager, main
from timmy.gameobject import Layer
from timmy.movement import Velocity


@pytest.fixture
def camera():
    cam = CameraManager.get()
    cam.init((1600, 900))
    return cam


def test_add_shock_uses_first_free_slot(camera):
    gm = GameManager()
    gm.add_shock(Vector2(0.0, 0.0))
    assert gm.shock_times[0] == 0.0
    assert gm.shock_centres[0] == Vector2(0.5, 0.5)
    gm.add_shock(Vector2(0.0, 0.0))
    assert gm.shock_times[1] == 0.0
    assert gm.shock_times[2] == 999.0


def test_add_shock_replaces_oldest_when_full(camera):
    gm = GameManager()
    gm.shock_times = [0.1] * NUM_SHOCKWAVES
    gm.shock_times[7] = 0.9
    gm.add_shock(Vector2(0.0, 0.0))
    assert gm.shock_times[7] == 0.0
    assert gm.shock_times.count(0.1) == NUM_SHOCKWAVES - 1


def test_update_advances_only_active_shocks(camera):
    gm = GameManager()
    gm.shock_times[0] = 0.5
    gm.update(0.25)
    assert gm.shock_times[0] == pytest.approx(0.75)
    assert gm.shock_times[1] == 999.0


def test_update_scales_world_time_by_game_speed(camera):
    displacements = []
    for speed, dt in ((2.0, 0.5), (1.0, 1.0)):
        gm = GameManager()
        gm.game_speed = speed
        obj = gm.world.create_object("mover")
        obj.add_component(Velocity((10.0, 0.0), 0.0))
        gm.update(dt)
        displacements.append(obj.position.x)
    assert displacements[0] == pytest.approx(displacements[1])


def test_game_speed_keys_are_clamped():
    gm = GameManager()
    gm.handle_key(pygame.K_LEFT)
    assert gm.game_speed == pytest.approx(0.9)
    for _ in range(50):
        gm.handle_key(pygame.K_LEFT)
    assert gm.game_speed == pytest.approx(0.1)
    for _ in range(100):
        gm.handle_key(pygame.K_RIGHT)
    assert gm.game_speed == pytest.approx(5.0)


def test_init_spawns_player_and_enemies(camera):
    gm = GameManager()
    gm.init((1600, 900))
    assert gm.player.name == "player1"
    assert camera.target is gm.player
    enemies = gm.world.objects_in_layer(Layer.ENEMY)
    assert len(enemies) == 10
    for enemy in enemies:
        distance = enemy.position.distance_to(gm.player.position)
        assert 300.0 - 1e-3 <= distance <= 700.0 + 1e-3


def test_r_key_spawns_more_enemies(camera):
    gm = GameManager()
    gm.init((1600, 900))
    gm.handle_key(pygame.K_r)
    assert len(gm.world.objects_in_layer(Layer.ENEMY)) == 30


def test_tab_key_retargets_camera(camera):
    gm = GameManager()
    gm.init((1600, 900))
    gm.handle_key(pygame.K_TAB)
    assert camera.target in gm.world.objects


def test_add_coin_accumulates():
    gm = GameManager()
    gm.add_coin(2)
    gm.add_coin(3)
    assert gm.coin == 5


def test_draw_paints_background():
    CameraManager.get().init((640, 360))
    gm = GameManager()
    gm.init((640, 360))
    surface = pygame.Surface((640, 360))
    gm.draw(surface)
    background = pygame.mask.from_threshold(surface, (245, 245, 245), (1, 1, 1, 255))
    assert background.count() > 640 * 360 // 2


def test_main_exits_on_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]), mock.patch("pygame.quit"):
        result = main([])
    assert result == 0
    assert GameManager.get().player.name == "player1"