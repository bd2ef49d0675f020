from collections import Counter

import pygame
from pygame.math import Vector2

from timmy.camera import CameraManager
from timmy.gameobject import GameObject
from timmy.health import Health
from timmy.render import SpriteRenderer
from timmy.world import World


def _knight(hp=3.0):
    world = World()
    obj = world.create_object("knight")
    health = obj.add_component(Health(hp))
    return world, obj, health


def test_take_damage_reduces_hp_and_notifies():
    _, _, health = _knight()
    seen = []
    health.on_damage = seen.append
    health.take_damage(1.0)
    assert health.hp == 2.0
    assert seen == [1.0]


def test_invincibility_blocks_repeated_hits():
    _, _, health = _knight()
    health.take_damage(1.0)
    health.take_damage(1.0)
    assert health.hp == 2.0
    health.update(health.invincibility_time)
    health.take_damage(1.0)
    assert health.hp == 1.0


def test_squash_direction_is_opposite():
    _, _, health = _knight()
    health.take_damage(1.0)
    assert abs(health.squash_dir_x) == 1.0
    assert health.squash_dir_x == -health.squash_dir_y


def test_death_clamps_hp_and_destroys():
    world, obj, health = _knight()
    deaths = []
    health.on_death = lambda: deaths.append(obj.name)
    health.take_damage(5.0)
    assert health.hp == 0.0
    assert deaths == ["knight"]
    world.update(0.0)
    assert obj not in world.objects


def test_dead_object_takes_no_more_damage():
    _, _, health = _knight()
    deaths = []
    health.on_death = lambda: deaths.append(1)
    health.take_damage(5.0)
    health.update(1.0)
    health.take_damage(5.0)
    assert deaths == [1]
    assert health.hp == 0.0


def test_hit_squashes_sprite_then_restores():
    obj = GameObject("knight")
    sprite = obj.add_component(SpriteRenderer())
    health = obj.add_component(Health(3.0))
    health.take_damage(1.0)
    health.update(0.05)
    assert sprite.scale.x - 1.0 == -(sprite.scale.y - 1.0)
    assert 0 < abs(sprite.scale.x - 1.0) <= health.bounce_scale
    assert sprite.tint != (255, 255, 255, 255)
    health.update(0.1)
    assert sprite.scale == Vector2(1.0, 1.0)
    assert sprite.tint == (255, 255, 255, 255)


def _colours(surface):
    width, height = surface.get_size()
    counts = Counter(
        tuple(surface.get_at((x, y)))[:3] for x in range(width) for y in range(height)
    )
    counts.pop((0, 0, 0), None)
    return counts


def test_health_bar_shrinks_with_hp():
    CameraManager.get().init((100, 100))
    obj = GameObject("knight")
    health = obj.add_component(Health(4.0))

    full = pygame.Surface((100, 100))
    health.draw(full)
    full_counts = _colours(full)
    fill_colour, full_amount = full_counts.most_common(1)[0]

    health.hp = 2.0
    half = pygame.Surface((100, 100))
    health.draw(half)
    half_amount = _colours(half)[fill_colour]

    assert 0 < half_amount < full_amount