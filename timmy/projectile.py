"""Projectile that damages enemies, leaves a glowing trail and sparks on hit."""

from __future__ import annotations

import math
from collections import deque
from itertools import pairwise

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .collider import CircleCollider, Collider
from .gameobject import Component, GameObject, Layer
from .health import Health
from .mathutils import normalize, random_float, random_int
from .movement import Velocity
from .particle import Particle
from .timer import Timer

LIME = (0, 158, 47)
LIGHTGRAY = (200, 200, 200, 255)


class Projectile(Component):
    """Hits enemies it touches, up to ``pierce`` of them, then disappears."""

    def __init__(
        self,
        damage: float,
        lifetime: float,
        pierce: int = 1,
        knockback_force: float = 0.0,
    ) -> None:
        super().__init__()
        self.life_timer = Timer(lifetime, False)
        self.tail_timer = Timer(0.05, True)
        self.damage = damage
        self.pierce = pierce
        self.knockback_force = knockback_force

        self.hit_objects: set[GameObject] = set()

        self.history: deque[Vector2] = deque()
        self.color = LIME
        self.max_history = 10
        self.tail_delay = 0.05

    def update(self, dt: float) -> None:
        self.life_timer.update(dt)
        if not self.life_timer.running:
            self.game_object.destroy()
            return

        self.tail_timer.update(dt)
        if self.tail_timer.completed_this_frame:
            self.history.appendleft(Vector2(self.game_object.position))
            if len(self.history) > self.max_history:
                self.history.pop()

    def on_trigger_enter(self, other: Collider) -> None:
        target = other.game_object
        if target.layer != Layer.ENEMY:
            return
        if target in self.hit_objects:
            return

        health = target.get_component(Health)
        if health is not None:
            self.hit_objects.add(target)
            self.pierce -= 1
            health.take_damage(self.damage)

            velocity = target.get_component(Velocity)
            if velocity is not None:
                direction = normalize(target.position - self.game_object.position)
                velocity.apply(direction * self.knockback_force)

            self.spawn_particles(self.game_object.position, random_int(3, 5))
            CameraManager.get().shake(2.0, 0.1)

        if self.pierce <= 0:
            self.game_object.destroy()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the trail with additive blending, thinning and fading with age."""
        collider = self.game_object.get_component(CircleCollider)
        if not self.history or collider is None:
            return

        camera = CameraManager.get()
        zoom = camera.view_zoom
        points = [camera.world_to_screen(self.game_object.position)]
        points.extend(camera.world_to_screen(p) for p in self.history)

        pad = max(1, round(collider.radius * zoom)) + 1
        left = math.floor(min(p.x for p in points)) - pad
        top = math.floor(min(p.y for p in points)) - pad
        right = math.ceil(max(p.x for p in points)) + pad
        bottom = math.ceil(max(p.y for p in points)) + pad
        origin = Vector2(left, top)

        overlay = pygame.Surface((right - left, bottom - top))
        overlay.fill((0, 0, 0))
        base = pygame.Color(self.color)
        size = len(self.history)
        for i, (start, end) in enumerate(pairwise(points)):
            ratio = (size - i) / size
            width = max(1, round(collider.radius * ratio * zoom))
            color = (round(base.r * ratio), round(base.g * ratio), round(base.b * ratio))
            pygame.draw.line(overlay, color, start - origin, end - origin, width)

        surface.blit(overlay, (left, top), special_flags=pygame.BLEND_RGB_ADD)

    def spawn_particles(self, position, count: int) -> None:
        """Create ``count`` grey sparks flying out of ``position``."""
        world = self.game_object.world
        for _ in range(count):
            obj = world.create_object("particle")
            obj.position = Vector2(position)

            speed = random_float(2.0, 10.0)
            velocity = Vector2(
                math.cos(random_float(0.0, 2 * math.pi)) * speed,
                math.sin(random_float(0.0, 2 * math.pi)) * speed,
            )
            lifetime = random_float(0.3, 1.0)
            size = random_float(3.0, 6.0)
            friction = random_float(7.0, 10.0)

            obj.add_component(Particle(velocity, lifetime, LIGHTGRAY, size, friction))