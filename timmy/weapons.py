"""Weapons carried by game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .collider import CircleCollider
from .gameobject import Component, GameObject, Layer
from .mathutils import normalize
from .movement import Velocity
from .projectile import Projectile
from .timer import Timer

GREEN = (0, 228, 48)


class Weapon(Component, ABC):
    """A component that deals ``damage`` when activated."""

    def __init__(self, damage: float) -> None:
        super().__init__()
        self.damage = damage

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the weapon by ``dt`` seconds."""

    @abstractmethod
    def activate(self) -> None:
        """Use the weapon once."""


class FireWeapon(Weapon):
    """Periodically shoots a projectile at the nearest enemy in range."""

    def __init__(
        self,
        damage: float,
        cooldown: float,
        projectile_speed: float,
        projectile_lifetime: float,
        projectile_radius: float,
        range_: float,
    ) -> None:
        super().__init__(damage)
        self.timer = Timer(cooldown, True)
        self.projectile_speed = projectile_speed
        self.projectile_lifetime = projectile_lifetime
        self.projectile_radius = projectile_radius
        self.range = range_
        self.show_range = False

    def update(self, dt: float) -> None:
        self.timer.update(dt)
        if self.timer.completed_this_frame:
            self.activate()

    def activate(self) -> None:
        target = self.find_nearest_enemy()
        if target is None:
            return

        direction = normalize(target.position - self.game_object.position)

        obj = self.game_object.world.create_object("projectile")
        obj.layer = Layer.PROJECTILE
        obj.position = Vector2(self.game_object.position)
        obj.add_component(Projectile(self.damage, self.projectile_lifetime, 1, 150.0))
        obj.add_component(Velocity(direction * self.projectile_speed, 0.0))

        collider = obj.add_component(CircleCollider(self.projectile_radius))
        collider.is_trigger = True

    def find_nearest_enemy(self) -> GameObject | None:
        """The closest living enemy within range, or None."""
        origin = self.game_object.position
        nearest = None
        best = self.range * self.range
        for obj in self.game_object.world.objects:
            if obj.layer != Layer.ENEMY or not obj.alive:
                continue
            dist_sqr = obj.position.distance_squared_to(origin)
            if dist_sqr <= best:
                best = dist_sqr
                nearest = obj
        return nearest

    def draw(self, surface: pygame.Surface) -> None:
        if not self.show_range:
            return
        camera = CameraManager.get()
        center = camera.world_to_screen(self.game_object.position)
        radius = max(1, round(self.range * camera.view_zoom))
        pygame.draw.circle(surface, GREEN, center, radius, 1)