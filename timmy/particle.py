"""Short-lived spinning square used for hit effects."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .gameobject import Component
from .mathutils import lerp, random_float
from .timer import Timer


class Particle(Component):
    """Drifts, slows down, shrinks and fades until its lifetime ends."""

    def __init__(self, velocity, lifetime: float, color, size: float, friction: float) -> None:
        super().__init__()
        self.velocity = Vector2(velocity)
        self.life_timer = Timer(lifetime, False)
        self.color = color
        self.size = size
        self.friction = friction
        self.rotation = random_float(0.0, 360.0)

    def update(self, dt: float) -> None:
        self.life_timer.update(dt)
        if not self.life_timer.running:
            self.game_object.destroy()
            return

        step = self.friction * dt
        self.game_object.position = self.game_object.position + self.velocity * step
        self.velocity = lerp(self.velocity, Vector2(0.0, 0.0), step)
        self.rotation += self.velocity.length() * dt

    def draw(self, surface: pygame.Surface) -> None:
        ratio = 1.0 - self.life_timer.progress
        if ratio <= 0.0:
            return
        camera = CameraManager.get()
        side = max(1, round(self.size * ratio * camera.view_zoom))
        color = pygame.Color(self.color)
        square = pygame.Surface((side, side), pygame.SRCALPHA)
        square.fill((color.r, color.g, color.b, round(color.a * ratio)))
        angle = self.rotation + camera.view_rotation
        if angle:
            square = pygame.transform.rotate(square, -angle)
        center = camera.world_to_screen(self.game_object.position)
        surface.blit(square, square.get_rect(center=(round(center.x), round(center.y))))