"""Box and circle colliders and their collision response ratios."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, NamedTuple

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .event import Event
from .gameobject import Component

_RED = (230, 41, 55)


class ColliderType(Enum):
    BOX = "box"
    CIRCLE = "circle"


class CollisionRatios(NamedTuple):
    """Share of the overlap each collider is pushed by."""

    a: float
    b: float


class Collider(Component):
    """Base collider; registers itself with the owner's world on start."""

    debug_mode: ClassVar[bool] = False

    def __init__(self, kind: ColliderType, offset=None) -> None:
        super().__init__()
        self.kind = kind
        self.offset = Vector2(offset) if offset is not None else Vector2(0.0, 0.0)
        self.is_static = False
        self.is_trigger = False
        self.mass = 1.0
        self.on_trigger_enter = Event()

    def start(self) -> None:
        self.game_object.world.register_collider(self)

    def on_destroy(self) -> None:
        if self.game_object is not None and self.game_object.world is not None:
            self.game_object.world.unregister_collider(self)
        self.on_trigger_enter.clear()

    @staticmethod
    def response_ratios(a: Collider, b: Collider) -> CollisionRatios:
        if a.is_trigger or b.is_trigger:
            return CollisionRatios(0.0, 0.0)
        if a.is_static and b.is_static:
            return CollisionRatios(0.0, 0.0)
        if a.is_static:
            return CollisionRatios(0.0, 1.0)
        if b.is_static:
            return CollisionRatios(1.0, 0.0)

        total_mass = a.mass + b.mass
        if total_mass > 0:
            return CollisionRatios(b.mass / total_mass, a.mass / total_mass)
        return CollisionRatios(0.5, 0.5)


class BoxCollider(Collider):
    """Axis-aligned box anchored at the owner's position plus offset."""

    def __init__(self, width: float, height: float, offset=None) -> None:
        super().__init__(ColliderType.BOX, offset)
        self.size = Vector2(width, height)

    def rect(self) -> tuple[float, float, float, float]:
        """The box as ``(x, y, width, height)`` in world space."""
        position = self.game_object.position
        return (
            position.x + self.offset.x,
            position.y + self.offset.y,
            self.size.x,
            self.size.y,
        )

    def draw(self, surface: pygame.Surface) -> None:
        if not Collider.debug_mode:
            return
        camera = CameraManager.get()
        x, y, width, height = self.rect()
        top_left = camera.world_to_screen((x, y))
        zoom = camera.view_zoom
        screen_rect = pygame.Rect(
            round(top_left.x),
            round(top_left.y),
            max(1, round(width * zoom)),
            max(1, round(height * zoom)),
        )
        overlay = pygame.Surface(screen_rect.size, pygame.SRCALPHA)
        overlay.fill((*_RED, 128))
        surface.blit(overlay, screen_rect.topleft)
        pygame.draw.rect(surface, _RED, screen_rect, max(1, round(2.0 * zoom)))


class CircleCollider(Collider):
    """Circle centred at the owner's position plus offset."""

    def __init__(self, radius: float, offset=None) -> None:
        super().__init__(ColliderType.CIRCLE, offset)
        self.radius = radius

    def center(self) -> Vector2:
        return self.game_object.position + self.offset

    def draw(self, surface: pygame.Surface) -> None:
        if not Collider.debug_mode:
            return
        camera = CameraManager.get()
        center = camera.world_to_screen(self.center())
        radius = max(1, round(self.radius * camera.view_zoom))
        size = radius * 2 + 1
        overlay = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(overlay, (*_RED, 5), (radius, radius), radius)
        surface.blit(overlay, (round(center.x) - radius, round(center.y) - radius))
        pygame.draw.circle(surface, _RED, center, radius, 1)