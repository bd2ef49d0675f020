"""World holding game objects and resolving collisions between them."""

from __future__ import annotations

import math
from itertools import combinations

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .collider import BoxCollider, CircleCollider, Collider, ColliderType
from .gameobject import GameObject, Layer
from .mathutils import normalize

_GRID_SIZE = 64
_GRID_COLOR = (130, 130, 130, round(255 * 0.08))


class World:
    """Owns game objects and the colliders that are currently active."""

    def __init__(self) -> None:
        self.objects: list[GameObject] = []
        self.active_colliders: list[Collider] = []

    def create_object(self, name: str) -> GameObject:
        obj = GameObject(name, self)
        self.objects.append(obj)
        return obj

    def update(self, dt: float) -> None:
        """Update existing objects, then remove the destroyed ones."""
        for obj in self.objects[: len(self.objects)]:
            obj.update(dt)

        survivors = []
        for obj in self.objects:
            if obj.alive:
                survivors.append(obj)
            else:
                obj.on_destroy()
        self.objects = survivors

    def draw_background(self, surface: pygame.Surface) -> None:
        """Draw a faint world-space grid over the visible area."""
        camera = CameraManager.get()
        width, height = surface.get_size()
        top_left = camera.screen_to_world((0, 0))
        bottom_right = camera.screen_to_world((width, height))

        start_x = math.floor(top_left.x / _GRID_SIZE) * _GRID_SIZE
        start_y = math.floor(top_left.y / _GRID_SIZE) * _GRID_SIZE

        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        for x in range(start_x, math.floor(bottom_right.x + _GRID_SIZE) + 1, _GRID_SIZE):
            pygame.draw.line(
                overlay,
                _GRID_COLOR,
                camera.world_to_screen((x, top_left.y - _GRID_SIZE)),
                camera.world_to_screen((x, bottom_right.y + _GRID_SIZE)),
            )
        for y in range(start_y, math.floor(bottom_right.y + _GRID_SIZE) + 1, _GRID_SIZE):
            pygame.draw.line(
                overlay,
                _GRID_COLOR,
                camera.world_to_screen((top_left.x - _GRID_SIZE, y)),
                camera.world_to_screen((bottom_right.x + _GRID_SIZE, y)),
            )
        surface.blit(overlay, (0, 0))

    def draw(self, surface: pygame.Surface) -> None:
        self.draw_background(surface)
        for obj in self.objects:
            obj.draw(surface)

    def draw_ui(self, surface: pygame.Surface) -> None:
        for obj in self.objects:
            obj.draw_ui(surface)

    def find_by_name(self, name: str) -> GameObject | None:
        return next((obj for obj in self.objects if obj.name == name), None)

    def objects_in_layer(self, layer: Layer) -> list[GameObject]:
        return [obj for obj in self.objects if obj.layer == layer]

    def register_collider(self, collider: Collider) -> None:
        self.active_colliders.append(collider)

    def unregister_collider(self, collider: Collider) -> None:
        self.active_colliders = [c for c in self.active_colliders if c is not collider]

    def resolve_collisions(self) -> None:
        """Test every pair of active colliders and separate or trigger them."""
        for a, b in combinations(list(self.active_colliders), 2):
            if a.kind is ColliderType.CIRCLE and b.kind is ColliderType.CIRCLE:
                self.resolve_circle_circle(a, b)
            elif a.kind is ColliderType.BOX and b.kind is ColliderType.BOX:
                self.resolve_box_box(a, b)
            elif a.kind is ColliderType.CIRCLE:
                self.resolve_circle_box(a, b)
            else:
                self.resolve_circle_box(b, a)

    def resolve_circle_circle(self, a: CircleCollider, b: CircleCollider) -> None:
        center_a = a.center()
        center_b = b.center()
        min_dist = a.radius + b.radius

        if center_a.distance_squared_to(center_b) > min_dist * min_dist:
            return

        if a.is_trigger or b.is_trigger:
            self.handle_trigger(a, b)
            return

        overlap = min_dist - center_a.distance_to(center_b)
        push = normalize(center_a - center_b)
        ratio_a, ratio_b = Collider.response_ratios(a, b)

        a.game_object.position = a.game_object.position + push * (overlap * ratio_a)
        b.game_object.position = b.game_object.position - push * (overlap * ratio_b)

    def resolve_box_box(self, a: BoxCollider, b: BoxCollider) -> None:
        ax, ay, aw, ah = a.rect()
        bx, by, bw, bh = b.rect()

        if not (ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by):
            return

        if a.is_trigger or b.is_trigger:
            self.handle_trigger(a, b)
            return

        overlap_w = min(ax + aw, bx + bw) - max(ax, bx)
        overlap_h = min(ay + ah, by + bh) - max(ay, by)
        ratio_a, ratio_b = Collider.response_ratios(a, b)

        if overlap_w > overlap_h:
            direction = -1.0 if ax < bx else 1.0
            a.game_object.position.x += direction * overlap_w * ratio_a
            b.game_object.position.x -= direction * overlap_w * ratio_b
        else:
            direction = -1.0 if ay < by else 1.0
            a.game_object.position.y += direction * overlap_h * ratio_a
            b.game_object.position.y -= direction * overlap_h * ratio_b

    def resolve_circle_box(self, circle: CircleCollider, box: BoxCollider) -> None:
        center = circle.center()
        x, y, width, height = box.rect()
        closest = Vector2(
            min(max(center.x, x), x + width),
            min(max(center.y, y), y + height),
        )

        dist = center.distance_to(closest)
        if dist >= circle.radius:
            return

        if circle.is_trigger or box.is_trigger:
            self.handle_trigger(circle, box)
            return

        overlap = circle.radius - dist
        ratio_circle, ratio_box = Collider.response_ratios(circle, box)
        push = normalize(center - closest)

        circle.game_object.position = circle.game_object.position + push * (
            overlap * ratio_circle
        )
        box.game_object.position = box.game_object.position - push * (overlap * ratio_box)

    def handle_trigger(self, a: Collider, b: Collider) -> None:
        """Notify both objects' components and both colliders' listeners."""
        for component in list(a.game_object.components):
            component.on_trigger_enter(b)
        for component in list(b.game_object.components):
            component.on_trigger_enter(a)
        a.on_trigger_enter.invoke(b)
        b.on_trigger_enter.invoke(a)