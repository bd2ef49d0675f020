"""Keyboard-driven player movement and target-chasing enemy movement."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from .gameobject import Component, GameObject
from .mathutils import normalize
from .render import SpriteRenderer


def _animate(owner: GameObject, moving: bool, direction: Vector2) -> None:
    sprite = owner.get_component(SpriteRenderer)
    if sprite is None:
        return
    if moving:
        sprite.play("Walk")
        sprite.flip_x = direction.x < 0
    else:
        sprite.play("Idle")


class PlayerController(Component):
    """Moves the owner with the W, A, S and D keys."""

    def __init__(self, speed: float) -> None:
        super().__init__()
        self.speed = speed

    def move(self, movement, dt: float) -> None:
        """Move in the direction of ``movement`` at ``speed`` and animate."""
        movement = Vector2(movement)
        moving = movement.length() > 0
        if moving:
            movement = movement.normalize()
            self.game_object.position = (
                self.game_object.position + movement * (self.speed * dt)
            )
        _animate(self.game_object, moving, movement)

    def update(self, dt: float) -> None:
        movement = Vector2(0.0, 0.0)
        try:
            keys = pygame.key.get_pressed()
        except pygame.error:
            keys = None
        if keys is not None:
            if keys[pygame.K_w]:
                movement.y -= 1
            if keys[pygame.K_s]:
                movement.y += 1
            if keys[pygame.K_a]:
                movement.x -= 1
            if keys[pygame.K_d]:
                movement.x += 1
        self.move(movement, dt)


class EnemyAI(Component):
    """Walks straight towards a target object."""

    def __init__(self, target: GameObject, speed: float) -> None:
        super().__init__()
        self.target = target
        self.speed = speed

    def update(self, dt: float) -> None:
        direction = normalize(self.target.position - self.game_object.position)
        self.game_object.position = self.game_object.position + direction * (self.speed * dt)
        _animate(self.game_object, direction.length() > 0, direction)