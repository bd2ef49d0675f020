"""Hit points, damage feedback and a health bar."""

from __future__ import annotations

import math
from typing import Callable

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .gameobject import Component
from .mathutils import random_int
from .render import SpriteRenderer
from .timer import Timer

_WHITE = (255, 255, 255, 255)
_HIT_TINT = (230, 41, 55, round(255 * 0.8))
_DARKGRAY = (80, 80, 80)
_MAROON = (190, 33, 55)
_BLACK = (0, 0, 0)

_BAR_WIDTH = 20.0
_BAR_HEIGHT = 3.0
_BAR_Y_OFFSET = 15.0


class Health(Component):
    """Takes damage, squashes the sprite when hit and destroys the owner at zero."""

    def __init__(self, max_hp: float) -> None:
        super().__init__()
        self.max_hp = max_hp
        self.hp = max_hp

        self.invincibility_time = 0.1
        self.invincibility_timer = Timer(0.0, False)

        self.on_death: Callable[[], None] | None = None
        self.on_damage: Callable[[float], None] | None = None

        self.hit_timer = Timer(0.0, False)
        self.bounce_scale = 0.15
        self.squash_dir_x = 1.0
        self.squash_dir_y = -1.0

    def update(self, dt: float) -> None:
        self.invincibility_timer.update(dt)
        self.hit_timer.update(dt)

        sprite = self.game_object.get_component(SpriteRenderer)
        if sprite is None:
            return

        if self.hit_timer.running:
            p = 1.0 - self.hit_timer.progress
            wave = math.sin(p * math.pi) * self.bounce_scale
            sprite.scale = Vector2(
                1.0 + wave * self.squash_dir_x,
                1.0 + wave * self.squash_dir_y,
            )
            sprite.tint = _HIT_TINT
            return

        sprite.scale = Vector2(1.0, 1.0)
        sprite.tint = _WHITE

    def take_damage(self, damage: float) -> None:
        """Lose ``damage`` hit points unless invincible or already dead."""
        if self.invincibility_timer.running or self.hp <= 0.0:
            return

        self.hp -= damage
        self.invincibility_timer.reset(self.invincibility_time)
        self.hit_timer.reset(0.1)

        if self.on_damage is not None:
            self.on_damage(damage)

        if random_int(0, 1) == 0:
            self.squash_dir_x, self.squash_dir_y = 1.0, -1.0
        else:
            self.squash_dir_x, self.squash_dir_y = -1.0, 1.0

        if self.hp <= 0.0:
            self.hp = 0.0
            self.die()

    def die(self) -> None:
        if self.on_death is not None:
            self.on_death()
        self.game_object.destroy()

    def draw(self, surface: pygame.Surface) -> None:
        camera = CameraManager.get()
        zoom = camera.view_zoom
        position = self.game_object.position
        top_left = camera.world_to_screen(
            (position.x - _BAR_WIDTH / 2.0, position.y - _BAR_Y_OFFSET)
        )
        height = max(1, round(_BAR_HEIGHT * zoom))
        background = pygame.Rect(
            round(top_left.x), round(top_left.y), max(1, round(_BAR_WIDTH * zoom)), height
        )
        pygame.draw.rect(surface, _DARKGRAY, background)

        fill_width = round(_BAR_WIDTH * (self.hp / self.max_hp) * zoom)
        if fill_width > 0:
            pygame.draw.rect(
                surface, _MAROON, pygame.Rect(background.x, background.y, fill_width, height)
            )
        pygame.draw.rect(surface, _BLACK, background, 1)