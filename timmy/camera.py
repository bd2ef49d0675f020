"""Following 2D camera with zoom, smoothing and screen shake."""

from __future__ import annotations

from typing import Any, ClassVar

import pygame
from pygame.math import Vector2

from .mathutils import lerp, random_float
from .timer import Timer

MIN_ZOOM = 0.1
MAX_ZOOM = 3.0
LIME = (0, 158, 47)


class CameraManager:
    """Shared camera that smoothly follows a target."""

    _instance: ClassVar[CameraManager | None] = None

    def __init__(self) -> None:
        self.shake_timer = Timer()
        self.init((0, 0))

    @classmethod
    def get(cls) -> CameraManager:
        """The shared camera instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self, screen_size) -> None:
        """Reset the camera for a screen of the given size."""
        self.screen_size = Vector2(screen_size)
        self._follow: Any = None
        self.offset_ratio = Vector2(0.5, 0.5)
        self.zoom = 3.0
        self.rotation = 0.0
        self.lerp_speed = 5.0

        self.show_reticle = False
        self.reticle_size = 20.0
        self.reticle_thickness = 1.2
        self.reticle_color = LIME

        self.shake_intensity = 0.0

        self.view_target = Vector2(0.0, 0.0)
        self.view_offset = self._default_offset()
        self.view_rotation = self.rotation
        self.view_zoom = self.zoom

    def clear(self) -> None:
        self._follow = None
        self.shake_intensity = 0.0
        self.shake_timer.reset(0.0)

    def _default_offset(self) -> Vector2:
        return Vector2(
            self.screen_size.x * self.offset_ratio.x,
            self.screen_size.y * self.offset_ratio.y,
        )

    def _follow_point(self) -> Vector2 | None:
        if self._follow is None:
            return None
        if isinstance(self._follow, Vector2):
            return self._follow
        return Vector2(self._follow.position)

    @property
    def target(self) -> Any:
        return self._follow

    def update(self, dt: float, wheel_move: float = 0.0) -> None:
        """Move towards the target, apply wheel zoom and shake."""
        default_offset = self._default_offset()
        follow = self._follow_point()
        if follow is not None:
            amount = self.lerp_speed * dt
            self.view_target = lerp(self.view_target, Vector2(follow), amount)
            self.view_offset = lerp(self.view_offset, default_offset, amount)
            self.view_zoom = lerp(self.view_zoom, self.zoom, amount)
            self.view_rotation = lerp(self.view_rotation, self.rotation, amount)

        if wheel_move != 0:
            self.zoom += wheel_move * 0.1
            self.zoom = min(max(MIN_ZOOM, self.zoom), MAX_ZOOM)

        self.shake_timer.update(dt)

        if self.shake_timer.running:
            jitter = Vector2(
                random_float(-self.shake_intensity, self.shake_intensity),
                random_float(-self.shake_intensity, self.shake_intensity),
            )
            self.view_offset = default_offset + jitter
        else:
            self.shake_intensity = 0.0
            self.view_offset = default_offset

    def set_target(self, target: Any) -> None:
        """Follow an object with a ``position``, a vector, or nothing."""
        self._follow = target

    def set_offset_ratio(self, ratio) -> None:
        self.offset_ratio = Vector2(ratio)

    def world_to_screen(self, point) -> Vector2:
        relative = (Vector2(point) - self.view_target) * self.view_zoom
        return relative.rotate(self.view_rotation) + self.view_offset

    def screen_to_world(self, point) -> Vector2:
        relative = (Vector2(point) - self.view_offset).rotate(-self.view_rotation)
        return relative / self.view_zoom + self.view_target

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the target reticle when enabled."""
        if not self.show_reticle:
            return

        pos = self.view_target
        s = self.reticle_size / self.view_zoom
        t = self.reticle_thickness / self.view_zoom
        gap = s * 0.3
        width = max(1, round(t * self.view_zoom))

        segments = []
        for sx in (-1, 1):
            for sy in (-1, 1):
                corner = Vector2(pos.x + sx * s, pos.y + sy * s)
                segments.append((corner, Vector2(pos.x + sx * gap, corner.y)))
                segments.append((corner, Vector2(corner.x, pos.y + sy * gap)))

        for start, end in segments:
            pygame.draw.line(
                surface,
                self.reticle_color,
                self.world_to_screen(start),
                self.world_to_screen(end),
                width,
            )

        radius = max(1, round(t * 1.5 * self.view_zoom))
        pygame.draw.circle(surface, self.reticle_color, self.world_to_screen(pos), radius)

    def shake(self, intensity: float, duration: float) -> None:
        self.shake_intensity = intensity
        self.shake_timer.reset(duration)