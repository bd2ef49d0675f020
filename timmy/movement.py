"""Movement components: attraction towards a target and free velocity."""

from __future__ import annotations

from typing import Any, Callable

from pygame.math import Vector2

from .gameobject import Component
from .mathutils import lerp, normalize


class Magnet(Component):
    """Pulls the owner towards a target and calls ``on_collect`` on arrival."""

    def __init__(self) -> None:
        super().__init__()
        self.target: Any = None
        self.speed = 200.0
        self.on_collect: Callable[[], None] | None = None

    def _target_point(self) -> Vector2 | None:
        if self.target is None:
            return None
        if isinstance(self.target, Vector2):
            return self.target
        return Vector2(self.target.position)

    def update(self, dt: float) -> None:
        target = self._target_point()
        if target is None:
            return
        direction = target - self.game_object.position
        if direction.length() > 1.0:
            self.game_object.position = (
                self.game_object.position + normalize(direction) * (self.speed * dt)
            )
        elif self.on_collect is not None:
            self.on_collect()


class Velocity(Component):
    """Moves the owner by a velocity that decays with ``damping``."""

    def __init__(self, velocity=(0.0, 0.0), damping: float = 0.0) -> None:
        super().__init__()
        self.velocity = Vector2(velocity)
        self.damping = damping

    def apply(self, force) -> None:
        """Replace the current velocity."""
        self.velocity = Vector2(force)

    def update(self, dt: float) -> None:
        if self.velocity.x == 0.0 and self.velocity.y == 0.0:
            return
        self.game_object.position = self.game_object.position + self.velocity * dt
        if self.damping <= 0.0:
            return
        self.velocity = lerp(self.velocity, Vector2(0.0, 0.0), self.damping * dt)
        if self.velocity.length_squared() < 1.0:
            self.velocity = Vector2(0.0, 0.0)