"""Component that destroys its object after a fixed time."""

from __future__ import annotations

from .gameobject import Component
from .timer import Timer


class Lifetime(Component):
    """Destroys the owning object once ``duration`` seconds have passed."""

    def __init__(self, duration: float) -> None:
        super().__init__()
        self.timer = Timer(duration, False)

    def update(self, dt: float) -> None:
        self.timer.update(dt)
        if not self.timer.running:
            self.game_object.destroy()