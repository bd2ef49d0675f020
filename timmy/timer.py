"""Frame-driven timer that counts up to a target duration."""

from __future__ import annotations

import math


class Timer:
    """Counts elapsed time towards a target, optionally looping."""

    def __init__(self, target: float = 0.0, looping: bool = False) -> None:
        self._target = max(0.0, target)
        self._current = 0.0
        self.looping = looping
        self._running = self._target > 0.0
        self._completed = False

    def update(self, dt: float) -> None:
        """Advance the timer by ``dt`` seconds."""
        self._completed = False
        if not self._running:
            return

        self._current += dt
        if self._current < self._target:
            return

        self._completed = True
        if self.looping:
            self._current = math.fmod(self._current, self._target)
        else:
            self._current = self._target
            self._running = False

    def reset(self, new_target: float | None = None) -> None:
        """Restart the timer, optionally with a new target."""
        if new_target is not None:
            self.target_time = new_target
        self.start()

    def start(self) -> None:
        """Start counting from zero; a timer without a target stays stopped."""
        self._current = 0.0
        self._running = self._target > 0.0
        self._completed = False

    def stop(self) -> None:
        """Stop the timer and clear its elapsed time."""
        self._current = 0.0
        self._running = False
        self._completed = False

    @property
    def target_time(self) -> float:
        return self._target

    @target_time.setter
    def target_time(self, new_target: float) -> None:
        self._target = max(0.0, new_target)
        if self._target <= 0.0:
            self.stop()
            return
        if self._current > self._target:
            self._current = self._target

    @property
    def current_time(self) -> float:
        return self._current

    @property
    def progress(self) -> float:
        """Fraction of the target reached, between 0 and 1."""
        if self._target <= 0.0:
            return 1.0
        return min(max(self._current / self._target, 0.0), 1.0)

    @property
    def completed_this_frame(self) -> bool:
        return self._completed

    @property
    def running(self) -> bool:
        return self._running