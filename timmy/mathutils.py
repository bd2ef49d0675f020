"""Random helpers and small vector utilities."""

from __future__ import annotations

import math
import random
from typing import TypeVar

from pygame.math import Vector2

_rng = random.Random()

T = TypeVar("T", float, Vector2)


def random_float(low: float, high: float) -> float:
    """Uniform float between ``low`` and ``high``."""
    return _rng.uniform(low, high)


def random_int(low: int, high: int) -> int:
    """Uniform integer in the inclusive range ``low``..``high``."""
    return _rng.randint(low, high)


def random_around_position(origin, min_radius: float, max_radius: float) -> Vector2:
    """A random point at a distance between the two radii from ``origin``."""
    origin = Vector2(origin)
    angle = random_float(0.0, math.pi * 2.0)
    distance = random_float(min_radius, max_radius)
    return Vector2(
        origin.x + math.cos(angle) * distance,
        origin.y + math.sin(angle) * distance,
    )


def check_chance(chance: float) -> bool:
    """True with probability ``chance``."""
    return random_float(0.0, 1.0) < chance


def normalize(vector) -> Vector2:
    """Unit vector in the same direction, or the zero vector."""
    vector = Vector2(vector)
    if vector.length() > 0.0:
        return vector.normalize()
    return Vector2(0.0, 0.0)


def lerp(start: T, end: T, amount: float) -> T:
    """Linear interpolation that works for floats and vectors."""
    return start + (end - start) * amount