"""Game objects and the components attached to them."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, TypeVar

from pygame.math import Vector2

if TYPE_CHECKING:
    import pygame

    from .collider import Collider
    from .world import World


class Layer(IntEnum):
    DEFAULT = 0
    PLAYER = 1
    ENEMY = 2
    PROJECTILE = 3
    UI = 4
    ITEM = 5


class Component:
    """Behaviour attached to a game object; all hooks default to no-ops."""

    def __init__(self) -> None:
        self.game_object: GameObject | None = None

    def start(self) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def draw(self, surface: pygame.Surface) -> None:
        pass

    def draw_ui(self, surface: pygame.Surface) -> None:
        pass

    def on_trigger_enter(self, other: Collider) -> None:
        pass

    def on_destroy(self) -> None:
        pass


C = TypeVar("C", bound=Component)


class GameObject:
    """A named entity in a world, made of components."""

    def __init__(self, name: str, world: World | None = None) -> None:
        self.name = name
        self.world = world
        self.layer = Layer.DEFAULT
        self.position = Vector2(0.0, 0.0)
        self.components: list[Component] = []
        self.alive = True

    def add_component(self, component: C) -> C:
        """Attach ``component``, start it and return it."""
        component.game_object = self
        self.components.append(component)
        component.start()
        return component

    def get_component(self, kind: type[C]) -> C | None:
        """The first component that is an instance of ``kind``."""
        return next((c for c in self.components if isinstance(c, kind)), None)

    def start(self) -> None:
        for component in self.components:
            component.start()

    def update(self, dt: float) -> None:
        for component in self.components:
            component.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        for component in self.components:
            component.draw(surface)

    def draw_ui(self, surface: pygame.Surface) -> None:
        for component in self.components:
            component.draw_ui(surface)

    def on_destroy(self) -> None:
        for component in self.components:
            component.on_destroy()

    def destroy(self) -> None:
        """Mark the object for removal at the end of the world update."""
        self.alive = False