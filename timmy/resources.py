"""Cache of textures loaded from disk."""

from __future__ import annotations

import sys
from typing import ClassVar

import pygame

SPRITE_SHEET = "../assets/source.png"


class ResourceManager:
    """Loads each texture once and hands out the cached surface afterwards."""

    _instance: ClassVar[ResourceManager | None] = None

    def __init__(self) -> None:
        self._cache: dict[str, pygame.Surface] = {}

    @classmethod
    def get(cls) -> ResourceManager:
        """The shared resource manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self) -> None:
        """Preload the main sprite sheet."""
        self.texture(SPRITE_SHEET)

    def clear(self) -> None:
        """Drop every cached texture."""
        for path in self._cache:
            print(f"Unloading texture: {path}")
        self._cache.clear()
        print("All resources unloaded.")

    def texture(self, path: str) -> pygame.Surface | None:
        """The texture at ``path``, loading it on first use; None if it fails."""
        cached = self._cache.get(path)
        if cached is None:
            try:
                cached = pygame.image.load(path)
            except (pygame.error, OSError):
                print(f"Failed to load texture: {path}", file=sys.stderr)
                return None
            self._cache[path] = cached
            print(f"Loaded texture: {path}")
        return cached

    def __contains__(self, path: object) -> bool:
        return path in self._cache

    def __len__(self) -> int:
        return len(self._cache)