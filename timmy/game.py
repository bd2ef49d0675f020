"""Game state, main loop and the command that starts the game."""

from __future__ import annotations

import argparse
from typing import ClassVar

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .gameobject import GameObject, Layer
from .mathutils import random_around_position, random_int
from .prefabs import create_knight, create_player
from .resources import ResourceManager
from .world import World

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 900
NUM_SHOCKWAVES = 20

_RAYWHITE = (245, 245, 245)
_BLACK = (0, 0, 0)
_DARKGRAY = (80, 80, 80)
_GOLD = (255, 203, 0)
_RED = (230, 41, 55)
_LIME = (0, 158, 47)


class GameManager:
    """Owns the world, the player, game speed, coins and shockwave effects."""

    NUM_SHOCKWAVES: ClassVar[int] = NUM_SHOCKWAVES
    _instance: ClassVar[GameManager | None] = None

    def __init__(self) -> None:
        self.screen_size = Vector2(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.aspect_ratio = SCREEN_WIDTH / SCREEN_HEIGHT
        self.shock_centres = [Vector2(0.0, 0.0) for _ in range(NUM_SHOCKWAVES)]
        self.shock_times = [999.0] * NUM_SHOCKWAVES

        self.world = World()
        self.player: GameObject | None = None
        self.game_speed = 1.0
        self.coin = 0

        self.wheel_move = 0.0
        self.fps = 0.0
        self._scene: pygame.Surface | None = None
        self._fonts: dict[int, pygame.font.Font] = {}

    @classmethod
    def get(cls) -> GameManager:
        """The shared game manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self, screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT)) -> None:
        """Prepare effects for the screen, spawn the player and the first enemies."""
        self.screen_size = Vector2(screen_size)
        self.aspect_ratio = self.screen_size.x / self.screen_size.y
        self.shock_times = [999.0] * NUM_SHOCKWAVES
        self.shock_centres = [Vector2(0.0, 0.0) for _ in range(NUM_SHOCKWAVES)]
        self._scene = pygame.Surface((int(self.screen_size.x), int(self.screen_size.y)))

        self.player = create_player(self.world, (0.0, 0.0))
        CameraManager.get().set_target(self.player)

        self.populate()

    def populate(self) -> None:
        self.spawn_enemies(10)

    def spawn_enemies(self, count: int) -> None:
        """Spawn ``count`` knights in a ring around the player."""
        for _ in range(count):
            position = random_around_position(self.player.position, 300.0, 700.0)
            create_knight(self.world, position, self.player)

    def handle_key(self, key: int) -> None:
        """React to a key press: retarget camera, spawn enemies, change speed."""
        if key == pygame.K_TAB and self.world.objects:
            index = random_int(0, len(self.world.objects) - 1)
            CameraManager.get().set_target(self.world.objects[index])
        elif key == pygame.K_r:
            self.spawn_enemies(20)
        elif key == pygame.K_LEFT:
            self.game_speed = max(0.1, self.game_speed - 0.1)
        elif key == pygame.K_RIGHT:
            self.game_speed = min(5.0, self.game_speed + 0.1)

    def add_shock(self, position) -> None:
        """Start a shockwave at a world position, reusing the oldest slot."""
        screen = CameraManager.get().world_to_screen(position)
        selected = -1
        oldest = -1.0
        for index, time in enumerate(self.shock_times):
            if time >= 1.0:
                selected = index
                break
            if time > oldest:
                oldest = time
                selected = index

        if selected < 0:
            return

        self.shock_times[selected] = 0.0
        self.shock_centres[selected] = Vector2(
            screen.x / self.screen_size.x,
            1.0 - screen.y / self.screen_size.y,
        )

    def update(self, dt: float) -> None:
        """Advance the world by scaled time and the camera and effects by real time."""
        scaled_dt = dt * self.game_speed
        self.world.update(scaled_dt)
        self.world.resolve_collisions()

        CameraManager.get().update(dt, self.wheel_move)
        self.wheel_move = 0.0

        self.shock_times = [t + dt if t < 1.0 else t for t in self.shock_times]

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _text(self, surface: pygame.Surface, text: str, position, size: int, color) -> None:
        surface.blit(self._font(size).render(text, True, color), position)

    def draw_ui(self, surface: pygame.Surface) -> None:
        self._text(surface, "Use WASD to move", (10, 30), 20, _DARKGRAY)
        self.world.draw_ui(surface)
        self._text(surface, f"Coins: {self.coin}", (10, 50), 20, _GOLD)
        enemies = len(self.world.objects_in_layer(Layer.ENEMY))
        self._text(surface, f"Enemies: {enemies}", (10, 70), 20, _RED)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the world to an offscreen scene, then effects and UI on top."""
        size = surface.get_size()
        if self._scene is None or self._scene.get_size() != size:
            self._scene = pygame.Surface(size)

        camera = CameraManager.get()
        scene = self._scene
        scene.fill(_RAYWHITE)
        label = camera.world_to_screen((0.0, 0.0))
        label_size = max(1, round(40 * camera.view_zoom))
        self._text(scene, "Map", (round(label.x), round(label.y)), label_size, _BLACK)
        self.world.draw(scene)
        camera.draw(scene)

        surface.fill(_BLACK)
        surface.blit(scene, (0, 0))
        self._draw_shockwaves(surface)

        self.draw_ui(surface)
        self._text(surface, f"{round(self.fps)} FPS", (10, 10), 20, _LIME)

    def _draw_shockwaves(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        overlay = None
        for centre, time in zip(self.shock_centres, self.shock_times):
            if time >= 1.0:
                continue
            if overlay is None:
                overlay = pygame.Surface((width, height), pygame.SRCALPHA)
            position = (centre.x * width, (1.0 - centre.y) * height)
            radius = max(1, round(time * max(width, height) * 0.5))
            alpha = round(80 * (1.0 - time))
            ring = max(1, round(6 * (1.0 - time)))
            pygame.draw.circle(overlay, (255, 255, 255, alpha), position, radius, ring)
        if overlay is not None:
            surface.blit(overlay, (0, 0))

    def clear(self) -> None:
        """Release rendering resources and effect state."""
        self._scene = None
        self._fonts.clear()
        self.shock_times = [999.0] * NUM_SHOCKWAVES

    def add_coin(self, amount: int) -> None:
        self.coin += amount


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="timmy", description="Top-down survival game.")
    parser.parse_args(argv)

    pygame.init()
    size = (SCREEN_WIDTH, SCREEN_HEIGHT)
    try:
        screen = pygame.display.set_mode(size, vsync=1)
    except pygame.error:
        screen = pygame.display.set_mode(size)
    pygame.display.set_caption("Timmy Survival")

    camera = CameraManager.get()
    game = GameManager.get()
    resources = ResourceManager.get()

    camera.init(size)
    game.init(size)
    resources.init()

    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                running = False
            elif event.type == pygame.KEYDOWN:
                game.handle_key(event.key)
            elif event.type == pygame.MOUSEWHEEL:
                game.wheel_move += event.y
        if not running:
            break

        dt = clock.tick() / 1000.0
        game.fps = clock.get_fps()
        game.update(dt)
        game.draw(screen)
        pygame.display.flip()

    game.clear()
    camera.clear()
    resources.clear()

    pygame.quit()
    return 0