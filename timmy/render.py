"""Sprite animation and world-anchored text rendering."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import pygame
from pygame.math import Vector2

from .camera import CameraManager
from .gameobject import Component
from .lifetime import Lifetime
from .resources import ResourceManager
from .timer import Timer

_WHITE = (255, 255, 255, 255)
_BLACK = (0, 0, 0, 255)
_RED = (230, 41, 55, 255)


@dataclass(frozen=True)
class AnimationClip:
    """A strip of equally sized frames on a texture."""

    name: str
    texture_path: str
    start_x: int
    start_y: int
    frame_width: int
    frame_height: int
    frame_count: int
    frame_speed: float
    loop: bool


class SpriteRenderer(Component):
    """Plays named animation clips and draws the current frame."""

    def __init__(self) -> None:
        super().__init__()
        self._animations: dict[str, AnimationClip] = {}
        self._current = ""
        self._frame = 0
        self._frame_timer = Timer(0.0, True)
        self._playing = False
        self.debug_mode = False

        self.scale = Vector2(1.0, 1.0)
        self.rotation = 0.0
        self.tint = _WHITE
        self.flip_x = False
        self.anchor_ratio = Vector2(0.5, 0.5)
        self.offset = Vector2(0.0, 0.0)

    def add_animation(
        self,
        name: str,
        texture_path: str,
        start_x: int,
        start_y: int,
        frame_width: int,
        frame_height: int,
        frame_count: int,
        frame_speed: float,
        loop: bool,
    ) -> None:
        """Register a clip; the first clip added starts playing."""
        self._animations[name] = AnimationClip(
            name,
            texture_path,
            start_x,
            start_y,
            frame_width,
            frame_height,
            frame_count,
            frame_speed,
            loop,
        )
        if not self._current:
            self.play(name)

    def play(self, name: str) -> None:
        """Switch to clip ``name``; unknown names and the playing clip are ignored."""
        if self._current == name and self._playing:
            return
        clip = self._animations.get(name)
        if clip is None:
            return
        self._current = name
        self._frame = 0
        self._frame_timer.reset(clip.frame_speed)
        self._playing = True

    @property
    def current_clip(self) -> str:
        return self._current

    @property
    def current_frame(self) -> int:
        return self._frame

    @property
    def playing(self) -> bool:
        return self._playing

    def update(self, dt: float) -> None:
        if not self._playing or not self._current:
            return
        clip = self._animations[self._current]
        self._frame_timer.update(dt)
        if not self._frame_timer.completed_this_frame:
            return
        self._frame += 1
        if self._frame >= clip.frame_count:
            if clip.loop:
                self._frame = 0
            else:
                self._frame = clip.frame_count - 1
                self._playing = False

    def draw(self, surface: pygame.Surface) -> None:
        clip = self._animations.get(self._current)
        if clip is None:
            return
        texture = ResourceManager.get().texture(clip.texture_path)
        if texture is None:
            return

        source = pygame.Rect(
            clip.start_x + self._frame * clip.frame_width,
            clip.start_y,
            clip.frame_width,
            clip.frame_height,
        ).clip(texture.get_rect())
        if source.width == 0 or source.height == 0:
            return
        image = texture.subsurface(source)
        if self.flip_x:
            image = pygame.transform.flip(image, True, False)

        camera = CameraManager.get()
        zoom = camera.view_zoom
        draw_w = clip.frame_width * self.scale.x
        draw_h = clip.frame_height * self.scale.y
        size = (max(1, round(abs(draw_w) * zoom)), max(1, round(abs(draw_h) * zoom)))
        image = self._tinted(pygame.transform.scale(image, size))

        anchor = Vector2(draw_w * self.anchor_ratio.x, draw_h * self.anchor_ratio.y)
        pivot = camera.world_to_screen(self.game_object.position + self.offset)
        angle = self.rotation + camera.view_rotation
        to_center = ((Vector2(draw_w, draw_h) / 2 - anchor) * zoom).rotate(angle)
        if angle:
            image = pygame.transform.rotate(image, -angle)
        center = pivot + to_center
        rect = image.get_rect(center=(round(center.x), round(center.y)))
        surface.blit(image, rect)

        if self.debug_mode:
            top_left = pivot - anchor * zoom
            debug_rect = pygame.Rect(round(top_left.x), round(top_left.y), *size)
            pygame.draw.rect(surface, _RED, debug_rect, 1)

    def _tinted(self, image: pygame.Surface) -> pygame.Surface:
        if tuple(pygame.Color(self.tint)) == _WHITE:
            return image
        tinted = pygame.Surface(image.get_size(), pygame.SRCALPHA)
        tinted.blit(image, (0, 0))
        tinted.fill(pygame.Color(self.tint), special_flags=pygame.BLEND_RGBA_MULT)
        return tinted


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class TextRenderer(Component):
    """Outlined text drawn in screen space at the owner's world position."""

    def __init__(
        self,
        text: str,
        color,
        font_size: int,
        alpha: float = 1.0,
        centered: bool = True,
        has_outline: bool = True,
        outline_color=_BLACK,
        outline_thickness: int = 1,
        fade_out: bool = False,
    ) -> None:
        super().__init__()
        self.text = text
        self.color = color
        self.font_size = font_size
        self.alpha = alpha
        self.centered = centered
        self.has_outline = has_outline
        self.outline_color = outline_color
        self.outline_thickness = outline_thickness
        self.fade_out = fade_out

    @property
    def current_alpha(self) -> float:
        """Opacity, following the owner's lifetime when fading out."""
        if self.fade_out and self.game_object is not None:
            lifetime = self.game_object.get_component(Lifetime)
            if lifetime is not None:
                return 1.0 - lifetime.timer.progress
        return self.alpha

    def draw_ui(self, surface: pygame.Surface) -> None:
        self.alpha = self.current_alpha
        font = _font(self.font_size)
        position = CameraManager.get().world_to_screen(self.game_object.position)
        if self.centered:
            position.x -= font.size(self.text)[0] * 0.5

        if self.has_outline and self.outline_thickness > 0:
            stroke = self._render(font, self.outline_color)
            t = self.outline_thickness
            for dx in (-t, 0, t):
                for dy in (-t, 0, t):
                    if dx or dy:
                        surface.blit(stroke, (round(position.x + dx), round(position.y + dy)))

        surface.blit(self._render(font, self.color), (round(position.x), round(position.y)))

    def _render(self, font: pygame.font.Font, color) -> pygame.Surface:
        color = pygame.Color(color)
        image = font.render(self.text, True, (color.r, color.g, color.b))
        alpha = min(max(self.alpha, 0.0), 1.0)
        image.set_alpha(round(255 * alpha * color.a / 255))
        return image