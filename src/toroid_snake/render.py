"""Drawing contract between the simulation and whatever paints it."""

from __future__ import annotations

from typing import Callable, Protocol

import pygame

from .config import PALETTE, SEGMENT_ALPHA_SPAN
from .simulation import Frame


ShapeDraw = Callable[[pygame.Surface, pygame.Color, pygame.Rect], object]


class Canvas(Protocol):
    def setup(self, width: int, height: int, background: pygame.Color) -> None: ...
    def set_fill_color(self, color: pygame.Color) -> None: ...
    def draw_square(self, x: float, y: float, size: float) -> None: ...
    def draw_ellipse(self, x: float, y: float, w: float, h: float) -> None: ...


def segment_colors(count: int, dying: bool) -> list[pygame.Color]:
    """Return tail-to-head colors, fading in alpha toward the head."""
    base = PALETTE["dead"] if dying else PALETTE["snake"]
    colors = []
    for i in range(count):
        color = pygame.Color(base)
        color.a = i * SEGMENT_ALPHA_SPAN // count
        colors.append(color)
    return colors


def render_frame(canvas: Canvas, frame: Frame, size: float) -> None:
    """Issue the draw calls for one tick: food squares, then body cells."""
    canvas.set_fill_color(pygame.Color(PALETTE["food"]))
    half = size / 2
    for c in frame.food:
        # squares are anchored on their top-left corner
        canvas.draw_square(c.x - half, c.y - half, size)

    for c, color in zip(frame.body, segment_colors(len(frame.body), frame.dying)):
        canvas.set_fill_color(color)
        canvas.draw_ellipse(c.x, c.y, size, size)


class PygameCanvas:
    """Canvas backed by a pygame surface; shapes honor the fill alpha."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.background = pygame.Color(PALETTE["background"])
        self.fill = pygame.Color(0, 0, 0)

    def setup(self, width: int, height: int, background: pygame.Color) -> None:
        if self.surface.get_size() != (width, height):
            self.surface = pygame.Surface((width, height))
        self.background = pygame.Color(background)
        self.clear()

    def clear(self) -> None:
        self.surface.fill(self.background)

    def set_fill_color(self, color: pygame.Color) -> None:
        self.fill = pygame.Color(color)

    def _blit_shape(self, rect: pygame.Rect, draw: ShapeDraw) -> None:
        if self.fill.a == 255:
            draw(self.surface, self.fill, rect)
            return
        shape = pygame.Surface(rect.size, pygame.SRCALPHA)
        draw(shape, self.fill, shape.get_rect())
        self.surface.blit(shape, rect.topleft)

    def draw_square(self, x: float, y: float, size: float) -> None:
        rect = pygame.Rect(round(x), round(y), round(size), round(size))
        self._blit_shape(rect, pygame.draw.rect)

    def draw_ellipse(self, x: float, y: float, w: float, h: float) -> None:
        rect = pygame.Rect(0, 0, round(w), round(h))
        rect.center = (round(x), round(y))
        self._blit_shape(rect, pygame.draw.ellipse)

