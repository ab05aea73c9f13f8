"""
Tests for render.py - frame hand-off to a canvas.
"""

import pygame

from toroid_snake.config import PALETTE
from toroid_snake.geometry import Point
from toroid_snake.movement import Direction
from toroid_snake.render import PygameCanvas, render_frame, segment_colors
from toroid_snake.simulation import Frame


class RecordingCanvas:
    """Canvas double that keeps every call."""

    def __init__(self):
        self.calls = []

    def setup(self, width, height, background):
        self.calls.append(("setup", width, height, tuple(background)))

    def set_fill_color(self, color):
        self.calls.append(("fill", tuple(color)))

    def draw_square(self, x, y, size):
        self.calls.append(("square", x, y, size))

    def draw_ellipse(self, x, y, w, h):
        self.calls.append(("ellipse", x, y, w, h))


def make_frame(body, food, direction=Direction.RIGHT):
    return Frame(
        head=body[-1] if body else Point(0, 0),
        body=tuple(body),
        food=tuple(food),
        direction=direction,
        score=0,
        max_score=0,
    )


class TestSegmentColors:
    """Tests for segment_colors()."""

    def test_alpha_fades_in_toward_the_head(self):
        colors = segment_colors(4, dying=False)
        assert [c.a for c in colors] == [0, 45, 90, 135]
        assert all((c.r, c.g, c.b) == (0, 255, 0) for c in colors)

    def test_dead_snake_uses_dead_color(self):
        colors = segment_colors(2, dying=True)
        assert all((c.r, c.g, c.b) == (255, 165, 0) for c in colors)

    def test_palette_is_not_mutated(self):
        segment_colors(3, dying=False)
        assert PALETTE["snake"].a == 255

    def test_empty_body(self):
        assert segment_colors(0, dying=False) == []


class TestRenderFrame:
    """Tests for render_frame()."""

    def test_draw_calls(self):
        """Food is drawn as top-left squares, body as centered ellipses."""
        canvas = RecordingCanvas()
        frame = make_frame([Point(10, 10), Point(20, 10)], [Point(50, 50)])
        render_frame(canvas, frame, 10)

        assert canvas.calls == [
            ("fill", (255, 0, 0, 255)),
            ("square", 45, 45, 10),
            ("fill", (0, 255, 0, 0)),
            ("ellipse", 10, 10, 10, 10),
            ("fill", (0, 255, 0, 90)),
            ("ellipse", 20, 10, 10, 10),
        ]

    def test_dying_frame_uses_dead_color(self):
        canvas = RecordingCanvas()
        frame = make_frame([Point(10, 10)], [], direction=Direction.DIE)
        render_frame(canvas, frame, 10)
        assert canvas.calls[2] == ("ellipse", 10, 10, 10, 10)
        assert canvas.calls[0][1][:3] == (255, 0, 0)
        fill = [c for c in canvas.calls if c[0] == "fill"][-1]
        assert fill[1][:3] == (255, 165, 0)


class TestPygameCanvas:
    """Tests for PygameCanvas on an off-screen surface."""

    def test_setup_paints_background(self):
        canvas = PygameCanvas(pygame.Surface((40, 40)))
        canvas.setup(40, 40, pygame.Color(220, 220, 220))
        assert tuple(canvas.surface.get_at((0, 0)))[:3] == (220, 220, 220)

    def test_setup_resizes(self):
        canvas = PygameCanvas(pygame.Surface((10, 10)))
        canvas.setup(30, 20, pygame.Color(0, 0, 0))
        assert canvas.surface.get_size() == (30, 20)

    def test_opaque_square(self):
        canvas = PygameCanvas(pygame.Surface((40, 40)))
        canvas.setup(40, 40, pygame.Color(220, 220, 220))
        canvas.set_fill_color(pygame.Color(255, 0, 0))
        canvas.draw_square(10, 10, 10)
        assert tuple(canvas.surface.get_at((15, 15)))[:3] == (255, 0, 0)
        assert tuple(canvas.surface.get_at((25, 25)))[:3] == (220, 220, 220)

    def test_transparent_ellipse_leaves_background(self):
        canvas = PygameCanvas(pygame.Surface((40, 40)))
        canvas.setup(40, 40, pygame.Color(220, 220, 220))
        canvas.set_fill_color(pygame.Color(0, 255, 0, 0))
        canvas.draw_ellipse(20, 20, 10, 10)
        assert tuple(canvas.surface.get_at((20, 20)))[:3] == (220, 220, 220)

    def test_opaque_ellipse_is_centered(self):
        canvas = PygameCanvas(pygame.Surface((40, 40)))
        canvas.setup(40, 40, pygame.Color(220, 220, 220))
        canvas.set_fill_color(pygame.Color(0, 255, 0))
        canvas.draw_ellipse(20, 20, 10, 10)
        assert tuple(canvas.surface.get_at((20, 20)))[:3] == (0, 255, 0)
        assert tuple(canvas.surface.get_at((5, 5)))[:3] == (220, 220, 220)
