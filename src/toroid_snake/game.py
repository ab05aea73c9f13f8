"""Toroid Snake window: samples keys, ticks the simulation, paints the frame."""

from __future__ import annotations

import logging
import time

import pygame

from .config import (
    CELL,
    FOOD_COUNT,
    FPS,
    HEIGHT,
    KEY_NAMES,
    PALETTE,
    QUIT_KEY,
    SCREENSHOT_DIR,
    SCREENSHOT_KEY,
    SPEED,
    START_LENGTH,
    WIDTH,
)
from .render import PygameCanvas, render_frame
from .simulation import Frame, InputSnapshot, SimulationState, update

logger = logging.getLogger(__name__)


def key_name(event: pygame.event.Event) -> str:
    """Translate a KEYDOWN event into the simulation's key names."""
    name = KEY_NAMES.get(event.key)
    if name is not None:
        return name
    return getattr(event, "unicode", "") or ""


class ToroidSnake:
    """Owns the window and the simulation state; one update per frame."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        cell: float = CELL,
        speed: float = SPEED,
        start: int = START_LENGTH,
        foods: int = FOOD_COUNT,
        *,
        seed: int | None = None,
    ) -> None:
        self.state = SimulationState.create(
            width, height, cell, speed, start, foods, seed=seed
        )
        pygame.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Toroid Snake")
        self.canvas = PygameCanvas(self.window)
        self.canvas.setup(width, height, PALETTE["background"])
        self.frame: Frame | None = None
        self.screenshot_requested = False

    # --- Input ---------------------------------------------------------

    def handle_events(self) -> tuple[bool, InputSnapshot]:
        """Drain the event queue; the last key pressed this frame wins."""
        pressed = ""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False, InputSnapshot()
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == QUIT_KEY:
                return False, InputSnapshot()
            if event.key == SCREENSHOT_KEY:
                self.screenshot_requested = True
                continue
            pressed = key_name(event) or pressed

        width, height = self.window.get_size()
        return True, InputSnapshot(
            key_pressed=bool(pressed),
            key_name=pressed,
            window_width=float(width),
            window_height=float(height),
        )

    # --- Screenshot ----------------------------------------------------

    def save_screenshot(self) -> None:
        path = SCREENSHOT_DIR / f"toroid-snake-{time.strftime('%Y%m%d-%H%M%S')}.png"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            pygame.image.save(self.window, str(path))
        except (OSError, pygame.error) as exc:
            logger.warning("could not save screenshot to %s: %s", path, exc)
            return
        logger.info("saved screenshot %s", path)

    # --- Main loop -----------------------------------------------------

    def draw(self) -> None:
        if self.frame is None:
            return
        self.canvas.clear()
        render_frame(self.canvas, self.frame, self.state.cell)

    def start(self) -> None:
        """Run the main loop: sample input, update once, then render."""
        clock = pygame.time.Clock()
        running = True

        while running:
            clock.tick(FPS)
            running, inputs = self.handle_events()
            if not running:
                break

            self.frame = update(self.state, inputs)
            self.draw()
            if self.screenshot_requested:
                self.screenshot_requested = False
                self.save_screenshot()
            pygame.display.update()

        pygame.quit()
