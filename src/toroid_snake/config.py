"""Centralized configuration and palette definitions for Toroid Snake."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pygame


def _default_screenshot_dir() -> Path:
    """Screenshots land in a subfolder of the user's pictures, else of home."""

    pictures = Path(os.getenv("XDG_PICTURES_DIR") or Path.home() / "Pictures")
    if not pictures.is_dir():
        pictures = Path.home()
    return pictures / "toroid-snake"


SCREENSHOT_DIR = Path(
    os.getenv("TOROID_SNAKE_SCREENSHOT_DIR") or _default_screenshot_dir()
)
LOG_LEVEL: str = os.getenv("TOROID_SNAKE_LOG_LEVEL", "INFO").upper()

WIDTH: int = 1800
HEIGHT: int = 1200
CELL: float = 50.0
SPEED: float = 5.0
START_LENGTH: int = 10  # empty body slots, filled as the snake moves
FOOD_COUNT: int = 10

MAX_PLACEMENT_ATTEMPTS: int = 1000
MIN_SPEED: float = 1.0
SEGMENT_ALPHA_SPAN: int = 180  # tail alpha 0 -> head alpha just below this
FPS: int = 60

KEY_UP = "↑"
KEY_DOWN = "↓"
KEY_LEFT = "←"
KEY_RIGHT = "→"
SLOWER_KEYS = ("-", "_")
FASTER_KEYS = ("+", "=")
ADD_FOOD_KEY = "F"

# pygame key codes that have no printable unicode
KEY_NAMES: dict[int, str] = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}
SCREENSHOT_KEY = pygame.K_F12
QUIT_KEY = pygame.K_ESCAPE

PALETTE = {
    "background": pygame.Color(220, 220, 220),
    "food": pygame.Color(255, 0, 0, 255),
    "snake": pygame.Color(0, 255, 0, 255),
    "dead": pygame.Color(255, 165, 0, 0),
}


def configure_logging(level: str | None = None) -> None:
    """Install the root handler once for command line runs."""

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
