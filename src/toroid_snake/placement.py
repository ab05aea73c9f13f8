"""Random food placement that avoids food and body cells."""

from __future__ import annotations

import logging
import random

from .config import MAX_PLACEMENT_ATTEMPTS
from .entities import Body, FoodList
from .geometry import Point

logger = logging.getLogger(__name__)


def _find_food_spot(
    rng: random.Random,
    food: FoodList,
    body: Body,
    width: float,
    height: float,
    size: float,
    attempts: int,
) -> Point:
    """Pick a point one cell in from the edges, clear of food and body.

    Falls back to the last candidate when every attempt collides.
    """

    candidate = Point(width / 2, height / 2)
    for _ in range(max(1, attempts)):
        candidate = Point(
            size + rng.random() * (width - size - size),
            size + rng.random() * (height - size - size),
        )
        if food.overlaps(candidate, size) < 0 and body.overlaps(candidate, size) < 0:
            return candidate

    logger.warning(
        "no free spot after %d attempts, placing food at %s", attempts, candidate
    )
    return candidate


def refill_food(
    rng: random.Random,
    food: FoodList,
    body: Body,
    width: float,
    height: float,
    size: float,
    *,
    attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> list[int]:
    """Place every empty food slot in turn and return the refilled indexes."""

    placed: list[int] = []
    for index in food.empty_indexes():
        food[index] = _find_food_spot(rng, food, body, width, height, size, attempts)
        placed.append(index)
    if placed:
        logger.debug("placed food in slots %s", placed)
    return placed
