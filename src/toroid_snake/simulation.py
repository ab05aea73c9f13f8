"""Per-tick simulation of the snake on a toroidal arena."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .config import (
    ADD_FOOD_KEY,
    CELL,
    FOOD_COUNT,
    HEIGHT,
    SPEED,
    START_LENGTH,
    WIDTH,
)
from .entities import Body, FoodList
from .geometry import Point
from .movement import Direction, adjust_speed, advance, steer, wrap
from .placement import refill_food

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """What the driver saw since the previous tick."""

    key_pressed: bool = False
    key_name: str = ""
    window_width: float = 0.0
    window_height: float = 0.0


@dataclass(frozen=True, slots=True)
class Frame:
    """Read-only view of one tick, safe to keep after the next update."""

    head: Point
    body: tuple[Point, ...]
    food: tuple[Point, ...]
    direction: Direction
    score: int
    max_score: int
    ate: bool = False
    died: bool = False

    @property
    def dying(self) -> bool:
        return self.direction is Direction.DIE


@dataclass(slots=True)
class SimulationState:
    """Everything the frame loop owns between ticks."""

    width: float
    height: float
    cell: float
    speed: float
    head: Point
    direction: Direction
    body: Body
    food: FoodList
    score: int = 0
    max_score: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def create(
        cls,
        width: float = WIDTH,
        height: float = HEIGHT,
        cell: float = CELL,
        speed: float = SPEED,
        start: int = START_LENGTH,
        foods: int = FOOD_COUNT,
        *,
        direction: Direction = Direction.UP,
        seed: int | None = None,
    ) -> SimulationState:
        """Build a fresh round: head at the top center, all slots empty."""
        if width <= 0 or height <= 0:
            raise ValueError(f"arena must be positive, got {width}x{height}")
        if cell <= 0:
            raise ValueError(f"cell size must be positive, got {cell}")
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        if start < 0 or foods < 0:
            raise ValueError("snake length and food count cannot be negative")

        return cls(
            width=float(width),
            height=float(height),
            cell=float(cell),
            speed=float(speed),
            head=Point(float(width // 2), 0.0),
            direction=direction,
            body=Body(start),
            food=FoodList(foods),
            rng=random.Random(seed),
        )

    def snapshot(self, *, ate: bool = False, died: bool = False) -> Frame:
        return Frame(
            head=self.head,
            body=self.body.points(),
            food=self.food.points(),
            direction=self.direction,
            score=self.score,
            max_score=self.max_score,
            ate=ate,
            died=died,
        )


def apply_key(state: SimulationState, key_name: str) -> None:
    """Route one key press to direction, speed or the food count."""
    state.direction = steer(state.direction, key_name)
    state.speed = adjust_speed(state.speed, key_name)
    if key_name == ADD_FOOD_KEY:
        state.food.add_slot()
        logger.debug("food slots: %d", len(state.food))


def update(state: SimulationState, inputs: InputSnapshot | None = None) -> Frame:
    """Advance the simulation by one tick and return what should be drawn.

    Eating and self-collision are checked independently against the swept
    head rectangle; either, both or neither may happen in the same tick.
    Death freezes the body but leaves food and score bookkeeping running.
    """

    if inputs is not None:
        if inputs.window_width > 0 and inputs.window_height > 0:
            state.width = inputs.window_width
            state.height = inputs.window_height
            state.head = wrap(state.head, state.width, state.height)
        if inputs.key_pressed:
            apply_key(state, inputs.key_name)

    cur, swept = advance(
        state.direction,
        state.head,
        state.speed,
        state.cell,
        state.width,
        state.height,
    )
    state.head = cur

    ate = died = False
    if swept is not None:
        i = state.food.overlaps_rect(swept, state.cell)
        if i >= 0:
            state.food.clear(i)
            ate = True
            state.score += 1
            if state.score > state.max_score:
                state.max_score = state.score
            logger.info("score %d (max %d)", state.score, state.max_score)

        if state.body.overlaps_rect(swept, state.cell) >= 0:
            state.direction = Direction.DIE
            state.score = 0
            died = True
            logger.info("snake hit itself at %s (max %d)", cur, state.max_score)

    refill_food(
        state.rng, state.food, state.body, state.width, state.height, state.cell
    )

    if ate:
        state.body.grow(cur)
    elif state.direction.moving:
        state.body.advance(cur)

    return state.snapshot(ate=ate, died=died)
