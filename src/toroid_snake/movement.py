"""Direction state machine, toroidal head movement and swept head rectangles."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .config import (
    FASTER_KEYS,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    MIN_SPEED,
    SLOWER_KEYS,
)
from .geometry import Point, Rect


class Direction(Enum):
    NONE = "NONE"
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    DIE = "DIE"

    @property
    def moving(self) -> bool:
        return self in _TRANSITIONS


KEY_TO_DIRECTION: dict[str, Direction] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}

Transition = Callable[[Point, float, float], tuple[Point, Rect]]


# Each transition returns the moved (unwrapped) head and the strip its leading
# edge swept this tick: ``speed`` long, one cell wide, ending on the new edge.


def _move_up(head: Point, speed: float, size: float) -> tuple[Point, Rect]:
    cur = head.move(0, -speed)
    return cur, cur.to_rect(size, speed).move(0, -(size - speed) / 2)


def _move_down(head: Point, speed: float, size: float) -> tuple[Point, Rect]:
    cur = head.move(0, speed)
    return cur, cur.to_rect(size, speed).move(0, (size - speed) / 2)


def _move_left(head: Point, speed: float, size: float) -> tuple[Point, Rect]:
    cur = head.move(-speed, 0)
    return cur, cur.to_rect(speed, size).move(-(size - speed) / 2, 0)


def _move_right(head: Point, speed: float, size: float) -> tuple[Point, Rect]:
    cur = head.move(speed, 0)
    return cur, cur.to_rect(speed, size).move((size - speed) / 2, 0)


_TRANSITIONS: dict[Direction, Transition] = {
    Direction.UP: _move_up,
    Direction.DOWN: _move_down,
    Direction.LEFT: _move_left,
    Direction.RIGHT: _move_right,
}


def _fold(v: float, bound: float) -> float:
    v %= bound
    # a tiny negative float can round up to the bound itself
    return 0.0 if v >= bound else v


def wrap(p: Point, width: float, height: float) -> Point:
    """Fold a point back into ``[0, width) x [0, height)``."""
    return Point(_fold(p.x, width), _fold(p.y, height))


def advance(
    direction: Direction,
    head: Point,
    speed: float,
    size: float,
    width: float,
    height: float,
) -> tuple[Point, Optional[Rect]]:
    """Move the head one tick and return it with its swept rectangle.

    Idle and dead snakes stay put and sweep nothing. The swept rectangle is
    shifted along with the head when it wraps so both stay in the same frame.
    """

    transition = _TRANSITIONS.get(direction)
    if transition is None:
        return head, None

    moved, swept = transition(head, speed, size)
    cur = wrap(moved, width, height)
    return cur, swept.move(cur.x - moved.x, cur.y - moved.y)


def steer(direction: Direction, key_name: str) -> Direction:
    """Return the direction after a key press; death is never left."""
    if direction is Direction.DIE:
        return direction
    return KEY_TO_DIRECTION.get(key_name, direction)


def adjust_speed(speed: float, key_name: str) -> float:
    if key_name in SLOWER_KEYS:
        speed = max(MIN_SPEED, speed - 1)
    elif key_name in FASTER_KEYS:
        speed += 1
    return speed
