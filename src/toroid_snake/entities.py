"""Slot lists for the snake body and the food set."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, MutableSequence, Optional

from .geometry import Point, Rect

Slot = Optional[Point]


class EntityList:
    """Ordered slots holding a point or ``None`` for an unplaced entry.

    Empty slots take no room in the arena and are skipped by every query.
    """

    def __init__(self, slots: MutableSequence[Slot]) -> None:
        self._slots = slots

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> Slot:
        return self._slots[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._slots)!r})"

    def points(self) -> tuple[Point, ...]:
        """Snapshot of the placed entries, in slot order."""
        return tuple(p for p in self._slots if p is not None)

    def empty_indexes(self) -> list[int]:
        return [i for i, p in enumerate(self._slots) if p is None]

    def overlaps(self, p: Point, size: float) -> int:
        """Index of the first entry whose cell overlaps the cell at ``p``, or -1."""
        return self.overlaps_rect(p.to_square(size), size)

    def overlaps_rect(self, r: Rect, size: float) -> int:
        """Index of the first entry whose cell overlaps ``r``, or -1."""
        for i, c in enumerate(self._slots):
            if c is None:
                continue
            if c.to_square(size).overlaps(r):
                return i
        return -1


class FoodList(EntityList):
    """Food slots: emptied when eaten and refilled in place."""

    def __init__(self, count: int) -> None:
        super().__init__([None] * count)

    @classmethod
    def of(cls, points: Iterable[Slot]) -> FoodList:
        foods = cls(0)
        foods._slots.extend(points)
        return foods

    def __setitem__(self, index: int, value: Slot) -> None:
        self._slots[index] = value

    def clear(self, index: int) -> None:
        self._slots[index] = None

    def add_slot(self) -> None:
        self._slots.append(None)


class Body(EntityList):
    """Snake cells from tail (index 0) to head (last index).

    Backed by a deque so both the sliding move and growth are O(1).
    """

    _slots: deque[Slot]

    def __init__(self, length: int) -> None:
        super().__init__(deque([None] * length))

    @classmethod
    def of(cls, points: Iterable[Slot]) -> Body:
        body = cls(0)
        body._slots.extend(points)
        return body

    def grow(self, head: Point) -> None:
        self._slots.append(head)

    def advance(self, head: Point) -> None:
        """Drop the tail slot and append ``head``; the length is unchanged."""
        if not self._slots:
            return
        self._slots.popleft()
        self._slots.append(head)
