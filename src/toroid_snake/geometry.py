"""Point and rectangle primitives shared by the arena logic."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A position in arena coordinates."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:3.2f},{self.y:3.2f})"

    def move(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def to_rect(self, w: float, h: float) -> Rect:
        """Return the ``w`` x ``h`` rectangle centered on this point."""
        w /= 2
        h /= 2
        return Rect(Point(self.x - w, self.y - h), Point(self.x + w, self.y + h))

    def to_square(self, size: float) -> Rect:
        """Return the footprint every cell occupies, centered on the point."""
        return self.to_rect(size, size)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned box, half-open on the max edge."""

    min: Point
    max: Point

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"

    def move(self, dx: float, dy: float) -> Rect:
        return Rect(self.min.move(dx, dy), self.max.move(dx, dy))

    def contains(self, p: Point) -> bool:
        return self.min.x <= p.x < self.max.x and self.min.y <= p.y < self.max.y

    def overlaps(self, other: Rect) -> bool:
        if self.max.x <= other.min.x or other.max.x <= self.min.x:
            return False
        if self.max.y <= other.min.y or other.max.y <= self.min.y:
            return False
        return True
