"""Axis-aligned integer rectangle."""

from __future__ import annotations

from dataclasses import dataclass, field

from .point import Point


@dataclass(frozen=True)
class Rect:
    """A rectangle described by its extent (size) and offset (position)."""

    extent: Point = field(default_factory=Point)
    offset: Point = field(default_factory=Point)

    @property
    def x(self) -> float:
        return float(self.offset.x)

    @property
    def y(self) -> int:
        return self.offset.y

    @property
    def width(self) -> int:
        return self.extent.x

    @property
    def height(self) -> int:
        return self.extent.y

    @property
    def position(self) -> Point:
        return self.offset

    @property
    def size(self) -> Point:
        return self.extent

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside the rectangle, edges included."""
        return (
            self.offset.x <= point.x <= self.offset.x + self.extent.x
            and self.offset.y <= point.y <= self.offset.y + self.extent.y
        )

    def inflate(self, amount: int) -> Rect:
        """Grow the rectangle by ``amount`` on every side."""
        return Rect(
            Point(self.extent.x + amount * 2, self.extent.y + amount * 2),
            Point(self.offset.x - amount, self.offset.y - amount),
        )

    def intersect(self, other: Rect) -> Rect:
        """The overlap of two rectangles, or an empty rectangle if none."""
        x1 = max(self.offset.x, other.offset.x)
        y1 = max(self.offset.y, other.offset.y)
        x2 = min(self.offset.x + self.extent.x, other.offset.x + other.extent.x)
        y2 = min(self.offset.y + self.extent.y, other.offset.y + other.extent.y)
        if x2 <= x1 or y2 <= y1:
            return Rect()
        return Rect(Point(x2 - x1, y2 - y1), Point(x1, y1))