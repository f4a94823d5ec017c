"""Integer two-dimensional point."""

from __future__ import annotations

from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Point:
    """A point or extent with integer coordinates."""

    x: int = 0
    y: int = 0

    @classmethod
    def splat(cls, value: int) -> Point:
        """A point with both coordinates set to ``value``."""
        return cls(value, value)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: Point) -> Point:
        """Component-wise integer division, truncating toward zero."""
        if not isinstance(other, Point):
            return NotImplemented
        return Point(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))