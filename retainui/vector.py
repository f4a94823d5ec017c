"""Floating-point vectors with tolerant equality."""

from __future__ import annotations

from dataclasses import dataclass

from .point import Point
from .scalar import floats_equal

_SIZE_MASK = (1 << 64) - 1


@dataclass(eq=False)
class Vector2:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, xy: float) -> Vector2:
        """A vector with both components set to ``xy``."""
        return cls(xy, xy)

    @classmethod
    def from_point(cls, point: Point) -> Vector2:
        return cls(float(point.x), float(point.y))

    def to_point(self) -> Point:
        """Convert to a point, truncating each component toward zero."""
        return Point(int(self.x), int(self.y))

    @staticmethod
    def equals(first: Vector2, second: Vector2) -> bool:
        return floats_equal(first.x, second.x) and floats_equal(first.y, second.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2.equals(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)


@dataclass(eq=False)
class Vector4:
    """A four-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def splat(cls, xyzw: float) -> Vector4:
        """A vector with all components set to ``xyzw``."""
        return cls(xyzw, xyzw, xyzw, xyzw)

    def values(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    @staticmethod
    def equals(first: Vector4, second: Vector4) -> bool:
        return all(floats_equal(a, b) for a, b in zip(first.values(), second.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4.equals(self, other)

    def __hash__(self) -> int:
        seed = 0x25A5D2D1
        salts = (0x3A734906, 0x6DE9118D, 0x631B2F2D, 0x532AE062)
        for salt, component in zip(salts, self.values()):
            mixed = ((seed << 6) + (seed >> 2) + salt + int(component)) & _SIZE_MASK
            seed = (seed ^ mixed) & _SIZE_MASK
        return hash(seed)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )