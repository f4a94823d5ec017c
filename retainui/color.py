"""RGBA colours and the theme that groups them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels; alpha defaults to opaque."""

    r: float
    g: float
    b: float
    a: float = 1.0

    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]

    def values(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Theme:
    """The colours used to paint widgets."""

    background_color: Color
    text_color: Color
    text_shadow_color: Color
    shadow_color: Color
    border_color: Color
    border_shadow_color: Color