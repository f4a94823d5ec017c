"""Vertex data and the helpers that fill it with geometry."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .rect import Rect
from .vector import Vector2

PlatformWindowHandle = int


@dataclass
class Vertex:
    """A vertex with a position and a texture coordinate."""

    position: Vector2 = field(default_factory=Vector2)
    uv: Vector2 = field(default_factory=Vector2)


@dataclass
class DrawData:
    """Indexed geometry to be drawn into one platform window."""

    window_handle: PlatformWindowHandle = 0
    index_buffer: list[int] = field(default_factory=list)
    vertex_buffer: list[Vertex] = field(default_factory=list)


DrawList = Sequence[DrawData]


def draw_rectangle(data: DrawData, rect: Rect) -> None:
    """Append a rectangle to ``data`` as four vertices and two triangles."""
    width = float(rect.width)
    height = float(rect.height)
    top_left = Vector2.from_point(rect.position)
    top_right = top_left + Vector2(width, 0.0)
    bottom_left = top_left + Vector2(0.0, height)
    bottom_right = top_left + Vector2(width, height)

    data.vertex_buffer.extend(
        (
            Vertex(top_left, Vector2(0.0, 1.0)),
            Vertex(top_right, Vector2(1.0, 1.0)),
            Vertex(bottom_right, Vector2(1.0, 0.0)),
            Vertex(bottom_left, Vector2(0.0, 0.0)),
        )
    )

    base = len(data.vertex_buffer) - 4
    data.index_buffer.extend(base + offset for offset in (0, 1, 2, 0, 2, 3))