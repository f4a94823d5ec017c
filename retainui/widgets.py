"""The widget base class and the basic widgets built on it."""

from __future__ import annotations

import weakref
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from .point import Point
from .rect import Rect
from .vector import Vector2


@dataclass(eq=False)
class Widget:
    """The underlying type for every UI element."""

    rect: Rect = field(default_factory=Rect)
    margin: float = 0.0
    padding: float = 0.0
    min_width: int = 0
    max_width: int = 0
    min_height: int = 0
    max_height: int = 0
    pointer: Optional[Point] = field(default=None, init=False, repr=False)
    _parent: Optional[weakref.ReferenceType] = field(
        default=None, init=False, repr=False
    )

    def on_mouse_move(self, point: Point) -> bool:
        """Record the pointer position; return whether the event was consumed."""
        self.pointer = point
        return False

    def on_mouse_down(self, point: Point) -> bool:
        """Record the press position; return whether the event was consumed."""
        self.pointer = point
        return False

    def on_mouse_up(self, point: Point) -> bool:
        """Record the release position; return whether the event was consumed."""
        self.pointer = point
        return False

    def on_mouse_leave(self) -> bool:
        """Handle the pointer leaving; return whether the event was consumed."""
        return False

    def on_mouse_enter(self) -> bool:
        """Handle the pointer entering; return whether the event was consumed."""
        return False

    @property
    def parent(self) -> Optional[Widget]:
        """The parent widget, or None if unset or no longer alive."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, parent: Optional[Widget]) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    def compute_desired_size(self) -> Vector2:
        """The size the widget would like to occupy."""
        return Vector2(float(self.rect.width), float(self.rect.height))

    def layout(self, available_rect: Rect) -> None:
        """Place the widget inside ``available_rect``.

        The widget is moved to the available position shifted by its margin
        and sized to its desired size plus padding, clamped to the available
        size.
        """
        desired = self.compute_desired_size()
        final_size = Vector2(
            min(desired.x + self.padding * 2, float(available_rect.width)),
            min(desired.y + self.padding * 2, float(available_rect.height)),
        )
        final_position = Vector2.from_point(available_rect.position) + Vector2(
            self.margin, self.margin
        )
        self.rect = Rect(final_size.to_point(), final_position.to_point())


@dataclass(eq=False)
class ButtonBase(Widget):
    """A widget that reacts to clicks and hovering."""

    on_click: Optional[Callable[[], None]] = None
    on_hover: Optional[Callable[[], None]] = None


@dataclass(eq=False)
class Container(Widget):
    """A widget that holds other widgets."""


@dataclass(eq=False)
class Label(Widget):
    """A widget that shows a line of text."""

    text: str = ""