"""Windows and the framework object that manages them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from .drawing import DrawData, PlatformWindowHandle
from .rect import Rect
from .widgets import Widget


@dataclass
class InteractableWindowCreateFlags:
    """Settings for creating an interactable window."""

    rect: Rect = field(default_factory=Rect)


@dataclass(eq=False)
class InteractableWindow:
    """A window inside a platform window that hosts a tree of widgets."""

    flags: InteractableWindowCreateFlags = field(
        default_factory=InteractableWindowCreateFlags
    )
    rect: Rect = field(default_factory=Rect)
    widgets: list[Widget] = field(default_factory=list)

    @property
    def root_widget(self) -> Optional[Widget]:
        """The first widget, or None when the window is empty."""
        return self.widgets[0] if self.widgets else None


@dataclass
class PlatformWindowCreateInfo:
    """Settings for creating a platform window."""

    width: int = 0
    height: int = 0
    native_window: Any = None


@dataclass(eq=False)
class PlatformWindow:
    """An operating-system window, identified by a handle."""

    handle: PlatformWindowHandle = 0
    native_window: Any = None
    interactable_windows: list[InteractableWindow] = field(default_factory=list)
    draw_data: DrawData = field(default_factory=DrawData)

    def __post_init__(self) -> None:
        self.draw_data.window_handle = self.handle

    def update(self) -> None:
        """Per-frame update: keep the draw data tagged with this window's handle."""
        self.draw_data.window_handle = self.handle


WindowCallback = Callable[[PlatformWindow], None]


@dataclass
class FrameworkCallbacks:
    """Hooks the host supplies to create, destroy and resize windows."""

    on_create_window: Optional[WindowCallback] = None
    on_destroy_window: Optional[WindowCallback] = None
    on_resize: Optional[WindowCallback] = None


@dataclass
class FrameworkCreateInfo:
    """Settings for creating a framework."""

    callbacks: FrameworkCallbacks = field(default_factory=FrameworkCallbacks)


class Framework:
    """Manages state and the platform windows."""

    def __init__(self, info: Optional[FrameworkCreateInfo] = None) -> None:
        self.create_info = info if info is not None else FrameworkCreateInfo()
        self._windows: list[PlatformWindow] = []

    @property
    def windows(self) -> tuple[PlatformWindow, ...]:
        return tuple(self._windows)

    def add_window(self, window: PlatformWindow) -> None:
        """Register a platform window with the framework."""
        self._windows.append(window)

    def update(self) -> None:
        """Update every platform window in registration order."""
        for window in self._windows:
            window.update()

    def native_window_from_handle(self, handle: PlatformWindowHandle) -> Any:
        """The native window for ``handle``, or None if no window has it."""
        for window in self._windows:
            if window.handle == handle:
                return window.native_window
        return None