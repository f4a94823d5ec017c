"""Geometry, colours, drawing buffers, widgets and window tracking for a retained-mode UI."""

__version__ = "0.1.0"

__all__ = ["color", "drawing", "framework", "point", "rect", "scalar", "vector", "widgets"]