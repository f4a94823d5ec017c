# retainui

Building blocks for a retained-mode user interface:

- integer points and rectangles;
- float vectors with tolerant equality;
- RGBA colours and a theme that groups them;
- vertex and index buffers that a renderer can upload;
- a small widget hierarchy with a simple layout step;
- a framework object that keeps track of platform windows.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Geometry

```python
from retainui.point import Point
from retainui.rect import Rect

area = Rect(Point(100, 50), Point(10, 20))   # extent (size), offset (position)
area.contains(Point(15, 25))                 # True, edges count as inside
area.inflate(5)                              # grows by 5 on every side
area.intersect(Rect(Point(40, 40), Point(0, 0)))
```

`Point` and `Rect` are immutable. `Point` supports `+`, `-`, `*` and `/`
component-wise. `/` is integer division that truncates toward zero.
`Point.splat(v)` builds a point with both coordinates equal to `v`.

`Rect` exposes `x`, `y`, `width`, `height`, `position` and `size` as
properties. `intersect` returns an empty `Rect()` when the two rectangles do
not overlap.

## Vectors and scalars

`retainui.vector` provides two vector types:

- `Vector2` supports `+`, `-` and multiplication by a number.
  `Vector2.from_point` and `to_point` convert to and from `Point`;
  `to_point` truncates toward zero.
- `Vector4` supports `+`, `values()` and hashing.

Both have a `splat` constructor. Both compare equal when every component
differs by at most `1e-6`. That tolerance is `ZERO_TOLERANCE` in
`retainui.scalar`. `Vector2` is not hashable.

`retainui.scalar` also holds:

- the constants `PI`, `HALF_PI` and `TWO_PI`;
- the conversion factors `RADIANS_TO_DEGREES` and `DEGREES_TO_RADIANS`;
- the helpers `deg_to_rad`, `rad_to_deg`, `clamp` and `floats_equal`.

## Colours and themes

```python
from retainui.color import Color, Theme

Color.RED.values()        # (1.0, 0.0, 0.0, 1.0)
Color(0.2, 0.4, 0.6, 0.5)
```

Alpha defaults to `1.0`. The predefined colours are `Color.RED`,
`Color.GREEN`, `Color.BLUE`, `Color.BLACK` and `Color.WHITE`.

`Theme` is an immutable group of six colours:

- `background_color`
- `text_color`
- `text_shadow_color`
- `shadow_color`
- `border_color`
- `border_shadow_color`

## Drawing

```python
from retainui.drawing import DrawData, draw_rectangle
from retainui.point import Point
from retainui.rect import Rect

data = DrawData()
draw_rectangle(data, Rect(Point(32, 16), Point(0, 0)))
# data.vertex_buffer: four Vertex objects (position, uv)
# data.index_buffer:  [0, 1, 2, 0, 2, 3]
```

The vertices are appended in the order top-left, top-right, bottom-right,
bottom-left. Their texture coordinates are (0, 1), (1, 1), (1, 0) and (0, 0).
Indices are offset by the number of vertices already in the buffer, so
several rectangles can share one `DrawData`.

## Widgets

`retainui.widgets` defines `Widget`, `ButtonBase`, `Container` and `Label`.

`Widget` has these fields:

- `rect`
- `margin` and `padding`
- `min_width`, `max_width`, `min_height` and `max_height`

`parent` holds only a weak reference to the parent widget. It reads as
`None` when unset or when the parent is gone.

`layout(available_rect)` works in three steps:

1. It takes `compute_desired_size()`, which by default is the widget's
   current size, and adds the padding on both sides.
2. It clamps that size to the available width and height.
3. It places the widget at the available position plus the margin.

Both the size and the position are truncated to integers.

Mouse handling works like this:

- `on_mouse_move`, `on_mouse_down` and `on_mouse_up` store the point in
  `pointer`.
- These three, and also `on_mouse_enter` and `on_mouse_leave`, return
  `False`, meaning the event was not consumed.
- Override any of them to consume events.

The other widgets add a few fields:

- `ButtonBase` has `on_click` and `on_hover` callback fields.
- `Label` has a `text` field.
- `Container` adds nothing to `Widget`.

## Framework

`retainui.framework.Framework` holds platform windows:

- `add_window` registers a `PlatformWindow`.
- `windows` returns the registered windows as a tuple.
- `update` calls `update()` on every window in registration order. Each
  window tags its `draw_data` with its handle.
- `native_window_from_handle` returns the native window object for a handle,
  or `None` if no window has that handle.

An `InteractableWindow` holds a list of widgets. Its `root_widget` is the
first widget, or `None` when the list is empty.

## What this package does not do

It does not open windows, handle input from an operating system, or render
anything. It produces geometry and widget state for a renderer of your own.

The callbacks in `FrameworkCallbacks` (`on_create_window`,
`on_destroy_window`, `on_resize`) are stored on the framework but never
called. `ButtonBase.on_click` and `on_hover` are likewise never invoked by
the package. `Container` does not lay out children. `Label` does not measure
its text.