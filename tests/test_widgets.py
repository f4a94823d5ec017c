import gc

import pytest

from retainui.point import Point
from retainui.rect import Rect
from retainui.vector import Vector2
from retainui.widgets import ButtonBase, Container, Label, Widget


@pytest.mark.parametrize("cls", [Widget, ButtonBase, Container, Label])
def test_mouse_handlers_do_not_consume(cls):
    widget = cls()
    point = Point(1, 2)
    assert widget.on_mouse_move(point) is False
    assert widget.on_mouse_down(point) is False
    assert widget.on_mouse_up(point) is False
    assert widget.on_mouse_leave() is False
    assert widget.on_mouse_enter() is False


def test_parent_defaults_to_none():
    assert Widget().parent is None


def test_parent_is_weak():
    child = Widget()
    parent = Container()
    child.parent = parent
    assert child.parent is parent
    del parent
    gc.collect()
    assert child.parent is None


def test_parent_can_be_cleared():
    child = Widget()
    parent = Widget()
    child.parent = parent
    child.parent = None
    assert child.parent is None


def test_desired_size_is_rect_size():
    widget = Widget(rect=Rect(Point(5, 6), Point(9, 9)))
    assert widget.compute_desired_size() == Vector2(5.0, 6.0)


def test_layout_without_padding_or_margin():
    widget = Widget(rect=Rect(Point(5, 6)))
    available = Rect(Point(50, 60), Point(7, 8))
    widget.layout(available)
    assert widget.rect.size == Point(5, 6)
    assert widget.rect.position == available.position


def test_layout_clamps_to_available_size():
    widget = Widget(rect=Rect(Point(500, 600)), padding=3.0)
    available = Rect(Point(40, 30), Point(1, 2))
    widget.layout(available)
    assert widget.rect.size == available.size


def test_layout_applies_padding_and_margin():
    widget = Widget(rect=Rect(Point(5, 6)), padding=1.0, margin=2.0)
    widget.layout(Rect(Point(100, 100), Point(10, 20)))
    assert widget.rect.size == Point(7, 8)
    assert widget.rect.position == Point(12, 22)


def test_label_text_and_button_callbacks():
    label = Label()
    label.text = "hello"
    assert label.text == "hello"
    clicks = []
    button = ButtonBase(on_click=lambda: clicks.append(1))
    button.on_click()
    assert clicks == [1]
    assert button.on_hover is None