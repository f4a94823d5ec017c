import dataclasses

import pytest

from retainui.color import Color, Theme


def test_named_colors():
    assert Color.RED.values() == (1.0, 0.0, 0.0, 1.0)
    assert Color.GREEN.values() == (0.0, 1.0, 0.0, 1.0)
    assert Color.BLUE.values() == (0.0, 0.0, 1.0, 1.0)
    assert Color.BLACK.values() == (0.0, 0.0, 0.0, 1.0)
    assert Color.WHITE.values() == (1.0, 1.0, 1.0, 1.0)


def test_alpha_defaults_to_opaque():
    assert Color(0.2, 0.4, 0.6).a == 1.0


def test_values_follow_fields():
    c = Color(0.1, 0.2, 0.3, 0.4)
    assert c.values() == (c.r, c.g, c.b, c.a)


def test_colors_cannot_be_changed():
    c = Color(1.0, 0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(c, "r", 0.0)
    assert c.values() == (1.0, 0.0, 0.0, 1.0)


def test_theme_holds_colors():
    theme = Theme(
        background_color=Color.WHITE,
        text_color=Color.BLACK,
        text_shadow_color=Color.BLUE,
        shadow_color=Color.BLACK,
        border_color=Color.RED,
        border_shadow_color=Color.GREEN,
    )
    assert theme.background_color == Color.WHITE
    assert theme.border_color.values() == Color.RED.values()


def test_theme_requires_all_colors():
    with pytest.raises(TypeError):
        Theme(background_color=Color.WHITE)  # type: ignore[call-arg]