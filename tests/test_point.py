import dataclasses

import pytest

from retainui.point import Point


def test_default_is_origin():
    assert Point() == Point(0, 0)


def test_splat_sets_both():
    p = Point.splat(5)
    assert (p.x, p.y) == (5, 5)


def test_add_then_sub_round_trip():
    a, b = Point(3, -8), Point(12, 7)
    assert (a + b) - b == a


def test_add_is_commutative():
    a, b = Point(3, -8), Point(12, 7)
    assert a + b == b + a


def test_mul_by_one_is_identity():
    a = Point(-4, 9)
    assert a * Point.splat(1) == a


def test_div_by_one_is_identity():
    a = Point(-4, 9)
    assert a / Point.splat(1) == a


def test_mul_then_div_round_trip():
    a, b = Point(-6, 14), Point(3, -5)
    assert (a * b) / b == a


def test_div_truncates_toward_zero():
    assert Point(-7, 7) / Point(2, 2) == Point(-3, 3)


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point(1, 1) / Point(0, 1)


def test_points_are_immutable():
    p = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(p, "x", 3)
    assert (p.x, p.y) == (1, 2)


def test_in_place_add_gives_sum():
    p = Point(1, 2)
    original = p
    p += Point(4, 5)
    assert p == original + Point(4, 5)
    assert original == Point(1, 2)