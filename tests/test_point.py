import pytest

from railway3.point import Point


def test_default_is_origin():
    assert Point() == Point(0, 0)


def test_size_multiplies_coordinates():
    assert Point(6, 1).size() == 6
    assert Point(0, 9).size() == 0


def test_multiply_by_unit_is_identity():
    p = Point(7, -4)
    assert p * Point(1, 1) == p


def test_multiply_then_divide_round_trip():
    p = Point(13, 21)
    q = Point(5, 3)
    assert (p * q) / q == p


def test_divide_by_itself_gives_unit():
    p = Point(9, 11)
    assert p / p == Point(1, 1)


def test_division_truncates_toward_zero():
    assert Point(-7, 7) / Point(2, 2) == Point(-3, 3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point(1, 1) / Point(0, 1)


def test_distance_pythagorean():
    assert Point(3, 4).distance(Point(0, 0)) == 5


def test_distance_rounds():
    assert Point(1, 1).distance(Point(0, 0)) == 1


def test_distance_symmetric_and_zero_to_self():
    a = Point(10, 17)
    b = Point(-2, 40)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0