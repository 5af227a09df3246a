import math

import pytest

from workbench.points import CartesianPoint, PolarPoint, make_point


def test_make_point_is_cartesian_with_coordinates():
    point = make_point(1, 2)
    assert isinstance(point, CartesianPoint)
    assert (point.x, point.y) == (1, 2)


def test_cartesian_str():
    assert str(make_point(1, 2)) == "(1.000000, 2.000000)"


def test_polar_str():
    assert str(PolarPoint(1.5, 0.25)) == "(1.500000, 0.250000°)"


def test_polar_on_axis():
    point = PolarPoint(2.0, 0.0)
    assert point.x == pytest.approx(2.0)
    assert point.y == pytest.approx(0.0)


@pytest.mark.parametrize("r,theta", [(1.0, 0.3), (3.5, 2.0), (0.5, -1.2)])
def test_polar_radius_preserved(r, theta):
    point = PolarPoint(r, theta)
    assert math.hypot(point.x, point.y) == pytest.approx(r)
    assert math.atan2(point.y, point.x) == pytest.approx(theta)


def test_points_are_immutable():
    point = make_point(3, 4)
    with pytest.raises(AttributeError):
        point.x = 5
    assert (point.x, point.y) == (3, 4)