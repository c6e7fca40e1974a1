"""Pytest configuration and shared fixtures."""

import logging
import math

import pytest

from planegeom import Circle, Ellipse, Point, Rectangle, Square, Triangle


def assert_point_close(actual: Point, expected: Point, abs_tol: float = 1e-9) -> None:
    """Compare two points coordinate by coordinate."""
    assert actual.x == pytest.approx(expected.x, abs=abs_tol), f"{actual} != {expected}"
    assert actual.y == pytest.approx(expected.y, abs=abs_tol), f"{actual} != {expected}"


@pytest.fixture
def right_triangle():
    """The 3-4-5 right triangle with the right angle at the origin."""
    return Triangle(Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 3.0))


@pytest.fixture
def rectangle():
    """4 x 3 rectangle whose first side lies on the x-axis."""
    return Rectangle(Point(0.0, 0.0), Point(4.0, 0.0), 3.0)


@pytest.fixture
def ellipse():
    """Ellipse with foci (-3, 0), (3, 0): semi-axes 5 and 4."""
    return Ellipse(Point(-3.0, 0.0), Point(3.0, 0.0), 2.0)


def _all_shapes():
    return [
        Ellipse(Point(-1.0, 2.0), Point(3.0, 5.0), 1.5),
        Circle(Point(2.0, -1.0), 2.5),
        Rectangle(Point(1.0, 1.0), Point(4.0, 5.0), 2.0),
        Square(Point(-2.0, 0.5), Point(1.0, -1.5)),
        Triangle(Point(0.0, 0.0), Point(5.0, 1.0), Point(2.0, 4.0)),
    ]


@pytest.fixture(params=range(5), ids=["ellipse", "circle", "rectangle", "square", "triangle"])
def any_shape(request):
    """One instance of every shape variant, in general position."""
    return _all_shapes()[request.param]


@pytest.fixture
def reset_package_logger():
    """Restore the package logger after a test configured it."""
    yield
    logger = logging.getLogger("planegeom")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def angles():
    return [0.0, 0.3, math.pi / 2, math.pi, -2.1, 7.0]
