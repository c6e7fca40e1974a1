"""
Geometric Primitives.

The Point is both a position and a displacement in the plane; every shape is
built from Points and is mutated only through Point operations.
"""
from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING
import numpy as np
import math

from planegeom.model.geometry_utils import ieee_divide

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """
    An immutable point (or vector) in 2D space.

    Every operation returns a new Point. Equality is exact, there is no tolerance.
    """
    x: float
    y: float

    def add(self, value: Point) -> Point:
        return Point(self.x + value.x, self.y + value.y)

    def subtract(self, value: Point) -> Point:
        return Point(self.x - value.x, self.y - value.y)

    def multiply(self, coefficient: float) -> Point:
        return Point(self.x * coefficient, self.y * coefficient)

    def divide(self, coefficient: float) -> Point:
        """Componentwise division. Division by zero yields inf/NaN coordinates."""
        return Point(ieee_divide(self.x, coefficient), ieee_divide(self.y, coefficient))

    def rotate(self, pivot: Point, angle: float) -> Point:
        """
        Rotate the point around a pivot.

        Args:
            pivot: Center of rotation.
            angle: Counter-clockwise angle in radians. A non-finite angle yields NaN.

        Returns:
            The rotated point.
        """
        dx = self.x - pivot.x
        dy = self.y - pivot.y
        with np.errstate(invalid="ignore"):
            cos = float(np.cos(angle))
            sin = float(np.sin(angle))
        return Point(pivot.x + cos * dx - sin * dy, pivot.y + sin * dx + cos * dy)

    def __add__(self, other: Point) -> Point:
        if isinstance(other, Point):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Point) -> Point:
        if isinstance(other, Point):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, scalar: float) -> Point:
        if isinstance(scalar, Real):
            return self.multiply(scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Point:
        if isinstance(scalar, Real):
            return self.divide(scalar)
        return NotImplemented

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def distance_to(self, other: Point) -> float:
        return distance(self, other)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


def distance(point_a: Point, point_b: Point) -> float:
    """Euclidean distance between two points."""
    dx = point_a.x - point_b.x
    dy = point_a.y - point_b.y
    return math.sqrt(dx * dx + dy * dy)


def dot_product(point_a: Point, point_b: Point) -> float:
    return point_a.x * point_b.x + point_a.y * point_b.y


# Origin, used as the pivot when scaling shapes
ZERO = Point(0.0, 0.0)
