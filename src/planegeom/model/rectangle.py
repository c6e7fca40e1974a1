"""
Rectangle and Square
====================
A rectangle is stored as the two endpoints of one side plus the length of the
perpendicular side. The corners are reconstructed on demand.
"""
from __future__ import annotations

import math
from typing import Optional, TYPE_CHECKING

from planegeom.model.ellipse import Circle
from planegeom.model.geometry_primitives import Point, distance, dot_product
from planegeom.model.geometry_utils import ieee_acos, ieee_divide, polygon_to_polyline
from planegeom.model.shape import Shape

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

# Unit vector of the x-axis
AXIS_X = Point(1.0, 0.0)


class Rectangle(Shape):
    """
    Rectangle defined by the endpoints of one side and the length of the other.

    The side A-B is the first side; the second side is perpendicular to it and
    the barycenter is the midpoint of A and B, so A and B lie on the middle line
    of the rectangle, not on its boundary.
    """

    def __init__(self, point_a: Point, point_b: Point, side: float) -> None:
        """
        Args:
            point_a: First endpoint of the first side.
            point_b: Second endpoint of the first side.
            side: Length of the second (perpendicular) side.
        """
        super().__init__(barycenter=point_a.add(point_b).divide(2.0))
        self._point_a = point_a
        self._point_b = point_b
        self._side_one = distance(point_a, point_b)
        self._side_two = side

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(point_a={self._point_a}, point_b={self._point_b}, "
            f"side={self._side_two})"
        )

    def vertices(self) -> list[Point]:
        """
        Reconstruct the four corners.

        The points A and B are turned back onto the x-axis direction around the
        barycenter, offset by half of the second side along y, and the offset
        points are turned forward again. The stored points are not modified.

        Returns:
            Corners in order: near A, near B, far B, far A.
        """
        vector_ab = self._point_b.subtract(self._point_a)
        cos_alpha = ieee_divide(dot_product(vector_ab, AXIS_X), distance(self._point_a, self._point_b))
        alpha = ieee_acos(cos_alpha)
        if self._point_a.y > self._point_b.y:
            alpha = -alpha

        point_a = self._point_a.rotate(self._barycenter, -alpha)
        point_b = self._point_b.rotate(self._barycenter, -alpha)
        half = self._side_two / 2

        return [
            Point(point_a.x, point_a.y - half).rotate(self._barycenter, alpha),
            Point(point_b.x, point_b.y - half).rotate(self._barycenter, alpha),
            Point(point_b.x, point_b.y + half).rotate(self._barycenter, alpha),
            Point(point_a.x, point_a.y + half).rotate(self._barycenter, alpha),
        ]

    def first_side(self) -> float:
        return self._side_one

    def second_side(self) -> float:
        return self._side_two

    def diagonal(self) -> float:
        return math.sqrt(self._side_one * self._side_one + self._side_two * self._side_two)

    def perimeter(self) -> float:
        return 2 * (self._side_one + self._side_two)

    def area(self) -> float:
        return self._side_one * self._side_two

    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        # straight edges, the corners are enough
        return polygon_to_polyline(self.vertices())

    def _defining_points(self) -> list[Point]:
        return [self._point_a, self._point_b]

    def _set_defining_points(self, points: list[Point]) -> None:
        self._point_a, self._point_b = points

    def _scale_lengths(self, factor: float) -> None:
        self._side_one *= factor
        self._side_two *= factor


class Square(Rectangle):
    """Rectangle whose second side equals the distance between A and B."""

    def __init__(self, point_a: Point, point_b: Point) -> None:
        super().__init__(point_a, point_b, distance(point_a, point_b))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(point_a={self._point_a}, point_b={self._point_b})"

    def side(self) -> float:
        return self._side_one

    def circumscribed_circle(self) -> Circle:
        return Circle(self._barycenter, self.diagonal() / 2)

    def inscribed_circle(self) -> Circle:
        return Circle(self._barycenter, self.side() / 2)
