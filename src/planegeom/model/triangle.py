"""
Triangle
========
A triangle is stored as its three vertices and its centroid. Side lengths and
the classical centers are recomputed from the vertices on every query.
Collinear vertices are not rejected: the formulas divide by zero and the
results carry inf/NaN coordinates.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from planegeom.model.ellipse import Circle
from planegeom.model.geometry_primitives import Point, distance
from planegeom.model.geometry_utils import ieee_divide, ieee_sqrt, polygon_to_polyline
from planegeom.model.shape import Shape

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Triangle(Shape):
    """Triangle defined by three vertices. The center is the centroid."""

    def __init__(self, point_a: Point, point_b: Point, point_c: Point) -> None:
        super().__init__(
            barycenter=Point(
                (point_a.x + point_b.x + point_c.x) / 3,
                (point_a.y + point_b.y + point_c.y) / 3
            )
        )
        self._point_a = point_a
        self._point_b = point_b
        self._point_c = point_c

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(point_a={self._point_a}, point_b={self._point_b}, "
            f"point_c={self._point_c})"
        )

    def vertices(self) -> tuple[Point, Point, Point]:
        return self._point_a, self._point_b, self._point_c

    def _circumscribed_circle_center(self) -> Point:
        a, b, c = self._point_a, self._point_b, self._point_c
        xab = a.x - b.x
        yab = a.y - b.y
        xbc = b.x - c.x
        ybc = b.y - c.y
        xca = c.x - a.x
        yca = c.y - a.y

        # zero for collinear vertices
        z = xab * yca - yab * xca
        if z == 0.0:
            logger.debug(f"Degenerate triangle {self!r}: circumcenter is not finite")

        z1 = a.x * a.x + a.y * a.y
        z2 = b.x * b.x + b.y * b.y
        z3 = c.x * c.x + c.y * c.y
        zx = yab * z3 + ybc * z1 + yca * z2
        zy = xab * z3 + xbc * z1 + xca * z2
        return Point(ieee_divide(-zx / 2, z), ieee_divide(zy / 2, z))

    def _circumscribed_circle_radius(self) -> float:
        side_ab = distance(self._point_a, self._point_b)
        side_ac = distance(self._point_a, self._point_c)
        side_bc = distance(self._point_b, self._point_c)
        return ieee_divide(side_ab * side_bc * side_ac / 4, self.area())

    def circumscribed_circle(self) -> Circle:
        return Circle(self._circumscribed_circle_center(), self._circumscribed_circle_radius())

    def inscribed_circle(self) -> Circle:
        """
        Incircle of the triangle.

        The radius follows from Heron's formula, the center is the average of
        the vertices weighted by the lengths of the opposite sides.
        """
        a, b, c = self._point_a, self._point_b, self._point_c
        side_a = distance(b, c)
        side_b = distance(a, c)
        side_c = distance(a, b)
        sum_sides = side_a + side_b + side_c
        p = self.perimeter() / 2

        radius = ieee_sqrt(ieee_divide((p - side_a) * (p - side_b) * (p - side_c), p))
        x = ieee_divide(side_a * a.x + side_b * b.x + side_c * c.x, sum_sides)
        y = ieee_divide(side_a * a.y + side_b * b.y + side_c * c.y, sum_sides)

        return Circle(Point(x, y), radius)

    def orthocenter(self) -> Point:
        """
        Intersection of the altitudes.

        The altitude from A is perpendicular to CB and the altitude from B is
        perpendicular to CA; both conditions form a 2x2 linear system solved
        with Cramer's rule.
        """
        a, b, c = self._point_a, self._point_b, self._point_c
        xcb = c.x - b.x
        ycb = c.y - b.y
        xca = c.x - a.x
        yca = c.y - a.y
        valcb = xcb * a.x + ycb * a.y
        valca = xca * b.x + yca * b.y

        det = xcb * yca - xca * ycb
        det_x = valcb * yca - valca * ycb
        det_y = xcb * valca - xca * valcb

        return Point(ieee_divide(det_x, det), ieee_divide(det_y, det))

    def nine_points_circle(self) -> Circle:
        point = self.orthocenter().add(self._circumscribed_circle_center()).divide(2.0)
        radius = self._circumscribed_circle_radius() / 2
        return Circle(point, radius)

    def perimeter(self) -> float:
        side_ab = distance(self._point_a, self._point_b)
        side_ac = distance(self._point_a, self._point_c)
        side_bc = distance(self._point_b, self._point_c)
        return side_ab + side_bc + side_ac

    def area(self) -> float:
        """Shoelace formula."""
        a, b, c = self._point_a, self._point_b, self._point_c
        return 0.5 * abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y))

    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        return polygon_to_polyline(self.vertices())

    def _defining_points(self) -> list[Point]:
        return [self._point_a, self._point_b, self._point_c]

    def _set_defining_points(self, points: list[Point]) -> None:
        self._point_a, self._point_b, self._point_c = points
