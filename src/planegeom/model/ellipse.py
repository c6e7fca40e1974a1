"""
Ellipse and Circle
==================
An ellipse is stored as its two foci and the perifocal distance (the gap
between a focus and the nearest vertex of the major axis). The axes and the
eccentricity are derived on demand, so transforms only touch the foci.
"""
from __future__ import annotations

import math
from typing import Optional, TYPE_CHECKING

from planegeom.config import DEFAULT_POLYLINE_SEGMENTS
from planegeom.model.geometry_primitives import Point, distance
from planegeom.model.geometry_utils import ellipse_to_polyline, ieee_divide, ieee_sqrt
from planegeom.model.shape import Shape

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


class Ellipse(Shape):
    """
    Ellipse defined by two foci and the perifocal distance.

    The barycenter is always the midpoint of the foci. For any boundary point,
    the sum of its distances to both foci equals twice the major semi-axis.
    """

    def __init__(self, focus_one: Point, focus_two: Point, perifocal_distance: float) -> None:
        """
        Args:
            focus_one: First focus.
            focus_two: Second focus.
            perifocal_distance: Major semi-axis minus the focal distance.
        """
        super().__init__(barycenter=focus_one.add(focus_two).divide(2.0))
        self._focus_one = focus_one
        self._focus_two = focus_two
        self._perifocal_distance = perifocal_distance

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(focus_one={self._focus_one}, focus_two={self._focus_two}, "
            f"perifocal_distance={self._perifocal_distance})"
        )

    def focuses(self) -> tuple[Point, Point]:
        return self._focus_one, self._focus_two

    def perifocal_distance(self) -> float:
        return self._perifocal_distance

    def focal_distance(self) -> float:
        """Distance from a focus to the center."""
        return distance(self._focus_one, self._barycenter)

    def major_semi_axis(self) -> float:
        return self.focal_distance() + self._perifocal_distance

    def minor_semi_axis(self) -> float:
        dst = self.focal_distance()
        major = self.major_semi_axis()
        return ieee_sqrt(major * major - dst * dst)

    def eccentricity(self) -> float:
        return ieee_divide(self.focal_distance(), self.major_semi_axis())

    def major_axis_direction(self) -> Point:
        """
        Unit vector pointing from the first focus to the second.

        With coincident foci every direction is an axis; the x-axis is returned.
        """
        length = distance(self._focus_one, self._focus_two)
        if length == 0.0:
            return Point(1.0, 0.0)
        return self._focus_two.subtract(self._focus_one).divide(length)

    def perimeter(self) -> float:
        """Ramanujan's approximation of the perimeter."""
        a = self.major_semi_axis()
        b = self.minor_semi_axis()
        return ieee_divide(4 * (math.pi * a * b + (a - b) * (a - b)), a + b)

    def area(self) -> float:
        return math.pi * self.major_semi_axis() * self.minor_semi_axis()

    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        direction = self.major_axis_direction()
        return ellipse_to_polyline(
            center=self._barycenter,
            a=self.major_semi_axis(),
            b=self.minor_semi_axis(),
            n_segments=DEFAULT_POLYLINE_SEGMENTS if n_segments is None else n_segments,
            angle=math.atan2(direction.y, direction.x)
        )

    def _defining_points(self) -> list[Point]:
        return [self._focus_one, self._focus_two]

    def _set_defining_points(self, points: list[Point]) -> None:
        self._focus_one, self._focus_two = points

    def _scale_lengths(self, factor: float) -> None:
        self._perifocal_distance *= factor


class Circle(Ellipse):
    """Ellipse with coincident foci; the perifocal distance is the radius."""

    def __init__(self, center: Point, radius: float) -> None:
        super().__init__(center, center, radius)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(center={self._barycenter}, radius={self.radius()})"

    def radius(self) -> float:
        return self._perifocal_distance
