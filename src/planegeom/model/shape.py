from __future__ import annotations

from abc import ABC, abstractmethod

import logging
from typing import TYPE_CHECKING, Optional, Self

from planegeom.model.geometry_primitives import Point, ZERO

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Shape(ABC):
    """
    Abstract base class for planar shapes.

    A shape is stored as a small set of defining points, a barycenter and
    optionally some length fields. Transforms are implemented once here in
    terms of the defining points; subclasses supply the metric queries.

    Transforms mutate the shape in place and return it, so they can be chained.
    Instances are not synchronized; concurrent mutation of one shape is the
    caller's responsibility.
    """

    def __init__(self, barycenter: Point) -> None:
        self._barycenter = barycenter

    def center(self) -> Point:
        """The reference point of the shape, kept fixed by rotate and scale."""
        return self._barycenter

    @abstractmethod
    def perimeter(self) -> float:
        """Length of the boundary."""
        pass

    @abstractmethod
    def area(self) -> float:
        """Enclosed area."""
        pass

    @abstractmethod
    def to_polyline(self, n_segments: Optional[int] = None) -> npt.NDArray[np.float64]:
        """Closed (N,2) outline of the shape."""
        pass

    @abstractmethod
    def _defining_points(self) -> list[Point]:
        pass

    @abstractmethod
    def _set_defining_points(self, points: list[Point]) -> None:
        pass

    def _scale_lengths(self, factor: float) -> None:
        """Hook for shapes storing explicit lengths; `factor` is never negative."""
        pass

    def translate(self, new_center: Point) -> Self:
        """
        Move the shape rigidly so that its center becomes `new_center`.

        Args:
            new_center: The center after the move.

        Returns:
            The shape itself.
        """
        self._move_to(new_center)
        logger.debug(f"{self.__class__.__name__} translated to {new_center}")
        return self

    def rotate(self, angle: float) -> Self:
        """
        Rotate every defining point around the current center.

        Args:
            angle: Counter-clockwise angle in radians.

        Returns:
            The shape itself.
        """
        self._set_defining_points([p.rotate(self._barycenter, angle) for p in self._defining_points()])
        logger.debug(f"{self.__class__.__name__} rotated by {angle} rad")
        return self

    def scale(self, coefficient: float) -> Self:
        """
        Apply a homothety about the center.

        Length fields are multiplied by |coefficient| while the defining points
        are multiplied by the signed coefficient relative to the center, so a
        negative coefficient turns the points half a revolution around the center
        and never mirrors the shape.

        Args:
            coefficient: Scale factor.

        Returns:
            The shape itself.
        """
        self._scale_lengths(abs(coefficient))
        old_barycenter = self._barycenter
        self._move_to(ZERO)
        self._set_defining_points([p.multiply(coefficient) for p in self._defining_points()])
        self._move_to(old_barycenter)
        logger.debug(f"{self.__class__.__name__} scaled by {coefficient}")
        return self

    def _move_to(self, new_center: Point) -> None:
        diff = new_center.subtract(self._barycenter)
        self._set_defining_points([p.add(diff) for p in self._defining_points()])
        self._barycenter = new_center
