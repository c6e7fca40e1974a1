from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from math import pi
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt
    from planegeom.model.geometry_primitives import Point

def deg2rad(degrees: float) -> float:
    return degrees * pi / 180

def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide following IEEE-754 semantics.

    Division by zero yields +/-inf (or NaN for 0/0) instead of raising
    ZeroDivisionError, so degenerate geometry propagates through formulas.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(numerator, denominator))

def ieee_sqrt(value: float) -> float:
    """Square root returning NaN for negative input instead of raising."""
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(value))

def ieee_acos(value: float) -> float:
    """Arc cosine returning NaN outside [-1, 1] instead of raising."""
    with np.errstate(invalid="ignore"):
        return float(np.arccos(value))

def ellipse_to_polyline(
    center: Point,
    a: float,
    b: float,
    n_segments: int,
    angle: float = 0.0
) -> npt.NDArray[np.float64]:
    """
    Discretize an ellipse in XY into an (N,2) polyline (closed).

    Args:
        center: Center of the ellipse.
        a: Semi-major axis length.
        b: Semi-minor axis length.
        n_segments: Number of segments to use for discretization, at least 1.
        angle: Angle in radians between the major axis and the x-axis.

    Returns:
        An array of shape (n + 1, 2) containing the (x, y) coordinates of the points
        along the ellipse, the first point repeated at the end.

    Raises:
        ValueError: If `n_segments` is smaller than 1.
    """
    if n_segments < 1:
        raise ValueError(f"n_segments must be at least 1, got {n_segments}")

    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    cos_phi = np.cos(angle)
    sin_phi = np.sin(angle)

    # parametric point on the axis-aligned ellipse, rotated by the major axis angle
    u = a * np.cos(theta)
    v = b * np.sin(theta)
    pts = np.c_[center.x + u * cos_phi - v * sin_phi, center.y + u * sin_phi + v * cos_phi]

    # close the ring
    return np.vstack((pts, pts[0]))

def polygon_to_polyline(vertices: Sequence[Point]) -> npt.NDArray[np.float64]:
    """
    Convert polygon vertices into an (N,2) polyline (closed).

    Args:
        vertices: Polygon vertices in boundary order.

    Returns:
        An array of shape (n + 1, 2), the first vertex repeated at the end.
    """
    pts = np.array([p.to_array() for p in vertices], dtype=np.float64)
    return np.vstack((pts, pts[0]))
