"""
planegeom
=========
2D analytic geometry: a point primitive and a closed family of planar shapes
(ellipse, circle, rectangle, square, triangle) with metric queries and
in-place translate / rotate / scale transforms.

Usage:

    from planegeom import Point, Triangle

    triangle = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))
    triangle.area()                          # 6.0
    triangle.circumscribed_circle().radius() # 2.5
    triangle.translate(Point(10, 10)).rotate(0.5).scale(2.0)
"""
from planegeom.model import (
    Point,
    ZERO,
    distance,
    dot_product,
    Shape,
    Ellipse,
    Circle,
    Rectangle,
    Square,
    Triangle,
    deg2rad,
)
from planegeom.logging_config import setup_logging

__all__ = [
    "Point",
    "ZERO",
    "distance",
    "dot_product",
    "Shape",
    "Ellipse",
    "Circle",
    "Rectangle",
    "Square",
    "Triangle",
    "deg2rad",
    "setup_logging",
]

__version__ = "0.1.0"
