"""
The MODEL layer contains the geometric data structures.
It has NO knowledge of rendering or I/O; it deals with points, shapes and
their metric queries and transforms.
"""
from planegeom.model.geometry_primitives import Point, ZERO, distance, dot_product
from planegeom.model.shape import Shape
from planegeom.model.ellipse import Ellipse, Circle
from planegeom.model.rectangle import Rectangle, Square
from planegeom.model.triangle import Triangle
from planegeom.model.geometry_utils import deg2rad

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
]
