"""Properties every shape variant must satisfy."""

import math

import pytest

from planegeom import Point, Shape

from conftest import assert_point_close


def _defining_state(shape):
    return [(p.x, p.y) for p in shape._defining_points()]


class TestShapeContract:

    def test_is_shape(self, any_shape):
        assert isinstance(any_shape, Shape)

    def test_shape_is_abstract(self):
        with pytest.raises(TypeError):
            Shape(Point(0.0, 0.0))

    def test_rotation_is_isometry(self, any_shape, angles):
        perimeter = any_shape.perimeter()
        area = any_shape.area()
        center = any_shape.center()
        for angle in angles:
            any_shape.rotate(angle)
            assert any_shape.perimeter() == pytest.approx(perimeter)
            assert any_shape.area() == pytest.approx(area)
            assert any_shape.center() == center

    def test_translation_invariance(self, any_shape):
        perimeter = any_shape.perimeter()
        area = any_shape.area()
        new_center = Point(-7.5, 12.25)
        any_shape.translate(new_center)
        assert any_shape.center() == new_center
        assert any_shape.perimeter() == pytest.approx(perimeter)
        assert any_shape.area() == pytest.approx(area)

    @pytest.mark.parametrize("coefficient", [2.0, 0.5, -3.0, -1.0])
    def test_scale_covariance(self, any_shape, coefficient):
        perimeter = any_shape.perimeter()
        area = any_shape.area()
        center = any_shape.center()
        any_shape.scale(coefficient)
        assert any_shape.perimeter() == pytest.approx(perimeter * abs(coefficient))
        assert any_shape.area() == pytest.approx(area * coefficient ** 2)
        assert any_shape.center() == center

    def test_translate_round_trip(self, any_shape):
        old_center = any_shape.center()
        before = _defining_state(any_shape)
        any_shape.translate(Point(100.0, -40.0)).translate(old_center)
        after = _defining_state(any_shape)
        for (x0, y0), (x1, y1) in zip(before, after):
            assert x1 == pytest.approx(x0)
            assert y1 == pytest.approx(y0)

    def test_full_turn_restores_points(self, any_shape):
        before = _defining_state(any_shape)
        any_shape.rotate(2 * math.pi)
        for (x0, y0), (x1, y1) in zip(before, _defining_state(any_shape)):
            assert_point_close(Point(x1, y1), Point(x0, y0))

    def test_transforms_return_self(self, any_shape):
        assert any_shape.translate(Point(1.0, 2.0)) is any_shape
        assert any_shape.rotate(0.5) is any_shape
        assert any_shape.scale(1.5) is any_shape

    def test_polyline_is_closed(self, any_shape):
        pts = any_shape.to_polyline(n_segments=12)
        assert pts.ndim == 2 and pts.shape[1] == 2
        assert tuple(pts[0]) == pytest.approx(tuple(pts[-1]))

    def test_transform_logging(self, any_shape, caplog):
        with caplog.at_level("DEBUG", logger="planegeom"):
            any_shape.translate(Point(0.0, 0.0)).rotate(1.0).scale(2.0)
        messages = [record.getMessage() for record in caplog.records]
        name = type(any_shape).__name__
        assert f"{name} translated to Point(x=0.0, y=0.0)" in messages
        assert f"{name} rotated by 1.0 rad" in messages
        assert f"{name} scaled by 2.0" in messages
