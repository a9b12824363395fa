import math

import cairo
import pytest

from helpers import Helper, Point, Rect, Save


class TestPoint:
    def test_arithmetic(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(3, 4) - Point(1, 1) == Point(2, 3)
        assert Point(1, 2) * 3 == Point(3, 6)
        assert 3 * Point(1, 2) == Point(3, 6)
        assert Point(4, 2) / 2 == Point(2, 1)

    def test_coordinates_are_floats(self):
        p = Point(1, 2)
        assert isinstance(p.x, float)
        assert tuple(p) == (1.0, 2.0)

    def test_equality_and_hash(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert Point(1, 2) != Point(2, 1)
        assert Point(1, 2) != (1, 2)
        assert len({Point(1, 2), Point(1, 2), Point(0, 0)}) == 2

    def test_origin_is_truthy(self):
        assert Point(0, 0)

    def test_len_and_dist(self):
        assert Point(3, 4).len() == 5
        assert Point(1, 1).dist(Point(4, 5)) == 5

    def test_from_polar(self):
        p = Point.from_polar(2, math.pi / 2)
        assert p.x == pytest.approx(0, abs=1e-12)
        assert p.y == pytest.approx(2)

    def test_from_polar_zero_radius(self):
        assert Point.from_polar(0, 1.234).len() == 0


class TestRect:
    def test_from_size(self):
        r = Rect.from_size(400, 300)
        assert r.center == Point(200, 150)
        assert r.width == 400
        assert r.height == 300

    def test_dimensions(self):
        r = Rect.from_size(400, 300)
        assert r.min_dimension() == 300

    def test_degenerate(self):
        r = Rect.from_size(0, 0)
        assert r.center == Point(0, 0)
        assert r.min_dimension() == 0

    def test_equality(self):
        assert Rect.from_size(10, 20) == Rect(Point(5, 10), 10, 20)
        assert Rect.from_size(10, 20) != Rect.from_size(20, 10)


class TestSave:
    def test_restores_state(self):
        surface = cairo.ImageSurface(cairo.Format.ARGB32, 4, 4)
        cr = cairo.Context(surface)
        cr.set_line_width(2)
        with Save(cr):
            cr.set_line_width(5)
            assert cr.get_line_width() == 5
        assert cr.get_line_width() == 2

    def test_restores_on_error(self):
        surface = cairo.ImageSurface(cairo.Format.ARGB32, 4, 4)
        cr = cairo.Context(surface)
        cr.set_line_width(2)
        with pytest.raises(RuntimeError):
            with Save(cr):
                cr.set_line_width(5)
                raise RuntimeError("boom")
        assert cr.get_line_width() == 2


class TestHelper:
    def test_round_cap(self):
        surface = cairo.ImageSurface(cairo.Format.ARGB32, 4, 4)
        helpers = Helper(cairo.Context(surface))
        helpers.set_round_cap(True)
        assert helpers.cr.get_line_cap() == cairo.LineCap.ROUND
        helpers.set_round_cap(False)
        assert helpers.cr.get_line_cap() == cairo.LineCap.BUTT

    def test_segment_builds_path(self):
        surface = cairo.ImageSurface(cairo.Format.ARGB32, 10, 10)
        helpers = Helper(cairo.Context(surface))
        helpers.segment(Point(1, 2), Point(7, 8))
        assert helpers.cr.get_current_point() == (7, 8)
