# firecracker: Looping burst animations rendered with cairo.
#
# Copyright (C) 2020  Brandon Lewis
#
# This program is free software: you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public License
# as published by the Free Software Foundation, either version 3 of
# the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program.  If not, see
# <https://www.gnu.org/licenses/>.


import cairo
import cmath
import math


class Helper(object):

    """Wraps a cairo context in a higher-level API.

    Primitives which take Point objects instead of x/y pairs:
    - circle
    - segment
    - move_to
    - line_to

    Transform Context Managers (so you cannot forget `restore()`):
    - save
    """

    def __init__(self, cr):
        self.cr = cr

    def circle(self, center, radius):
        self.cr.new_sub_path()
        self.cr.arc(center.x, center.y, radius, 0, 2 * math.pi)

    def segment(self, start, end):
        self.move_to(start)
        self.line_to(end)

    def move_to(self, point):
        self.cr.move_to(*point)

    def line_to(self, point):
        self.cr.line_to(*point)

    def set_color(self, color):
        self.cr.set_source_rgba(*color)

    def set_round_cap(self, round_cap):
        if round_cap:
            self.cr.set_line_cap(cairo.LineCap.ROUND)
        else:
            self.cr.set_line_cap(cairo.LineCap.BUTT)

    def save(self):
        return Save(self.cr)


class Point(object):

    """Reasonably terse 2D Point class."""

    def __init__(self, x, y): self.x = float(x) ; self.y = float(y)
    def __eq__(self, o):
        return isinstance(o, Point) and (self.x, self.y) == (o.x, o.y)
    def __repr__(self):       return "(%g,%g)" % (self.x, self.y)
    def __iter__(self):       yield  self.x ; yield self.y
    def __hash__(self):       return hash((self.x, self.y))

    def len(self): return math.sqrt(self.x ** 2 + self.y ** 2)

    def dist(self, other): return (other - self).len()

    def binop(func):
        def impl(self, x):
            o = x if isinstance(x, Point) else Point(x, x)
            return Point(func(self.x, o.x), func(self.y, o.y))
        return impl

    __add__  = binop(lambda a, b: a + b)
    __sub__  = binop(lambda a, b: a - b)
    __mul__  = binop(lambda a, b: a * b)
    __radd__ = binop(lambda a, b: b + a)
    __rsub__ = binop(lambda a, b: b - a)
    __rmul__ = binop(lambda a, b: b * a)
    __truediv__  = binop(lambda a, b: a / b)
    __rtruediv__ = binop(lambda a, b: b / a)

    @classmethod
    def from_polar(cls, r, theta):
        rect = cmath.rect(r, theta)
        return Point(rect.real, rect.imag)


class Rect(object):

    """Rectangle operations for layout."""

    def __init__(self, center, width, height):
        self.center = center
        self.width = width
        self.height = height

    @classmethod
    def from_top_left(self, top_left, width, height):
        return Rect(
            Point(top_left.x + width * 0.5, top_left.y + height * 0.5),
            width, height
        )

    @classmethod
    def from_size(self, width, height):
        """The drawing area of a canvas, with its origin at the top left."""
        return self.from_top_left(Point(0, 0), width, height)

    def __repr__(self):
        return "(%s, %g, %g)" % (self.center, self.width, self.height)

    def __eq__(self, o):
        return isinstance(o, Rect) and (
            (self.center, self.width, self.height) ==
            (o.center, o.width, o.height))

    def min_dimension(self):
        return min(self.width, self.height)


class Save(object):

    """A context manager which Keeps calls to save() and restore() balanced."""

    def __init__(self, cr):
        self.cr = cr

    def __enter__(self):
        self.cr.save()

    def __exit__(self, unused1, unused2, unused3):
        self.cr.restore()
