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

"""Draw commands, and the canvases which receive them.

Renderers never talk to cairo directly. They produce `Dot` and `Line`
records and submit them to a canvas, which is any object providing:

- draw_circle(center, radius, color)
- draw_line(start, end, width, color, round_cap)
- a `density` attribute, the number of pixels per dp

`CommandList` records the calls, `CairoCanvas` paints them.
"""

from collections import namedtuple
import string

from helpers import Helper


# Android's baseline density: one dp is one pixel at 160 dpi.
BASELINE_DPI = 160.0


class Color(namedtuple("Color", "r g b a")):

    """An RGBA color, each channel in [0, 1]."""

    __slots__ = ()

    @classmethod
    def from_argb(cls, argb):
        return cls(
            ((argb >> 16) & 0xFF) / 0xFF,
            ((argb >> 8) & 0xFF) / 0xFF,
            (argb & 0xFF) / 0xFF,
            ((argb >> 24) & 0xFF) / 0xFF,
        )

    @classmethod
    def parse(cls, text):
        """Parse an AARRGGBB hex string, e.g. `FF90EE90`."""
        # int() alone would accept signs, underscores and whitespace.
        if not (len(text) == 8 and all(c in string.hexdigits for c in text)):
            raise ValueError("Could not parse as color: %r" % text)

        a = int(text[0:2], 16) / 0xFF
        r = int(text[2:4], 16) / 0xFF
        g = int(text[4:6], 16) / 0xFF
        b = int(text[6:8], 16) / 0xFF
        return cls(r, g, b, a)


LIGHT_GREEN = Color.from_argb(0xFF90EE90)
YELLOW      = Color.from_argb(0xFFFFFF00)
LAVENDER    = Color.from_argb(0xFFE6E6FA)
NAVY        = Color.from_argb(0xFF000080)


class Dot(namedtuple("Dot", "center radius color")):

    """A filled circle."""

    __slots__ = ()

    def paint(self, canvas):
        canvas.draw_circle(self.center, self.radius, self.color)


class Line(namedtuple("Line", "start end width color round_cap")):

    """A stroked line segment."""

    __slots__ = ()

    def paint(self, canvas):
        canvas.draw_line(
            self.start, self.end, self.width, self.color, self.round_cap)

    def length(self):
        return self.start.dist(self.end)


def density_for_dpi(dpi):
    return dpi / BASELINE_DPI


def dp_to_px(dp, density):
    return dp * density


class CommandList(object):

    """A canvas which records draw calls instead of painting them.

    Recorded commands compare equal when the calls were identical, which
    makes this the canvas of choice for tests. A recording can be
    replayed onto any other canvas later.
    """

    def __init__(self, density=1.0):
        self.density = density
        self.commands = []

    def __len__(self):
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __repr__(self):
        return "CommandList(%r)" % (self.commands,)

    def draw_circle(self, center, radius, color):
        self.commands.append(Dot(center, radius, color))

    def draw_line(self, start, end, width, color, round_cap=True):
        self.commands.append(Line(start, end, width, color, round_cap))

    def dots(self):
        return [c for c in self.commands if isinstance(c, Dot)]

    def lines(self):
        return [c for c in self.commands if isinstance(c, Line)]

    def replay(self, canvas):
        for command in self.commands:
            command.paint(canvas)


class CairoCanvas(object):

    """Paints draw commands onto a cairo context.

    Each command is painted inside its own save() / restore() pair, so
    source, line width and line cap never leak from one to the next.
    """

    def __init__(self, cr, density=1.0):
        self.cr = cr
        self.helpers = Helper(cr)
        self.density = density

    def paint_background(self, color):
        with self.helpers.save():
            self.helpers.set_color(color)
            self.cr.paint()

    def draw_circle(self, center, radius, color):
        with self.helpers.save():
            self.helpers.circle(center, radius)
            self.helpers.set_color(color)
            self.cr.fill()

    def draw_line(self, start, end, width, color, round_cap=True):
        with self.helpers.save():
            self.helpers.segment(start, end)
            self.cr.set_line_width(width)
            self.helpers.set_round_cap(round_cap)
            self.helpers.set_color(color)
            self.cr.stroke()
