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

"""The oval burst.

A ring of thick round-capped spokes ("ovals") that shoot outward and
then retract, after a short pause. Progress runs 0 -> 2 each cycle:

    0       idle, nothing drawn
    (0, 1]  expanding: the tail stays on the inner anchor, the head grows
    (1, 2]  contracting: the head stays on the outer anchor, the tail follows
"""

from collections import namedtuple
import math

from drawing import Line, YELLOW, dp_to_px
from helpers import Point
from params import (ChoiceParameter, ColorParameter, InfiniteParameter,
                    NumericParameter, ToggleParameter)
from timeline import EASINGS, InfiniteRepeatable, linear


IDLE = "idle"
EXPANDING = "expanding"
CONTRACTING = "contracting"

SegmentBounds = namedtuple("SegmentBounds", "start end")


def phase(progress):
    if progress == 0:
        return IDLE
    elif progress <= 1:
        return EXPANDING
    else:
        return CONTRACTING


def segment_bounds(progress, inner, outer, direction, max_length):
    """Where one spoke starts and ends at `progress`."""
    current = phase(progress)
    if current == IDLE:
        return SegmentBounds(inner, inner)
    elif current == EXPANDING:
        return SegmentBounds(inner, inner + direction * (max_length * progress))
    elif progress >= 2:
        # Exact, so the finished spoke is recognised as zero-length.
        return SegmentBounds(outer, outer)
    else:
        travelled = max_length * (progress - 1)
        return SegmentBounds(inner + direction * travelled, outer)


def define_parameters(params):
    params.define("spokes",       NumericParameter(1, 360, 8))
    params.define("length_ratio", InfiniteParameter(0.8))
    params.define("width_dp",     InfiniteParameter(10.0))
    params.define("round_cap",    ToggleParameter(True))
    params.define("color",        ColorParameter(YELLOW))
    params.define("duration",     InfiniteParameter(700.0))
    params.define("delay",        InfiniteParameter(500.0))
    params.define("easing",       ChoiceParameter(EASINGS, "linear"))


class OvalBurstRenderer(object):

    """Draws the oval burst into a drawing area.

    The spokes never rotate. Their width is given in dp, and converted
    to pixels with the density of whichever canvas they are drawn on.
    """

    def __init__(self, spokes=8, length_ratio=0.8, width_dp=10.0,
                 round_cap=True, color=YELLOW, duration=700.0, delay=500.0,
                 easing=linear, progress_driver=None):
        self.spokes = int(spokes)
        self.length_ratio = length_ratio
        self.width_dp = width_dp
        self.round_cap = round_cap
        self.color = color

        if progress_driver is None:
            progress_driver = InfiniteRepeatable(
                0.0, 2.0, duration, delay=delay, easing=easing)
        self.progress_driver = progress_driver

    def base_radius(self, window):
        return window.min_dimension() / 4

    def max_length(self, window):
        return self.base_radius(window) * self.length_ratio

    def directions(self):
        step = 360 / self.spokes
        return [Point.from_polar(1, math.radians(i * step))
                for i in range(self.spokes)]

    def anchors(self, window):
        """(inner, outer) anchor points of every spoke."""
        base = self.base_radius(window)
        reach = base + self.max_length(window)
        return [(window.center + direction * base,
                 window.center + direction * reach)
                for direction in self.directions()]

    def segments(self, window, progress):
        max_length = self.max_length(window)
        return [
            segment_bounds(progress, inner, outer, direction, max_length)
            for direction, (inner, outer)
            in zip(self.directions(), self.anchors(window))
        ]

    def shapes(self, window, progress, density=1.0):
        """All visible spokes for one frame.

        Spokes whose ends coincide exactly are left out.
        """
        width = dp_to_px(self.width_dp, density)
        return [
            Line(bounds.start, bounds.end, width, self.color, self.round_cap)
            for bounds in self.segments(window, progress)
            if bounds.start != bounds.end
        ]

    def draw(self, canvas, window, progress):
        for shape in self.shapes(window, progress, canvas.density):
            shape.paint(canvas)

    def progress_at(self, elapsed):
        return self.progress_driver.value_at(elapsed)

    def draw_at(self, canvas, window, elapsed):
        self.draw(canvas, window, self.progress_at(elapsed))
