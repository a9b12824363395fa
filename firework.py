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

"""The rotating firework burst.

Two rings of dots spin in opposite directions while they bloom out from
the center, ringed by a set of short rays.
"""

import math

from drawing import Dot, Line, LAVENDER, LIGHT_GREEN, YELLOW
from helpers import Point
from params import (ChoiceParameter, ColorParameter, InfiniteParameter,
                    NumericParameter, ToggleParameter)
from timeline import EASINGS, InfiniteRepeatable, linear


def define_parameters(params):
    params.define("dots",          NumericParameter(1, 360, 16))
    params.define("dot_radius",    InfiniteParameter(8.0))
    params.define("inner_ratio",   NumericParameter(0.0, 1.0, 0.7))
    params.define("rays",          NumericParameter(0, 360, 8))
    params.define("ray_ratio",     InfiniteParameter(1.2))
    params.define("ray_width",     InfiniteParameter(8.0))
    params.define("round_cap",     ToggleParameter(True))
    params.define("outer_color",   ColorParameter(LIGHT_GREEN))
    params.define("inner_color",   ColorParameter(YELLOW))
    params.define("ray_color",     ColorParameter(LAVENDER))
    params.define("scale_period",  InfiniteParameter(2000.0))
    params.define("rotation_period", InfiniteParameter(3000.0))
    params.define("easing",        ChoiceParameter(EASINGS, "linear"))


class RadialBurstRenderer(object):

    """Draws the firework burst into a drawing area.

    `scale` in [0, 1] blooms both rings out from the center. `rotation`
    (degrees) spins the outer ring and the rays clockwise, and the inner
    ring counter-clockwise. The rays always sit at full length: only the
    dots follow `scale`.
    """

    def __init__(self, dots=16, dot_radius=8.0, inner_ratio=0.7, rays=8,
                 ray_ratio=1.2, ray_width=8.0, round_cap=True,
                 outer_color=LIGHT_GREEN, inner_color=YELLOW,
                 ray_color=LAVENDER, scale_period=2000.0,
                 rotation_period=3000.0, easing=linear,
                 scale_driver=None, rotation_driver=None):
        self.dots = int(dots)
        self.dot_radius = dot_radius
        self.inner_ratio = inner_ratio
        self.rays_count = int(rays)
        self.ray_ratio = ray_ratio
        self.ray_width = ray_width
        self.round_cap = round_cap
        self.outer_color = outer_color
        self.inner_color = inner_color
        self.ray_color = ray_color

        if scale_driver is None:
            scale_driver = InfiniteRepeatable(
                0.0, 1.0, scale_period, easing=easing)
        if rotation_driver is None:
            rotation_driver = InfiniteRepeatable(
                0.0, 360.0, rotation_period, easing=easing)
        self.scale_driver = scale_driver
        self.rotation_driver = rotation_driver

    def radius(self, window):
        return window.min_dimension() / 4

    def _ring(self, window, radius, rotation, color):
        step = 360 / self.dots
        return [
            Dot(window.center +
                Point.from_polar(radius, math.radians(i * step + rotation)),
                self.dot_radius,
                color)
            for i in range(self.dots)
        ]

    def outer_ring(self, window, scale, rotation):
        radius = self.radius(window) * scale
        return self._ring(window, radius, rotation, self.outer_color)

    def inner_ring(self, window, scale, rotation):
        # spins the other way
        radius = self.radius(window) * self.inner_ratio * scale
        return self._ring(window, radius, -rotation, self.inner_color)

    def rays(self, window, rotation):
        radius = self.radius(window)
        if not self.rays_count:
            return []
        step = 360 / self.rays_count
        lines = []
        for i in range(self.rays_count):
            direction = Point.from_polar(1, math.radians(i * step + rotation))
            lines.append(Line(
                window.center + direction * radius,
                window.center + direction * (radius * self.ray_ratio),
                self.ray_width,
                self.ray_color,
                self.round_cap))
        return lines

    def shapes(self, window, scale, rotation):
        """All shapes for one frame, in paint order."""
        return (self.outer_ring(window, scale, rotation) +
                self.inner_ring(window, scale, rotation) +
                self.rays(window, rotation))

    def draw(self, canvas, window, scale, rotation):
        for shape in self.shapes(window, scale, rotation):
            shape.paint(canvas)

    def progress_at(self, elapsed):
        """Return (scale, rotation) at `elapsed` milliseconds."""
        return (self.scale_driver.value_at(elapsed),
                self.rotation_driver.value_at(elapsed))

    def draw_at(self, canvas, window, elapsed):
        scale, rotation = self.progress_at(elapsed)
        self.draw(canvas, window, scale, rotation)
