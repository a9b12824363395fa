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

"""Looping progress drivers.

A driver maps elapsed time (in milliseconds) to a progress value. The
renderers take their progress from a driver's `value_at()`, and never
look at a clock themselves, so any object with a `value_at(elapsed)`
method can stand in for one of these.
"""

RESTART = "restart"
REVERSE = "reverse"


def linear(fraction):
    return fraction


class CubicBezier(object):

    """Easing curve through (0, 0), (x1, y1), (x2, y2), (1, 1).

    Solves for the curve parameter whose x coordinate matches the input
    fraction, then returns the y coordinate at that parameter.
    """

    iterations = 8
    epsilon = 1e-6

    def __init__(self, x1, y1, x2, y2):
        if not (0 <= x1 <= 1 and 0 <= x2 <= 1):
            raise ValueError(
                "x control points must lie in [0, 1], got {} and {}".format(
                    x1, x2))
        self.x1, self.y1 = x1, y1
        self.x2, self.y2 = x2, y2

    def __repr__(self):
        return "CubicBezier(%g, %g, %g, %g)" % (
            self.x1, self.y1, self.x2, self.y2)

    @staticmethod
    def _bezier(t, a, b):
        u = 1 - t
        return 3 * u * u * t * a + 3 * u * t * t * b + t * t * t

    @staticmethod
    def _slope(t, a, b):
        u = 1 - t
        return 3 * u * u * a + 6 * u * t * (b - a) + 3 * t * t * (1 - b)

    def _solve(self, x):
        # Newton first, bisection when the slope flattens out.
        t = x
        for _ in range(self.iterations):
            error = self._bezier(t, self.x1, self.x2) - x
            if abs(error) < self.epsilon:
                return t
            slope = self._slope(t, self.x1, self.x2)
            if abs(slope) < self.epsilon:
                break
            t -= error / slope
            if not 0 <= t <= 1:
                break

        lower, upper = 0.0, 1.0
        t = x
        while upper - lower > self.epsilon:
            if self._bezier(t, self.x1, self.x2) < x:
                lower = t
            else:
                upper = t
            t = (lower + upper) * 0.5
        return t

    def __call__(self, fraction):
        if fraction <= 0:
            return 0.0
        if fraction >= 1:
            return 1.0
        return self._bezier(self._solve(fraction), self.y1, self.y2)


FAST_OUT_SLOW_IN = CubicBezier(0.4, 0.0, 0.2, 1.0)

EASINGS = {"linear": linear, "fast_out_slow_in": FAST_OUT_SLOW_IN}


class InfiniteRepeatable(object):

    """Interpolates from `initial` to `target`, forever.

    Each iteration holds its starting value for `delay` ms, then moves to
    its end value over `duration` ms along `easing`. With RESTART every
    iteration runs initial -> target. With REVERSE, odd iterations play
    the previous one backwards: they leave `target` at once, reach
    `initial` after `duration` ms, and hold it for the trailing `delay`.
    """

    def __init__(self, initial, target, duration, delay=0,
                 easing=linear, repeat_mode=RESTART):
        if duration <= 0:
            raise ValueError("duration must be positive, got %r" % duration)
        if delay < 0:
            raise ValueError("delay must not be negative, got %r" % delay)
        if repeat_mode not in (RESTART, REVERSE):
            raise ValueError("unknown repeat mode: %r" % repeat_mode)
        self.initial = initial
        self.target = target
        self.duration = duration
        self.delay = delay
        self.easing = easing
        self.repeat_mode = repeat_mode

    def __repr__(self):
        return "InfiniteRepeatable(%g -> %g, %gms, delay=%gms, %s)" % (
            self.initial, self.target, self.duration, self.delay,
            self.repeat_mode)

    @property
    def period(self):
        return self.delay + self.duration

    def fraction_at(self, elapsed):
        """Return (iteration, fraction of the iteration's animation)."""
        if elapsed < 0:
            raise ValueError("elapsed time must not be negative, got %r" %
                             elapsed)
        iteration, offset = divmod(elapsed, self.period)
        if self.repeat_mode == REVERSE and int(iteration) % 2:
            # Played backwards: the ramp runs first, the delay comes last.
            offset = self.period - offset
        if offset < self.delay:
            fraction = 0.0
        else:
            fraction = (offset - self.delay) / self.duration
        return int(iteration), fraction

    def value_at(self, elapsed):
        iteration, fraction = self.fraction_at(elapsed)
        eased = self.easing(fraction)
        return self.initial + (self.target - self.initial) * eased


class Constant(object):

    """A driver which never moves. Handy for still frames."""

    def __init__(self, value):
        self.value = value

    def value_at(self, elapsed):
        return self.value
