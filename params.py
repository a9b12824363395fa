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

"""Text-based renderer parameters.

Every renderer argument has a default. A value can be overridden with
an environment variable, `FIRECRACKER_<NAME>`, or explicitly (as the
`--param` option of the offline renderer does). Explicit overrides win
over the environment.
"""

from collections import OrderedDict
import logging
import os

from drawing import Color


logger = logging.getLogger(__name__)

ENV_PREFIX = "FIRECRACKER_"


class Parameter(object):

    """A uniform interface for creating parameters from the environment."""

    def require(self, value, allowed_types):
        """Raise an error if `value` is not one of `allowed_types`.

        `allowed_types` may be a tuple or a single type.
        """

        if not isinstance(allowed_types, tuple):
            allowed_types = (allowed_types,)

        if not isinstance(value, allowed_types):
            raise TypeError("Expected one of %s, got %r." % (
                ", ".join(repr(t) for t in allowed_types),
                value
            ))

    def parse(self, text):
        raise NotImplementedError


class ChoiceParameter(Parameter):

    """A parameter representing a choice of alternatives.

    `alternatives` is either a sequence of names, in which case the value
    is the name itself, or a mapping of names to values.
    """

    def __init__(self, alternatives, default):
        self.require(alternatives, (tuple, list, dict))

        if not default in alternatives:
            raise ValueError("Default must be one of the alternatives")

        if isinstance(alternatives, dict):
            self.alternatives = alternatives
        else:
            self.alternatives = OrderedDict((a, a) for a in alternatives)
        self.default = self.alternatives[default]

    def parse(self, text):
        if text not in self.alternatives:
            raise ValueError(
                "{} is not one of {}".format(
                    text, ", ".join(self.alternatives)))
        return self.alternatives[text]


class ColorParameter(Parameter):

    """An RGBA Color value, parsed from AARRGGBB hex text."""

    def __init__(self, default):
        self.require(default, Color)
        self.default = default

    def parse(self, text):
        return Color.parse(text)


class InfiniteParameter(Parameter):

    """A scalar value that is not constrained to a finite interval."""

    def __init__(self, default):
        self.require(default, (float, int))
        self.default = default

    def parse(self, text):
        return type(self.default)(text)


class NumericParameter(Parameter):

    """A scalar numeric value, with a finite range."""

    def __init__(self, lower, upper, default):
        allowed = (int, float)
        self.require(lower, allowed)
        self.require(upper, allowed)
        self.require(default, allowed)
        if not lower <= default <= upper:
            raise ValueError(
                "default {} not in range [{}, {}]".format(
                    default, lower, upper))
        self.lower = lower
        self.upper = upper
        self.default = default

    def parse(self, text):
        value = type(self.default)(text)
        if self.lower <= value <= self.upper:
            return value
        else:
            raise ValueError(
                "{} not in range [{}, {}]".format(value, self.lower, self.upper)
            )


class ToggleParameter(Parameter):

    """A parameter representing a binary choice."""

    def __init__(self, default):
        self.require(default, bool)
        self.default = default

    def parse(self, text):
        if text == "true":
            return True
        elif text == "false":
            return False

        raise ValueError("Could not parse {} as bool".format(text))


class ParameterGroup(object):

    """Manages the parameters a renderer is built from."""

    def __init__(self, prefix=ENV_PREFIX):
        self.params = OrderedDict()
        self.prefix = prefix

    def __contains__(self, name):
        return name in self.params

    def define(self, name, param):
        """Define a new parameter for later use by a renderer."""

        if name in self.params:
            raise ValueError("Parameter %s already defined" % name)
        self.params[name] = param

    def envName(self, name):
        return self.prefix + name.upper()

    def getValues(self, overrides=None, environ=None):
        """Get the current value for each parameter, as dict.

        `overrides` maps parameter names to text. Unknown names are an
        error, since they are almost always a typo.
        """
        overrides = overrides or {}
        environ = os.environ if environ is None else environ

        unknown = [name for name in overrides if name not in self.params]
        if unknown:
            raise ValueError(
                "Unknown parameter(s): {}. Expected one of: {}".format(
                    ", ".join(sorted(unknown)), ", ".join(self.params)))

        return OrderedDict(
            (name, self.getParamValue(name, param, overrides, environ))
            for name, param in self.params.items()
        )

    def getParamValue(self, name, param, overrides, environ):
        if name in overrides:
            logger.debug("%s = %r (override)", name, overrides[name])
            return param.parse(overrides[name])
        elif self.envName(name) in environ:
            text = environ[self.envName(name)]
            logger.debug("%s = %r (from $%s)", name, text, self.envName(name))
            return param.parse(text)
        else:
            return param.default
