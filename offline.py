#! /usr/bin/python3
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


"""Offline rendering of the burst animations.

Renders frames of one animation to a file or stdout, as determined by
the given options. Frame times are given explicitly, so the output is
the same on every run.

Intended mainly for batch processing workflows (documentation, unit
tests, previews, etc).

The following modes of operation are supported:
- oneshot    -- render the single frame at --time.
- sequence   -- render --frames frames as separate files in the given
                directory (PNG only).
- slideshow  -- render --frames frames as separate pages in the given
                file (PDF and PostScript only).
"""

import argparse
import logging
import os
import sys

import cairo

from drawing import CairoCanvas, Color, NAVY, density_for_dpi
from helpers import Rect, Save
import firework
import oval_burst
import params


logger = logging.getLogger(__name__)


RENDERERS = {
    "burst": (firework.RadialBurstRenderer, firework.define_parameters),
    "oval":  (oval_burst.OvalBurstRenderer, oval_burst.define_parameters),
}


def mm_to_in(mm):
    return mm / 25.4

def in_to_pt(inches):
    return inches * 72

def parse_unit(value):
    # - no unit: device units (pixels for PNG, points otherwise).
    # - mm: convert to inch, then convert points
    # - in: convert to to points.
    # - pt: do not convert.
    if value.endswith("mm"):
        return in_to_pt(mm_to_in(float(value[:-2])))
    elif value.endswith("in"):
        return in_to_pt(float(value[:-2]))
    elif value.endswith("pt"):
        return float(value[:-2])
    else:
        return float(value)


class UserError(Exception):
    pass


def build_renderer(name, overrides=None, environ=None):
    """Build the named renderer, configured from the parameters."""
    if name not in RENDERERS:
        raise UserError("Unknown renderer: %s" % name)
    renderer_class, define_parameters = RENDERERS[name]
    group = params.ParameterGroup()
    define_parameters(group)
    return renderer_class(**group.getValues(overrides, environ))


def frame_times(start, fps, frames):
    """The elapsed time, in ms, of each frame to render."""
    if start < 0:
        raise UserError("--time must not be negative")
    if fps <= 0:
        raise UserError("--fps must be positive")
    if frames < 1:
        raise UserError("--frames must be at least 1")
    return [start + i * 1000.0 / fps for i in range(frames)]


class SurfaceWrapper:
    """Abstract the different output formats cairo supports.

    There are some wierd asymmetries in the cairo API. This family of
    classes attempts to smooth this over.

    In particular, there's no obvious way to create a "blank" PNG
    surface for painting. Rather, one creates an ImageSurface and writes
    it as a .png file.

    While we're here, we also abstract over the different supported
    modes of operation.
    """

    @classmethod
    def from_args(self, args):
        fmt = args.format
        if   fmt == "png": return PngSurfaceWrapper(args)
        elif fmt == "ps":  return PsSurfaceWrapper(args)
        elif fmt == "pdf": return PdfSurfaceWrapper(args)
        elif fmt == "svg": return SvgSurfaceWrapper(args)
        raise UserError("Unsupported format: %s" % fmt)

    def __init__(self, args):
        width, height = args.size
        self.window = Rect.from_size(width, height)
        self.output = args.output
        self.background = args.background
        self.surface = self.create_surface(width, height)
        self.cr = cairo.Context(self.surface)
        self.canvas = CairoCanvas(self.cr, density_for_dpi(args.dpi))

    def render(self, renderer, elapsed):
        logger.debug("rendering frame at %.1f ms", elapsed)
        with Save(self.cr):
            self.cr.set_operator(cairo.OPERATOR_CLEAR)
            self.cr.paint()
        with Save(self.cr):
            self.canvas.paint_background(self.background)
            renderer.draw_at(self.canvas, self.window, elapsed)

    def oneshot(self, renderer, times):
        try:
            self.render(renderer, times[0])
        finally:
            self.write()

    def slideshow(self, renderer, times):
        try:
            for elapsed in times:
                self.render(renderer, elapsed)
                self.next_page()
        finally:
            self.write()

    def create_surface(self, width, height):
        """Defined by all subclasses."""
        raise NotImplementedError

    def next_page(self):
        """Defined in supported subclasses"""
        raise NotImplementedError

    def write(self):
        """Defined by all subclasses."""
        raise NotImplementedError


class PngSurfaceWrapper(SurfaceWrapper):

    def __init__(self, args):
        if args.output is None:
            raise UserError("PNG does not support streaming to stdout.")
        if args.mode == "slideshow":
            raise UserError("The PNG format does not support slideshows.")
        if (args.mode == "sequence" and os.path.exists(args.output)
                and not os.path.isdir(args.output)):
            raise UserError("%s exists and is not a directory" % args.output)
        super().__init__(args)

    def create_surface(self, width, height):
        return cairo.ImageSurface(cairo.Format.ARGB32, int(width), int(height))

    def write(self, path=None):
        path = path or self.output
        self.surface.write_to_png(path)
        logger.info("wrote %s", path)

    def sequence(self, renderer, times):
        os.makedirs(self.output, exist_ok=True)
        for (i, elapsed) in enumerate(times):
            self.render(renderer, elapsed)
            self.write(os.path.join(self.output, "%d.png" % i))


class VectorSurfaceWrapper(SurfaceWrapper):

    """Common base for the formats which write straight to a file."""

    surface_class = None

    def __init__(self, args):
        if args.mode == "sequence":
            raise UserError("Only the PNG format supports image sequences.")
        super().__init__(args)

    def target(self):
        if self.output is None:
            return sys.stdout.buffer
        return self.output

    def create_surface(self, width, height):
        return self.surface_class(self.target(), width, height)

    def next_page(self):
        self.cr.show_page()

    def write(self):
        self.surface.finish()
        logger.info("wrote %s", self.output or "<stdout>")


class PdfSurfaceWrapper(VectorSurfaceWrapper):
    surface_class = cairo.PDFSurface


class PsSurfaceWrapper(VectorSurfaceWrapper):
    surface_class = cairo.PSSurface


class SvgSurfaceWrapper(VectorSurfaceWrapper):
    surface_class = cairo.SVGSurface

    def __init__(self, args):
        if args.mode == "slideshow":
            raise UserError("The SVG format does not support slideshows.")
        super().__init__(args)


def make_parser():
    desc = "Render frames of the burst animations to image files."
    parser = argparse.ArgumentParser(description=desc)

    parser.add_argument(
        "-r", "--renderer",
        help="Which animation to render",
        choices=sorted(RENDERERS),
        default="burst"
    )

    parser.add_argument(
        "-m", "--mode",
        help="Specifies output mode",
        metavar="MODE",
        choices=("oneshot", "sequence", "slideshow"),
        default="oneshot"
    )

    parser.add_argument(
        "-f", "--format",
        help="Output file format",
        metavar="FMT",
        choices=("png", "ps", "pdf", "svg"),
        required=True
    )

    parser.add_argument(
        "-o", "--output",
        help="The output file path (defaults to `stdout`), "
             "or directory in sequence mode",
        metavar="FILE",
        type=str
    )

    parser.add_argument(
        "-s", "--size",
        help="The width and height of the output image",
        nargs=2,
        type=parse_unit,
        default=(480.0, 480.0)
    )

    parser.add_argument(
        "-d", "--dpi",
        help="Output DPI, used to convert dp to pixels.",
        metavar="DPI",
        default=96,
        type=int,
    )

    parser.add_argument(
        "-t", "--time",
        help="Elapsed time of the first frame, in ms",
        metavar="MS",
        default=0.0,
        type=float,
    )

    parser.add_argument(
        "--fps",
        help="Frames per second in sequence and slideshow modes",
        default=30.0,
        type=float,
    )

    parser.add_argument(
        "-n", "--frames",
        help="Number of frames in sequence and slideshow modes",
        default=1,
        type=int,
    )

    parser.add_argument(
        "-b", "--background",
        help="Background color as AARRGGBB hex",
        metavar="COLOR",
        default=NAVY,
        type=Color.parse,
    )

    parser.add_argument(
        "-p", "--param",
        help="Override a renderer parameter.",
        nargs=2,
        metavar=("NAME", "VALUE"),
        dest="params",
        action="append",
        default=[],
    )

    parser.add_argument(
        "-v", "--verbose",
        help="Log every frame",
        action="store_true",
    )

    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S')

    try:
        renderer = build_renderer(args.renderer, dict(args.params))
        frames = 1 if args.mode == "oneshot" else args.frames
        times = frame_times(args.time, args.fps, frames)
        wrapper = SurfaceWrapper.from_args(args)

        if   args.mode == "oneshot":   wrapper.oneshot(renderer,   times)
        elif args.mode == "sequence":  wrapper.sequence(renderer,  times)
        elif args.mode == "slideshow": wrapper.slideshow(renderer, times)
    except (UserError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
