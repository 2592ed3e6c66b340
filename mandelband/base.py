# -*- coding: utf-8 -*-
"""
Provides constants, error classes, the Viewport value and small helpers.
"""

__all__ = ["ITER_LIMIT", "ESCAPE_RADIUS_2", "BAR_MAX_WIDTH",
           "RenderError", "ConfigurationError", "WorkerFault",
           "Viewport", "Band", "fps_bar", "gray_to_rgb"]

from collections import namedtuple

import numpy as np

ITER_LIMIT = 255
ESCAPE_RADIUS_2 = 4.0
BAR_MAX_WIDTH = 20

# Partial blocks, indexed by eighths.
PARTIAL_BLOCKS = " ▏▎▍▌▋▊▉"
FULL_BLOCK = "█"


class RenderError(Exception):
    """
    Base class for errors raised while rendering a frame.
    """


class ConfigurationError(RenderError):
    """
    Invalid viewport, image bounds or worker count. Fix before retrying.
    """


class WorkerFault(RenderError):
    """
    A band worker failed; the frame is discarded.
    """

    def __init__(self, band, cause):
        super().__init__("band {} failed: {!r}".format(band, cause))
        self.band = band
        self.cause = cause


class Viewport(namedtuple("Viewport", ["upper_left", "lower_right"])):
    """
    Rectangle of the complex plane mapped onto the image.

    The upper-left corner has the smallest real and the largest imaginary
    part. Instances are immutable; navigation returns a new Viewport.
    """

    __slots__ = ()

    def __new__(cls, upper_left, lower_right):
        return super().__new__(cls, complex(upper_left), complex(lower_right))

    @property
    def width(self):
        return self.lower_right.real - self.upper_left.real

    @property
    def height(self):
        return self.upper_left.imag - self.lower_right.imag

    def check(self):
        if not (self.width > 0.0 and self.height > 0.0):
            raise ConfigurationError(
                "invalid complex plane region: upper-left {}, lower-right {}"
                .format(self.upper_left, self.lower_right))
        return self

    def pan(self, dx, dy):
        """
        Shift by a fraction of the span. Positive dy moves the view up.
        """
        offset = complex(dx * self.width, dy * self.height)
        return Viewport(self.upper_left + offset, self.lower_right + offset)

    def zoom(self, factor):
        """
        Move every edge outward by factor times the span on its axis.
        A negative factor zooms in.
        """
        dx, dy = factor * self.width, factor * self.height
        return Viewport(self.upper_left + complex(-dx, dy),
                        self.lower_right + complex(dx, -dy))

    def zoom_in(self):
        return self.zoom(-0.1)

    def zoom_out(self):
        return self.zoom(0.1)


# One horizontal strip of the image. The pixels member is a view into the
# shared intensity buffer covering rows [top, top + height) only.
Band = namedtuple("Band", ["index", "top", "height", "viewport", "pixels"])


def fps_bar(ratio, width=BAR_MAX_WIDTH):
    """
    Return a bar of `width` cells filled in eighths according to ratio.
    """
    ratio = max(0.0, min(1.0, ratio))
    eighths = int(ratio * width * 8)
    full, rem = divmod(eighths, 8)

    bar = FULL_BLOCK * full
    if full < width:
        bar += PARTIAL_BLOCKS[rem]

    return bar.ljust(width)


def gray_to_rgb(buffer, out=None):
    """
    Broadcast a (h, w) intensity buffer into a (h, w, 3) RGB array.
    """
    h, w = buffer.shape
    if out is None:
        out = np.empty((h, w, 3), dtype=np.uint8)
    out[:] = buffer[:, :, np.newaxis]
    return out
