# -*- coding: utf-8 -*-
"""
Common numeric functions: the escape-time loop and the pixel mapping.
"""

__all__ = ["escape_time", "map_pixel", "evaluate", "pixel_to_complex"]

import os

from .base import ESCAPE_RADIUS_2, ITER_LIMIT

os.environ['NUMBA_DISABLE_INTEL_SVML'] = str(1)
os.environ['NUMBA_OPT'] = str(3)
from numba import njit


def _escape_time(creal, cimag, max_iters):

    zreal = 0.0
    zimag = 0.0

    # Compute z = z^2 + c, testing |z|^2 before each update.
    for n in range(max_iters):
        zreal_sqr = zreal * zreal
        zimag_sqr = zimag * zimag

        if zreal_sqr + zimag_sqr > ESCAPE_RADIUS_2:
            return n

        zimag = 2.0 * zreal * zimag + cimag
        zreal = zreal_sqr - zimag_sqr + creal

    # Bounded.
    return -1

escape_time = njit('i4(f8, f8, i4)', nogil=True)(_escape_time)


def _map_pixel(width, height, x, y, ul_real, ul_imag, lr_real, lr_imag):

    # The far edges are returned as is so that adjacent bands share them
    # bit for bit.
    if x < width:
        creal = ul_real + (x / width) * (lr_real - ul_real)
    else:
        creal = lr_real
    if y < height:
        cimag = ul_imag - (y / height) * (ul_imag - lr_imag)
    else:
        cimag = lr_imag

    return (creal, cimag)

map_pixel = njit('UniTuple(f8,2)(i8, i8, i8, i8, f8, f8, f8, f8)', nogil=True)(_map_pixel)


def evaluate(c, limit=ITER_LIMIT):
    """
    Return the 0-based iteration at which c diverged, or None if bounded.
    """
    c = complex(c)
    n = escape_time(c.real, c.imag, limit)
    return None if n < 0 else int(n)


def pixel_to_complex(bounds, pixel, viewport):
    """
    Map pixel (x, y) of an image with bounds (width, height) into the
    viewport. Raises ConfigurationError for an empty viewport.
    """
    viewport.check()
    width, height = bounds
    x, y = pixel
    ul, lr = viewport
    creal, cimag = map_pixel(width, height, x, y, ul.real, ul.imag, lr.real, lr.imag)
    return complex(creal, cimag)
