# -*- coding: utf-8 -*-
"""
Band functions. Each call touches the rows of a single band only.
"""

__all__ = ["fill_band", "rescale_band", "render_band"]

from .base import ITER_LIMIT
from .mandel_common import escape_time, map_pixel

from numba import njit


@njit('i4(u1[:,:], f8, f8, f8, f8, i4)', nogil=True)
def fill_band(pixels, ul_real, ul_imag, lr_real, lr_imag, max_iters):
    """
    Store raw intensities and return the band maximum, at least 1.
    """
    height, width = pixels.shape
    max_brightness = 1

    for row in range(height):
        for col in range(width):
            creal, cimag = map_pixel(
                width, height, col, row, ul_real, ul_imag, lr_real, lr_imag)
            n = escape_time(creal, cimag, max_iters)

            if n < 0:
                value = 0
            else:
                value = max(0, 255 - n)

            pixels[row, col] = value
            if value > max_brightness:
                max_brightness = value

    return max_brightness


@njit('void(u1[:,:], i4)', nogil=True)
def rescale_band(pixels, max_brightness):
    """
    Linear rescale so that max_brightness maps to 255, rounding half up.
    """
    height, width = pixels.shape

    for row in range(height):
        for col in range(width):
            value = pixels[row, col]
            if value:
                pixels[row, col] = int(value * 255.0 / max_brightness + 0.5)


def render_band(band, max_iters=ITER_LIMIT):
    """
    Fill and normalize one band against its own maximum.
    """
    ul, lr = band.viewport.check()
    max_brightness = fill_band(
        band.pixels, ul.real, ul.imag, lr.real, lr.imag, max_iters)
    rescale_band(band.pixels, max_brightness)

    return max_brightness
