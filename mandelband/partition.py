# -*- coding: utf-8 -*-
"""
Split the intensity buffer into horizontal bands, one per worker.
"""

__all__ = ["rows_per_band", "partition"]

from .base import Band, ConfigurationError, Viewport
from .mandel_common import pixel_to_complex


def rows_per_band(height, num_workers):
    if height <= 0 or num_workers <= 0:
        raise ConfigurationError(
            "height and number of workers must be positive: {}, {}"
            .format(height, num_workers))

    # The last band may be shorter, never taller.
    return height // num_workers + 1


def partition(buffer, viewport, num_workers):
    """
    Slice a (height, width) buffer into consecutive row bands.

    Each band gets its own sub-viewport, obtained by mapping its top-left
    and bottom-right corners through the full image bounds, so the
    sub-viewports tile the viewport without drift.
    """
    height, width = buffer.shape
    bounds = (width, height)
    step = rows_per_band(height, num_workers)

    bands = list()
    for index, top in enumerate(range(0, height, step)):
        stop = min(top + step, height)
        sub = Viewport(
            pixel_to_complex(bounds, (0, top), viewport),
            pixel_to_complex(bounds, (width, stop), viewport) )
        bands.append(Band(index, top, stop - top, sub, buffer[top:stop]))

    return bands
