# -*- coding: utf-8 -*-
"""
Provides the frame renderer: partition, dispatch one worker per band, join.
"""

__all__ = ["NORMALIZE_MODES", "FrameRenderer"]

import time
import numpy as np

from .base import ITER_LIMIT, ConfigurationError, WorkerFault
from .mandel_band import fill_band, rescale_band, render_band
from .parallel import Barrier, BrokenBarrierError, Worker
from .partition import partition

NORMALIZE_MODES = ('band', 'global')


class FrameRenderer(object):
    """
    Render escape-time intensities for a fixed image size.

    The output buffer is allocated once and overwritten by every call to
    render(). Workers are spawned fresh per frame and joined before
    render() returns.
    """

    def __init__(self, width, height, num_workers, max_iters=ITER_LIMIT, normalize='band'):

        if width <= 0 or height <= 0:
            raise ConfigurationError(
                "image bounds must be positive: {}x{}".format(width, height))
        if num_workers <= 0:
            raise ConfigurationError(
                "number of workers must be positive: {}".format(num_workers))
        if max_iters <= 0:
            raise ConfigurationError(
                "iteration limit must be positive: {}".format(max_iters))
        if normalize not in NORMALIZE_MODES:
            raise ConfigurationError(
                "normalize must be one of {}: {!r}".format(NORMALIZE_MODES, normalize))

        self.width = width
        self.height = height
        self.num_workers = num_workers
        self.max_iters = max_iters
        self.normalize = normalize
        self.elapsed = 0.0

        self.output = np.zeros((height, width), dtype=np.uint8)


    def render(self, viewport):
        """
        Render the viewport snapshot and return the completed buffer.

        Raises ConfigurationError before any work for an empty viewport,
        and WorkerFault if any band fails.
        """
        start = time.time()

        viewport.check()
        bands = partition(self.output, viewport, self.num_workers)

        if self.normalize == 'global':
            workers = self.__dispatch_global(bands)
        else:
            workers = [
                Worker(target=render_band, args=(band, self.max_iters),
                       name="band-{}".format(band.index))
                for band in bands ]
            self.__run(workers)

        self.__check(bands, workers)
        self.elapsed = time.time() - start

        return self.output


    def __dispatch_global(self, bands):

        barrier = Barrier(len(bands))
        maxima = [1] * len(bands)

        def task(band):
            ul, lr = band.viewport.check()
            maxima[band.index] = fill_band(
                band.pixels, ul.real, ul.imag, lr.real, lr.imag, self.max_iters)

            # Wait for every band maximum.
            barrier.wait()
            rescale_band(band.pixels, max(maxima))

        workers = [
            Worker(target=task, args=(band,), name="band-{}".format(band.index),
                   on_error=barrier.abort)
            for band in bands ]
        self.__run(workers)

        return workers


    @staticmethod
    def __run(workers):

        for w in workers:
            w.start()
        for w in workers:
            w.join()


    @staticmethod
    def __check(bands, workers):

        # Report the originating fault, not peers released by the abort.
        failed = [(band, w.error) for band, w in zip(bands, workers) if w.error is not None]
        if not failed:
            return
        causes = [f for f in failed if not isinstance(f[1], BrokenBarrierError)]
        band, error = (causes or failed)[0]

        raise WorkerFault(band.index, error) from error
