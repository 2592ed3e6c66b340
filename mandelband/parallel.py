# -*- coding: utf-8 -*-
"""
Provides the worker thread and barrier used by the frame renderer.

Workers are threads, not processes: every band writes into a view of the
same numpy buffer, and the numba functions release the GIL.
"""

__all__ = ['Barrier', 'BrokenBarrierError', 'Worker']

import threading

Barrier = threading.Barrier
BrokenBarrierError = threading.BrokenBarrierError


class Worker(threading.Thread):
    """
    Thread that keeps the exception raised by its target, if any.
    """

    def __init__(self, target, args=(), name=None, on_error=None):
        super().__init__(name=name, daemon=True)
        self._work = target
        self._work_args = args
        self._on_error = on_error
        self.error = None

    def run(self):
        try:
            self._work(*self._work_args)
        except Exception as e:
            self.error = e
            if self._on_error is not None:
                self._on_error()
