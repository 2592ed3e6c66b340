#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Explore the Mandelbrot Set on the CPU, one thread per horizontal band.
"""

import sys

from os.path import basename

from mandelband.base import ConfigurationError, WorkerFault
from mandelband.frame import FrameRenderer
from mandelband.interface import WindowPygame
from mandelband.option import Option

class App(WindowPygame):

    def __init__(self, opt):
        super().__init__(opt)

        self.renderer = FrameRenderer(
            self.width, self.height, self.num_threads, normalize=self.normalize)

        # Instantiate the Window interface.
        super().init()

    def display(self):

        # The viewport is an immutable snapshot for the whole frame.
        buffer = self.renderer.render(self.viewport)
        self.update_window(buffer, self.renderer.elapsed)


def main():

    opt = Option()
    prog = basename(sys.argv[0])

    try:
        mandel = App(opt)
    except ConfigurationError as e:
        print(f"{prog}: error: {e}", file=sys.stderr)
        return 2

    try:
        mandel.run()
    except ConfigurationError as e:
        print(f"\n{prog}: error: {e}", file=sys.stderr)
        return 2
    except WorkerFault as e:
        print(f"\n{prog}: error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass

    return 0


if __name__ == '__main__':

    sys.exit(main())
