# -*- coding: utf-8 -*-
"""
Provides the Pygame-based window interface.
"""

__all__ = ["WindowPygame"]

import os, sys, time
os.environ['SDL_VIDEO_ALLOW_SCREENSAVER'] = '1';

import numpy as np
import pygame as pg

from .base import BAR_MAX_WIDTH, Viewport, fps_bar, gray_to_rgb


class WindowPygame(object):

    def __init__(self, opt):

        self.width = opt.width
        self.height = opt.height
        self.num_threads = opt.num_threads
        self.normalize = opt.normalize
        self.max_fps = opt.max_fps
        self.frame_count = 0
        self.compute_time = 0.0
        self.last_time = time.time()

        # init/save home location
        self.viewport = Viewport(
            complex(opt.left, opt.top), complex(opt.right, opt.bottom)).check()
        self.reset_view = self.viewport

        self.rgb = np.zeros((self.height, self.width, 3), dtype=np.uint8)


    def init(self):

        # There's no sound or anything like that. Thus initializing display only.
        pg.display.init()

        self.window = pg.display.set_mode((self.width, self.height), flags=pg.DOUBLEBUF)
        self.window.set_alpha(None)
        self.window.fill(pg.Color('#000000'))

        pg.display.set_caption("Mandelbrot")
        pg.display.flip()


    def print_info(self):

        ul, lr = self.viewport
        print("[CPU] number of threads {}, normalize: {}".format(
            self.num_threads, self.normalize))
        print("  upper-left  : {:.16f}, {:.16f}".format(ul.real, ul.imag))
        print("  lower-right : {:.16f}, {:.16f}".format(lr.real, lr.imag))


    def run(self):

        self.print_info()

        # Poll events once per cycle, then render the current viewport.
        while True:
            done = False
            for e in pg.event.get():
                if e.type == pg.QUIT:
                    done = True
                elif e.type == pg.KEYDOWN:
                    if e.key in (pg.K_q, pg.K_ESCAPE):
                        done = True
                    else:
                        self.__on_key_press(e.key)
            if done:
                break

            self.display()
            self.__update_fps()

        print()
        pg.quit()


    def update_window(self, buffer, compute_time=0.0):

        self.compute_time = compute_time
        gray_to_rgb(buffer, self.rgb)
        img = pg.image.frombuffer(np.ravel(self.rgb), (self.width, self.height), 'RGB')

        self.window.blit(img, (0,0))
        pg.display.flip()


    def __update_fps(self):

        self.frame_count += 1
        elapsed = time.time() - self.last_time
        if elapsed < 1.0:
            return

        ratio = self.frame_count / elapsed / self.max_fps
        print("\x1b[2KFPS: {:3}  compute time: {:.3f} seconds\n\x1b[2K[{}]\x1b[1A\r".format(
            self.frame_count, self.compute_time, fps_bar(ratio, BAR_MAX_WIDTH)), end='')
        sys.stdout.flush()

        self.frame_count = 0
        self.last_time = time.time()


    def __on_key_press(self, symbol):

        if symbol == pg.K_UP:
            self.viewport = self.viewport.pan(0.0, 0.1)
        elif symbol == pg.K_DOWN:
            self.viewport = self.viewport.pan(0.0, -0.1)
        elif symbol == pg.K_LEFT:
            self.viewport = self.viewport.pan(-0.1, 0.0)
        elif symbol == pg.K_RIGHT:
            self.viewport = self.viewport.pan(0.1, 0.0)

        elif symbol == pg.K_a:  # zoom out
            self.viewport = self.viewport.zoom_out()
        elif symbol == pg.K_s:  # zoom in
            self.viewport = self.viewport.zoom_in()

        elif symbol in (pg.K_r, pg.K_HOME):  # reset display to initial view
            self.viewport = self.reset_view

        elif symbol == pg.K_e:
            img = pg.image.frombuffer(np.ravel(self.rgb), (self.width, self.height), 'RGB')
            pg.image.save(img, "image.png")
            print("\nImage saved as image.png.")
