# -*- coding: utf-8 -*-
"""
Provides the Option class for config file and command line parsing.
"""

__all__ = ['Option', 'show_keyboard_shortcuts']

import os, sys

from configparser import ConfigParser
from optparse import OptionParser
from os.path import basename, exists

from .frame import NORMALIZE_MODES


class Option(object):

    def __init__(self, argv=None):

        argv = list(sys.argv[1:] if argv is None else argv)

        usage = "%prog [--config filepath [section]] [options]"
        epilog = """
          Values exceeding the range specification are silently clipped to
          the respective minimum or maximum value. The viewport is given by
          its left, top, right and bottom edges in the complex plane.
          """
        epilog = " ".join([line.lstrip() for line in epilog.splitlines()])

        p = OptionParser(usage=usage, version="%prog 0.1.0", epilog=epilog)

        def _opt(parser, opt, t, h):
          if t is None:
            parser.add_option(opt, help=h, action="store_true", default=False)
          else:
            parser.add_option(opt, type=t, help=h, metavar="ARG")

        # allow options with underscore by replacing with dash
        for i in range(len(argv)):
            if argv[i].startswith('--'):
                name, sep, value = argv[i].partition('=')
                argv[i] = name.replace('_', '-') + sep + value

        # configure options
        _opt(p, "--shortcuts", None, "show keyboard shortcuts and exit")
        _opt(p, "--width", "int", "width of window [100-8000]: 800")
        _opt(p, "--height", "int", "height of window [100-5000]: 800")
        _opt(p, "--left", "float", "real part of the upper-left corner: -1.2")
        _opt(p, "--top", "float", "imag part of the upper-left corner: 1.2")
        _opt(p, "--right", "float", "real part of the lower-right corner: 1.2")
        _opt(p, "--bottom", "float", "imag part of the lower-right corner: -1.2")
        _opt(p, "--num-threads", "string", "number of bands/threads to use: 16")
        _opt(p, "--normalize", "string", "brightness normalization [band,global]: band")
        _opt(p, "--max-fps", "int", "frame rate at which the FPS bar is full [1-240]: 60")

        p.set_defaults(
            width=800, height=800, left=-1.2, top=1.2, right=1.2, bottom=-1.2,
            num_threads='16', normalize='band', max_fps=60 )

        # optionally, override defaults from a config file
        self.__handle_config(p, argv)

        # process command-line arguments
        (opt, args) = p.parse_args(argv)

        # show usage
        if len(args):
            p.print_help()
            sys.exit(2)
        if opt.shortcuts:
            show_keyboard_shortcuts()
            sys.exit(0)
        if opt.normalize not in NORMALIZE_MODES:
            p.error("option --normalize: invalid choice: '{}'".format(opt.normalize))

        # clamp to minimum-maximum values
        self.width = max(100, min(8000, opt.width))
        self.height = max(100, min(5000, opt.height))
        self.max_fps = max(1, min(240, opt.max_fps))
        self.left = opt.left
        self.top = opt.top
        self.right = opt.right
        self.bottom = opt.bottom
        self.normalize = opt.normalize

        if opt.num_threads != 'auto':
            try:
                self.num_threads = max(1, int(opt.num_threads))
            except ValueError:
                p.error("option --num-threads: invalid value: '{}'".format(opt.num_threads))
        else:
            ncpu = int(os.getenv('NUM_THREADS') or os.cpu_count() or 1)
            self.num_threads = max(1, ncpu)

        del opt, args


    @classmethod
    def __handle_config(cls, parser, argv):

        if len(argv) >= 1 and argv[0].startswith('--config'):
            try:
                (_, config_path) = argv[0].split('=')
                del argv[0]
            except ValueError:
                if len(argv) < 2:
                    parser.error("--config option requires an argument")
                config_path = argv[1]
                del argv[1], argv[0]

            if len(argv) >= 1 and not argv[0].startswith('-'):
                section = argv[0]
                del argv[0]
            else:
                section = 'common'

            if not exists(config_path):
                prog = basename(sys.argv[0])
                mesg = f"{prog}: error: no such file or directory: '{config_path}'"
                print(mesg, file=sys.stderr)
                sys.exit(2)

            config = ConfigParser(default_section=None, empty_lines_in_values=False)
            config.read(config_path)

            cls.__override_defaults(parser, config, 'common')
            if section != 'common':
                cls.__override_defaults(parser, config, section)


    @classmethod
    def __override_defaults(cls, parser, config, section):

        if not config.has_section(section):
            prog = basename(sys.argv[0])
            mesg = f"{prog}: error: no such section in config: '{section}'"
            print(mesg, file=sys.stderr)
            sys.exit(2)

        opt = dict()

        for key in ('width', 'height', 'max_fps'):
            if config.has_option(section, key):
                opt[key] = int(config.get(section, key))

        for key in ('left', 'top', 'right', 'bottom'):
            if config.has_option(section, key):
                opt[key] = float(config.get(section, key))

        for key in ('num_threads', 'normalize'):
            if config.has_option(section, key):
                opt[key] = str(config.get(section, key))

        if len(opt):
            parser.set_defaults(**opt)


def show_keyboard_shortcuts():

    print("""
Keyboard shortcuts:
  q) Escape) terminate the application and exit
  r) Home)   reset window back to the start viewport
  e)         export the window intensities to image.png
  Left)      scroll window left by 0.1x width
  Right)     scroll window right by 0.1x width
  Up)        scroll window up by 0.1x height
  Down)      scroll window down by 0.1x height
  s)         zoom in, moving every edge inward by 0.1x
  a)         zoom out, moving every edge outward by 0.1x
    """.strip())
