# -*- coding: utf-8 -*-

import time

import pygame as pg
import pytest

from mandelband.base import Viewport
from mandelband.interface import WindowPygame
from mandelband.option import Option

HOME = Viewport(complex(-1.2, 1.2), complex(1.2, -1.2))


@pytest.fixture
def window():
    # No display is opened until init() is called.
    return WindowPygame(Option([]))


def press(window, key):
    window._WindowPygame__on_key_press(key)


def test_starts_at_configured_viewport(window):
    assert window.viewport == HOME
    assert window.reset_view == HOME


@pytest.mark.parametrize("key, expected", [
    (pg.K_UP, HOME.pan(0.0, 0.1)),
    (pg.K_DOWN, HOME.pan(0.0, -0.1)),
    (pg.K_LEFT, HOME.pan(-0.1, 0.0)),
    (pg.K_RIGHT, HOME.pan(0.1, 0.0)),
    (pg.K_s, HOME.zoom_in()),
    (pg.K_a, HOME.zoom_out()),
])
def test_navigation_keys(window, key, expected):
    press(window, key)
    assert window.viewport == expected


@pytest.mark.parametrize("key", [pg.K_r, pg.K_HOME])
def test_reset_keys(window, key):
    press(window, pg.K_s)
    press(window, pg.K_RIGHT)
    assert window.viewport != HOME

    press(window, key)
    assert window.viewport == HOME


def test_unbound_key_keeps_viewport(window):
    press(window, pg.K_F1)
    assert window.viewport == HOME


def test_fps_line_reports_compute_time(window, capsys):
    window.compute_time = 0.25
    window.frame_count = 59
    window.last_time = time.time() - 2.0

    window._WindowPygame__update_fps()

    out = capsys.readouterr().out
    assert "FPS:  60" in out
    assert "compute time: 0.250 seconds" in out
    assert window.frame_count == 0


def test_fps_line_waits_a_second(window, capsys):
    window._WindowPygame__update_fps()

    assert capsys.readouterr().out == ""
    assert window.frame_count == 1
