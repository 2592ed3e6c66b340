# -*- coding: utf-8 -*-

import pytest

from mandelband.option import Option


def test_defaults():
    opt = Option([])

    assert (opt.width, opt.height) == (800, 800)
    assert (opt.left, opt.top, opt.right, opt.bottom) == (-1.2, 1.2, 1.2, -1.2)
    assert opt.num_threads == 16
    assert opt.normalize == 'band'
    assert opt.max_fps == 60


def test_values_are_clipped():
    opt = Option(["--width", "20", "--height", "9000", "--num-threads", "0",
                  "--max-fps", "1000"])

    assert opt.width == 100
    assert opt.height == 5000
    assert opt.num_threads == 1
    assert opt.max_fps == 240


def test_underscores_are_accepted():
    opt = Option(["--num_threads", "4", "--normalize", "global"])
    assert opt.num_threads == 4
    assert opt.normalize == 'global'


def test_auto_threads_from_environment(monkeypatch):
    monkeypatch.setenv('NUM_THREADS', '3')
    assert Option(["--num-threads", "auto"]).num_threads == 3


def test_config_file_sections(tmp_path):
    path = tmp_path / "mandel.ini"
    path.write_text(
        "[common]\n"
        "width = 640\n"
        "num_threads = 8\n"
        "\n"
        "[seahorse]\n"
        "left = -0.76\n"
        "top = 0.11\n"
        "right = -0.73\n"
        "bottom = 0.08\n")

    opt = Option(["--config", str(path), "seahorse", "--height", "480"])
    assert (opt.width, opt.height, opt.num_threads) == (640, 480, 8)
    assert (opt.left, opt.top, opt.right, opt.bottom) == (-0.76, 0.11, -0.73, 0.08)

    opt = Option(["--config=" + str(path)])
    assert opt.width == 640
    assert opt.left == -1.2


def test_missing_config_section(tmp_path, capsys):
    path = tmp_path / "mandel.ini"
    path.write_text("[common]\nwidth = 640\n")

    with pytest.raises(SystemExit) as info:
        Option(["--config", str(path), "nowhere"])
    assert info.value.code == 2
    assert "no such section" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["--normalize", "image"],
    ["--num-threads", "many"],
    ["--width", "wide"],
    ["extra"],
])
def test_bad_arguments_exit(argv):
    with pytest.raises(SystemExit) as info:
        Option(argv)
    assert info.value.code == 2
