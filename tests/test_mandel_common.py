# -*- coding: utf-8 -*-

import pytest

from mandelband.base import ConfigurationError, Viewport
from mandelband.mandel_common import escape_time, evaluate, pixel_to_complex

VIEWPORTS = [
    Viewport(complex(-1.2, 1.2), complex(1.2, -1.2)),
    Viewport(complex(-2.1, 1.3), complex(0.7, -0.9)),
    Viewport(complex(-0.7436, 0.1318), complex(-0.7426, 0.1308)),
    Viewport(complex(0.1, 3.0), complex(0.3, 2.9)),
]


@pytest.mark.parametrize("limit", [1, 2, 255, 1000])
def test_origin_is_bounded(limit):
    assert evaluate(0j, limit) is None


def test_far_point_diverges_immediately():
    # z is 0 on the first test, c on the second.
    assert evaluate(complex(3.0, 3.0)) in (0, 1)
    assert evaluate(complex(3.0, 3.0)) == 1


def test_divergence_count():
    # 0 -> 1 -> 2 -> 5
    assert evaluate(1.0) == 3
    assert evaluate(1.0, limit=3) is None


def test_bailout_is_strict():
    # The orbit of -2 sits on |z| = 2 forever.
    assert evaluate(-2.0) is None


def test_raw_kernel_reports_bounded_as_negative():
    assert escape_time(0.0, 0.0, 255) == -1
    assert escape_time(1.0, 0.0, 255) == 3


@pytest.mark.parametrize("viewport", VIEWPORTS)
@pytest.mark.parametrize("bounds", [(800, 800), (640, 480), (7, 3), (1, 1)])
def test_corners_map_exactly(viewport, bounds):
    width, height = bounds
    assert pixel_to_complex(bounds, (0, 0), viewport) == viewport.upper_left
    assert pixel_to_complex(bounds, (width, height), viewport) == viewport.lower_right


def test_mapping_is_linear():
    viewport = Viewport(complex(-2.0, 1.0), complex(2.0, -1.0))
    c = pixel_to_complex((400, 200), (100, 50), viewport)
    assert c.real == pytest.approx(-1.0)
    assert c.imag == pytest.approx(0.5)


def test_center_pixel_maps_to_origin():
    viewport = Viewport(complex(-1.2, 1.2), complex(1.2, -1.2))
    assert pixel_to_complex((800, 800), (400, 400), viewport) == 0j


@pytest.mark.parametrize("upper_left, lower_right", [
    (complex(1.0, 1.0), complex(1.0, -1.0)),
    (complex(-1.0, 1.0), complex(1.0, 1.0)),
    (complex(1.0, 1.0), complex(-1.0, -1.0)),
    (complex(-1.0, -1.0), complex(1.0, 1.0)),
])
def test_empty_viewport_is_rejected(upper_left, lower_right):
    with pytest.raises(ConfigurationError):
        pixel_to_complex((10, 10), (0, 0), Viewport(upper_left, lower_right))
