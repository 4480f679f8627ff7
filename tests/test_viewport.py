import pytest

from seika.viewport import Viewport, ViewportData


def test_initial_cached_value_is_default_size():
    viewport = Viewport()
    assert viewport.cached() == ViewportData(0, 0, 800, 600)


def test_without_aspect_ratio_fills_window():
    viewport = Viewport(800, 600, False)
    data = viewport.generate(1024, 300)
    assert data == ViewportData(0, 0, 1024, 300)


def test_generate_updates_cache():
    viewport = Viewport(320, 180)
    data = viewport.generate(1280, 720)
    assert viewport.cached() == data


def test_matching_aspect_ratio_fills_window():
    viewport = Viewport(800, 600, True)
    data = viewport.generate(1600, 1200)
    assert data == ViewportData(0, 0, 1600, 1200)


def test_wide_window_is_pillarboxed():
    viewport = Viewport(800, 600, True)
    data = viewport.generate(1600, 600)
    assert data.height == 600
    assert data.width == 800
    assert data.y == 0
    assert data.x * 2 + data.width == 1600


def test_tall_window_is_letterboxed():
    viewport = Viewport(800, 600, True)
    data = viewport.generate(800, 1200)
    assert data.width == 800
    assert abs(data.height - 600) <= 1
    assert data.x == 0
    assert data.y == (1200 - data.height) // 2


@pytest.mark.parametrize("size", [(1920, 1080), (1000, 1000), (640, 1136), (3000, 700)])
def test_maintained_viewport_fits_and_is_centered(size):
    window_w, window_h = size
    viewport = Viewport(800, 600, True)
    data = viewport.generate(window_w, window_h)
    assert 0 <= data.width <= window_w
    assert 0 <= data.height <= window_h
    assert data.x == (window_w - data.width) // 2
    assert data.y == (window_h - data.height) // 2
    assert abs(data.width / data.height - 800 / 600) < 0.01


def test_toggle_maintain_aspect_ratio():
    viewport = Viewport(800, 600)
    assert viewport.generate(1600, 600).width == 1600
    viewport.maintain_aspect_ratio = True
    assert viewport.generate(1600, 600).width < 1600


def test_bad_resolution_raises():
    with pytest.raises(ValueError):
        Viewport(0, 600)


def test_negative_window_raises():
    viewport = Viewport()
    with pytest.raises(ValueError):
        viewport.generate(-1, 600)