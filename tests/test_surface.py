import numpy as np
import pytest

from fireworks.core.color import hsl_to_rgb, parse_color, wrap_hue
from fireworks.core.physics import Vec2
from fireworks.core.surface import RasterSurface, RecordingSurface


def test_hsl_primary_colors():
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
    assert hsl_to_rgb(0, 0, 100) == (255, 255, 255)


def test_hsl_wraps_hue():
    assert wrap_hue(370.0) == pytest.approx(10.0)
    assert wrap_hue(-20.0) == pytest.approx(340.0)
    assert hsl_to_rgb(480, 100, 50) == hsl_to_rgb(120, 100, 50)
    assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50)


def test_parse_color():
    assert parse_color('#ff8000') == (255, 128, 0)
    assert parse_color([1, 2, 3]) == (1, 2, 3)
    with pytest.raises(ValueError):
        parse_color('#fff')
    with pytest.raises(ValueError):
        parse_color([0, 0, 300])


def test_draw_circle_skips_invisible_commands():
    surface = RecordingSurface()

    assert not surface.draw_circle(Vec2(1, 1), 0.0, (255, 0, 0), 1.0)
    assert not surface.draw_circle(Vec2(1, 1), -2.0, (255, 0, 0), 1.0)
    assert not surface.draw_circle(Vec2(1, 1), 2.0, (255, 0, 0), 0.0)
    assert not surface.draw_circle(Vec2(1, 1), 2.0, (255, 0, 0), -0.5)
    assert surface.commands == []


def test_draw_circle_clamps_alpha():
    surface = RecordingSurface()

    assert surface.draw_circle(Vec2(1, 1), 2.0, (255, 0, 0), 1.7)

    assert surface.commands[0].alpha == 1.0


def test_raster_clear_and_opaque_circle():
    surface = RasterSurface(40, 30)
    surface.clear((5, 5, 5))

    surface.draw_circle(Vec2(20, 15), 4.0, (255, 100, 0), 1.0)

    assert tuple(surface.pixels[15, 20]) == (255, 100, 0)
    assert tuple(surface.pixels[0, 0]) == (5, 5, 5)
    assert tuple(surface.pixels[15, 30]) == (5, 5, 5)


def test_raster_alpha_blend():
    surface = RasterSurface(20, 20)

    surface.draw_circle(Vec2(10, 10), 3.0, (200, 100, 50), 0.5)

    assert tuple(surface.pixels[10, 10]) == (100, 50, 25)


def test_raster_sub_pixel_circle_lights_one_pixel():
    surface = RasterSurface(10, 10)

    surface.draw_circle(Vec2(4.0, 4.0), 0.3, (255, 255, 255), 1.0)

    assert surface.pixels.sum() == 255 * 3
    assert tuple(surface.pixels[4, 4]) == (255, 255, 255)


def test_raster_sub_pixel_circle_left_of_canvas_is_ignored():
    surface = RasterSurface(10, 10)

    surface.draw_circle(Vec2(-0.5, 4.0), 0.3, (255, 255, 255), 1.0)

    assert surface.pixels.sum() == 0


def test_raster_offscreen_circle_is_ignored():
    surface = RasterSurface(10, 10)

    surface.draw_circle(Vec2(-50, -50), 3.0, (255, 255, 255), 1.0)
    surface.draw_circle(Vec2(500, 5), 3.0, (255, 255, 255), 1.0)

    assert surface.pixels.sum() == 0


def test_raster_resize_and_image():
    surface = RasterSurface(10, 10, background=(1, 2, 3))
    surface.resize(16, 8)

    image = surface.to_image()

    assert surface.pixels.shape == (8, 16, 3)
    assert image.size == (16, 8)
    assert image.getpixel((0, 0)) == (1, 2, 3)
    assert np.array_equal(surface.to_array(), surface.pixels)
