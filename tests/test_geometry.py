import pytest

from mandelbrot_explorer.geometry import (
    DEFAULT_VIEWPORT,
    Point2D,
    Rectangle,
    pixel_to_complex,
    selection_around,
)


def test_point_coerces_to_float():
    p = Point2D(3, 4)
    assert isinstance(p.x, float) and isinstance(p.y, float)


def test_rectangle_rejects_unordered_corners():
    with pytest.raises(ValueError):
        Rectangle(Point2D(1, 0), Point2D(0, 1))
    with pytest.raises(ValueError):
        Rectangle(Point2D(0, 1), Point2D(1, 0))


def test_rectangle_allows_zero_area():
    rect = Rectangle(Point2D(1, 1), Point2D(1, 5))
    assert rect.is_degenerate
    assert rect.width == 0
    assert rect.height == 4


def test_clamped_limits_edges_to_buffer():
    rect = Rectangle.clamped(-10, -5, 120, 90, 100, 80)
    assert rect == Rectangle(Point2D(0, 0), Point2D(100, 80))


def test_default_viewport():
    assert DEFAULT_VIEWPORT.top_left == Point2D(-2, -1.5)
    assert DEFAULT_VIEWPORT.bottom_right == Point2D(1, 1.5)


def test_origin_pixel_maps_to_top_left():
    viewport = Rectangle(Point2D(-0.8, 0.1), Point2D(-0.7, 0.2))
    assert pixel_to_complex(Point2D(0, 0), viewport, 640, 480) == viewport.top_left


def test_center_pixel_of_default_view():
    c = pixel_to_complex(Point2D(500, 500), DEFAULT_VIEWPORT, 1000, 1000)
    assert c == Point2D(-0.5, 0.0)


def test_far_corner_maps_to_bottom_right():
    c = pixel_to_complex(Point2D(1000, 1000), DEFAULT_VIEWPORT, 1000, 1000)
    assert c == DEFAULT_VIEWPORT.bottom_right


def test_mapping_is_monotonic():
    reals = [pixel_to_complex(Point2D(x, 0), DEFAULT_VIEWPORT, 1000, 1000).x
             for x in range(0, 1001, 50)]
    imags = [pixel_to_complex(Point2D(0, y), DEFAULT_VIEWPORT, 1000, 1000).y
             for y in range(0, 1001, 50)]
    assert all(a < b for a, b in zip(reals, reals[1:]))
    assert all(a < b for a, b in zip(imags, imags[1:]))


def test_mapping_is_affine():
    a = pixel_to_complex(Point2D(100, 0), DEFAULT_VIEWPORT, 1000, 1000).x
    b = pixel_to_complex(Point2D(200, 0), DEFAULT_VIEWPORT, 1000, 1000).x
    c = pixel_to_complex(Point2D(300, 0), DEFAULT_VIEWPORT, 1000, 1000).x
    assert b - a == pytest.approx(c - b)


def test_selection_clamped_at_corner():
    selection = selection_around(Point2D(0, 0), 1000, 1000)
    assert selection == Rectangle(Point2D(0, 0), Point2D(333, 333))


def test_selection_centered():
    selection = selection_around(Point2D(500, 500), 1000, 1000)
    assert selection == Rectangle(Point2D(167, 167), Point2D(833, 833))


def test_selection_clamped_at_far_corner():
    selection = selection_around(Point2D(999, 999), 1000, 1000)
    assert selection == Rectangle(Point2D(666, 666), Point2D(1000, 1000))


def test_selection_uses_each_axis_size():
    selection = selection_around(Point2D(100, 50), 300, 90)
    assert selection == Rectangle(Point2D(0, 20), Point2D(200, 80))


def test_tiny_buffer_gives_degenerate_selection():
    assert selection_around(Point2D(1, 1), 2, 2).is_degenerate
