import pytest

from chartkit.drawing.line import bresenham, polyline_bresenham


def _check_connected(pixels):
    for (ax, ay), (bx, by) in zip(pixels, pixels[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_horizontal_line():
    assert list(bresenham(0, 0, 3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_single_point():
    assert list(bresenham(4, 7, 4, 7)) == [(4, 7)]


@pytest.mark.parametrize(
    "x0,y0,x1,y1",
    [(0, 0, 7, 3), (7, 3, 0, 0), (2, 9, 5, -4), (-3, -3, 3, 3), (0, 0, 0, -6)],
)
def test_line_invariants(x0, y0, x1, y1):
    pixels = list(bresenham(x0, y0, x1, y1))
    assert pixels[0] == (x0, y0)
    assert pixels[-1] == (x1, y1)
    assert len(pixels) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    _check_connected(pixels)


def test_polyline_rounds_and_joins_segments():
    pixels = list(polyline_bresenham(0.4, 0.0, 2.6, 0.0, 2.6, 2.2))
    assert pixels[0] == (0, 0)
    assert pixels[-1] == (3, 2)
    assert pixels.count((3, 0)) == 2


def test_polyline_single_point_yields_nothing():
    assert list(polyline_bresenham(1.0, 1.0)) == []


def test_polyline_odd_coordinates_rejected():
    with pytest.raises(ValueError):
        list(polyline_bresenham(1.0, 2.0, 3.0))