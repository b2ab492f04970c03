import pytest

from chartkit.colormap import jet
from chartkit.drawing.color import COLOR_BLUE, COLOR_RED


def test_minimum_is_blue():
    assert jet(0.0, 0.0, 1.0) == COLOR_BLUE


def test_maximum_is_red():
    assert jet(1.0, 0.0, 1.0) == COLOR_RED


def test_values_are_clamped():
    assert jet(-5.0, 0.0, 1.0) == jet(0.0, 0.0, 1.0)
    assert jet(7.0, 0.0, 1.0) == jet(1.0, 0.0, 1.0)


@pytest.mark.parametrize("v", [0.1, 0.3, 0.6, 0.9])
def test_colours_are_opaque(v):
    assert jet(v, 0.0, 1.0).a == 255


def test_scale_invariance():
    assert jet(0.3, 0.0, 1.0) == jet(30.0, 0.0, 100.0)


def test_equal_bounds_rejected():
    with pytest.raises(ValueError):
        jet(1.0, 1.0, 1.0)