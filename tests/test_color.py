import pytest

from chartkit.drawing.color import (
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_TRANSPARENT,
    COLOR_WHITE,
    Color,
    color_channel_from_float,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("FFFFFF", COLOR_WHITE),
        ("FFF", COLOR_WHITE),
        ("000000", COLOR_BLACK),
        ("000", COLOR_BLACK),
        ("FF0000", COLOR_RED),
        ("F00", COLOR_RED),
        ("00FF00", COLOR_GREEN),
        ("0F0", COLOR_GREEN),
        ("0000FF", COLOR_BLUE),
        ("00F", COLOR_BLUE),
    ],
)
def test_from_hex(code, expected):
    assert Color.from_hex(code) == expected


def test_from_hex_rejects_short_code():
    with pytest.raises(ValueError):
        Color.from_hex("FFFF")


def test_from_alpha_mixed_rgba_black():
    black = Color.from_alpha_mixed_rgba(0, 0, 0, 0xFFFF)
    assert black == COLOR_BLACK, str(black)


def test_from_alpha_mixed_rgba_white():
    white = Color.from_alpha_mixed_rgba(0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)
    assert white == COLOR_WHITE, str(white)


def test_rgba_round_trip():
    for colour in (COLOR_WHITE, COLOR_BLACK, COLOR_RED, COLOR_GREEN, COLOR_BLUE):
        assert Color.from_alpha_mixed_rgba(*colour.rgba()) == colour


def test_rgba_of_white():
    assert COLOR_WHITE.rgba() == (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)


def test_is_zero_and_transparent():
    assert COLOR_TRANSPARENT.is_zero()
    assert not COLOR_BLACK.is_zero()
    assert COLOR_RED.with_alpha(0).is_transparent()
    assert not COLOR_RED.with_alpha(0).is_zero()


def test_with_alpha_keeps_channels():
    faded = COLOR_BLUE.with_alpha(64)
    assert (faded.r, faded.g, faded.b, faded.a) == (0, 0, 255, 64)


def test_average_with_keeps_own_alpha():
    mixed = COLOR_BLACK.average_with(COLOR_BLACK.with_alpha(10))
    assert mixed == COLOR_BLACK


def test_str():
    assert str(Color.from_hex("FFFFFF")) == "rgba(255,255,255,1.0)"
    assert str(Color(0, 0, 0, 0)) == "rgba(0,0,0,0.0)"
    assert str(Color.from_hex("F00").with_alpha(0)) == "rgba(255,0,0,0.0)"


def test_channel_from_float_bounds():
    assert color_channel_from_float(0.0) == 0
    assert color_channel_from_float(1.0) == 255


def test_channel_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)