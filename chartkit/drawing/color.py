"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass


def _to_byte(value: float) -> int:
    """Truncate a number to an unsigned 8-bit value, wrapping like a byte cast."""
    return int(value) & 0xFF


def _parse_hex(digits: str) -> int:
    try:
        return int(digits, 16) & 0xFF
    except ValueError:
        return 0


def color_channel_from_float(v: float) -> int:
    """Return a channel byte for a value normalised to the range 0..1."""
    return _to_byte(v * 255)


@dataclass(frozen=True)
class Color:
    """A straight (not premultiplied) RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range: {value}")

    @classmethod
    def from_hex(cls, hex_code: str) -> Color:
        """Parse a CSS hex code of three or six digits, without the leading '#'."""
        if len(hex_code) == 3:
            r, g, b = (_parse_hex(digit) * 0x11 for digit in hex_code)
        elif len(hex_code) >= 6:
            r, g, b = (_parse_hex(hex_code[i : i + 2]) for i in (0, 2, 4))
        else:
            raise ValueError(f"invalid hex colour: {hex_code!r}")
        return cls(r & 0xFF, g & 0xFF, b & 0xFF, 255)

    @classmethod
    def from_alpha_mixed_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from 16-bit premultiplied channel values."""
        fa = a / 255.0
        alpha = (a | (a >> 8)) & 0xFF
        if fa == 0:
            return cls(0, 0, 0, alpha)
        return cls(_to_byte(r / fa), _to_byte(g / fa), _to_byte(b / fa), alpha)

    def rgba(self) -> tuple[int, int, int, int]:
        """Return premultiplied 16-bit channel values."""
        fa = self.a / 255.0

        def mixed(channel: int) -> int:
            value = int(channel * fa)
            return value | (value << 8)

        return mixed(self.r), mixed(self.g), mixed(self.b), self.a | (self.a << 8)

    def is_zero(self) -> bool:
        """Return whether every channel is zero, i.e. the colour is unset."""
        return self.r == 0 and self.g == 0 and self.b == 0 and self.a == 0

    def is_transparent(self) -> bool:
        """Return whether the alpha channel is zero."""
        return self.a == 0

    def with_alpha(self, a: int) -> Color:
        """Return a copy with the given alpha."""
        return Color(self.r, self.g, self.b, a)

    def average_with(self, other: Color) -> Color:
        """Average the colour channels with another colour, keeping this alpha."""
        return Color(
            ((self.r + other.r) & 0xFF) >> 1,
            ((self.g + other.g) & 0xFF) >> 1,
            ((self.b + other.b) & 0xFF) >> 1,
            self.a,
        )

    def __str__(self) -> str:
        fa = self.a / 255.0
        return f"rgba({self.r},{self.g},{self.b},{fa:.1f})"


COLOR_TRANSPARENT = Color()
COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_BLACK = Color(0, 0, 0, 255)
COLOR_RED = Color(255, 0, 0, 255)
COLOR_GREEN = Color(0, 255, 0, 255)
COLOR_BLUE = Color(0, 0, 255, 255)