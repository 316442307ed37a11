"""24-bit RGB color values used by grid cells."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple, Union

from exceptions import InvalidColorError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Color:
    """Immutable RGB color with 8 bits per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidColorError(f"Invalid channel value: {channel!r}")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#rrggbb`` or ``#rgb`` (leading ``#`` optional, any case).

        Raises:
            InvalidColorError: If the string is not a hex color
        """
        if not isinstance(value, str):
            raise InvalidColorError(f"Expected hex string, got {type(value).__name__}")
        match = _HEX_RE.match(value.strip())
        if match is None:
            raise InvalidColorError(f"Invalid hex color: {value!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.to_hex()


ColorLike = Union[Color, str]

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def to_color(value: ColorLike) -> Color:
    """Coerce a Color or hex string into a Color."""
    if isinstance(value, Color):
        return value
    return Color.from_hex(value)


__all__ = ["Color", "ColorLike", "WHITE", "BLACK", "to_color"]
