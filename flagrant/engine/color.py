"""Color resolver — palette mnemonics and #RRGGBB literals."""

from __future__ import annotations

import enum
import re
from typing import NamedTuple, Union

from flagrant.errors import InvalidColor

# Exactly '#' plus six ASCII hex digits
_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


class NamedColor(enum.Enum):
    """Fixed palette. Value is (mnemonic, rgb)."""

    BLUE = ("b", (0, 0, 255))
    GREEN = ("g", (0, 255, 0))
    RED = ("r", (255, 0, 0))
    WHITE = ("w", (255, 255, 255))
    YELLOW = ("y", (255, 255, 0))
    BLACK = ("s", (0, 0, 0))

    @property
    def mnemonic(self) -> str:
        return self.value[0]

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.value[1]

    def __repr__(self) -> str:
        return f"NamedColor.{self.name}"


class RgbColor(NamedTuple):
    red: int
    green: int
    blue: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


Color = Union[NamedColor, RgbColor]

PALETTE: dict[str, NamedColor] = {c.mnemonic: c for c in NamedColor}


def parse_hex(text: str) -> RgbColor:
    """Parse ``#RRGGBB``; channels pair up most-significant nibble first."""
    if len(text) != 7 or not _HEX_RE.fullmatch(text):
        raise InvalidColor(f"{text!r} is not a #RRGGBB literal")
    return RgbColor(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))


def parse_color(text: str) -> Color:
    """Map a palette mnemonic or hex literal to a color."""
    named = PALETTE.get(text)
    if named is not None:
        return named
    if text.startswith("#"):
        return parse_hex(text)
    raise InvalidColor(f"unknown color {text!r}")


def to_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color.rgb)
