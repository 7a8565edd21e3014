# colorspace.py – hex ↔ RGB ↔ HSL conversions
#   - canonical colour is lower-case "#rrggbb"
#   - HSL uses hue in turns, h,s,l in [0,1]
#   - conversions are lossy: round-trips agree within ±1 per channel

from __future__ import annotations

import math
import string
from dataclasses import dataclass

Hex = str


class FormatError(ValueError):
    """Input cannot be normalised to exactly six hex digits."""


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSL:
    h: float
    s: float
    l: float


# --- parsing -----------------------------------------------------------------
def parse_hex(value: str) -> Hex:
    """Normalise '#RRGGBB' / 'rrggbb' (surrounding blanks allowed) to '#rrggbb'."""
    if not isinstance(value, str):
        raise FormatError(f"expected a hex string, got {type(value).__name__}")
    raw = value.strip().lower()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise FormatError(f"invalid hex color {value!r}: expected #RRGGBB")
    return "#" + raw


def to_rgb(color: str) -> RGB:
    num = int(parse_hex(color)[1:], 16)
    return RGB((num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF)


def _round_half_up(x: float) -> int:
    # Math.round semantics; Python's round() is banker's rounding
    return math.floor(x + 0.5)


def _channel(x: float) -> int:
    return max(0, min(255, _round_half_up(x)))


def from_rgb(r: float, g: float, b: float) -> Hex:
    """Round each channel to nearest, then clamp into 0..255 and encode."""
    return "#{:02x}{:02x}{:02x}".format(_channel(r), _channel(g), _channel(b))


# --- HSL ---------------------------------------------------------------------
def to_hsl(color: str) -> HSL:
    rgb = to_rgb(color)
    r1, g1, b1 = rgb.r / 255, rgb.g / 255, rgb.b / 255
    hi = max(r1, g1, b1)
    lo = min(r1, g1, b1)
    l = (hi + lo) / 2
    if hi == lo:
        return HSL(0.0, 0.0, l)

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == r1:
        h = (g1 - b1) / d + (6 if g1 < b1 else 0)
    elif hi == g1:
        h = (b1 - r1) / d + 2
    else:
        h = (r1 - g1) / d + 4
    return HSL(h / 6, s, l)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def from_hsl(hsl: HSL) -> tuple[float, float, float]:
    """HSL → unrounded, unclamped RGB floats on the 0..255 scale."""
    h, s, l = hsl.h, hsl.s, hsl.l
    if s == 0:
        gray = l * 255
        return gray, gray, gray

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _hue_to_channel(p, q, h + 1 / 3) * 255,
        _hue_to_channel(p, q, h) * 255,
        _hue_to_channel(p, q, h - 1 / 3) * 255,
    )


def hsl_to_hex(hsl: HSL) -> Hex:
    return from_rgb(*from_hsl(hsl))


__all__ = [
    "FormatError",
    "HSL",
    "Hex",
    "RGB",
    "from_hsl",
    "from_rgb",
    "hsl_to_hex",
    "parse_hex",
    "to_hsl",
    "to_rgb",
]
