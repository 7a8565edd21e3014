from __future__ import annotations

import logging
import math

from .colorspace import HSL, Hex, hsl_to_hex, parse_hex, to_hsl, to_rgb

log = logging.getLogger(__name__)

# --- thresholds --------------------------------------------------------------
TEXT_LUMINANCE_THRESHOLD = 0.55
LIGHT_LUMINANCE_THRESHOLD = 0.6
ACCENT_MIN_CONTRAST = 2.5

DARK_TEXT: Hex = "#111111"
LIGHT_TEXT: Hex = "#ffffff"

# WCAG 2.0 companding knee (older than the IEC 0.04045 value)
_WCAG_KNEE = 0.03928


def _wrap_turn(h: float) -> float:
    h = math.fmod(h, 1.0)
    if h < 0:
        h += 1
    return h


def rotate_hue(color: str, degrees: float) -> Hex:
    hsl = to_hsl(color)
    return hsl_to_hex(HSL(_wrap_turn(hsl.h + degrees / 360), hsl.s, hsl.l))


def adjust_lightness(color: str, delta: float) -> Hex:
    hsl = to_hsl(color)
    return hsl_to_hex(HSL(hsl.h, hsl.s, max(0.0, min(1.0, hsl.l + delta))))


def _linear(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= _WCAG_KNEE else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """WCAG relative luminance in [0,1]."""
    rgb = to_rgb(color)
    return 0.2126 * _linear(rgb.r) + 0.7152 * _linear(rgb.g) + 0.0722 * _linear(rgb.b)


def contrast_ratio(a: str, b: str) -> float:
    la, lb = relative_luminance(a), relative_luminance(b)
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def choose_text_color(background: str) -> Hex:
    """Near-black on bright backgrounds, white otherwise."""
    if relative_luminance(background) > TEXT_LUMINANCE_THRESHOLD:
        return DARK_TEXT
    return LIGHT_TEXT


def is_light(color: str) -> bool:
    return relative_luminance(color) > LIGHT_LUMINANCE_THRESHOLD


def ensure_accent_contrast(base: str, candidate: str) -> Hex:
    """
    Return `candidate` unless it equals `base` or contrasts less than 2.5:1
    with it. In that case a single opposite-hue replacement is synthesised
    (saturation ≥ 0.6, lightness flipped to 0.32 / 0.68). The replacement is
    not re-checked against the threshold.
    """
    base = parse_hex(base)
    candidate = parse_hex(candidate)
    if candidate != base and contrast_ratio(base, candidate) >= ACCENT_MIN_CONTRAST:
        return candidate

    hsl = to_hsl(base)
    fallback = hsl_to_hex(
        HSL(
            (hsl.h + 0.5) % 1,
            max(0.6, 1 - hsl.s),
            0.32 if hsl.l > 0.5 else 0.68,
        )
    )
    log.debug("accent %s too close to %s, using %s", candidate, base, fallback)
    return fallback


__all__ = [
    "ACCENT_MIN_CONTRAST",
    "DARK_TEXT",
    "LIGHT_TEXT",
    "adjust_lightness",
    "choose_text_color",
    "contrast_ratio",
    "ensure_accent_contrast",
    "is_light",
    "relative_luminance",
    "rotate_hue",
]
