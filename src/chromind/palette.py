# palette.py – harmony sets derived from one base colour
#
# Two plans are produced per call:
#   1. a fixed complementary pair (base + contrast-checked complement)
#   2. an N-colour suggestion (2 ≤ N ≤ 7) with the accent kept at index 1

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Iterable

from .colorops import (
    adjust_lightness,
    ensure_accent_contrast,
    is_light,
    rotate_hue,
)
from .colorspace import HSL, Hex, hsl_to_hex, parse_hex, to_hsl

log = logging.getLogger(__name__)

MIN_COUNT = 2
MAX_COUNT = 7
DEFAULT_COUNT = 4

BACKFILL_STEP = 0.08

ROLE_BASE = "base"
ROLE_ACCENT = "accent"
ROLE_COMPLEMENT = "complementary accent"
ROLE_SUB_ACCENT = "sub-accent"
ROLE_BALANCE = "balance"
ROLE_CONTRAST = "contrast"
ROLE_CONTRAST_2 = "contrast 2"
ROLE_NEUTRAL = "neutral"
ROLE_HIGHLIGHT = "highlight"
ROLE_SHADOW = "shadow"
ROLE_VARIATION = "variation {}"


@dataclass(frozen=True)
class PaletteEntry:
    color: Hex
    role: str
    is_accent: bool = False


@dataclass(frozen=True)
class PalettePlan:
    title: str
    subtitle: str
    colors: tuple[PaletteEntry, ...]

    def hexes(self) -> list[Hex]:
        return [e.color for e in self.colors]

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "colors": [asdict(e) for e in self.colors],
        }


@dataclass(frozen=True)
class Harmony:
    base: Hex
    complement: Hex
    accent: Hex
    analog_warm: Hex
    analog_cool: Hex
    secondary: Hex
    tertiary: Hex
    neutral: Hex
    highlight: Hex
    shadow: Hex
    vivid: Hex
    soft: Hex


def harmony_set(base: str) -> Harmony:
    base = parse_hex(base)
    complement = rotate_hue(base, 180)
    analog_warm = rotate_hue(base, 30)
    analog_cool = rotate_hue(base, -30)
    return Harmony(
        base=base,
        complement=complement,
        accent=ensure_accent_contrast(base, complement),
        analog_warm=analog_warm,
        analog_cool=analog_cool,
        secondary=rotate_hue(base, 120),
        tertiary=rotate_hue(base, -120),
        neutral=adjust_lightness(base, -0.22 if is_light(base) else 0.22),
        highlight=adjust_lightness(base, 0.18),
        shadow=adjust_lightness(base, -0.18),
        vivid=adjust_lightness(analog_warm, -0.05),
        soft=adjust_lightness(analog_cool, 0.12),
    )


def clamp_count(desired: float | None) -> int:
    # 0 / None / NaN behave like "not chosen"; ±inf clamp to the bounds
    if not desired or math.isnan(desired):
        desired = DEFAULT_COUNT
    return int(max(MIN_COUNT, min(desired, MAX_COUNT)))


def _key(color: Hex) -> str:
    return color.upper()


def _dedupe(entries: Iterable[PaletteEntry]) -> tuple[PaletteEntry, ...]:
    seen: set[str] = set()
    out: list[PaletteEntry] = []
    for entry in entries:
        key = _key(entry.color)
        if key in seen:
            continue
        seen.add(key)
        out.append(entry)
    return tuple(out)


def _backfill(
    entries: tuple[PaletteEntry, ...], base: Hex, count: int
) -> tuple[PaletteEntry, ...]:
    """
    Sweep HSL offsets away from `base` until `count` entries exist.
    The first colour that collides with an existing one ends the sweep, so
    the result may stay short of `count`.
    """
    hsl = to_hsl(base)
    seen = {_key(e.color) for e in entries}
    out = list(entries)
    while len(out) < count:
        offset = (len(out) + 1) * BACKFILL_STEP
        shift = offset if len(out) % 2 == 0 else -offset
        color = hsl_to_hex(
            HSL(
                (hsl.h + offset) % 1,
                min(1.0, max(0.45, hsl.s + offset)),
                min(0.8, max(0.2, hsl.l + shift)),
            )
        )
        if _key(color) in seen:
            log.debug("backfill for %s stopped at %d/%d on %s", base, len(out), count, color)
            break
        seen.add(_key(color))
        out.append(PaletteEntry(color, ROLE_VARIATION.format(len(out))))
    return tuple(out)


def _promote_accent(
    entries: tuple[PaletteEntry, ...], size: int
) -> tuple[PaletteEntry, ...]:
    idx = next((i for i, e in enumerate(entries) if e.is_accent), -1)
    if 1 < idx < size:
        rest = entries[:idx] + entries[idx + 1 :]
        entries = rest[:1] + (entries[idx],) + rest[1:]
    return entries[:size]


def _custom_colors(h: Harmony, count: int) -> tuple[PaletteEntry, ...]:
    if count == 2:
        accent = h.vivid
        if _key(accent) == _key(h.base):
            accent = ensure_accent_contrast(h.base, rotate_hue(h.base, 45))
        return (
            PaletteEntry(h.base, ROLE_BASE),
            PaletteEntry(accent, ROLE_ACCENT, True),
        )

    candidates = _dedupe(
        [
            PaletteEntry(h.base, ROLE_BASE),
            PaletteEntry(h.accent, ROLE_ACCENT, True),
            PaletteEntry(h.vivid, ROLE_SUB_ACCENT),
            PaletteEntry(h.soft, ROLE_BALANCE),
            PaletteEntry(h.secondary, ROLE_CONTRAST),
            PaletteEntry(h.tertiary, ROLE_CONTRAST_2),
            PaletteEntry(h.neutral, ROLE_NEUTRAL),
            PaletteEntry(h.highlight, ROLE_HIGHLIGHT),
            PaletteEntry(h.shadow, ROLE_SHADOW),
        ]
    )
    if len(candidates) < count:
        candidates = _backfill(candidates, h.base, count)
    return _promote_accent(candidates, min(count, len(candidates)))


def generate_palettes(
    base: str, desired_count: int | None = None
) -> tuple[PalettePlan, PalettePlan]:
    """
    Build the complementary pair and an N-colour suggestion for `base`.

    Raises FormatError when `base` is not a 6-digit hex colour.
    """
    h = harmony_set(base)
    count = clamp_count(desired_count)

    pair = PalettePlan(
        title="Complementary pair",
        subtitle="The base color with its complementary accent.",
        colors=(
            PaletteEntry(h.base, ROLE_BASE),
            PaletteEntry(h.accent, ROLE_COMPLEMENT, True),
        ),
    )
    colors = _custom_colors(h, count)
    custom = PalettePlan(
        title=f"{len(colors)}-color suggestion",
        subtitle="A suggestion with an accent for the chosen number of colors.",
        colors=colors,
    )
    return pair, custom


__all__ = [
    "DEFAULT_COUNT",
    "Harmony",
    "MAX_COUNT",
    "MIN_COUNT",
    "PaletteEntry",
    "PalettePlan",
    "ROLE_ACCENT",
    "ROLE_BASE",
    "clamp_count",
    "generate_palettes",
    "harmony_set",
]
