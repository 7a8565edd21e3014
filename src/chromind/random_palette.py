from __future__ import annotations

from .colorspace import Hex, from_rgb
from .palette import PaletteEntry, PalettePlan
from .rng import RandomSource, create_rng, random_int


def random_colors(size: int, rng: RandomSource) -> list[Hex]:
    # draw order (r, g, b per colour, left to right) is part of the seed contract
    out: list[Hex] = []
    for _ in range(size):
        r = random_int(0, 255, rng)
        g = random_int(0, 255, rng)
        b = random_int(0, 255, rng)
        out.append(from_rgb(r, g, b))
    return out


def random_palette(size: int, seed: int | None = None) -> list[Hex]:
    """`size` uniform sRGB colours; reproducible when `seed` is given."""
    return random_colors(size, create_rng(seed))


def random_plan(size: int, seed: int | None = None) -> PalettePlan:
    colors = random_palette(size, seed)
    subtitle = f"{size} colors"
    if seed is not None:
        subtitle += f" · seed {seed}"
    return PalettePlan(
        title="Random palette",
        subtitle=subtitle,
        colors=tuple(
            PaletteEntry(c, f"color {i}") for i, c in enumerate(colors, start=1)
        ),
    )


__all__ = ["random_colors", "random_palette", "random_plan"]
