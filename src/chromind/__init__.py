"""Colour harmony, random palette and predator/prey simulation toolkit."""

from .colorops import contrast_ratio, ensure_accent_contrast, rotate_hue
from .colorspace import FormatError, parse_hex
from .palette import PaletteEntry, PalettePlan, generate_palettes
from .population import SimulationHistory, SimulationParams, simulate
from .random_palette import random_palette
from .rng import DeterministicRNG, create_rng

__all__ = [
    "DeterministicRNG",
    "FormatError",
    "PaletteEntry",
    "PalettePlan",
    "SimulationHistory",
    "SimulationParams",
    "contrast_ratio",
    "create_rng",
    "ensure_accent_contrast",
    "generate_palettes",
    "parse_hex",
    "random_palette",
    "rotate_hue",
    "simulate",
]
