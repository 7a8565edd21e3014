"""
Random sources for palette generation.

Two variants share the `RandomSource` protocol:

- `DeterministicRNG` – Mulberry32 counter generator. The same seed yields
  the same float stream on every platform; all arithmetic is unsigned
  32-bit wraparound.
- `EntropyRNG` – 32 bits from the OS CSPRNG per draw, not reproducible.

A generator instance owns its counter; give each caller its own instance
rather than sharing one across threads.
"""

from __future__ import annotations

import math
import secrets
from typing import Protocol

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_SCALE = 4294967296.0  # 2**32


class RandomSource(Protocol):
    def next(self) -> float: ...


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


def mulberry32_step(state: int) -> tuple[float, int]:
    """Advance `state` once; return (uniform float in [0,1), new state)."""
    t = (state + _INCREMENT) & _MASK
    r = _imul(t ^ (t >> 15), t | 1)
    r ^= (r + _imul(r ^ (r >> 7), r | 61)) & _MASK
    r = (r ^ (r >> 14)) & _MASK
    return r / _SCALE, t


class DeterministicRNG:
    def __init__(self, seed: int) -> None:
        self.seed = int(seed) & _MASK
        self.state = self.seed

    def next(self) -> float:
        value, self.state = mulberry32_step(self.state)
        return value

    def __repr__(self) -> str:
        return f"DeterministicRNG(seed={self.seed}, state={self.state:#010x})"


class EntropyRNG:
    def next(self) -> float:
        return secrets.randbits(32) / _SCALE


def create_rng(seed: int | None = None) -> RandomSource:
    """Seeded generator when `seed` is given, entropy-backed otherwise."""
    if seed is None:
        return EntropyRNG()
    return DeterministicRNG(seed)


def random_int(lo: int, hi: int, rng: RandomSource) -> int:
    """Uniform integer in [lo, hi], both ends inclusive."""
    return math.floor(rng.next() * (hi - lo + 1)) + lo


__all__ = [
    "DeterministicRNG",
    "EntropyRNG",
    "RandomSource",
    "create_rng",
    "mulberry32_step",
    "random_int",
]
