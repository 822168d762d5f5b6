"""Random sources for the rain simulation.

A seeded run uses Mulberry32, a small 32-bit generator whose output must stay
bit-identical across implementations so that ``--seed`` reproduces the same
animation everywhere. An unseeded run uses the standard library generator.
"""

import random
from typing import Optional, Union

MASK32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """Low 32 bits of the product of two 32-bit integers."""
    return (a * b) & MASK32


class Mulberry32:
    """Deterministic uniform stream in [0, 1) from a 32-bit seed."""

    def __init__(self, seed: int):
        self.seed = seed
        self._state = seed & MASK32

    def random(self) -> float:
        a = self._state = (self._state + 0x6D2B79F5) & MASK32
        t = _imul(a ^ (a >> 15), 1 | a)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & MASK32) ^ t
        return ((t ^ (t >> 14)) & MASK32) / TWO_POW_32

    def __repr__(self) -> str:
        return f"Mulberry32(seed={self.seed})"


RandomSource = Union[Mulberry32, random.Random]


def create_random(seed: Optional[int] = None) -> RandomSource:
    """Return a seeded Mulberry32 stream, or a non-deterministic one."""
    if seed is None:
        return random.Random()
    return Mulberry32(seed)
