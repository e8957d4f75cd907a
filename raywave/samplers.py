"""Random number samplers used for rendering."""

from __future__ import annotations

import copy
import math
import os
from abc import ABC, abstractmethod

from raywave.pcg32 import MASK64, PCG32

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3


def fnv1a(*args: int) -> int:
    """64-bit FNV-1a hash over the 8-byte little-endian encoding of each value."""
    result = FNV_OFFSET_BASIS
    for value in args:
        for byte in (int(value) & MASK64).to_bytes(8, "little"):
            result ^= byte
            result = (result * FNV_PRIME) & MASK64
    return result


def radical_inverse(a: int, base: int) -> float:
    """Mirror the base-`base` digits of `a` around the radix point."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    reversed_value = 0.0
    inv_base = 1.0 / base
    while a > 0:
        a, digit = divmod(a, base)
        reversed_value += digit * inv_base
        inv_base /= base
    return reversed_value


def _default_seed() -> int:
    return 1337 if "reference" in os.environ else 420


class Sampler(ABC):
    """Source of numbers in [0, 1) for Monte Carlo integration."""

    def __init__(self, count: int = 1) -> None:
        self.samples_per_pixel = count

    @abstractmethod
    def seed(self, sample_index: int, pixel: tuple[int, int] | None = None) -> None:
        """Prepare for a sample, optionally tied to a pixel."""

    @abstractmethod
    def next(self) -> float:
        """Return the next number in [0, 1)."""

    def next_2d(self) -> tuple[float, float]:
        first = self.next()
        second = self.next()
        return first, second

    def clone(self) -> Sampler:
        return copy.deepcopy(self)


class Independent(Sampler):
    """Independent uniform numbers drawn from PCG32."""

    def __init__(self, count: int = 1, seed: int | None = None) -> None:
        super().__init__(count)
        self.seed_value = _default_seed() if seed is None else seed
        self._rng = PCG32()

    def seed(self, sample_index: int, pixel: tuple[int, int] | None = None) -> None:
        if pixel is None:
            self._rng.seed(self.seed_value, sample_index)
        else:
            x, y = pixel
            self._rng.seed(fnv1a(x, y, sample_index, self.seed_value))

    def next(self) -> float:
        return self._rng.next_float()

    def __str__(self) -> str:
        return f"Independent[\n  count = {self.samples_per_pixel}\n]"


class Halton(Sampler):
    """Halton-style sequence whose base grows with every dimension, with a per-pixel offset."""

    def __init__(self, count: int = 1, seed: int | None = None, base: int = 2) -> None:
        super().__init__(count)
        self.seed_value = _default_seed() if seed is None else seed
        self.base = base
        self.sample_index = 0
        self.offset = 0.0
        self._rng = PCG32()

    def seed(self, sample_index: int, pixel: tuple[int, int] | None = None) -> None:
        self.base = 2
        self.sample_index = sample_index
        if pixel is None:
            self._rng.seed(self.seed_value, sample_index)
        else:
            x, y = pixel
            stream = ((x << 32) & MASK64) ^ (y & MASK64)
            self._rng.seed(self.seed_value, stream)
            self.offset = self._rng.next_float()

    def next(self) -> float:
        value = radical_inverse(self.sample_index, self.base)
        self.base += 1
        return math.fmod(value + self.offset, 1.0)

    def __str__(self) -> str:
        return f"halton[\n  count = {self.samples_per_pixel}\n]"