"""PCG32 pseudorandom number generator."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1

DEFAULT_STATE = 0x853C49E6748FEA9B
DEFAULT_STREAM = 0xDA3E39CB94B95BDB
MULTIPLIER = 0x5851F42D4C957F2D


class PCG32:
    """PCG32 generator with 64-bit state and a selectable stream."""

    __slots__ = ("state", "inc")

    def __init__(self, initstate: int | None = None, initseq: int = 1) -> None:
        if initstate is None:
            self.state = DEFAULT_STATE
            self.inc = DEFAULT_STREAM
        else:
            self.state = 0
            self.inc = 1
            self.seed(initstate, initseq)

    def seed(self, initstate: int, initseq: int = 1) -> None:
        """Seed with a state initializer and a stream selector."""
        self.state = 0
        self.inc = (((initseq & MASK64) << 1) | 1) & MASK64
        self._step()
        self.state = (self.state + (initstate & MASK64)) & MASK64
        self._step()

    def _step(self) -> int:
        old = self.state
        self.state = (old * MULTIPLIER + self.inc) & MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32

    def next_uint(self, bound: int | None = None) -> int:
        """Return a 32-bit value, or a value in [0, bound) without bias."""
        if bound is None:
            return self._step()
        if not 0 < bound <= MASK32:
            raise ValueError(f"bound must lie in 1..{MASK32}, got {bound}")
        threshold = ((-bound) & MASK32) % bound
        while True:
            value = self._step()
            if value >= threshold:
                return value % bound

    def next_float(self) -> float:
        """Return a value in [0, 1) with 23 bits of resolution."""
        return (self._step() >> 9) / float(1 << 23)

    def next_double(self) -> float:
        """Return a value in [0, 1) with 32 bits of resolution."""
        return self._step() / float(1 << 32)

    def advance(self, delta: int) -> None:
        """Jump ahead by delta steps; negative values go backwards."""
        delta &= MASK64
        cur_mult, cur_plus = MULTIPLIER, self.inc
        acc_mult, acc_plus = 1, 0
        while delta > 0:
            if delta & 1:
                acc_mult = (acc_mult * cur_mult) & MASK64
                acc_plus = (acc_plus * cur_mult + cur_plus) & MASK64
            cur_plus = ((cur_mult + 1) * cur_plus) & MASK64
            cur_mult = (cur_mult * cur_mult) & MASK64
            delta >>= 1
        self.state = (acc_mult * self.state + acc_plus) & MASK64

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Permute a mutable sequence in place (Fisher-Yates)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_uint(i + 1)
            items[i], items[j] = items[j], items[i]

    def distance(self, other: PCG32) -> int:
        """Number of steps from other's state to this one's."""
        if self.inc != other.inc:
            raise ValueError("generators use different streams")
        cur_mult, cur_plus = MULTIPLIER, self.inc
        cur_state = other.state
        bit, dist = 1, 0
        while self.state != cur_state:
            if (self.state & bit) != (cur_state & bit):
                cur_state = (cur_state * cur_mult + cur_plus) & MASK64
                dist |= bit
            bit = (bit << 1) & MASK64
            cur_plus = ((cur_mult + 1) * cur_plus) & MASK64
            cur_mult = (cur_mult * cur_mult) & MASK64
        return dist - (1 << 64) if dist >= (1 << 63) else dist

    def __sub__(self, other: PCG32) -> int:
        return self.distance(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PCG32):
            return NotImplemented
        return self.state == other.state and self.inc == other.inc

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PCG32(state={self.state:#018x}, inc={self.inc:#018x})"