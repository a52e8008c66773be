"""Seeded PRNG — Mulberry32 with 32-bit masked integer arithmetic."""

from __future__ import annotations

from collections.abc import Iterator

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


class SeededRandom:
    """Deterministic stream of floats in [0, 1).

    Call the instance for the next value, or iterate it for an endless stream.
    Each instance owns its state; two instances with the same seed produce
    the same sequence.
    """

    __slots__ = ("_state", "draws")

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK32
        self.draws = 0

    def __call__(self) -> float:
        self._state = (self._state + _INCREMENT) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        t = (t ^ (t >> 14)) & _MASK32
        self.draws += 1
        return t / _TWO_POW_32

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self()

    def choice_index(self, n: int) -> int:
        """One draw mapped to an index in ``range(n)``."""
        return int(self() * n)


def create_random(seed: int) -> SeededRandom:
    return SeededRandom(seed)
