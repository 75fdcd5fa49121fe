"""A pseudo-random generator that reproduces the C library's ``rand()``.

The generator is the additive feedback generator with a 31-word state
that ``srand``/``rand`` use by default, so a given seed yields the same
sequence of numbers as the C library does.
"""

from __future__ import annotations

from collections import deque

_MASK32 = 0xFFFFFFFF
_DEGREE = 31
_SEPARATION = 3
_WARMUP = 10 * _DEGREE


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero, as C does."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class LibcRandom:
    """Generator of non-negative 31-bit integers, seeded like ``srand``."""

    def __init__(self, seed: int = 1) -> None:
        self._history: deque[int] = deque(maxlen=_DEGREE + _SEPARATION)
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator; a seed of 0 behaves like a seed of 1."""
        seed &= _MASK32
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        state = [word & _MASK32]
        for _ in range(_DEGREE - 1):
            hi = _trunc_div(word, 127773)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            state.append(word & _MASK32)
        state.extend(state[:_SEPARATION])
        self._history = deque(state, maxlen=_DEGREE + _SEPARATION)
        for _ in range(_WARMUP):
            self._next_word()

    def _next_word(self) -> int:
        history = self._history
        value = (history[-_DEGREE] + history[-_SEPARATION]) & _MASK32
        history.append(value)
        return value

    def rand(self) -> int:
        """Return the next number, between 0 and 2**31 - 1."""
        return self._next_word() >> 1