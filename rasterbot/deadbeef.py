"""The fast, portable "dead beef" pseudo-random number generator."""

from __future__ import annotations

import time

MAX = 0xFFFFFFFF
_BEEF = 0xDEADBEEF
_CLOCKS_PER_SEC = 1_000_000


class DeadbeefRandom:
    """Pseudo-random generator producing 32-bit unsigned integers."""

    def __init__(self, seed: int = 0) -> None:
        self._seed = 0
        self._beef = _BEEF
        self.seed(seed)

    def seed(self, x: int) -> None:
        """Reset the generator with the given seed."""
        self._seed = x & MAX
        self._beef = _BEEF

    def rand(self) -> int:
        """Return the next number in the range [0, MAX]."""
        self._seed = ((self._seed << 7) ^ ((self._seed >> 25) + self._beef)) & MAX
        self._beef = ((self._beef << 7) ^ ((self._beef >> 25) + _BEEF)) & MAX
        return self._seed

    def uniform(self, a: float, b: float) -> float:
        """Return a random float in [a, b)."""
        return a + self.rand() / (MAX / (b - a) + 1)

    def randrange(self, a: int, b: int) -> int:
        """Return a random integer in [a, b)."""
        return int(self.uniform(a, b))


def generate_seed() -> int:
    """Derive a 32-bit seed from the current time and processor clock."""
    t = int(time.time()) & MAX
    c = int(time.process_time() * _CLOCKS_PER_SEC) & MAX
    marker = id(object()) & MAX
    return ((t << 24) ^ (c << 11) ^ t ^ marker) & MAX