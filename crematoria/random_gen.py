"""Deterministic pseudo-random generator shared by the board and the players."""

from __future__ import annotations

_RANDOM_MOD = 1 << 31
_RANDOM_MASK = _RANDOM_MOD - 1
_MAX_RANGE = 10**6


class RandomGenerator:
    """Linear congruential generator with a fixed, reproducible sequence."""

    def __init__(self, seed: int = 0) -> None:
        self.set_random_seed(seed)

    def set_random_seed(self, seed: int) -> None:
        """Set the seed; negative seeds are taken by absolute value."""
        self._seed = abs(seed) & _RANDOM_MASK

    def _next(self) -> None:
        self._seed = (843314861 * self._seed + 453816693) & _RANDOM_MASK

    def uniform(self) -> float:
        """Return a real number in [0, 1)."""
        self._next()
        return self._seed / _RANDOM_MOD

    def random(self, low: int, high: int) -> int:
        """Return an integer in [low, high]; low if the interval is empty or too long."""
        if low > high:
            return low
        if high - low + 1 > _MAX_RANGE:
            return low
        self._next()
        return low + int((high - low + 1) * self.uniform())

    def random_permutation(self, n: int) -> list[int]:
        """Return a random permutation of 0..n-1, or [] if n is out of range."""
        if n < 0 or n > _MAX_RANGE:
            return []
        v = list(range(n))
        for i in range(n - 1):
            r = self.random(i, n - 1)
            v[i], v[r] = v[r], v[i]
        return v