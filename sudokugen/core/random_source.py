"""
Randomness providers for grid generation.

The search and the remover never touch the ``random`` module directly; they
draw through a RandomSource so tests can swap in a seeded or scripted one.
"""
import random
from abc import ABC, abstractmethod
from typing import Optional


class RandomSource(ABC):
    """Abstract source of uniform draws."""

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        pass

    @abstractmethod
    def random(self) -> float:
        """Return a uniform float in [0, 1)."""
        pass


class SystemRandomSource(RandomSource):
    """
    RandomSource backed by a private ``random.Random`` instance.

    Each instance owns its generator, so separate generation calls never share
    state. Pass ``seed`` for reproducible output.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)

    def random(self) -> float:
        return self._rng.random()


class LowestCandidateSource(RandomSource):
    """
    Degenerate source: always picks the first (lowest) candidate.

    ``coin`` is returned by every ``random()`` call; the default keeps every
    cell, 0.0 blanks every unprotected cell.
    """

    def __init__(self, coin: float = 0.99):
        if not 0.0 <= coin < 1.0:
            raise ValueError(f"coin must be in [0, 1), got {coin}")
        self.coin = coin

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randbelow() requires n > 0")
        return 0

    def random(self) -> float:
        return self.coin
