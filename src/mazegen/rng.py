# src/mazegen/rng.py
# Injectable random sources. Every source owns its own state; nothing here
# touches the process-wide `random` module generator.

import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Return a uniformly distributed integer in [0, n)."""
        ...


def pm_next(state: int) -> int:
    return (state * A) % M


def normalize_seed(seed: int) -> int:
    # Park–Miller states live in 1..M-1; 0 would be a fixed point.
    s = seed % M
    return s if s else 1


@dataclass
class PMRandom:
    """Park–Miller minimal standard generator, reproducible on every platform."""
    state: int

    def __post_init__(self):
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be > 0")
        return self.next32() % n


class PyRandom:
    """Private `random.Random` stream. Seeded from OS entropy when seed is None."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be > 0")
        return self._rng.randrange(n)

    def __repr__(self) -> str:
        return f"PyRandom(seed={self.seed!r})"


@dataclass
class ScriptedRandom:
    """
    Replays a fixed sequence of draws, for tests that need an exact maze.
    Raises ValueError when a scripted value is out of range for the request
    and RuntimeError once the script runs out.
    """
    values: List[int]
    consumed: int = 0
    _it: Iterator[int] = field(init=False, repr=False)

    def __post_init__(self):
        self.values = list(self.values)
        self._it = iter(self.values)

    @classmethod
    def of(cls, values: Iterable[int]) -> "ScriptedRandom":
        return cls(list(values))

    def randbelow(self, n: int) -> int:
        try:
            v = next(self._it)
        except StopIteration:
            raise RuntimeError(
                f"scripted sequence exhausted after {self.consumed} draws"
            ) from None
        if not (0 <= v < n):
            raise ValueError(f"scripted value {v} not in [0, {n})")
        self.consumed += 1
        return v
