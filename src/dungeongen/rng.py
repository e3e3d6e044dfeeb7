import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1

class RandomSource(Protocol):
    """The two primitives the generator draws from."""

    def inclusive_random(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi]."""
        ...

    def exclusive_random(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        ...

def _check_range(lo: int, hi: int) -> None:
    if hi < lo:
        raise ValueError(f"empty range [{lo}, {hi}]")

def pm_next(state: int) -> int:
    return (state * A) % M

def seed_state(seed: int) -> int:
    # Map any integer onto 1..M-1; 0 is a fixed point of the recurrence.
    return (seed % (M - 1)) + 1

@dataclass
class PMRandom:
    """Park–Miller minimal-standard generator.

    Sequences depend only on the starting state, so a seed reproduces the same
    dungeon on any interpreter.
    """
    state: int

    def __post_init__(self) -> None:
        if not 0 < self.state < M:
            raise ValueError(f"state must be within 1..{M - 1}, got {self.state}")

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(seed_state(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Return 1..n inclusive."""
        if n <= 0:
            raise ValueError(f"bound must be positive, got {n}")
        return (self.next32() % n) + 1

    def inclusive_random(self, lo: int, hi: int) -> int:
        _check_range(lo, hi)
        return lo + self.bounded(hi - lo + 1) - 1

    def exclusive_random(self, n: int) -> int:
        return self.bounded(n) - 1

@dataclass
class StdRandom:
    """Adapter over the stdlib Mersenne Twister; unseeded by default."""
    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def inclusive_random(self, lo: int, hi: int) -> int:
        _check_range(lo, hi)
        return self._rng.randint(lo, hi)

    def exclusive_random(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"bound must be positive, got {n}")
        return self._rng.randrange(n)
