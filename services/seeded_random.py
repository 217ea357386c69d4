"""
Seeded Random Service
Deterministic linear congruential generator shared by every daily game.

The arithmetic is done in IEEE doubles on purpose: the web clients compute
`(seed * 1103515245 + 12345) & 0x7fffffff` in JavaScript numbers, where the
product can exceed 2**53 and round. Integer math would drift from them.
"""

from typing import List, Optional, Sequence, TypeVar

from config import PuzzleConfig


T = TypeVar('T')


class SeededRandom:
    """
    Reproducible stream of floats in [0, 1) from an integer seed.

    Each instance carries its own seed; there is no module-level random state.
    """

    def __init__(self, seed: int):
        self.initial_seed = seed
        self._seed = seed

    @property
    def state(self) -> int:
        return self._seed

    def next_state(self) -> int:
        """Advance one LCG step and return the new integer state"""
        value = float(self._seed) * PuzzleConfig.LCG_MULTIPLIER + PuzzleConfig.LCG_INCREMENT
        self._seed = int(value) & PuzzleConfig.LCG_MASK
        return self._seed

    def next(self) -> float:
        """Next value in [0, 1)"""
        return self.next_state() / PuzzleConfig.LCG_MASK

    __call__ = next

    def index(self, n: int) -> int:
        """floor(next() * n) - an index into a sequence of length n"""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return int(self.next() * n)

    def coin(self) -> bool:
        """True with probability ~1/2 (next() > 0.5)"""
        return self.next() > 0.5

    def choice(self, items: Sequence[T]) -> Optional[T]:
        """Random element, None for an empty sequence"""
        if not items:
            return None
        return items[self.index(len(items))]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates shuffle from the tail. Returns a new list."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result

    def sample(self, items: Sequence[T], count: int) -> List[T]:
        """First `count` items of a shuffled copy"""
        return self.shuffle(items)[:count]

    def randint(self, low: int, high: int) -> int:
        """Integer in [low, high], inclusive"""
        return low + self.index(high - low + 1)
