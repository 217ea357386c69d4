"""
Puzzle Models
Shared types for every daily game: difficulty levels and generation outcomes
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar('T')


class Difficulty(Enum):
    """Difficulty selector for the cipher and shift games"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> 'Difficulty':
        """Accepts a Difficulty or its string value ('easy', 'Medium', ...)"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None


class GenerationStatus(Enum):
    """How a daily puzzle came to exist"""
    GENERATED = "generated"   # built fresh from the seed
    FALLBACK = "fallback"     # precomputed puzzle used after the retry budget ran out
    EXHAUSTED = "exhausted"   # retry budget ran out and no fallback was applied (yet)


@dataclass(frozen=True)
class GenerationResult(Generic[T]):
    """
    Tagged result of a bounded generate-with-fallback loop.

    Callers and tests can tell "generated freshly" from "used the fallback"
    without inspecting the puzzle itself.
    """
    status: GenerationStatus
    value: Optional[T] = None
    attempts: int = 0

    @property
    def is_generated(self) -> bool:
        return self.status == GenerationStatus.GENERATED

    @property
    def used_fallback(self) -> bool:
        return self.status == GenerationStatus.FALLBACK
