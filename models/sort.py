"""
Sort Models
Word-grouping puzzle: 16 words, 4 groups of 4, one group per difficulty tier
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


GROUP_SIZE = 4
GROUP_COUNT = 4
TIERS = (1, 2, 3, 4)   # 1 = easiest (yellow), 4 = hardest (purple)


@dataclass(frozen=True)
class CategoryTemplate:
    """A category with a pool of candidate words (pool larger than a group)"""
    id: str
    category: str
    difficulty: int
    words: Tuple[str, ...]


@dataclass(frozen=True)
class SortGroup:
    category: str
    words: Tuple[str, str, str, str]
    difficulty: int

    def word_set(self) -> frozenset:
        return frozenset(w.upper() for w in self.words)


@dataclass(frozen=True)
class SortPuzzle:
    puzzle_number: int
    groups: Tuple[SortGroup, SortGroup, SortGroup, SortGroup]

    def all_words(self) -> List[str]:
        return [w for group in self.groups for w in group.words]


class SortStatus(Enum):
    """Session state"""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GuessOutcome(Enum):
    CORRECT = "correct"
    ONE_AWAY = "one_away"           # 3 of the 4 words share a group
    INCORRECT = "incorrect"
    ALREADY_GUESSED = "already_guessed"
    INVALID = "invalid"             # not 4 distinct words from the board
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class SolvedGroup:
    group: SortGroup
    solved_order: int
    revealed: bool = False          # True if revealed after a loss rather than found


@dataclass
class GuessResult:
    outcome: GuessOutcome
    group: Optional[SortGroup] = None
    mistakes: int = 0
    remaining_mistakes: int = 0
    revealed: List[SolvedGroup] = field(default_factory=list)
