# models/grid.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from models.puzzle import GenerationStatus


class WordDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row step, col step) for walking along the word"""
        if self == WordDirection.HORIZONTAL:
            return (0, 1)
        return (1, 0)

    @property
    def crossing(self) -> 'WordDirection':
        """The perpendicular direction"""
        if self == WordDirection.HORIZONTAL:
            return WordDirection.VERTICAL
        return WordDirection.HORIZONTAL


# --- Player space ---

@dataclass(frozen=True)
class GridPosition:
    """A tile the player placed on the board"""
    row: int
    col: int
    letter: str


# --- Solution space (generator scratch structure) ---

@dataclass(frozen=True)
class PlacedWord:
    """A word anchored in the generated solution grid"""
    word: str
    row: int
    col: int
    direction: WordDirection

    def cells(self) -> List[Tuple[int, int]]:
        """All (row, col) coordinates the word covers, in letter order"""
        dr, dc = self.direction.delta
        return [(self.row + i * dr, self.col + i * dc) for i in range(len(self.word))]


@dataclass
class GridSolution:
    """
    A connected crossword built by the generator.
    Only the (shuffled) letters are ever shown to the player.
    """
    grid: Dict[Tuple[int, int], str] = field(default_factory=dict)
    words: List[PlacedWord] = field(default_factory=list)

    @property
    def letters(self) -> List[str]:
        """Flat letter multiset, in cell insertion order"""
        return list(self.grid.values())

    @property
    def letter_count(self) -> int:
        return len(self.grid)

    def has_word(self, word: str) -> bool:
        return any(placed.word == word for placed in self.words)

    def to_string_grid(self) -> str:
        """Text rendering of the solution, '.' for empty cells"""
        if not self.grid:
            return ""
        rows = [r for r, _ in self.grid]
        cols = [c for _, c in self.grid]
        lines = []
        for r in range(min(rows), max(rows) + 1):
            lines.append(" ".join(
                self.grid.get((r, c), ".") for c in range(min(cols), max(cols) + 1)
            ))
        return "\n".join(lines)


@dataclass(frozen=True)
class GridPuzzle:
    """The daily letter rack"""
    letters: List[str]
    seed: int
    puzzle_number: int
    status: GenerationStatus = GenerationStatus.GENERATED


# --- Validation & scoring ---

@dataclass
class ValidationResult:
    is_valid: bool
    words: List[str] = field(default_factory=list)           # runs that passed the dictionary
    invalid_words: List[str] = field(default_factory=list)   # runs that did not
    is_connected: bool = True
    all_letters_used: bool = False


@dataclass(frozen=True)
class WordScore:
    word: str
    score: int


@dataclass(frozen=True)
class Bonus:
    type: str      # 'Efficiency' / 'Long Word'
    amount: int


@dataclass
class ScoreResult:
    total_score: int = 0
    word_scores: List[WordScore] = field(default_factory=list)
    longest_word: str = ""
    word_count: int = 0
    bonuses: List[Bonus] = field(default_factory=list)
