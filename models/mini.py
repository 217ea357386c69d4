"""
Mini Crossword Models
5x5 hand-authored crossword
"""

from dataclasses import dataclass, field
from typing import List, Optional


MINI_SIZE = 5


@dataclass(frozen=True)
class MiniClue:
    number: int
    clue: str
    row: int
    col: int
    length: int
    answer: str


@dataclass(frozen=True)
class MiniClues:
    across: List[MiniClue] = field(default_factory=list)
    down: List[MiniClue] = field(default_factory=list)


@dataclass(frozen=True)
class MiniPuzzle:
    """
    grid: player-facing cell mask ('' = open cell, None = black square)
    solution: letters, None for black squares
    """
    puzzle_number: int
    grid: List[List[Optional[str]]]
    solution: List[List[Optional[str]]]
    clues: MiniClues

    def is_black(self, row: int, col: int) -> bool:
        return self.grid[row][col] is None

    def open_cells(self) -> List[tuple]:
        return [
            (r, c)
            for r in range(len(self.grid))
            for c in range(len(self.grid[r]))
            if self.grid[r][c] is not None
        ]
