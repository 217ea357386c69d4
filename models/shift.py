"""
Shift Models
Row/column rotation puzzle
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from models.puzzle import Difficulty, GenerationStatus


Grid = List[List[str]]


class MoveDirection(Enum):
    """One-cell wrap-around rotation"""
    LEFT = "left"     # row
    RIGHT = "right"   # row
    UP = "up"         # column
    DOWN = "down"     # column

    @property
    def is_row_move(self) -> bool:
        return self in (MoveDirection.LEFT, MoveDirection.RIGHT)

    @property
    def opposite(self) -> 'MoveDirection':
        return {
            MoveDirection.LEFT: MoveDirection.RIGHT,
            MoveDirection.RIGHT: MoveDirection.LEFT,
            MoveDirection.UP: MoveDirection.DOWN,
            MoveDirection.DOWN: MoveDirection.UP,
        }[self]


@dataclass(frozen=True)
class ShiftMove:
    """A single scramble step (row or column index + direction)"""
    index: int
    direction: MoveDirection


@dataclass(frozen=True)
class ShiftPuzzle:
    """
    Scrambled start grid plus the solution it came from.
    Every row of the solution is a dictionary word of length `size`.
    """
    grid: Grid
    solution: Grid
    size: int
    difficulty: Difficulty
    seed: int
    puzzle_number: int
    status: GenerationStatus = GenerationStatus.GENERATED

    def solution_words(self) -> List[str]:
        return ["".join(row) for row in self.solution]
