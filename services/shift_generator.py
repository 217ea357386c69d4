"""
Shift Generator Service
Solution-first rotation puzzles: pick N words of length N, stack them, scramble with row/column rotations.

Every row of the solved grid reads as a word. The player wins when every row is
*some* valid word, not necessarily the generated one.
"""

from typing import List, Optional, Union

import numpy as np

from config import PuzzleConfig
from data.shift_fallbacks import SHIFT_FALLBACKS
from models.puzzle import Difficulty, GenerationResult, GenerationStatus
from models.shift import Grid, MoveDirection, ShiftMove, ShiftPuzzle
from services import daily_seed
from services.dictionary import Dictionary, get_default_dictionary
from services.seeded_random import SeededRandom


DirectionLike = Union[MoveDirection, str]


def _parse_direction(direction: DirectionLike) -> MoveDirection:
    if isinstance(direction, MoveDirection):
        return direction
    try:
        return MoveDirection(str(direction).lower())
    except ValueError:
        raise ValueError(f"Unknown direction: {direction!r}") from None


def _check_index(index: int, size: int, kind: str):
    if not 0 <= index < size:
        raise IndexError(f"{kind} index {index} out of range for size {size}")


# === Player operations ===

def shift_row(grid: Grid, row: int, direction: DirectionLike) -> Grid:
    """Rotate one row by one cell (left or right), returning a new grid"""
    direction = _parse_direction(direction)
    if not direction.is_row_move:
        raise ValueError(f"Rows shift left or right, not {direction.value}")

    cells = np.array(grid)
    _check_index(row, cells.shape[0], "Row")
    step = -1 if direction == MoveDirection.LEFT else 1
    cells[row, :] = np.roll(cells[row, :], step)
    return cells.tolist()


def shift_column(grid: Grid, col: int, direction: DirectionLike) -> Grid:
    """Rotate one column by one cell (up or down), returning a new grid"""
    direction = _parse_direction(direction)
    if direction.is_row_move:
        raise ValueError(f"Columns shift up or down, not {direction.value}")

    cells = np.array(grid)
    _check_index(col, cells.shape[1], "Column")
    step = -1 if direction == MoveDirection.UP else 1
    cells[:, col] = np.roll(cells[:, col], step)
    return cells.tolist()


def apply_move(grid: Grid, move: ShiftMove) -> Grid:
    if move.direction.is_row_move:
        return shift_row(grid, move.index, move.direction)
    return shift_column(grid, move.index, move.direction)


def get_row_word(grid: Grid, row: int) -> str:
    return "".join(grid[row])


def is_row_valid(grid: Grid, row: int, dictionary: Optional[Dictionary] = None) -> bool:
    if dictionary is None:
        dictionary = get_default_dictionary()
    return dictionary.is_valid_word(get_row_word(grid, row))


def check_all_rows_valid(grid: Grid, dictionary: Optional[Dictionary] = None) -> bool:
    if dictionary is None:
        dictionary = get_default_dictionary()
    return all(dictionary.is_valid_word("".join(row)) for row in grid)


def is_solved(grid: Grid, dictionary: Optional[Dictionary] = None) -> bool:
    """Win condition: every row is a valid word"""
    return check_all_rows_valid(grid, dictionary)


# === Generation ===

def get_grid_size(difficulty) -> int:
    return PuzzleConfig.SHIFT_GRID_SIZES[Difficulty.parse(difficulty).value]


def generate_solution_grid(size: int, rng: SeededRandom, dictionary: Dictionary) -> GenerationResult[Grid]:
    """
    N stacked words of length N.
    4x4 grids come from the curated easy pool, larger ones from the generation pool.

    EXHAUSTED when the pool holds fewer than N words.
    """
    if size == 4:
        words = dictionary.easy_words(size, rng)
    else:
        words = dictionary.random_words(size, size, rng)
    if len(words) < size:
        return GenerationResult(status=GenerationStatus.EXHAUSTED, attempts=1)
    return GenerationResult(
        status=GenerationStatus.GENERATED,
        value=[list(word) for word in words],
        attempts=1
    )


def get_fallback_grid(size: int) -> Grid:
    return [list(word) for word in SHIFT_FALLBACKS[size]]


def _random_row_move(size: int, rng: SeededRandom) -> ShiftMove:
    index = rng.index(size)
    return ShiftMove(index, MoveDirection.LEFT if rng.coin() else MoveDirection.RIGHT)


def _random_column_move(size: int, rng: SeededRandom) -> ShiftMove:
    index = rng.index(size)
    return ShiftMove(index, MoveDirection.UP if rng.coin() else MoveDirection.DOWN)


def generate_scramble(size: int, difficulty, rng: SeededRandom) -> List[ShiftMove]:
    """
    Seeded scramble sequence.

    easy: exactly 2 column moves then 2 row moves (column moves are always needed)
    medium / hard: 6-10 / 12-18 mixed moves, each a coin flip between row and column
    """
    difficulty = Difficulty.parse(difficulty)

    if difficulty == Difficulty.EASY:
        moves = [_random_column_move(size, rng) for _ in range(PuzzleConfig.SHIFT_EASY_COLUMN_MOVES)]
        moves += [_random_row_move(size, rng) for _ in range(PuzzleConfig.SHIFT_EASY_ROW_MOVES)]
        return moves

    low, high = PuzzleConfig.SHIFT_SCRAMBLE_DEPTH[difficulty.value]
    depth = rng.randint(low, high)

    moves = []
    for _ in range(depth):
        is_row_move = rng.coin()
        index = rng.index(size)
        if is_row_move:
            direction = MoveDirection.LEFT if rng.coin() else MoveDirection.RIGHT
        else:
            direction = MoveDirection.UP if rng.coin() else MoveDirection.DOWN
        moves.append(ShiftMove(index, direction))
    return moves


def scramble_grid(grid: Grid, moves: List[ShiftMove]) -> Grid:
    scrambled = [list(row) for row in grid]
    for move in moves:
        scrambled = apply_move(scrambled, move)
    return scrambled


def unscramble_moves(moves: List[ShiftMove]) -> List[ShiftMove]:
    """The inverse sequence: replaying it on the scrambled grid restores the solution"""
    return [ShiftMove(move.index, move.direction.opposite) for move in reversed(moves)]


def get_daily_puzzle(difficulty, value=None, dictionary: Optional[Dictionary] = None) -> ShiftPuzzle:
    """The shift puzzle for a date and difficulty"""
    difficulty = Difficulty.parse(difficulty)
    if dictionary is None:
        dictionary = get_default_dictionary()

    date_str = daily_seed.to_date_string(value)
    seed = daily_seed.shift_seed(date_str, difficulty)
    rng = SeededRandom(seed)
    size = get_grid_size(difficulty)

    # Solution draws come first, then the scramble draws
    result = generate_solution_grid(size, rng, dictionary)
    if result.is_generated:
        solution = result.value
        status = GenerationStatus.GENERATED
    else:
        print(f"⚠ Not enough {size}-letter words for the {difficulty.value} shift grid on {date_str}, using fallback")
        solution = get_fallback_grid(size)
        status = GenerationStatus.FALLBACK

    grid = scramble_grid(solution, generate_scramble(size, difficulty, rng))

    return ShiftPuzzle(
        grid=grid,
        solution=solution,
        size=size,
        difficulty=difficulty,
        seed=seed,
        puzzle_number=daily_seed.puzzle_number(date_str),
        status=status
    )
