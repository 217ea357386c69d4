"""
Mini Crossword Service
Daily 5x5 crossword from a hand-authored bank: selection, numbering, answer checking.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from data.mini_puzzles import MINI_PUZZLES
from models.mini import MINI_SIZE, MiniClue, MiniClues, MiniPuzzle
from services import daily_seed
from services.dictionary import Dictionary


BLACK_SQUARE = '#'

Run = Tuple[int, int, str]   # (row, col, word)


def _build_clues(entries) -> List[MiniClue]:
    return [
        MiniClue(number=number, clue=clue, row=row, col=col, length=len(answer), answer=answer)
        for number, clue, row, col, answer in entries
    ]


def build_puzzle(entry: dict, puzzle_number: int) -> MiniPuzzle:
    """MiniPuzzle from a bank entry; the open/black mask is derived from the solution"""
    solution = [
        [None if ch == BLACK_SQUARE else ch for ch in row]
        for row in entry['solution']
    ]
    grid = [['' if ch is not None else None for ch in row] for row in solution]
    return MiniPuzzle(
        puzzle_number=puzzle_number,
        grid=grid,
        solution=solution,
        clues=MiniClues(
            across=_build_clues(entry['across']),
            down=_build_clues(entry['down'])
        )
    )


def get_puzzle(number: int) -> Optional[MiniPuzzle]:
    """Bank puzzle by 1-based bank number, None if out of range"""
    if 1 <= number <= len(MINI_PUZZLES):
        return build_puzzle(MINI_PUZZLES[number - 1], number)
    return None


def get_daily_puzzle(value=None) -> MiniPuzzle:
    """Bank entry abs(days since epoch) % bank size, numbered days + 1"""
    days = daily_seed.days_since_epoch(value)
    entry = MINI_PUZZLES[abs(days) % len(MINI_PUZZLES)]
    return build_puzzle(entry, days + 1)


def get_cell_numbers(puzzle: MiniPuzzle) -> Dict[str, int]:
    """
    Standard crossword numbering, row-major.

    A cell is numbered when it starts an across run (left edge or black to its left,
    open to its right) or a down run (same, vertically). Keys are "row,col".
    """
    grid = puzzle.grid
    rows = len(grid)
    numbers: Dict[str, int] = {}
    num = 1

    for row in range(rows):
        cols = len(grid[row])
        for col in range(cols):
            if grid[row][col] is None:
                continue

            starts_across = (
                (col == 0 or grid[row][col - 1] is None)
                and col + 1 < cols and grid[row][col + 1] is not None
            )
            starts_down = (
                (row == 0 or grid[row - 1][col] is None)
                and row + 1 < rows and grid[row + 1][col] is not None
            )

            if starts_across or starts_down:
                numbers[f"{row},{col}"] = num
                num += 1

    return numbers


def get_runs(solution: Sequence[Sequence[Optional[str]]]) -> Tuple[List[Run], List[Run]]:
    """All across and down runs of length >= 2 in the solution, with their start cells"""
    across: List[Run] = []
    down: List[Run] = []
    rows = len(solution)
    cols = len(solution[0]) if rows else 0

    for row in range(rows):
        col = 0
        while col < cols:
            if solution[row][col] is None:
                col += 1
                continue
            start = col
            while col < cols and solution[row][col] is not None:
                col += 1
            if col - start >= 2:
                across.append((row, start, "".join(solution[row][start:col])))

    for col in range(cols):
        row = 0
        while row < rows:
            if solution[row][col] is None:
                row += 1
                continue
            start = row
            while row < rows and solution[row][col] is not None:
                row += 1
            if row - start >= 2:
                down.append((start, col, "".join(solution[r][col] for r in range(start, row))))

    return across, down


# === Answer checking ===

def _entry(entries: Sequence[Sequence[str]], row: int, col: int) -> str:
    """Player letter at a cell; missing rows or cells read as empty"""
    if row >= len(entries) or col >= len(entries[row]):
        return ''
    return entries[row][col] or ''


def check_cell(puzzle: MiniPuzzle, row: int, col: int, letter: str) -> bool:
    """True if `letter` is correct for an open cell (black squares and off-grid cells are never correct)"""
    if not (0 <= row < len(puzzle.solution) and 0 <= col < len(puzzle.solution[row])):
        return False
    expected = puzzle.solution[row][col]
    return expected is not None and bool(letter) and letter.upper() == expected


def get_incorrect_cells(puzzle: MiniPuzzle, entries: Sequence[Sequence[str]]) -> List[Tuple[int, int]]:
    """Open cells that are filled in but wrong"""
    incorrect = []
    for row, col in puzzle.open_cells():
        letter = _entry(entries, row, col)
        if letter and not check_cell(puzzle, row, col, letter):
            incorrect.append((row, col))
    return incorrect


def check_solution(puzzle: MiniPuzzle, entries: Sequence[Sequence[str]]) -> bool:
    """Solved iff every open cell matches the solution (case-insensitive)"""
    return all(
        check_cell(puzzle, row, col, _entry(entries, row, col))
        for row, col in puzzle.open_cells()
    )


# === Bank validation ===

def validate_bank_entry(puzzle: MiniPuzzle, dictionary: Dictionary) -> List[str]:
    """
    Problems with a bank puzzle (empty list = valid).

    Checks:
    1. 5x5 shape
    2. Every across and down run is a dictionary word
    3. Clues agree with the grid: answer, start cell, length and number
    """
    problems = []

    if len(puzzle.solution) != MINI_SIZE or any(len(r) != MINI_SIZE for r in puzzle.solution):
        return [f"Grid is not {MINI_SIZE}x{MINI_SIZE}"]

    across_runs, down_runs = get_runs(puzzle.solution)
    for row, col, word in across_runs + down_runs:
        if not dictionary.is_valid_word(word):
            problems.append(f"Not a word: {word} at {row},{col}")

    numbers = get_cell_numbers(puzzle)
    for direction, clues, runs in (
        ('across', puzzle.clues.across, across_runs),
        ('down', puzzle.clues.down, down_runs),
    ):
        run_starts = {(row, col): word for row, col, word in runs}
        if len(clues) != len(runs):
            problems.append(f"{direction}: {len(clues)} clues for {len(runs)} runs")
        for clue in clues:
            word = run_starts.get((clue.row, clue.col))
            if word is None:
                problems.append(f"{direction} {clue.number}: no run starts at {clue.row},{clue.col}")
                continue
            if word != clue.answer or clue.length != len(word):
                problems.append(f"{direction} {clue.number}: answer {clue.answer} but grid has {word}")
            if numbers.get(f"{clue.row},{clue.col}") != clue.number:
                problems.append(f"{direction} {clue.number}: cell is numbered {numbers.get(f'{clue.row},{clue.col}')}")

    return problems
