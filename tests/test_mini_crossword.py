"""
Tests for the mini crossword bank and helpers
"""

import pytest

from data.mini_puzzles import MINI_PUZZLES
from services.dictionary import Dictionary
from services.mini_crossword import (
    build_puzzle,
    check_cell,
    check_solution,
    get_cell_numbers,
    get_daily_puzzle,
    get_incorrect_cells,
    get_puzzle,
    get_runs,
    validate_bank_entry,
)


@pytest.fixture
def full_square():
    """HEART / EMBER / ABUSE / RESIN / TREND, no black squares"""
    return build_puzzle(MINI_PUZZLES[0], 1)


@pytest.fixture
def cornered():
    """#SCAB / SHALE / CAKES / ALERT / BEST#"""
    return build_puzzle(MINI_PUZZLES[1], 2)


@pytest.fixture(scope="module")
def english():
    """Full English validation set (wordfreq checked against the NLTK word list)"""
    try:
        return Dictionary.from_wordfreq(generation_words={}, easy_words=[])
    except LookupError:
        pytest.skip("NLTK corpora not available")


class TestBuildPuzzle:

    def test_mask_from_solution(self, cornered):
        assert cornered.is_black(0, 0)
        assert cornered.is_black(4, 4)
        assert cornered.solution[0][0] is None
        assert cornered.grid[0][1] == ''
        assert len(cornered.open_cells()) == 23

    def test_clue_lengths(self, cornered):
        lengths = {c.number: c.length for c in cornered.clues.across}
        assert lengths == {1: 4, 5: 5, 6: 5, 7: 5, 8: 4}


class TestCellNumbers:

    def test_full_square(self, full_square):
        numbers = get_cell_numbers(full_square)
        assert numbers == {
            "0,0": 1, "0,1": 2, "0,2": 3, "0,3": 4, "0,4": 5,
            "1,0": 6, "2,0": 7, "3,0": 8, "4,0": 9,
        }

    def test_black_corners(self, cornered):
        numbers = get_cell_numbers(cornered)
        assert numbers == {
            "0,1": 1, "0,2": 2, "0,3": 3, "0,4": 4,
            "1,0": 5, "2,0": 6, "3,0": 7, "4,0": 8,
        }

    def test_clue_numbers_match_cells(self):
        for i in range(len(MINI_PUZZLES)):
            puzzle = get_puzzle(i + 1)
            numbers = get_cell_numbers(puzzle)
            for clue in puzzle.clues.across + puzzle.clues.down:
                assert numbers[f"{clue.row},{clue.col}"] == clue.number


class TestBank:

    def test_every_entry_uses_real_words(self, english):
        for i in range(len(MINI_PUZZLES)):
            assert validate_bank_entry(get_puzzle(i + 1), english) == [], i + 1

    def test_runs_are_clue_answers(self, cornered):
        across, down = get_runs(cornered.solution)
        assert [w for _, _, w in across] == ["SCAB", "SHALE", "CAKES", "ALERT", "BEST"]
        assert sorted(w for _, _, w in down) == sorted(["SCAB", "SHALE", "CAKES", "ALERT", "BEST"])

    def test_validation_reports_unknown_words(self, full_square):
        tiny = Dictionary(["HEART"], generation_words={}, easy_words=[])
        problems = validate_bank_entry(full_square, tiny)
        assert any("EMBER" in p for p in problems)

    def test_get_puzzle_out_of_range(self):
        assert get_puzzle(0) is None
        assert get_puzzle(len(MINI_PUZZLES) + 1) is None


class TestDailyPuzzle:

    def test_epoch(self):
        puzzle = get_daily_puzzle("2026-01-11")
        assert puzzle.puzzle_number == 1
        assert puzzle.solution == build_puzzle(MINI_PUZZLES[0], 1).solution

    def test_cycles_through_bank(self):
        puzzle = get_daily_puzzle("2026-01-12")
        assert puzzle.puzzle_number == 2
        assert puzzle.solution == build_puzzle(MINI_PUZZLES[1 % len(MINI_PUZZLES)], 2).solution

    def test_before_epoch_uses_absolute_offset(self):
        puzzle = get_daily_puzzle("2026-01-10")
        assert puzzle.puzzle_number == 0
        assert puzzle.solution == build_puzzle(MINI_PUZZLES[1 % len(MINI_PUZZLES)], 0).solution


class TestChecking:

    def test_check_cell(self, cornered):
        assert check_cell(cornered, 0, 1, 's')
        assert not check_cell(cornered, 0, 1, 'X')
        assert not check_cell(cornered, 0, 0, 'S')   # black square
        assert not check_cell(cornered, 0, 1, '')

    def test_check_solution(self, cornered):
        entries = [[ch or '' for ch in row] for row in cornered.solution]
        assert check_solution(cornered, entries)

        entries[2][2] = 'Z'
        assert not check_solution(cornered, entries)
        assert get_incorrect_cells(cornered, entries) == [(2, 2)]

    def test_empty_board_not_solved(self, cornered):
        entries = [[''] * 5 for _ in range(5)]
        assert not check_solution(cornered, entries)
        assert get_incorrect_cells(cornered, entries) == []

    def test_short_submission_is_not_solved(self):
        puzzle = get_daily_puzzle("2026-01-11")
        entries = [[ch or '' for ch in row] for row in puzzle.solution[:2]]

        assert not check_solution(puzzle, entries)
        assert get_incorrect_cells(puzzle, entries) == []

    def test_ragged_rows(self, cornered):
        entries = [[ch or '' for ch in row] for row in cornered.solution]
        entries[3] = entries[3][:2]
        entries[4] = []

        assert not check_solution(cornered, entries)
        assert get_incorrect_cells(cornered, entries) == []

        entries[3][1] = 'Q'
        assert get_incorrect_cells(cornered, entries) == [(3, 1)]

    def test_off_grid_cell_is_never_correct(self, cornered):
        assert not check_cell(cornered, 5, 0, 'A')
        assert not check_cell(cornered, 0, -1, 'A')
