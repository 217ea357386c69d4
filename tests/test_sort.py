"""
Tests for the sort generator, bank and game session
"""

import pytest

from data.category_templates import CATEGORY_TEMPLATES
from data.sort_puzzles import SORT_PUZZLES
from models.puzzle import GenerationStatus
from models.sort import CategoryTemplate, GuessOutcome, SortGroup, SortPuzzle, SortStatus, TIERS
from services.sort_game import SortSession
from services.sort_generator import (
    FALLBACK_GROUPS,
    check_guess,
    generate_daily_puzzle,
    generate_puzzle,
    generate_puzzle_batch,
    get_daily_puzzle,
    get_puzzle,
    get_shuffled_words,
    group_overlap,
    validate_puzzle,
)


@pytest.fixture
def fallback_puzzle():
    """Colors / Fruits / Body parts / Also names"""
    return SortPuzzle(puzzle_number=7, groups=FALLBACK_GROUPS)


class TestTemplates:

    def test_every_tier_has_templates(self):
        for tier in TIERS:
            assert any(t.difficulty == tier for t in CATEGORY_TEMPLATES)

    def test_template_ids_unique(self):
        ids = [t.id for t in CATEGORY_TEMPLATES]
        assert len(ids) == len(set(ids))

    def test_pools_large_enough(self):
        for template in CATEGORY_TEMPLATES:
            assert len(template.words) >= 4, template.id


class TestGeneratePuzzle:

    @pytest.mark.parametrize("seed", [0, 1, 1000, 12345, 99999])
    def test_generated_puzzles_are_valid(self, seed):
        puzzle = generate_puzzle(seed)
        if puzzle is not None:
            assert validate_puzzle(puzzle)
            assert [g.difficulty for g in puzzle.groups] == [1, 2, 3, 4]

    def test_deterministic(self):
        assert generate_puzzle(4242) == generate_puzzle(4242)

    def test_fails_when_tier_cannot_be_filled(self):
        templates = [
            CategoryTemplate('a', "A", 1, ('ONE', 'TWO', 'THREE', 'FOUR')),
            CategoryTemplate('b', "B", 2, ('FIVE', 'SIX', 'SEVEN', 'EIGHT')),
            CategoryTemplate('c', "C", 3, ('NINE', 'TEN', 'ELEVEN', 'TWELVE')),
            # tier 4 pool overlaps tier 1 completely
            CategoryTemplate('d', "D", 4, ('ONE', 'TWO', 'THREE', 'FOUR')),
        ]
        assert generate_puzzle(1, templates) is None

    def test_daily_generation(self):
        result = generate_daily_puzzle("2026-01-11")

        assert result.status in (GenerationStatus.GENERATED, GenerationStatus.FALLBACK)
        assert result.value.puzzle_number == 1
        assert validate_puzzle(result.value)

    def test_batch(self):
        puzzles = generate_puzzle_batch(5)
        assert len(puzzles) <= 5
        for puzzle in puzzles:
            assert validate_puzzle(puzzle)


class TestValidatePuzzle:

    def test_fallback_is_valid(self, fallback_puzzle):
        assert validate_puzzle(fallback_puzzle)

    def test_duplicate_word_is_invalid(self, fallback_puzzle):
        groups = list(fallback_puzzle.groups)
        colors = groups[0]
        groups[0] = type(colors)(colors.category, ("RED", "BLUE", "GREEN", "APPLE"), 1)
        assert not validate_puzzle(SortPuzzle(1, tuple(groups)))

    def test_bank_puzzles_are_valid(self):
        for i, groups in enumerate(SORT_PUZZLES):
            assert validate_puzzle(SortPuzzle(i + 1, groups)), f"bank puzzle {i + 1}"

    @pytest.mark.parametrize("number", range(1, len(SORT_PUZZLES) + 1))
    def test_bank_puzzles_are_winnable(self, number):
        session = SortSession(get_puzzle(number))
        outcomes = [session.submit_guess(list(group.words)).outcome for group in session.puzzle.groups]

        assert outcomes == [GuessOutcome.CORRECT] * 4
        assert session.status == SortStatus.WON


class TestBank:

    def test_daily_puzzle_cycles(self):
        first = get_daily_puzzle("2026-01-11")
        assert first.puzzle_number == 1
        assert first.groups == SORT_PUZZLES[0]

        wrapped = get_daily_puzzle(f"2026-01-{11 + len(SORT_PUZZLES)}")
        assert wrapped.groups == SORT_PUZZLES[0]
        assert wrapped.puzzle_number == len(SORT_PUZZLES) + 1

    def test_before_epoch_still_selects(self):
        puzzle = get_daily_puzzle("2026-01-10")
        assert puzzle.puzzle_number == 0
        assert puzzle.groups == SORT_PUZZLES[-1]

    def test_get_puzzle(self):
        assert get_puzzle(1).groups == SORT_PUZZLES[0]
        assert get_puzzle(0) is None
        assert get_puzzle(len(SORT_PUZZLES) + 1) is None


class TestCheckGuess:

    def test_exact_match(self, fallback_puzzle):
        group = check_guess(fallback_puzzle, ["red", "Blue", "GREEN", "yellow"])
        assert group is not None
        assert group.category == "Colors"

    def test_order_does_not_matter(self, fallback_puzzle):
        assert check_guess(fallback_puzzle, ["KNEE", "HEAD", "FOOT", "HAND"]).category == "Body parts"

    def test_three_words(self, fallback_puzzle):
        assert check_guess(fallback_puzzle, ["RED", "BLUE", "GREEN"]) is None

    def test_mixed_groups(self, fallback_puzzle):
        assert check_guess(fallback_puzzle, ["RED", "BLUE", "GREEN", "APPLE"]) is None

    def test_group_overlap(self, fallback_puzzle):
        overlap = group_overlap(fallback_puzzle, ["RED", "BLUE", "GREEN", "APPLE"])
        assert overlap["Colors"] == 3
        assert overlap["Fruits"] == 1


class TestShuffledWords:

    def test_permutation(self, fallback_puzzle):
        words = get_shuffled_words(fallback_puzzle)
        assert sorted(words) == sorted(fallback_puzzle.all_words())

    def test_default_seed(self, fallback_puzzle):
        assert get_shuffled_words(fallback_puzzle) == get_shuffled_words(fallback_puzzle, 7 * 31337)


class TestSortSession:

    @pytest.fixture
    def session(self, fallback_puzzle):
        return SortSession(fallback_puzzle)

    def test_correct_guess(self, session):
        result = session.submit_guess(["RED", "BLUE", "GREEN", "YELLOW"])

        assert result.outcome == GuessOutcome.CORRECT
        assert result.group.category == "Colors"
        assert len(session.words) == 12
        assert session.solved_groups[0].solved_order == 1
        assert session.status == SortStatus.IN_PROGRESS

    def test_one_away(self, session):
        result = session.submit_guess(["RED", "BLUE", "GREEN", "APPLE"])
        assert result.outcome == GuessOutcome.ONE_AWAY
        assert result.mistakes == 1
        assert result.remaining_mistakes == 3

    def test_plain_miss(self, session):
        result = session.submit_guess(["RED", "BLUE", "APPLE", "BANANA"])
        assert result.outcome == GuessOutcome.INCORRECT

    def test_repeat_guess_costs_nothing(self, session):
        session.submit_guess(["RED", "BLUE", "GREEN", "APPLE"])
        result = session.submit_guess(["apple", "green", "blue", "red"])

        assert result.outcome == GuessOutcome.ALREADY_GUESSED
        assert session.mistakes == 1

    def test_invalid_guesses(self, session):
        assert session.submit_guess(["RED", "BLUE"]).outcome == GuessOutcome.INVALID
        assert session.submit_guess(["RED", "RED", "BLUE", "GREEN"]).outcome == GuessOutcome.INVALID
        assert session.submit_guess(["RED", "BLUE", "GREEN", "PURPLE"]).outcome == GuessOutcome.INVALID
        assert session.mistakes == 0

    def test_win(self, session):
        for group in reversed(FALLBACK_GROUPS):
            session.submit_guess(list(group.words))

        assert session.status == SortStatus.WON
        assert session.words == []
        assert [s.solved_order for s in session.solved_groups] == [1, 2, 3, 4]
        assert session.solved_groups[0].group.category == "Also names"

    def test_loss_reveals_remaining_groups(self, session):
        session.submit_guess(["ROSE", "VIOLET", "LILY", "IRIS"])
        for fourth in ("APPLE", "BANANA", "CHERRY"):
            session.submit_guess(["RED", "BLUE", "GREEN", fourth])
        result = session.submit_guess(["HAND", "FOOT", "HEAD", "GRAPE"])

        assert session.status == SortStatus.LOST
        assert session.is_lost
        assert [s.group.category for s in result.revealed] == ["Colors", "Fruits", "Body parts"]
        assert all(s.revealed for s in result.revealed)
        assert [s.solved_order for s in session.solved_groups] == [1, 2, 3, 4]
        assert session.words == []

    def test_no_guesses_after_game_over(self, session):
        for fourth in ("APPLE", "BANANA", "CHERRY", "GRAPE"):
            session.submit_guess(["RED", "BLUE", "GREEN", fourth])

        result = session.submit_guess(["RED", "BLUE", "GREEN", "YELLOW"])
        assert result.outcome == GuessOutcome.GAME_OVER

    def test_groups_sharing_a_label_stay_separate(self):
        groups = (
            SortGroup("Things", ("RED", "BLUE", "GREEN", "YELLOW"), 1),
            SortGroup("Things", ("APPLE", "BANANA", "CHERRY", "GRAPE"), 2),
            FALLBACK_GROUPS[2],
            FALLBACK_GROUPS[3],
        )
        session = SortSession(SortPuzzle(puzzle_number=1, groups=groups))
        session.submit_guess(["RED", "BLUE", "GREEN", "YELLOW"])

        assert session.unsolved_groups() == list(groups[1:])
        result = session.submit_guess(["APPLE", "BANANA", "CHERRY", "ROSE"])
        assert result.outcome == GuessOutcome.ONE_AWAY
