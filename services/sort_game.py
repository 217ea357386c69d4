"""
Sort Game Session
Play-through state for one grouping puzzle: solved groups, mistakes, loss and reveal.
"""

from typing import FrozenSet, List, Optional, Sequence, Set

from config import PuzzleConfig
from models.sort import (
    GROUP_COUNT, GROUP_SIZE,
    GuessOutcome, GuessResult, SolvedGroup, SortGroup, SortPuzzle, SortStatus
)
from services.seeded_random import SeededRandom
from services.sort_generator import check_guess, get_shuffled_words


class SortSession:
    """
    One player's attempt at a sort puzzle.

    Flow:
    1. Board starts with the 16 words in seeded tile order
    2. Each correct guess removes its group from the board
    3. Each wrong guess costs a mistake; at max_mistakes the game is lost
       and the remaining groups are revealed in puzzle order
    """

    def __init__(
        self,
        puzzle: SortPuzzle,
        max_mistakes: int = PuzzleConfig.SORT_MAX_MISTAKES,
        tile_seed: Optional[int] = None
    ):
        self.puzzle = puzzle
        self.max_mistakes = max_mistakes
        self.words: List[str] = get_shuffled_words(puzzle, tile_seed)
        self.solved_groups: List[SolvedGroup] = []
        self.mistakes = 0
        self._guesses: Set[FrozenSet[str]] = set()

    # === State ===

    @property
    def status(self) -> SortStatus:
        if any(solved.revealed for solved in self.solved_groups):
            return SortStatus.LOST
        if self.mistakes >= self.max_mistakes:
            return SortStatus.LOST
        if len(self.solved_groups) == GROUP_COUNT:
            return SortStatus.WON
        return SortStatus.IN_PROGRESS

    @property
    def is_complete(self) -> bool:
        return self.status != SortStatus.IN_PROGRESS

    @property
    def is_lost(self) -> bool:
        return self.status == SortStatus.LOST

    @property
    def remaining_mistakes(self) -> int:
        return max(0, self.max_mistakes - self.mistakes)

    def unsolved_groups(self) -> List[SortGroup]:
        solved = [s.group for s in self.solved_groups]
        return [g for g in self.puzzle.groups if g not in solved]

    # === Actions ===

    def submit_guess(self, guess: Sequence[str]) -> GuessResult:
        """Submit four words from the board"""
        if self.is_complete:
            return self._result(GuessOutcome.GAME_OVER)

        words = [w.upper() for w in guess]
        if len(words) != GROUP_SIZE or len(set(words)) != GROUP_SIZE:
            return self._result(GuessOutcome.INVALID)
        if any(w not in self.words for w in words):
            return self._result(GuessOutcome.INVALID)

        key = frozenset(words)
        if key in self._guesses:
            return self._result(GuessOutcome.ALREADY_GUESSED)
        self._guesses.add(key)

        group = check_guess(self.puzzle, words)
        if group:
            self.solved_groups.append(
                SolvedGroup(group=group, solved_order=len(self.solved_groups) + 1)
            )
            self.words = [w for w in self.words if w not in key]
            return self._result(GuessOutcome.CORRECT, group=group)

        self.mistakes += 1
        outcome = GuessOutcome.ONE_AWAY if self._is_one_away(key) else GuessOutcome.INCORRECT

        revealed = []
        if self.mistakes >= self.max_mistakes:
            revealed = self._reveal_remaining()
        return self._result(outcome, revealed=revealed)

    def shuffle_board(self, rng: SeededRandom) -> List[str]:
        """Reorder the remaining tiles"""
        self.words = rng.shuffle(self.words)
        return self.words

    # === Internals ===

    def _is_one_away(self, guess: FrozenSet[str]) -> bool:
        return any(
            len(guess & group.word_set()) == GROUP_SIZE - 1
            for group in self.unsolved_groups()
        )

    def _reveal_remaining(self) -> List[SolvedGroup]:
        revealed = []
        for group in self.unsolved_groups():
            solved = SolvedGroup(
                group=group,
                solved_order=len(self.solved_groups) + 1,
                revealed=True
            )
            self.solved_groups.append(solved)
            revealed.append(solved)
        self.words = []
        return revealed

    def _result(self, outcome: GuessOutcome, group: Optional[SortGroup] = None,
                revealed: Optional[List[SolvedGroup]] = None) -> GuessResult:
        return GuessResult(
            outcome=outcome,
            group=group,
            mistakes=self.mistakes,
            remaining_mistakes=self.remaining_mistakes,
            revealed=revealed or []
        )
