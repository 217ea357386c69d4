"""
Grid Generator Service
Builds a connected crossword first, then hands the player only its letters.

Generating the solution first is what guarantees every daily rack is solvable.
"""

from typing import List, Optional, Tuple

from config import PuzzleConfig
from data.grid_fallbacks import GRID_FALLBACKS
from models.grid import GridPuzzle, GridSolution, PlacedWord, WordDirection
from models.puzzle import GenerationResult, GenerationStatus
from services import daily_seed
from services.dictionary import Dictionary, get_default_dictionary
from services.seeded_random import SeededRandom


Crossing = Tuple[int, int, WordDirection]


class SolutionBuilder:
    """
    Scratch crossword for one generation attempt.

    Responsibilities:
    1. Hold the occupied cells
    2. Check a placement before committing it (no silent overwrites)
    3. Find every legal crossing of a candidate word with the placed words
    """

    def __init__(self):
        self.solution = GridSolution()

    @property
    def letter_count(self) -> int:
        return self.solution.letter_count

    def can_place(self, word: str, row: int, col: int, direction: WordDirection) -> bool:
        """Every cell the word would cover is empty or already holds the same letter"""
        dr, dc = direction.delta
        for i, letter in enumerate(word):
            existing = self.solution.grid.get((row + i * dr, col + i * dc))
            if existing and existing != letter:
                return False
        return True

    def place(self, word: str, row: int, col: int, direction: WordDirection) -> PlacedWord:
        placed = PlacedWord(word=word, row=row, col=col, direction=direction)
        for (r, c), letter in zip(placed.cells(), word):
            self.solution.grid[(r, c)] = letter
        self.solution.words.append(placed)
        return placed

    def find_crossings(self, word: str) -> List[Crossing]:
        """
        All anchors where `word` crosses a placed word perpendicularly through a shared letter.

        Order: placed words in placement order, then letters of the placed word,
        then letters of the candidate.
        """
        crossings: List[Crossing] = []
        for placed in self.solution.words:
            cross_dir = placed.direction.crossing
            cdr, cdc = cross_dir.delta
            for (r, c), placed_letter in zip(placed.cells(), placed.word):
                for j, letter in enumerate(word):
                    if letter != placed_letter:
                        continue
                    anchor_row, anchor_col = r - j * cdr, c - j * cdc
                    if self.can_place(word, anchor_row, anchor_col, cross_dir):
                        crossings.append((anchor_row, anchor_col, cross_dir))
        return crossings


def _in_target_range(count: int, target: int) -> bool:
    tolerance = PuzzleConfig.GRID_LETTER_TOLERANCE
    return target - tolerance <= count <= target + tolerance


def generate_solution(
    seed: int,
    dictionary: Optional[Dictionary] = None,
    target_letters: int = PuzzleConfig.GRID_TARGET_LETTERS
) -> GenerationResult[GridSolution]:
    """
    Seeded crossword with roughly `target_letters` occupied cells.

    Returns:
        GenerationResult tagged GENERATED (value = GridSolution) or
        EXHAUSTED after GRID_MAX_ATTEMPTS attempts (value = None)
    """
    if dictionary is None:
        dictionary = get_default_dictionary()
    rng = SeededRandom(seed)

    words = dictionary.generation_pool(PuzzleConfig.GRID_WORD_LENGTHS)
    short_min, short_max = PuzzleConfig.GRID_SHORT_RANGE
    medium_min, medium_max = PuzzleConfig.GRID_MEDIUM_RANGE
    short_words = [w for w in words if short_min <= len(w) <= short_max]
    medium_words = [w for w in words if medium_min <= len(w) <= medium_max]

    if not medium_words:
        return GenerationResult(status=GenerationStatus.EXHAUSTED, attempts=0)

    for attempt in range(1, PuzzleConfig.GRID_MAX_ATTEMPTS + 1):
        builder = SolutionBuilder()

        start_word = rng.shuffle(medium_words)[0]
        builder.place(start_word, 0, 0, WordDirection.HORIZONTAL)

        for word in rng.shuffle(short_words + medium_words):
            if builder.letter_count >= target_letters:
                break
            if builder.solution.has_word(word):
                continue

            crossings = builder.find_crossings(word)
            if crossings:
                row, col, direction = crossings[rng.index(len(crossings))]
                builder.place(word, row, col, direction)

        if _in_target_range(builder.letter_count, target_letters):
            return GenerationResult(
                status=GenerationStatus.GENERATED,
                value=builder.solution,
                attempts=attempt
            )

    return GenerationResult(
        status=GenerationStatus.EXHAUSTED,
        attempts=PuzzleConfig.GRID_MAX_ATTEMPTS
    )


def get_fallback_letters(seed: int) -> List[str]:
    """Verified fallback rack for this seed, shuffled with seed * 3"""
    fallback = GRID_FALLBACKS[seed % len(GRID_FALLBACKS)]
    rng = SeededRandom(seed * PuzzleConfig.GRID_FALLBACK_SEED_MULTIPLIER)
    return rng.shuffle(list(fallback['letters']))


def get_daily_puzzle(value=None, dictionary: Optional[Dictionary] = None) -> GridPuzzle:
    """
    The daily letter rack. Always returns a solvable puzzle:
    a generated one when possible, otherwise a verified fallback.
    """
    date_str = daily_seed.to_date_string(value)
    seed = daily_seed.grid_seed(date_str)
    number = daily_seed.puzzle_number(date_str)

    result = generate_solution(seed, dictionary)

    if result.is_generated:
        rng = SeededRandom(seed * PuzzleConfig.GRID_RACK_SEED_MULTIPLIER)
        return GridPuzzle(
            letters=rng.shuffle(result.value.letters),
            seed=seed,
            puzzle_number=number,
            status=GenerationStatus.GENERATED
        )

    print(f"⚠ Grid generation exhausted for {date_str} after {result.attempts} attempts, using fallback")
    return GridPuzzle(
        letters=get_fallback_letters(seed),
        seed=seed,
        puzzle_number=number,
        status=GenerationStatus.FALLBACK
    )
