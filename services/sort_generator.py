"""
Sort Generator Service
Grouping puzzles: four categories, one per difficulty tier, no word shared between groups.

Two sources:
1. Procedural - templates from data/category_templates.py, seeded per day
2. Hand-crafted bank - data/sort_puzzles.py, cycled by puzzle number
"""

from typing import Dict, Iterable, List, Optional, Sequence, Set

from config import PuzzleConfig
from data.category_templates import CATEGORY_TEMPLATES
from data.sort_puzzles import SORT_PUZZLES
from models.puzzle import GenerationResult, GenerationStatus
from models.sort import (
    GROUP_COUNT, GROUP_SIZE, TIERS,
    CategoryTemplate, SortGroup, SortPuzzle
)
from services import daily_seed
from services.seeded_random import SeededRandom


FALLBACK_GROUPS = (
    SortGroup("Colors", ("RED", "BLUE", "GREEN", "YELLOW"), 1),
    SortGroup("Fruits", ("APPLE", "BANANA", "CHERRY", "GRAPE"), 2),
    SortGroup("Body parts", ("HAND", "FOOT", "HEAD", "KNEE"), 3),
    SortGroup("Also names", ("ROSE", "VIOLET", "LILY", "IRIS"), 4),
)


def get_templates_by_difficulty(
    difficulty: int,
    templates: Sequence[CategoryTemplate] = CATEGORY_TEMPLATES
) -> List[CategoryTemplate]:
    return [t for t in templates if t.difficulty == difficulty]


def select_words_from_category(
    template: CategoryTemplate,
    used_words: Set[str],
    rng: SeededRandom
) -> Optional[List[str]]:
    """Four unused words from the template's pool, or None if fewer than four are free"""
    available = [w for w in template.words if w.upper() not in used_words]
    if len(available) < GROUP_SIZE:
        return None
    return [w.upper() for w in rng.sample(available, GROUP_SIZE)]


def generate_puzzle(
    seed: int,
    templates: Sequence[CategoryTemplate] = CATEGORY_TEMPLATES
) -> Optional[SortPuzzle]:
    """
    One group per tier, easiest first.

    Returns None when some tier has no template with four free words;
    the caller retries with another seed.
    """
    rng = SeededRandom(seed)
    selected_ids: Set[str] = set()
    used_words: Set[str] = set()
    groups: List[SortGroup] = []

    for tier in TIERS:
        group = None
        for template in rng.shuffle(get_templates_by_difficulty(tier, templates)):
            if template.id in selected_ids:
                continue
            words = select_words_from_category(template, used_words, rng)
            if words:
                selected_ids.add(template.id)
                used_words.update(words)
                group = SortGroup(category=template.category, words=tuple(words), difficulty=tier)
                break

        if group is None:
            return None
        groups.append(group)

    return SortPuzzle(puzzle_number=0, groups=tuple(groups))


def generate_daily_puzzle(value=None) -> GenerationResult[SortPuzzle]:
    """
    Procedural puzzle for a date.

    Tries SORT_MAX_ATTEMPTS seed variants, then falls back to a fixed puzzle.
    """
    number = daily_seed.puzzle_number(value)

    for attempt in range(PuzzleConfig.SORT_MAX_ATTEMPTS):
        puzzle = generate_puzzle(daily_seed.sort_seed(number, attempt))
        if puzzle:
            return GenerationResult(
                status=GenerationStatus.GENERATED,
                value=SortPuzzle(puzzle_number=number, groups=puzzle.groups),
                attempts=attempt + 1
            )

    print(f"⚠ Sort generation failed for puzzle #{number}, using fallback")
    return GenerationResult(
        status=GenerationStatus.FALLBACK,
        value=SortPuzzle(puzzle_number=number, groups=FALLBACK_GROUPS),
        attempts=PuzzleConfig.SORT_MAX_ATTEMPTS
    )


def generate_puzzle_batch(count: int, start_seed: int = 1) -> List[SortPuzzle]:
    """Pre-validation batch: seeds start_seed, start_seed + 1000, ... (failed seeds are skipped)"""
    puzzles = []
    for i in range(count):
        puzzle = generate_puzzle(start_seed + i * PuzzleConfig.SORT_SEED_STRIDE)
        if puzzle:
            puzzles.append(SortPuzzle(puzzle_number=i + 1, groups=puzzle.groups))
    return puzzles


def validate_puzzle(puzzle: SortPuzzle) -> bool:
    """Four groups of four, 16 distinct words, one group per tier"""
    if len(puzzle.groups) != GROUP_COUNT:
        return False

    all_words: Set[str] = set()
    for group in puzzle.groups:
        if len(group.words) != GROUP_SIZE:
            return False
        for word in group.words:
            word = word.upper()
            if word in all_words:
                return False
            all_words.add(word)

    tiers = sorted(group.difficulty for group in puzzle.groups)
    return len(all_words) == GROUP_COUNT * GROUP_SIZE and tuple(tiers) == TIERS


# === Hand-crafted bank ===

def get_puzzle(number: int) -> Optional[SortPuzzle]:
    """Bank puzzle by its 1-based bank number, None if out of range"""
    if 1 <= number <= len(SORT_PUZZLES):
        return SortPuzzle(puzzle_number=number, groups=SORT_PUZZLES[number - 1])
    return None


def get_daily_puzzle(value=None) -> SortPuzzle:
    """Bank puzzle for a date, cycling; keeps the date's puzzle number"""
    number = daily_seed.puzzle_number(value)
    index = (number - 1) % len(SORT_PUZZLES)
    return SortPuzzle(puzzle_number=number, groups=SORT_PUZZLES[index])


def get_shuffled_words(puzzle: SortPuzzle, seed: Optional[int] = None) -> List[str]:
    """
    Board order of the 16 words.

    Uses the raw LCG state (`state % (i + 1)`) rather than the float stream,
    matching the clients' tile order. Default seed: puzzle_number * 31337.
    """
    if seed is None:
        seed = puzzle.puzzle_number * PuzzleConfig.SORT_TILE_SEED_MULTIPLIER

    words = puzzle.all_words()
    rng = SeededRandom(seed)
    for i in range(len(words) - 1, 0, -1):
        j = rng.next_state() % (i + 1)
        words[i], words[j] = words[j], words[i]
    return words


def check_guess(puzzle: SortPuzzle, guess: Iterable[str]) -> Optional[SortGroup]:
    """The group whose word set equals the guess exactly (case-insensitive), or None"""
    guess = list(guess)
    if len(guess) != GROUP_SIZE:
        return None

    guess_set = {w.upper() for w in guess}
    for group in puzzle.groups:
        if guess_set == group.word_set():
            return group
    return None


def group_overlap(puzzle: SortPuzzle, guess: Iterable[str]) -> Dict[str, int]:
    """How many guessed words fall in each category"""
    guess_set = {w.upper() for w in guess}
    return {group.category: len(guess_set & group.word_set()) for group in puzzle.groups}
