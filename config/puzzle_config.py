"""
Puzzle Generation Configuration
Shared constants for seeding, numbering and the generators' retry budgets
"""

from datetime import date


class PuzzleConfig:
    """Generation constants. Changing any seed constant changes which puzzle appears on which day."""

    # Puzzle numbering (day 1 of every game)
    EPOCH_DATE = date(2026, 1, 11)

    # PRNG (linear congruential step)
    LCG_MULTIPLIER = 1103515245
    LCG_INCREMENT = 12345
    LCG_MASK = 0x7fffffff

    # Seed derivation
    SEED_OFFSET = 20260111
    CIPHER_DIFFICULTY_MULTIPLIERS = {'easy': 1, 'medium': 2, 'hard': 3}
    CIPHER_MAPPING_SEED_MULTIPLIER = 31337
    GRID_RACK_SEED_MULTIPLIER = 2        # shuffle of a generated rack
    GRID_FALLBACK_SEED_MULTIPLIER = 3    # shuffle of a fallback rack
    SHIFT_DIFFICULTY_WEIGHT = 1000       # ord(difficulty[0]) * weight
    SORT_SEED_STRIDE = 1000              # puzzle_number * stride + attempt
    SORT_TILE_SEED_MULTIPLIER = 31337

    # Cipher
    DERANGEMENT_MAX_ATTEMPTS = 100

    # Grid
    GRID_TARGET_LETTERS = 12
    GRID_LETTER_TOLERANCE = 1            # accept target +/- tolerance
    GRID_MAX_ATTEMPTS = 100
    GRID_WORD_LENGTHS = (3, 4, 5, 6)
    GRID_SHORT_RANGE = (3, 5)
    GRID_MEDIUM_RANGE = (4, 6)

    # Shift
    SHIFT_GRID_SIZES = {'easy': 4, 'medium': 5, 'hard': 5}
    SHIFT_EASY_COLUMN_MOVES = 2
    SHIFT_EASY_ROW_MOVES = 2
    SHIFT_SCRAMBLE_DEPTH = {
        'medium': (6, 10),   # inclusive range
        'hard': (12, 18),
    }

    # Sort
    SORT_MAX_ATTEMPTS = 100
    SORT_MAX_MISTAKES = 4

    # Daily challenge
    CHALLENGE_UNLOCK_HOUR = 10           # 10:00 local time
    DAILY_GAMES = ('cipher', 'gridgram', 'shift')
    CHALLENGE_COMPLETION_STARS = 10
