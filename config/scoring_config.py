"""
Scoring Configuration
Star thresholds and word-score constants
"""


class ScoringConfig:
    """Scoring constants"""

    # Completion time thresholds in milliseconds (3 / 2 / 1 star ceilings)
    STAR_THRESHOLDS = {
        'easy': {'three': 30000, 'two': 60000, 'one': 120000},
        'medium': {'three': 120000, 'two': 240000, 'one': 480000},
        'hard': {'three': 300000, 'two': 600000, 'one': 900000},
    }
    MIN_STARS = 1  # any completion earns at least one star
    MAX_STARS = 3

    # Grid word scoring
    POINTS_PER_LETTER = 10
    LENGTH_BONUSES = [   # (min length, bonus) - additive
        (5, 20),
        (6, 30),
        (7, 50),
    ]
    EFFICIENCY_BONUSES = [   # (max word count, bonus) - first match wins
        (3, 50),
        (4, 25),
    ]
    LONG_WORD_MIN_LENGTH = 6
    LONG_WORD_BONUS = 30

    # Cipher completion score (daily challenge)
    CIPHER_BASE_SCORE = 1000
    CIPHER_MIN_SCORE = 100
    CIPHER_SECONDS_PER_POINT = 2
