"""
Scoring Service
Completion stars and time formatting shared by every game.
Grid word scoring lives in grid_validator and is re-exported here.
"""

from config import ScoringConfig
from models.puzzle import Difficulty
from services.grid_validator import calculate_score, score_word

__all__ = ['calculate_stars_earned', 'format_elapsed', 'format_seconds', 'calculate_score', 'score_word']


def calculate_stars_earned(difficulty, elapsed_ms: int) -> int:
    """
    3 stars at or under the tightest threshold, 2 under the next,
    1 for any other completion (never 0).
    """
    thresholds = ScoringConfig.STAR_THRESHOLDS[Difficulty.parse(difficulty).value]
    if elapsed_ms <= thresholds['three']:
        return 3
    if elapsed_ms <= thresholds['two']:
        return 2
    return ScoringConfig.MIN_STARS


def format_seconds(total_seconds: int) -> str:
    """M:SS"""
    total_seconds = max(0, int(total_seconds))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def format_elapsed(elapsed_ms: int) -> str:
    """M:SS from milliseconds (partial seconds are dropped)"""
    return format_seconds(int(elapsed_ms // 1000))
