"""
Daily Seed Service
Maps calendar dates to seeds and puzzle numbers so every player gets the same puzzle.

The ISO date string (YYYY-MM-DD, local calendar date) is the puzzle identity.
Each game keeps its own seed formula; they differ on purpose and must not be unified,
otherwise historical dates would show different puzzles.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from config import PuzzleConfig
from models.puzzle import Difficulty


DateLike = Union[date, datetime, str]

_MS_PER_SECOND = 1000


def _to_int32(value: int) -> int:
    """Truncate to a signed 32-bit integer (two's complement wrap)"""
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def to_date(value: Optional[DateLike] = None) -> date:
    """Normalize a date, datetime or ISO string to a calendar date (no timezone conversion)"""
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        # fromisoformat raises ValueError for malformed input
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Expected date, datetime or ISO string, got {type(value).__name__}")


def to_date_string(value: Optional[DateLike] = None) -> str:
    """YYYY-MM-DD for the given date"""
    return to_date(value).isoformat()


def hash_date_string(date_str: str) -> int:
    """
    Polynomial string hash: hash = hash * 31 + charCode, kept in signed 32-bit range.
    """
    h = 0
    for ch in date_str:
        h = _to_int32((h << 5) - h + ord(ch))
    return h


# --- Per-game seeds ---

def cipher_seed(value: DateLike, difficulty) -> int:
    """abs(hash * difficulty multiplier) + offset"""
    difficulty = Difficulty.parse(difficulty)
    multiplier = PuzzleConfig.CIPHER_DIFFICULTY_MULTIPLIERS[difficulty.value]
    h = hash_date_string(to_date_string(value))
    return abs(h * multiplier) + PuzzleConfig.SEED_OFFSET


def cipher_mapping_seed(seed: int) -> int:
    return seed * PuzzleConfig.CIPHER_MAPPING_SEED_MULTIPLIER


def grid_seed(value: DateLike) -> int:
    """abs(hash) + offset"""
    return abs(hash_date_string(to_date_string(value))) + PuzzleConfig.SEED_OFFSET


def shift_seed(value: DateLike, difficulty) -> int:
    """abs(hash + charCode(first letter of difficulty) * 1000), no offset"""
    difficulty = Difficulty.parse(difficulty)
    h = hash_date_string(to_date_string(value))
    return abs(h + ord(difficulty.value[0]) * PuzzleConfig.SHIFT_DIFFICULTY_WEIGHT)


def sort_seed(puzzle_number: int, attempt: int = 0) -> int:
    return puzzle_number * PuzzleConfig.SORT_SEED_STRIDE + attempt


# --- Numbering ---

def days_since_epoch(value: Optional[DateLike] = None) -> int:
    return (to_date(value) - PuzzleConfig.EPOCH_DATE).days


def puzzle_number(value: Optional[DateLike] = None) -> int:
    """Sequential puzzle number; the epoch date is puzzle #1"""
    return days_since_epoch(value) + 1


# --- Daily rollover ---

def effective_date(now: Optional[datetime] = None) -> str:
    """
    The daily challenge unlocks at 10:00 local time.
    Before that the previous day's challenge is still the current one.
    """
    now = now or datetime.now()
    day = now.date()
    if now.hour < PuzzleConfig.CHALLENGE_UNLOCK_HOUR:
        day -= timedelta(days=1)
    return day.isoformat()


def is_same_day(puzzle_date: str, today: Optional[DateLike] = None) -> bool:
    return puzzle_date == to_date_string(today)


def time_until_next_puzzle(now: Optional[datetime] = None) -> timedelta:
    """Time left until the next local midnight"""
    now = now or datetime.now()
    tomorrow = datetime.combine(now.date() + timedelta(days=1), datetime.min.time())
    if now.tzinfo is not None:
        tomorrow = tomorrow.replace(tzinfo=now.tzinfo)
    return tomorrow - now


def format_time_remaining(remaining: Union[timedelta, int, float]) -> str:
    """HH:MM:SS for a timedelta or a millisecond count"""
    if isinstance(remaining, timedelta):
        total_seconds = int(remaining.total_seconds())
    else:
        total_seconds = int(remaining // _MS_PER_SECOND)
    total_seconds = max(0, total_seconds)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
