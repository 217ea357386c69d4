"""
Daily Challenge Service
Three-game daily challenge: completion tracking, composite score and streaks.

Pure functions over state objects; persisting them is the caller's job.
The challenge day rolls over at 10:00 local time (see daily_seed.effective_date).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from config import PuzzleConfig
from services import daily_seed


GAME_NAMES = {
    'cipher': 'CIPHER',
    'gridgram': 'GRIDGRAM',
    'shift': 'SHIFT',
}


@dataclass(frozen=True)
class GameCompletion:
    game_id: str
    completed: bool = True
    score: int = 0
    time: int = 0                 # elapsed, in the game's own unit
    moves: Optional[int] = None
    timestamp: Optional[int] = None   # epoch ms


@dataclass
class DailyChallengeState:
    date: str                     # effective date, YYYY-MM-DD
    completions: Dict[str, GameCompletion] = field(default_factory=dict)
    is_fully_completed: bool = False
    final_completion_timestamp: Optional[int] = None
    composite_score: int = 0


@dataclass
class GlobalStats:
    current_streak: int = 0
    longest_streak: int = 0
    total_challenges_completed: int = 0
    total_stars: int = 0
    last_completed_date: Optional[str] = None


def get_daily_games(date_str: Optional[str] = None) -> Tuple[str, ...]:
    """Game ids in today's challenge (currently the same three every day)"""
    return PuzzleConfig.DAILY_GAMES


def load_challenge_state(saved: Optional[DailyChallengeState], date_str: str) -> DailyChallengeState:
    """The saved state if it belongs to `date_str`, otherwise a fresh one"""
    if saved is not None and saved.date == date_str:
        return saved
    return DailyChallengeState(date=date_str)


def _previous_day(date_str: str) -> str:
    return (daily_seed.to_date(date_str) - timedelta(days=1)).isoformat()


def register_completion(
    state: Optional[DailyChallengeState],
    stats: Optional[GlobalStats],
    game_id: str,
    score: int,
    time: int,
    moves: Optional[int] = None,
    now: Optional[datetime] = None
) -> Tuple[DailyChallengeState, GlobalStats]:
    """
    Record one finished game and return the new (state, stats).

    When the last daily game is finished:
    - composite score = floor(sum of scores / number of daily games)
    - +10 stars, one more challenge completed
    - streak continues if the previous completion was yesterday,
      restarts at 1 unless it was already counted today
    """
    now = now or datetime.now()
    date_str = daily_seed.effective_date(now)
    timestamp = int(now.timestamp() * 1000)

    state = load_challenge_state(state, date_str)
    state = replace(state, completions=dict(state.completions))
    stats = replace(stats) if stats is not None else GlobalStats()

    state.completions[game_id] = GameCompletion(
        game_id=game_id,
        completed=True,
        score=score,
        time=time,
        moves=moves,
        timestamp=timestamp
    )

    daily_games = get_daily_games(date_str)
    finished = [
        state.completions[g] for g in daily_games
        if g in state.completions and state.completions[g].completed
    ]

    if not state.is_fully_completed and len(finished) == len(daily_games):
        state.is_fully_completed = True
        state.final_completion_timestamp = timestamp
        state.composite_score = sum(c.score for c in finished) // len(daily_games)

        stats.total_challenges_completed += 1
        stats.total_stars += PuzzleConfig.CHALLENGE_COMPLETION_STARS

        if stats.last_completed_date == _previous_day(date_str):
            stats.current_streak += 1
        elif stats.last_completed_date != date_str:
            stats.current_streak = 1

        stats.longest_streak = max(stats.longest_streak, stats.current_streak)
        stats.last_completed_date = date_str

    return state, stats


def get_score_breakdown(state: DailyChallengeState) -> List[dict]:
    return [
        {
            'id': c.game_id,
            'name': GAME_NAMES.get(c.game_id, c.game_id),
            'score': c.score,
            'completed': c.completed,
        }
        for c in state.completions.values()
    ]
