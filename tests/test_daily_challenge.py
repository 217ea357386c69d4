"""
Tests for the daily challenge: completion, composite score, streaks
"""

from datetime import datetime

import pytest

from services.daily_challenge import (
    DailyChallengeState,
    GlobalStats,
    get_daily_games,
    get_score_breakdown,
    load_challenge_state,
    register_completion,
)


def play_all(state, stats, now, scores=(900, 600, 301)):
    for game_id, score in zip(get_daily_games(), scores):
        state, stats = register_completion(state, stats, game_id, score, time=60, now=now)
    return state, stats


class TestDailyChallenge:

    @pytest.fixture
    def morning(self):
        return datetime(2026, 3, 5, 11, 30)

    def test_daily_games(self):
        assert get_daily_games() == ('cipher', 'gridgram', 'shift')

    def test_partial_completion(self, morning):
        state, stats = register_completion(None, None, 'cipher', 900, 60, now=morning)

        assert state.date == "2026-03-05"
        assert not state.is_fully_completed
        assert state.completions['cipher'].score == 900
        assert stats.total_challenges_completed == 0

    def test_full_completion(self, morning):
        state, stats = play_all(None, None, morning)

        assert state.is_fully_completed
        assert state.composite_score == (900 + 600 + 301) // 3
        assert stats.total_challenges_completed == 1
        assert stats.total_stars == 10
        assert stats.current_streak == 1
        assert stats.longest_streak == 1
        assert stats.last_completed_date == "2026-03-05"

    def test_replaying_a_game_does_not_recount(self, morning):
        state, stats = play_all(None, None, morning)
        state, stats = register_completion(state, stats, 'shift', 1000, 10, now=morning)

        assert stats.total_challenges_completed == 1
        assert stats.total_stars == 10

    def test_before_unlock_counts_for_previous_day(self):
        state, _ = register_completion(None, None, 'cipher', 500, 60, now=datetime(2026, 3, 5, 9, 0))
        assert state.date == "2026-03-04"

    def test_streak_continues_from_yesterday(self):
        stats = GlobalStats(current_streak=4, longest_streak=4, last_completed_date="2026-03-04")
        _, stats = play_all(None, stats, datetime(2026, 3, 5, 12, 0))

        assert stats.current_streak == 5
        assert stats.longest_streak == 5

    def test_streak_resets_after_gap(self):
        stats = GlobalStats(current_streak=4, longest_streak=9, last_completed_date="2026-03-01")
        _, stats = play_all(None, stats, datetime(2026, 3, 5, 12, 0))

        assert stats.current_streak == 1
        assert stats.longest_streak == 9

    def test_inputs_not_mutated(self, morning):
        stats = GlobalStats()
        state = DailyChallengeState(date="2026-03-05")
        register_completion(state, stats, 'cipher', 900, 60, now=morning)

        assert state.completions == {}
        assert stats.total_stars == 0

    def test_stale_state_is_replaced(self):
        stale = DailyChallengeState(date="2026-03-01", is_fully_completed=True)
        assert load_challenge_state(stale, "2026-03-05").date == "2026-03-05"
        assert not load_challenge_state(stale, "2026-03-05").is_fully_completed
        assert load_challenge_state(stale, "2026-03-01") is stale

    def test_score_breakdown(self, morning):
        state, _ = register_completion(None, None, 'gridgram', 420, 60, now=morning)
        assert get_score_breakdown(state) == [
            {'id': 'gridgram', 'name': 'GRIDGRAM', 'score': 420, 'completed': True}
        ]
