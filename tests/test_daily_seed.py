"""
Tests for date -> seed derivation and puzzle numbering
"""

from datetime import date, datetime, timedelta

import pytest

from services import daily_seed


class TestDateNormalization:

    def test_accepts_date_datetime_and_string(self):
        assert daily_seed.to_date_string(date(2026, 3, 5)) == "2026-03-05"
        assert daily_seed.to_date_string(datetime(2026, 3, 5, 23, 59)) == "2026-03-05"
        assert daily_seed.to_date_string("2026-03-05") == "2026-03-05"

    def test_bad_type(self):
        with pytest.raises(TypeError):
            daily_seed.to_date_string(20260305)

    def test_bad_string(self):
        with pytest.raises(ValueError):
            daily_seed.to_date_string("not-a-date")


class TestHashAndSeeds:

    def test_hash_small_strings(self):
        assert daily_seed.hash_date_string("") == 0
        assert daily_seed.hash_date_string("a") == 97
        assert daily_seed.hash_date_string("ab") == 97 * 31 + 98

    def test_hash_stays_32_bit(self):
        h = daily_seed.hash_date_string("2026-01-11")
        assert -2**31 <= h < 2**31

    def test_hash_of_first_puzzle_date(self):
        assert daily_seed.hash_date_string("2026-01-11") == 1161665761
        assert daily_seed.cipher_seed("2026-01-11", "easy") == 1181925872

    def test_cipher_seed_formula(self):
        h = daily_seed.hash_date_string("2026-01-11")
        assert daily_seed.cipher_seed("2026-01-11", "easy") == abs(h) + 20260111
        assert daily_seed.cipher_seed("2026-01-11", "medium") == abs(h * 2) + 20260111
        assert daily_seed.cipher_seed("2026-01-11", "hard") == abs(h * 3) + 20260111

    def test_grid_seed_formula(self):
        h = daily_seed.hash_date_string("2026-02-14")
        assert daily_seed.grid_seed(date(2026, 2, 14)) == abs(h) + 20260111

    def test_shift_seed_formula(self):
        h = daily_seed.hash_date_string("2026-02-14")
        assert daily_seed.shift_seed("2026-02-14", "easy") == abs(h + ord('e') * 1000)
        assert daily_seed.shift_seed("2026-02-14", "hard") == abs(h + ord('h') * 1000)

    def test_sort_seed(self):
        assert daily_seed.sort_seed(12) == 12000
        assert daily_seed.sort_seed(12, 7) == 12007

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            daily_seed.cipher_seed("2026-01-11", "impossible")


class TestNumbering:

    def test_epoch_is_puzzle_one(self):
        assert daily_seed.puzzle_number("2026-01-11") == 1
        assert daily_seed.puzzle_number("2026-01-12") == 2

    def test_before_epoch(self):
        assert daily_seed.puzzle_number("2026-01-10") == 0
        assert daily_seed.puzzle_number("2026-01-01") == -9

    def test_days_since_epoch(self):
        assert daily_seed.days_since_epoch("2027-01-11") == 365


class TestDailyRollover:

    def test_effective_date_before_unlock(self):
        assert daily_seed.effective_date(datetime(2026, 3, 5, 9, 59)) == "2026-03-04"

    def test_effective_date_after_unlock(self):
        assert daily_seed.effective_date(datetime(2026, 3, 5, 10, 0)) == "2026-03-05"

    def test_time_until_next_puzzle(self):
        remaining = daily_seed.time_until_next_puzzle(datetime(2026, 3, 5, 23, 0))
        assert remaining == timedelta(hours=1)

    def test_format_time_remaining(self):
        assert daily_seed.format_time_remaining(timedelta(hours=1, minutes=2, seconds=3)) == "01:02:03"
        assert daily_seed.format_time_remaining(3723000) == "01:02:03"
        assert daily_seed.format_time_remaining(-5) == "00:00:00"

    def test_is_same_day(self):
        assert daily_seed.is_same_day("2026-03-05", date(2026, 3, 5))
        assert not daily_seed.is_same_day("2026-03-04", date(2026, 3, 5))
