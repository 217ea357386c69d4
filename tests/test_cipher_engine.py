"""
Tests for the cipher engine
"""

import pytest

from data.phrases import PHRASES
from models.cipher import ALPHABET, CipherMapping
from models.puzzle import Difficulty
from services import cipher_engine
from services.cipher_engine import (
    assign_letter,
    check_for_conflict,
    clear_letter,
    completion_score,
    create_guess_mapping,
    decode_phrase,
    encode_phrase,
    find_incorrect_guesses,
    generate_cipher_mapping,
    get_daily_puzzle,
    get_letter_frequency,
    get_unique_letters,
    validate_solution,
)


class TestCipherMapping:

    @pytest.mark.parametrize("seed", [0, 1, 42, 20260111, 20260111 * 31337, 2**40 + 7])
    def test_always_a_derangement(self, seed):
        mapping = generate_cipher_mapping(seed)
        assert mapping.is_bijection()
        assert mapping.fixed_points() == []
        assert mapping.is_derangement()

    def test_deterministic(self):
        assert generate_cipher_mapping(123).to_dict() == generate_cipher_mapping(123).to_dict()

    def test_seeds_differ(self):
        assert generate_cipher_mapping(123).to_dict() != generate_cipher_mapping(124).to_dict()

    def test_mapping_is_read_only(self):
        mapping = generate_cipher_mapping(5)
        with pytest.raises(TypeError):
            mapping['A'] = 'B'

    def test_identity_is_not_a_derangement(self):
        mapping = CipherMapping({ch: ch for ch in ALPHABET})
        assert not mapping.is_derangement()
        assert len(mapping.fixed_points()) == 26


class TestEncoding:

    @pytest.fixture
    def mapping(self):
        return generate_cipher_mapping(777)

    def test_round_trip(self, mapping):
        phrase = "The quick brown fox, jumps!"
        encoded = encode_phrase(phrase, mapping)
        assert decode_phrase(encoded, mapping) == phrase.upper()

    def test_non_letters_pass_through(self, mapping):
        encoded = encode_phrase("A B-C!", mapping)
        assert encoded[1] == " "
        assert encoded[3] == "-"
        assert encoded[5] == "!"

    def test_no_letter_encodes_to_itself(self, mapping):
        encoded = encode_phrase(ALPHABET, mapping)
        assert all(e != p for e, p in zip(encoded, ALPHABET))


class TestGuesses:

    @pytest.fixture
    def puzzle(self):
        return get_daily_puzzle("easy", "2026-01-11")

    def test_full_correct_guesses_validate(self, puzzle):
        guesses = puzzle.cipher_mapping.inverse()
        assert validate_solution(puzzle.encoded_phrase, puzzle.original_phrase, guesses)

    def test_partial_guesses_do_not_validate(self, puzzle):
        guesses = puzzle.cipher_mapping.inverse()
        first_cipher_letter = next(ch for ch in puzzle.encoded_phrase if ch in ALPHABET)
        del guesses[first_cipher_letter]
        assert not validate_solution(puzzle.encoded_phrase, puzzle.original_phrase, guesses)

    def test_conflict_detection(self):
        guesses = {'X': 'E', 'Q': 'T'}
        assert check_for_conflict(guesses, 'Z', 'E') == 'X'
        assert check_for_conflict(guesses, 'x', 'e') is None  # same cipher letter
        assert check_for_conflict(guesses, 'Z', 'A') is None

    def test_assign_letter_moves_conflicting_guess(self):
        guesses = {'X': 'E'}
        updated = assign_letter(guesses, 'z', 'e')
        assert updated == {'Z': 'E'}
        assert guesses == {'X': 'E'}  # original untouched

    def test_assign_letter_rejects_non_letters(self):
        with pytest.raises(ValueError):
            assign_letter({}, 'X', '1')

    def test_clear_letter(self):
        assert clear_letter({'X': 'E', 'Q': 'T'}, 'x') == {'Q': 'T'}
        assert clear_letter({}, 'X') == {}

    def test_find_incorrect_guesses(self, puzzle):
        guesses = puzzle.cipher_mapping.inverse()
        cipher_letters = get_unique_letters(puzzle.encoded_phrase)
        wrong = cipher_letters[0]
        right_plain = guesses[wrong]
        guesses[wrong] = 'A' if right_plain != 'A' else 'B'

        assert find_incorrect_guesses(puzzle, guesses) == [wrong]

    def test_create_guess_mapping(self):
        assert create_guess_mapping([('x', 'e'), ('', 'a'), ('q', '')]) == {'X': 'E'}


class TestLetterStats:

    def test_unique_letters_sorted(self):
        assert get_unique_letters("hello, world") == ['D', 'E', 'H', 'L', 'O', 'R', 'W']
        assert cipher_engine.count_unique_letters("hello, world") == 7

    def test_letter_frequency(self):
        assert get_letter_frequency("Aab!") == {'A': 2, 'B': 1}


class TestDailyPuzzle:

    def test_puzzle_fields(self):
        puzzle = get_daily_puzzle("easy", "2026-01-11")

        assert puzzle.puzzle_number == 1
        assert puzzle.date == "2026-01-11"
        assert puzzle.difficulty == Difficulty.EASY
        assert (puzzle.original_phrase, puzzle.hint) in PHRASES['easy']
        assert puzzle.cipher_mapping.is_derangement()
        assert decode_phrase(puzzle.encoded_phrase, puzzle.cipher_mapping) == puzzle.original_phrase

    def test_first_easy_puzzle_matches_web_clients(self):
        puzzle = get_daily_puzzle("easy", "2026-01-11")
        assert puzzle.encoded_phrase == "ST SWV W OTU ZPF YWH ZP BDWF UXZS"

    def test_deterministic_for_date(self):
        a = get_daily_puzzle(Difficulty.HARD, "2026-05-20")
        b = get_daily_puzzle("hard", "2026-05-20")
        assert a.to_dict() == b.to_dict()

    def test_difficulties_use_own_banks(self):
        for difficulty in ("easy", "medium", "hard"):
            puzzle = get_daily_puzzle(difficulty, "2026-02-01")
            assert (puzzle.original_phrase, puzzle.hint) in PHRASES[difficulty]

    def test_is_puzzle_from_today(self):
        puzzle = get_daily_puzzle("medium", "2026-02-01")
        assert cipher_engine.is_puzzle_from_today(puzzle, "2026-02-01")
        assert not cipher_engine.is_puzzle_from_today(puzzle, "2026-02-02")

    def test_to_dict(self):
        data = get_daily_puzzle("easy", "2026-01-11").to_dict()
        assert data['difficulty'] == 'easy'
        assert len(data['cipher_mapping']) == 26


class TestCompletionScore:

    def test_fast_solve(self):
        assert completion_score(0) == 1000
        assert completion_score(10_000) == 995

    def test_floor(self):
        assert completion_score(60 * 60 * 1000) == 100
