"""
Cipher Engine
Monoalphabetic substitution puzzles: mapping generation, encoding and guess checking.

Every function is pure; guess maps are plain dicts (cipher letter -> guessed plain letter)
and the "mutating" helpers return new dicts.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from config import PuzzleConfig, ScoringConfig
from data.phrases import PHRASES
from models.cipher import ALPHABET, CipherMapping, CipherPuzzle
from models.puzzle import Difficulty
from services import daily_seed
from services.seeded_random import SeededRandom


Guesses = Dict[str, str]


def _is_derangement(shuffled: List[str]) -> bool:
    return all(letter != ALPHABET[i] for i, letter in enumerate(shuffled))


def generate_cipher_mapping(seed: int) -> CipherMapping:
    """
    Derangement of A-Z from a seed.

    Tries up to DERANGEMENT_MAX_ATTEMPTS seeded shuffles. If none is a derangement,
    each self-mapped letter is swapped with its right neighbour (wrapping), which
    always terminates with no fixed points.
    """
    rng = SeededRandom(seed)
    letters = list(ALPHABET)

    shuffled = letters
    for _ in range(PuzzleConfig.DERANGEMENT_MAX_ATTEMPTS):
        shuffled = rng.shuffle(letters)
        if _is_derangement(shuffled):
            break

    for i in range(len(shuffled)):
        if shuffled[i] == letters[i]:
            j = (i + 1) % len(shuffled)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return CipherMapping(dict(zip(letters, shuffled)))


def encode_phrase(phrase: str, mapping: CipherMapping) -> str:
    return mapping.encode(phrase)


def decode_phrase(encoded: str, mapping: CipherMapping) -> str:
    return mapping.decode(encoded)


def validate_solution(encoded_phrase: str, original_phrase: str, guesses: Guesses) -> bool:
    """
    True only if the guesses decode the whole phrase exactly.
    Missing guesses decode to nothing, so a partial map never matches.
    """
    decoded = "".join(
        guesses.get(ch, '') if ch in ALPHABET else ch
        for ch in encoded_phrase.upper()
    )
    return decoded == original_phrase.upper()


def check_for_conflict(guesses: Guesses, cipher_letter: str, plain_letter: str) -> Optional[str]:
    """Cipher letter already holding `plain_letter` (other than `cipher_letter`), or None"""
    cipher_upper = cipher_letter.upper()
    plain_upper = plain_letter.upper()
    for cipher, plain in guesses.items():
        if plain == plain_upper and cipher != cipher_upper:
            return cipher
    return None


def assign_letter(guesses: Guesses, cipher_letter: str, plain_letter: str) -> Guesses:
    """Assign a guess; any other cipher letter holding the same plain letter loses it"""
    cipher_upper = cipher_letter.upper()
    plain_upper = plain_letter.upper()
    if cipher_upper not in ALPHABET or plain_upper not in ALPHABET or len(plain_upper) != 1:
        raise ValueError(f"Letters must be A-Z, got {cipher_letter!r} -> {plain_letter!r}")

    updated = dict(guesses)
    conflict = check_for_conflict(updated, cipher_upper, plain_upper)
    if conflict:
        del updated[conflict]
    updated[cipher_upper] = plain_upper
    return updated


def clear_letter(guesses: Guesses, cipher_letter: str) -> Guesses:
    updated = dict(guesses)
    updated.pop(cipher_letter.upper(), None)
    return updated


def find_incorrect_guesses(puzzle: CipherPuzzle, guesses: Guesses) -> List[str]:
    """Cipher letters whose current guess is wrong, sorted (the "check progress" hint)"""
    correct: Dict[str, str] = {}
    for cipher, plain in zip(puzzle.encoded_phrase.upper(), puzzle.original_phrase.upper()):
        if cipher in ALPHABET:
            correct[cipher] = plain
    return sorted(
        cipher for cipher, guess in guesses.items()
        if cipher in correct and correct[cipher] != guess
    )


def is_fully_guessed(encoded_phrase: str, guesses: Guesses) -> bool:
    """Every cipher letter in the phrase has a guess"""
    return all(guesses.get(letter) for letter in get_unique_letters(encoded_phrase))


# --- Letter statistics ---

def get_unique_letters(phrase: str) -> List[str]:
    return sorted({ch for ch in phrase.upper() if ch in ALPHABET})


def count_unique_letters(phrase: str) -> int:
    return len(get_unique_letters(phrase))


def get_letter_frequency(phrase: str) -> Dict[str, int]:
    frequency: Dict[str, int] = {}
    for ch in phrase.upper():
        if ch in ALPHABET:
            frequency[ch] = frequency.get(ch, 0) + 1
    return frequency


def create_guess_mapping(pairs: Iterable[Tuple[str, str]]) -> Guesses:
    """Guess map from (cipher, plain) pairs; empty entries are skipped"""
    mapping: Guesses = {}
    for cipher, plain in pairs:
        if cipher and plain:
            mapping[cipher.upper()] = plain.upper()
    return mapping


def completion_score(elapsed_ms: int) -> int:
    """Daily challenge score: one point lost per two seconds, floored at the minimum"""
    seconds = int(elapsed_ms // 1000)
    return max(
        ScoringConfig.CIPHER_MIN_SCORE,
        ScoringConfig.CIPHER_BASE_SCORE - seconds // ScoringConfig.CIPHER_SECONDS_PER_POINT
    )


# --- Daily puzzle ---

def get_phrase(difficulty, seed: int) -> Tuple[str, str]:
    """(phrase, hint) from the bank, indexed by abs(seed) % bank size"""
    bank = PHRASES[Difficulty.parse(difficulty).value]
    return bank[abs(seed) % len(bank)]


def get_daily_puzzle(difficulty, value=None) -> CipherPuzzle:
    """The cipher puzzle for a date and difficulty (today if no date is given)"""
    difficulty = Difficulty.parse(difficulty)
    date_str = daily_seed.to_date_string(value)

    seed = daily_seed.cipher_seed(date_str, difficulty)
    phrase, hint = get_phrase(difficulty, seed)
    mapping = generate_cipher_mapping(daily_seed.cipher_mapping_seed(seed))

    return CipherPuzzle(
        puzzle_number=daily_seed.puzzle_number(date_str),
        difficulty=difficulty,
        original_phrase=phrase,
        encoded_phrase=encode_phrase(phrase, mapping),
        cipher_mapping=mapping,
        date=date_str,
        hint=hint
    )


def is_puzzle_from_today(puzzle: CipherPuzzle, today=None) -> bool:
    return daily_seed.is_same_day(puzzle.date, today)
