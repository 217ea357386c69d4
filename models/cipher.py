"""
Cipher Models
Substitution alphabet and the daily cipher puzzle
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from models.puzzle import Difficulty


ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'


class CipherMapping(Mapping):
    """
    Plain letter -> cipher letter substitution over A-Z.

    Read-only once built. A valid puzzle mapping is a derangement:
    a bijection where no letter maps to itself.
    """

    def __init__(self, mapping: Mapping[str, str]):
        self._mapping = MappingProxyType({k.upper(): v.upper() for k, v in mapping.items()})

    def __getitem__(self, letter: str) -> str:
        return self._mapping[letter.upper()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        pairs = "".join(self._mapping.get(ch, '?') for ch in ALPHABET)
        return f"CipherMapping({pairs})"

    def inverse(self) -> Dict[str, str]:
        """cipher letter -> plain letter"""
        return {cipher: plain for plain, cipher in self._mapping.items()}

    def encode(self, phrase: str) -> str:
        """Uppercase, substitute A-Z, pass everything else through"""
        return "".join(self._mapping.get(ch, ch) for ch in phrase.upper())

    def decode(self, encoded: str) -> str:
        reverse = self.inverse()
        return "".join(reverse.get(ch, ch) for ch in encoded.upper())

    def is_bijection(self) -> bool:
        return (
            set(self._mapping.keys()) == set(ALPHABET)
            and set(self._mapping.values()) == set(ALPHABET)
        )

    def fixed_points(self) -> list:
        """Letters that map to themselves (empty for a derangement)"""
        return [ch for ch, mapped in self._mapping.items() if ch == mapped]

    def is_derangement(self) -> bool:
        return self.is_bijection() and not self.fixed_points()

    def to_dict(self) -> Dict[str, str]:
        return dict(self._mapping)


@dataclass(frozen=True)
class CipherPuzzle:
    """The daily cipher puzzle for one difficulty"""
    puzzle_number: int
    difficulty: Difficulty
    original_phrase: str
    encoded_phrase: str
    cipher_mapping: CipherMapping
    date: str   # ISO date string (YYYY-MM-DD)
    hint: str   # crossword-style clue

    def to_dict(self) -> dict:
        return {
            'puzzle_number': self.puzzle_number,
            'difficulty': self.difficulty.value,
            'original_phrase': self.original_phrase,
            'encoded_phrase': self.encoded_phrase,
            'cipher_mapping': self.cipher_mapping.to_dict(),
            'date': self.date,
            'hint': self.hint,
        }
