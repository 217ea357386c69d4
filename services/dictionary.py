"""
Dictionary Service
Word validation and generation pools for every game.

Two different word sets on purpose:
1. Validation set - large, accepts any real word a clever player finds
2. Generation pools - small curated lists of common words, so generated puzzles stay guessable
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence

import nltk
from nltk.corpus import wordnet
from nltk.corpus import words as nltk_words
from wordfreq import top_n_list

from config import DictionaryConfig
from data.generation_words import EASY_4_WORDS, GENERATION_WORDS
from services.seeded_random import SeededRandom


def _normalize(word: str) -> str:
    return word.strip().upper()


@lru_cache(maxsize=None)
def _ensure_corpus(name: str):
    try:
        nltk.data.find(f"corpora/{name}")
    except LookupError:
        print(f"Downloading NLTK corpus '{name}'...")
        nltk.download(name, quiet=True)


def load_lexicon() -> FrozenSet[str]:
    """
    Lower-case entries of the NLTK English word list, upper-cased.
    Capitalized entries (names, places) are left out.
    """
    _ensure_corpus("words")
    return frozenset(w.upper() for w in nltk_words.words() if w.isalpha() and w.islower())


def base_form(word: str) -> Optional[str]:
    """WordNet base form of an inflected word (RUNNING -> RUN), None if unknown"""
    _ensure_corpus("wordnet")
    lemma = wordnet.morphy(word.lower())
    return lemma.upper() if lemma else None


def in_lexicon(word: str, lexicon: FrozenSet[str]) -> bool:
    """Word is a lexicon entry, or an inflection of one"""
    word = word.upper()
    if word in lexicon:
        return True
    lemma = base_form(word)
    return lemma is not None and lemma in lexicon


class Dictionary:
    """
    Immutable word service, built once and injected into generators and validators.

    Tests build tiny instances: Dictionary(['CAT', 'CAR'], generation_words={}, easy_words=[])
    """

    def __init__(
        self,
        words: Iterable[str],
        generation_words: Optional[Mapping[int, Sequence[str]]] = None,
        easy_words: Optional[Sequence[str]] = None
    ):
        """
        Args:
            words: validation words (any case)
            generation_words: curated pools keyed by length (None = built-in pools)
            easy_words: curated 4-letter pool for easy shift grids (None = built-in pool)
        """
        if generation_words is None:
            generation_words = GENERATION_WORDS
        if easy_words is None:
            easy_words = EASY_4_WORDS

        self._pools: Dict[int, tuple] = {
            length: tuple(_normalize(w) for w in pool)
            for length, pool in generation_words.items()
        }
        self._easy: tuple = tuple(_normalize(w) for w in easy_words)

        # Every generated word must also validate
        validation = {_normalize(w) for w in words if w and w.strip()}
        for pool in self._pools.values():
            validation.update(pool)
        validation.update(self._easy)
        self._words = frozenset(validation)

    # === Validation ===

    def is_valid_word(self, word: str) -> bool:
        """Case-insensitive membership test"""
        if not isinstance(word, str) or not word:
            return False
        return word.upper() in self._words

    def __contains__(self, word) -> bool:
        return self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)

    # === Generation pools ===

    def words_of_length(self, length: int) -> List[str]:
        """Curated words of exactly this length (empty list if there is no pool)"""
        return [w for w in self._pools.get(length, ()) if len(w) == length]

    def generation_pool(self, lengths: Iterable[int]) -> List[str]:
        """
        Curated pools for several lengths, concatenated in the given order.
        Entries are kept exactly as filed (no length filter), callers bucket by len().
        """
        words: List[str] = []
        for length in lengths:
            words.extend(self._pools.get(length, ()))
        return words

    def random_words(self, count: int, length: int, rng: SeededRandom) -> List[str]:
        """`count` distinct curated words of `length`, seeded order"""
        pool = self.words_of_length(length)
        if not pool:
            return []
        return rng.sample(pool, count)

    def easy_words(self, count: int, rng: SeededRandom) -> List[str]:
        """`count` very common 4-letter words, seeded order"""
        if not self._easy:
            return []
        return rng.sample(self._easy, count)

    # === Loaders ===

    @classmethod
    def from_file(cls, path, min_length: int = 2, **kwargs) -> 'Dictionary':
        """Newline-delimited word list (ENABLE1 style). Blank lines and '#' comments are skipped."""
        words = []
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                word = line.strip()
                if not word or word.startswith('#'):
                    continue
                if word.isalpha() and len(word) >= min_length:
                    words.append(word)
        return cls(words, **kwargs)

    @classmethod
    def from_wordfreq(
        cls,
        size: int = 100000,
        language: str = 'en',
        wordlist: str = 'best',
        min_length: int = 2,
        lexicon: Optional[FrozenSet[str]] = None,
        **kwargs
    ) -> 'Dictionary':
        """
        Top-N words by frequency from wordfreq, spell-checked against a lexicon.

        wordfreq alone lists contractions, names and slang (DONT, LONDON, LOL), so a
        frequent word is kept only if it is in the lexicon or inflects one of its
        entries. The lexicon itself is part of the validation set, which adds the
        rarer real words (OXLIP) a top-N list never reaches.

        Args:
            lexicon: upper-case word set (None = NLTK word list via load_lexicon())
        """
        if lexicon is None:
            lexicon = load_lexicon()

        frequent = [
            w for w in top_n_list(language, size, wordlist=wordlist)
            if w.isascii() and w.isalpha() and len(w) >= min_length
        ]
        words = [w for w in frequent if in_lexicon(w, lexicon)]
        words.extend(w for w in lexicon if len(w) >= min_length)
        return cls(words, **kwargs)


def load_dictionary(config: Optional[DictionaryConfig] = None) -> Dictionary:
    """Word list file if configured and present, otherwise wordfreq"""
    config = config or DictionaryConfig()

    print("Loading dictionary...")
    if config.has_word_list_file():
        dictionary = Dictionary.from_file(config.word_list_path, min_length=config.min_word_length)
        source = Path(config.word_list_path).name
    else:
        if config.word_list_path:
            print(f"⚠ Word list not found at {config.word_list_path}, falling back to wordfreq")
        dictionary = Dictionary.from_wordfreq(
            size=config.wordfreq_size,
            language=config.wordfreq_language,
            wordlist=config.wordfreq_wordlist,
            min_length=config.min_word_length
        )
        source = f"wordfreq ({config.wordfreq_language}, top {config.wordfreq_size}) + NLTK words"

    print(f"✓ Loaded {len(dictionary)} words from {source}")
    return dictionary


@lru_cache(maxsize=1)
def get_default_dictionary() -> Dictionary:
    """Process-wide dictionary, loaded on first use and read-only afterwards"""
    return load_dictionary()
