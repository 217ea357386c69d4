"""
Dictionary Configuration
Where the validation word list comes from
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not an integer, using {default}")
        return default


@dataclass
class DictionaryConfig:
    """Validation dictionary settings"""

    # Option 1: newline-delimited word list (e.g. ENABLE1), one word per line
    word_list_path: Optional[str] = field(
        default_factory=lambda: os.environ.get('PUZZLE_WORD_LIST')
    )

    # Option 2: top-N English words from wordfreq (used when no word list file is present)
    wordfreq_size: int = field(
        default_factory=lambda: _env_int('PUZZLE_WORDFREQ_SIZE', 100000)
    )
    wordfreq_language: str = 'en'
    wordfreq_wordlist: str = 'best'

    # Words shorter than this are never accepted
    min_word_length: int = 2

    def has_word_list_file(self) -> bool:
        return bool(self.word_list_path) and os.path.exists(self.word_list_path)
