from .puzzle_config import PuzzleConfig
from .scoring_config import ScoringConfig
from .dictionary_config import DictionaryConfig

__all__ = ['PuzzleConfig', 'ScoringConfig', 'DictionaryConfig']
