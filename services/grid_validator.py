"""
Grid Validator Service
Checks a player's board and scores the words on it.

A board is valid when:
1. Every horizontal and vertical run of 2+ tiles is a dictionary word
2. All tiles form one 4-connected group
3. The tiles use exactly the letters of the rack
"""

from collections import deque
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from config import ScoringConfig
from models.grid import Bonus, GridPosition, ScoreResult, ValidationResult, WordScore
from services.dictionary import Dictionary, get_default_dictionary


Cells = Dict[Tuple[int, int], str]

_NEIGHBORS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _runs(lines: Dict[int, List[int]], letter_at) -> List[str]:
    """Maximal consecutive runs of length >= 2 along each line"""
    words = []
    for line, offsets in lines.items():
        word = ''
        last = None
        for offset in sorted(offsets):
            if last is not None and offset == last + 1:
                word += letter_at(line, offset)
            else:
                if len(word) >= 2:
                    words.append(word)
                word = letter_at(line, offset)
            last = offset
        if len(word) >= 2:
            words.append(word)
    return words


def get_horizontal_words(cells: Cells) -> List[str]:
    """Runs along each row; rows in order of first appearance"""
    rows: Dict[int, List[int]] = {}
    for row, col in cells:
        rows.setdefault(row, []).append(col)
    return _runs(rows, lambda row, col: cells[(row, col)])


def get_vertical_words(cells: Cells) -> List[str]:
    """Runs along each column; columns in order of first appearance"""
    cols: Dict[int, List[int]] = {}
    for row, col in cells:
        cols.setdefault(col, []).append(row)
    return _runs(cols, lambda col, row: cells[(row, col)])


def is_grid_connected(cells: Iterable[Tuple[int, int]]) -> bool:
    """BFS over orthogonal neighbours; an empty board counts as connected"""
    occupied = list(cells)
    if not occupied:
        return True

    occupied_set = set(occupied)
    visited = set()
    queue = deque([occupied[0]])

    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        row, col = current
        for dr, dc in _NEIGHBORS:
            neighbor = (row + dr, col + dc)
            if neighbor in occupied_set and neighbor not in visited:
                queue.append(neighbor)

    return len(visited) == len(occupied_set)


def validate_grid(
    positions: Sequence[GridPosition],
    available_letters: Sequence[str],
    dictionary: Optional[Dictionary] = None
) -> ValidationResult:
    """
    Validate a placed board against the rack.

    Two tiles on the same cell are invalid player input: the result is
    reported as not valid rather than raised.
    """
    if not positions:
        return ValidationResult(
            is_valid=False,
            words=[],
            invalid_words=[],
            is_connected=True,
            all_letters_used=False
        )

    if dictionary is None:
        dictionary = get_default_dictionary()

    cells: Cells = {}
    for p in positions:
        cells[(p.row, p.col)] = p.letter.upper()
    has_overlap = len(cells) != len(positions)

    all_words = get_horizontal_words(cells) + get_vertical_words(cells)

    valid_words = []
    invalid_words = []
    for word in all_words:
        if dictionary.is_valid_word(word):
            valid_words.append(word)
        else:
            invalid_words.append(word)

    connected = is_grid_connected(cells)

    used = sorted(p.letter.upper() for p in positions)
    available = sorted(letter.upper() for letter in available_letters)
    all_used = used == available

    return ValidationResult(
        is_valid=(
            not invalid_words
            and connected
            and all_used
            and bool(all_words)
            and not has_overlap
        ),
        words=valid_words,
        invalid_words=invalid_words,
        is_connected=connected,
        all_letters_used=all_used
    )


def score_word(word: str) -> int:
    """10 per letter plus the additive length bonuses"""
    score = len(word) * ScoringConfig.POINTS_PER_LETTER
    for min_length, bonus in ScoringConfig.LENGTH_BONUSES:
        if len(word) >= min_length:
            score += bonus
    return score


def calculate_score(words: Sequence[str]) -> ScoreResult:
    """Score a validated board's words"""
    if not words:
        return ScoreResult()

    word_scores = [WordScore(word=w, score=score_word(w)) for w in words]

    # First word wins ties
    longest_word = ''
    for word in words:
        if len(word) > len(longest_word):
            longest_word = word

    bonuses = []
    for max_words, amount in ScoringConfig.EFFICIENCY_BONUSES:
        if len(words) <= max_words:
            bonuses.append(Bonus(type='Efficiency', amount=amount))
            break

    if len(longest_word) >= ScoringConfig.LONG_WORD_MIN_LENGTH:
        bonuses.append(Bonus(type='Long Word', amount=ScoringConfig.LONG_WORD_BONUS))

    total = sum(ws.score for ws in word_scores) + sum(b.amount for b in bonuses)

    return ScoreResult(
        total_score=total,
        word_scores=word_scores,
        longest_word=longest_word,
        word_count=len(words),
        bonuses=bonuses
    )
