"""
Share Text Service
Spoiler-free result text for the cipher, sort and mini games.
"""

from typing import Sequence

from config import ScoringConfig
from models.sort import GROUP_SIZE, SolvedGroup
from services.scoring import calculate_stars_earned, format_elapsed, format_seconds


BRAND = "The Daily Littles"
CIPHER_URL = "https://cipher.game"

# Tier colors, easiest to hardest
DIFFICULTY_EMOJI = {
    1: '🟨',
    2: '🟩',
    3: '🟦',
    4: '🟪',
}


def cipher_share_text(puzzle_number: int, difficulty, elapsed_ms: int, streak: int = 0) -> str:
    stars = calculate_stars_earned(difficulty, elapsed_ms)
    star_line = '⭐' * stars + '☆' * (ScoringConfig.MAX_STARS - stars)

    text = f"{BRAND} — Cipher\nLittle #{puzzle_number}\n"
    text += f"{star_line}\n"
    text += f"⏱️ {format_elapsed(elapsed_ms)}"
    if streak > 1:
        text += f" • 🔥 {streak} day streak"
    text += f"\n\n{CIPHER_URL}"
    return text


def sort_share_text(
    puzzle_number: int,
    solved_groups: Sequence[SolvedGroup],
    mistakes: int,
    won: bool,
    max_mistakes: int = 4
) -> str:
    """One emoji row per group, in the order it was solved (or revealed)"""
    ordered = sorted(solved_groups, key=lambda s: s.solved_order)
    emoji_grid = "\n".join(DIFFICULTY_EMOJI[s.group.difficulty] * GROUP_SIZE for s in ordered)

    status = '✅' if won else '❌'
    mistake_text = 'Perfect! 🎯' if mistakes == 0 else f"{mistakes}/{max_mistakes} mistakes"

    return "\n".join([
        f"{BRAND} — Sort",
        f"Little #{puzzle_number} {status}",
        '',
        emoji_grid,
        '',
        mistake_text,
    ])


def mini_share_text(puzzle_number: int, solve_seconds: int) -> str:
    return "\n".join([
        f"{BRAND} — Mini",
        f"Little #{puzzle_number}",
        '',
        f"⏱ {format_seconds(solve_seconds)}",
    ])
