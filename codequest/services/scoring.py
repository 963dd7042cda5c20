"""
Leaderboard scoring: XP per minute weighted by difficulty.
Efficiency is always derived from the stored inputs; ranks are dense and stable on ties.
"""
import math
from typing import Any, Iterable

# Fixed leaderboard size
LEADERBOARD_LIMIT = 50

# Floor for elapsed time so near-instant attempts don't produce unbounded scores
MIN_TIME_IN_MINUTES = 0.1

DIFFICULTY_BONUS = {
    "beginner": 1.0,
    "intermediate": 1.5,
    "advanced": 2.0,
}


def _difficulty_key(difficulty: Any) -> str:
    return getattr(difficulty, "value", difficulty)


def calculate_efficiency(xp_points: int, time_in_seconds: int, difficulty: Any) -> float:
    """Efficiency = (xp / max(minutes, 0.1)) * difficulty bonus, rounded to 2 decimals."""
    time_in_minutes = max(time_in_seconds / 60, MIN_TIME_IN_MINUTES)
    bonus = DIFFICULTY_BONUS[_difficulty_key(difficulty)]
    return round((xp_points / time_in_minutes) * bonus, 2)


def round_correct_answers(value: float) -> int:
    """Nearest integer, halves rounded up (3.6 -> 4, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def rank_results(results: Iterable[dict], limit: int = LEADERBOARD_LIMIT) -> list[dict]:
    """
    Attach efficiency and rank to result dicts given in creation order.
    sorted() is stable, so equal efficiencies keep their original relative order.
    Returns at most `limit` dicts with ranks 1..N.
    """
    scored = [
        {
            **r,
            "efficiency": calculate_efficiency(r["xp_points"], r["time_in_seconds"], r["difficulty"]),
        }
        for r in results
    ]
    ordered = sorted(scored, key=lambda r: r["efficiency"], reverse=True)
    return [{**r, "rank": idx + 1} for idx, r in enumerate(ordered[:limit])]
