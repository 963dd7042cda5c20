from abc import ABC, abstractmethod

from codequest.schemas.leaderboard import LeaderboardEntry, QuizResultResponse
from codequest.services.scoring import LEADERBOARD_LIMIT, rank_results


class ResultStore(ABC):
    """Storage backend for quiz results: append-only writes and ranked bulk reads."""

    name: str = "store"

    @abstractmethod
    def insert(self, record: dict) -> QuizResultResponse:
        """Persist one normalized result dict; return it with the assigned id and created_at."""

    @abstractmethod
    def query(self, limit: int = LEADERBOARD_LIMIT) -> list[LeaderboardEntry]:
        """Return up to `limit` entries ordered by efficiency desc with dense ranks."""


def rank_entries(results: list[QuizResultResponse], limit: int = LEADERBOARD_LIMIT) -> list[LeaderboardEntry]:
    """Score and rank results given in creation order (see services.scoring.rank_results)."""
    ranked = rank_results((r.model_dump() for r in results), limit)
    return [LeaderboardEntry(**r) for r in ranked]
