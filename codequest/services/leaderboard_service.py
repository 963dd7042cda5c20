"""
Leaderboard orchestration: normalize submissions, then delegate to the result store.
The store decides where data lives; this layer only sees success or PersistenceError.
"""
import logging

from codequest.repositories.base import ResultStore
from codequest.schemas.leaderboard import LeaderboardEntry, QuizResultCreate, QuizResultResponse
from codequest.services.scoring import LEADERBOARD_LIMIT, round_correct_answers

logger = logging.getLogger(__name__)


class LeaderboardService:
    def __init__(self, store: ResultStore):
        self._store = store

    def submit(self, result: QuizResultCreate) -> QuizResultResponse:
        """Store one quiz attempt. correct_answers is rounded to an integer here."""
        record = {
            "username": result.username,
            "topics": list(result.topics),
            "difficulty": result.difficulty.value,
            "xp_points": result.xp_points,
            "time_in_seconds": result.time_in_seconds,
            "questions_count": result.questions_count,
            "correct_answers": round_correct_answers(result.correct_answers),
        }
        saved = self._store.insert(record)
        logger.info("Saved quiz result %s for %s (%s XP)", saved.id, saved.username, saved.xp_points)
        return saved

    def list(self) -> list[LeaderboardEntry]:
        """Top entries by efficiency, ranks 1..N, N <= 50."""
        return self._store.query(LEADERBOARD_LIMIT)
