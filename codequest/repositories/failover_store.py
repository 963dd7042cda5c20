"""
Failover over two ResultStores: primary first, secondary on BackendUnavailable.
Callers never learn which backend served them; they only see PersistenceError when both fail.
"""
import logging

from codequest.repositories.base import ResultStore
from codequest.repositories.errors import BackendUnavailable, LeaderboardStoreError, PersistenceError
from codequest.schemas.leaderboard import LeaderboardEntry, QuizResultResponse
from codequest.services.scoring import LEADERBOARD_LIMIT

logger = logging.getLogger(__name__)


class FailoverResultStore(ResultStore):
    name = "failover"

    def __init__(self, primary: ResultStore, secondary: ResultStore):
        self.primary = primary
        self.secondary = secondary

    def insert(self, record: dict) -> QuizResultResponse:
        try:
            return self.primary.insert(record)
        except BackendUnavailable as e:
            logger.warning("Saving to %s failed, falling back to %s storage: %s", self.primary.name, self.secondary.name, e)
        try:
            return self.secondary.insert(record)
        except PersistenceError:
            raise
        except LeaderboardStoreError as e:
            raise PersistenceError(f"Score not saved: all backends failed ({e})") from e

    def query(self, limit: int = LEADERBOARD_LIMIT) -> list[LeaderboardEntry]:
        try:
            return self.primary.query(limit)
        except BackendUnavailable as e:
            logger.warning("Reading from %s failed, falling back to %s storage: %s", self.primary.name, self.secondary.name, e)
        try:
            return self.secondary.query(limit)
        except PersistenceError:
            raise
        except LeaderboardStoreError as e:
            raise PersistenceError(f"Leaderboard unavailable: all backends failed ({e})") from e
