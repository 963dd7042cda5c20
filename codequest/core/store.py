"""
Builds the leaderboard store from settings: database first, JSON file as fallback.
Lazy singleton; no connection is attempted until the first request.
"""
import logging

from codequest import database
from codequest.config import get_settings
from codequest.repositories.failover_store import FailoverResultStore
from codequest.repositories.file_result_store import FileResultStore
from codequest.repositories.sql_result_store import SqlResultStore
from codequest.services.leaderboard_service import LeaderboardService

logger = logging.getLogger(__name__)

_result_store: FailoverResultStore | None = None


def get_result_store() -> FailoverResultStore:
    global _result_store
    if _result_store is not None:
        return _result_store
    settings = get_settings()
    if database.engine is None:
        logger.warning("DATABASE_URL is empty; leaderboard uses file storage only")
    _result_store = FailoverResultStore(
        primary=SqlResultStore(database.engine),
        secondary=FileResultStore(settings.leaderboard_file),
    )
    return _result_store


def get_leaderboard_service() -> LeaderboardService:
    """FastAPI dependency."""
    return LeaderboardService(get_result_store())
