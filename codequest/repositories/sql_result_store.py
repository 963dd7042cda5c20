"""
Primary leaderboard backend: relational database through SQLAlchemy.
Reads prefer the `leaderboard` view; when it is missing or empty, quiz_results
is scanned instead. Either way rows are read in creation order and efficiency
and rank are recomputed locally; the view's efficiency and rank columns are not read.
Every SQLAlchemy error is translated to BackendUnavailable / SchemaMissing.
"""
import logging

from pydantic import ValidationError
from sqlalchemy import inspect, text, DateTime, JSON
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from codequest.database import build_session_factory
from codequest.models.quiz_result import QuizResult
from codequest.repositories.base import ResultStore, rank_entries
from codequest.repositories.errors import BackendUnavailable, MalformedStoredData, SchemaMissing
from codequest.repositories.leaderboard_view import VIEW_NAME
from codequest.schemas.leaderboard import LeaderboardEntry, QuizResultResponse, StorageStatus
from codequest.services.scoring import LEADERBOARD_LIMIT

logger = logging.getLogger(__name__)

RESULTS_TABLE = QuizResult.__tablename__

_MISSING_SCHEMA_MARKERS = ("no such table", "does not exist", "undefined table")

_VIEW_QUERY = text(
    "SELECT id, username, topics, difficulty, xp_points, time_in_seconds, questions_count, "
    f"correct_answers, created_at FROM {VIEW_NAME} ORDER BY created_at ASC"
).columns(topics=JSON, created_at=DateTime)


def _translate(exc: SQLAlchemyError) -> BackendUnavailable:
    message = str(getattr(exc, "orig", None) or exc)
    if any(marker in message.lower() for marker in _MISSING_SCHEMA_MARKERS):
        return SchemaMissing(message)
    return BackendUnavailable(message)


class SqlResultStore(ResultStore):
    name = "database"

    def __init__(self, engine: Engine | None):
        self._engine = engine
        self._session_factory = build_session_factory(engine) if engine is not None else None

    def _session(self):
        if self._session_factory is None:
            raise BackendUnavailable("DATABASE_URL is not configured")
        return self._session_factory()

    def insert(self, record: dict) -> QuizResultResponse:
        db = self._session()
        try:
            row = QuizResult(**record)
            db.add(row)
            db.commit()
            db.refresh(row)
            return QuizResultResponse.model_validate(row)
        except SQLAlchemyError as e:
            db.rollback()
            raise _translate(e) from e
        finally:
            db.close()

    def query(self, limit: int = LEADERBOARD_LIMIT) -> list[LeaderboardEntry]:
        db = self._session()
        try:
            entries = self._query_view(db, limit)
            if entries:
                return entries
            return self._query_results(db, limit)
        except SQLAlchemyError as e:
            raise _translate(e) from e
        except ValidationError as e:
            raise MalformedStoredData(f"{RESULTS_TABLE} contains invalid rows: {e}") from e
        finally:
            db.close()

    def _query_view(self, db, limit: int) -> list[LeaderboardEntry]:
        try:
            rows = db.execute(_VIEW_QUERY).mappings().all()
        except SQLAlchemyError as e:
            logger.info("Leaderboard view unavailable, ranking %s directly: %s", RESULTS_TABLE, _translate(e))
            db.rollback()
            return []
        results = [QuizResultResponse.model_validate(dict(row)) for row in rows]
        return rank_entries(results, limit)

    def _query_results(self, db, limit: int) -> list[LeaderboardEntry]:
        rows = db.query(QuizResult).order_by(QuizResult.created_at.asc()).all()
        results = [QuizResultResponse.model_validate(r) for r in rows]
        return rank_entries(results, limit)

    def status(self) -> StorageStatus:
        """Probe the database for the results table and leaderboard view. Never raises."""
        if self._engine is None:
            return StorageStatus(
                success=False,
                message="DATABASE_URL is not configured; using file storage",
                using_file_storage=True,
            )
        try:
            inspector = inspect(self._engine)
            tables = [t for t in inspector.get_table_names() if t == RESULTS_TABLE]
            views = [v for v in inspector.get_view_names() if v == VIEW_NAME]
        except SQLAlchemyError as e:
            logger.warning("Database status check failed: %s", e, exc_info=False)
            return StorageStatus(
                success=False,
                message=f"Database unreachable ({e.__class__.__name__}); using file storage",
                using_file_storage=True,
            )
        if not tables:
            return StorageStatus(
                success=False,
                message=f"Table {RESULTS_TABLE} not found; run `alembic upgrade head`. Using file storage",
                using_file_storage=True,
                views_found=views,
            )
        return StorageStatus(
            success=True,
            message="Database setup complete",
            using_file_storage=False,
            tables_found=tables,
            views_found=views,
        )
