"""Shared fixtures: throwaway SQLite database, JSON leaderboard file, failing backends."""
import pytest

from codequest.database import Base, build_engine
from codequest.models import QuizResult  # noqa: F401 - register table on Base.metadata
from codequest.repositories.base import ResultStore
from codequest.repositories.errors import BackendUnavailable
from codequest.repositories.file_result_store import FileResultStore
from codequest.repositories.leaderboard_view import create_view_sql
from codequest.repositories.sql_result_store import SqlResultStore
from codequest.schemas.leaderboard import QuizResultCreate
from sqlalchemy import text


class UnavailableStore(ResultStore):
    """Backend that is always down."""

    name = "unavailable"

    def __init__(self):
        self.calls = 0

    def insert(self, record):
        self.calls += 1
        raise BackendUnavailable("connection refused")

    def query(self, limit=50):
        self.calls += 1
        raise BackendUnavailable("connection refused")


@pytest.fixture
def engine(tmp_path):
    eng = build_engine(f"sqlite:///{tmp_path / 'quiz.db'}")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def engine_with_view(engine):
    with engine.begin() as conn:
        conn.execute(text(create_view_sql(engine.dialect.name)))
    return engine


@pytest.fixture
def sql_store(engine):
    return SqlResultStore(engine)


@pytest.fixture
def leaderboard_path(tmp_path):
    return tmp_path / "data" / "leaderboard.json"


@pytest.fixture
def file_store(leaderboard_path):
    return FileResultStore(leaderboard_path)


@pytest.fixture
def unavailable_store():
    return UnavailableStore()


def make_result(**overrides) -> QuizResultCreate:
    data = {
        "username": "ada",
        "topics": ["python", "sql"],
        "difficulty": "beginner",
        "xp_points": 100,
        "time_in_seconds": 60,
        "questions_count": 5,
        "correct_answers": 4,
    }
    data.update(overrides)
    return QuizResultCreate(**data)


def make_record(**overrides) -> dict:
    """Normalized record as LeaderboardService passes it to a store."""
    record = {
        "username": "ada",
        "topics": ["python"],
        "difficulty": "beginner",
        "xp_points": 100,
        "time_in_seconds": 60,
        "questions_count": 5,
        "correct_answers": 4,
    }
    record.update(overrides)
    return record
