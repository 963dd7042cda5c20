import uuid
import enum
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, DateTime, JSON
from codequest.database import Base


class Difficulty(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite DateTime columns drop tzinfo)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class QuizResult(Base):
    """One completed quiz attempt. Efficiency and rank are derived on read, never stored."""
    __tablename__ = "quiz_results"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(100), nullable=False)
    topics = Column(JSON, nullable=False, default=list)
    difficulty = Column(String(20), nullable=False)
    xp_points = Column(Integer, nullable=False)
    time_in_seconds = Column(Integer, nullable=False)
    questions_count = Column(Integer, nullable=False)
    correct_answers = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
