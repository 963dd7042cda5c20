from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator

from codequest.models.quiz_result import Difficulty
from codequest.services.scoring import round_correct_answers


# ---- Submit ----

class QuizResultCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    topics: list[str] = Field(default_factory=list, description="List, or comma-separated string from the setup form")
    difficulty: Difficulty
    xp_points: int = Field(..., ge=0)
    time_in_seconds: int = Field(..., ge=0)
    questions_count: int = Field(..., ge=1)
    correct_answers: float = Field(..., ge=0, allow_inf_nan=False, description="May be fractional; rounded before storage")

    @field_validator("username")
    @classmethod
    def _strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v

    @field_validator("topics", mode="before")
    @classmethod
    def _split_topics(cls, v):
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            return [t.strip() for t in v if isinstance(t, str) and t.strip()]
        return v

    @model_validator(mode="after")
    def _check_correct_answers(self):
        if round_correct_answers(self.correct_answers) > self.questions_count:
            raise ValueError("correct_answers cannot exceed questions_count")
        return self


# ---- Stored records ----

class QuizResultResponse(BaseModel):
    id: str
    username: str
    topics: list[str]
    difficulty: Difficulty
    xp_points: int = Field(..., ge=0)
    time_in_seconds: int = Field(..., ge=0)
    questions_count: int = Field(..., ge=1)
    correct_answers: int = Field(..., ge=0)
    created_at: datetime

    class Config:
        from_attributes = True


class LeaderboardEntry(QuizResultResponse):
    efficiency: float
    rank: int = Field(..., ge=1)


class StorageStatus(BaseModel):
    """Result of probing the primary database (shown on the setup page)."""
    success: bool
    message: str
    using_file_storage: bool
    tables_found: list[str] = Field(default_factory=list)
    views_found: list[str] = Field(default_factory=list)
