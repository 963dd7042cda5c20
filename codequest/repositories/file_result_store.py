"""
Fallback leaderboard backend: one JSON array of quiz results on local disk.
The directory and an empty `[]` file are created on first use.
Writes are read-modify-write of the whole file and assume a single writer.
A corrupt file is never repaired or overwritten: reads and writes raise MalformedStoredData.
"""
import json
import logging
import uuid
from pathlib import Path

from pydantic import ValidationError

from codequest.models.quiz_result import utcnow
from codequest.repositories.base import ResultStore, rank_entries
from codequest.repositories.errors import BackendUnavailable, MalformedStoredData
from codequest.schemas.leaderboard import LeaderboardEntry, QuizResultResponse
from codequest.services.scoring import LEADERBOARD_LIMIT

logger = logging.getLogger(__name__)


class FileResultStore(ResultStore):
    name = "file"

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> None:
        """Idempotent: create parent directory and an empty array if missing."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.write_text("[]", encoding="utf-8")
                logger.info("Created leaderboard file %s", self._path)
        except OSError as e:
            raise BackendUnavailable(f"Cannot create {self._path}: {e}") from e

    def _load(self) -> list[QuizResultResponse]:
        self._ensure_file()
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise BackendUnavailable(f"Cannot read {self._path}: {e}") from e
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedStoredData(f"{self._path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise MalformedStoredData(f"{self._path} must contain a JSON array")
        try:
            return [QuizResultResponse.model_validate(item) for item in data]
        except ValidationError as e:
            raise MalformedStoredData(f"{self._path} contains invalid entries: {e}") from e

    def _save(self, results: list[QuizResultResponse]) -> None:
        payload = [r.model_dump(mode="json") for r in results]
        try:
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            raise BackendUnavailable(f"Cannot write {self._path}: {e}") from e

    def insert(self, record: dict) -> QuizResultResponse:
        results = self._load()
        result = QuizResultResponse(id=str(uuid.uuid4()), created_at=utcnow(), **record)
        results.append(result)
        self._save(results)
        return result

    def query(self, limit: int = LEADERBOARD_LIMIT) -> list[LeaderboardEntry]:
        # File order is insertion order, which is the tie-break for equal efficiency
        return rank_entries(self._load(), limit)
