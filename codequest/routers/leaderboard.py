"""
Leaderboard API: submit a finished quiz, read the ranked board, check storage status.
PersistenceError (no backend could serve the call) maps to 503; the client shows
"score not saved" / "leaderboard unavailable" and may retry.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from codequest.core.store import get_leaderboard_service, get_result_store
from codequest.repositories.errors import PersistenceError
from codequest.repositories.failover_store import FailoverResultStore
from codequest.schemas.leaderboard import LeaderboardEntry, QuizResultCreate, QuizResultResponse, StorageStatus
from codequest.services.leaderboard_service import LeaderboardService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.post("", response_model=QuizResultResponse, status_code=status.HTTP_201_CREATED)
def submit_result(
    body: QuizResultCreate,
    service: LeaderboardService = Depends(get_leaderboard_service),
):
    try:
        return service.submit(body)
    except PersistenceError as e:
        logger.error("Score not saved for %s: %s", body.username, e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Score not saved. Please try again.")


@router.get("", response_model=list[LeaderboardEntry])
def get_leaderboard(service: LeaderboardService = Depends(get_leaderboard_service)):
    """Top 50 attempts by efficiency (XP per minute weighted by difficulty)."""
    try:
        return service.list()
    except PersistenceError as e:
        logger.error("Leaderboard read failed: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Leaderboard temporarily unavailable")


@router.get("/status", response_model=StorageStatus)
def get_storage_status(store: FailoverResultStore = Depends(get_result_store)):
    """Whether scores are going to the database or to file storage."""
    return store.primary.status()
