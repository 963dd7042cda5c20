import json

import pytest
from fastapi.testclient import TestClient

from codequest.core.store import get_leaderboard_service, get_result_store
from codequest.main import app
from codequest.repositories.failover_store import FailoverResultStore
from codequest.repositories.sql_result_store import SqlResultStore
from codequest.services.leaderboard_service import LeaderboardService
from conftest import UnavailableStore

PAYLOAD = {
    "username": "ada",
    "topics": "python, sql ,",
    "difficulty": "intermediate",
    "xp_points": 100,
    "time_in_seconds": 30,
    "questions_count": 5,
    "correct_answers": 3.6,
}


def _client(store: FailoverResultStore) -> TestClient:
    app.dependency_overrides[get_result_store] = lambda: store
    app.dependency_overrides[get_leaderboard_service] = lambda: LeaderboardService(store)
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(sql_store, file_store):
    return _client(FailoverResultStore(sql_store, file_store))


def test_root():
    assert TestClient(app).get("/").json()["message"] == "Code Quest Leaderboard API"


def test_submit_and_list(client):
    resp = client.post("/api/leaderboard", json=PAYLOAD)

    assert resp.status_code == 201
    body = resp.json()
    assert body["topics"] == ["python", "sql"]
    assert body["correct_answers"] == 4
    assert body["difficulty"] == "intermediate"

    board = client.get("/api/leaderboard").json()
    assert len(board) == 1
    assert board[0]["id"] == body["id"]
    assert board[0]["rank"] == 1
    assert board[0]["efficiency"] == 300.0


@pytest.mark.parametrize(
    "override",
    [
        {"username": "   "},
        {"difficulty": "expert"},
        {"xp_points": -1},
        {"questions_count": 0},
        {"correct_answers": 5.5},
    ],
)
def test_submit_validation(client, override):
    resp = client.post("/api/leaderboard", json={**PAYLOAD, **override})

    assert resp.status_code == 422


def test_submit_rejects_infinite_correct_answers(client):
    # json.dumps writes Infinity, which the request parser accepts
    body = json.dumps({**PAYLOAD, "correct_answers": float("inf")})

    resp = client.post("/api/leaderboard", content=body, headers={"Content-Type": "application/json"})

    assert resp.status_code == 422
    assert client.get("/api/leaderboard").json() == []


def test_both_backends_down_returns_503(unavailable_store):
    client = _client(FailoverResultStore(unavailable_store, UnavailableStore()))

    resp = client.post("/api/leaderboard", json=PAYLOAD)
    assert resp.status_code == 503
    assert resp.json()["detail"].startswith("Score not saved")

    resp = client.get("/api/leaderboard")
    assert resp.status_code == 503
    assert resp.json()["detail"] == "Leaderboard temporarily unavailable"


def test_status_reports_database(engine_with_view, file_store):
    client = _client(FailoverResultStore(SqlResultStore(engine_with_view), file_store))

    body = client.get("/api/leaderboard/status").json()

    assert body["success"] is True
    assert body["using_file_storage"] is False
    assert body["views_found"] == ["leaderboard"]


def test_status_reports_file_storage(file_store):
    client = _client(FailoverResultStore(SqlResultStore(None), file_store))

    body = client.get("/api/leaderboard/status").json()

    assert body["success"] is False
    assert body["using_file_storage"] is True
