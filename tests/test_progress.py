"""Tests for learner progress endpoints."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.db.models.progress import UserProgress
from app.schemas import ProgressUpdate
from app.services.progress import ProgressService, format_rate


def test_progress_requires_authorization(client: TestClient) -> None:
    assert client.get("/api/progress").status_code == 401
    assert client.post("/api/progress", json={"word": "apple", "source": "oxford"}).status_code == 401


def test_save_progress_creates_then_updates_row(client: TestClient, auth_headers, db_session) -> None:
    payload = {
        "word": "apple",
        "wordMeaning": "a round fruit",
        "source": "oxford",
        "isMastered": False,
        "feedback": "Try again",
    }

    first = client.post("/api/progress", json=payload, headers=auth_headers)
    assert first.status_code == 200
    first_data = first.json()["data"]
    assert first_data["attempts"] == 1
    assert first_data["isMastered"] is False
    assert first_data["aiFeedback"] == "Try again"
    assert first_data["topic"] is None

    second = client.post(
        "/api/progress",
        json={**payload, "isMastered": True, "topic": "Food & Drink", "feedback": "Great"},
        headers=auth_headers,
    )
    second_data = second.json()["data"]
    assert second_data["id"] == first_data["id"]
    assert second_data["attempts"] == 2
    assert second_data["isMastered"] is True
    assert second_data["topic"] == "Food & Drink"
    assert second_data["learnedDate"] == first_data["learnedDate"]

    assert db_session.query(UserProgress).count() == 1


def test_save_progress_requires_word_and_source(client: TestClient, auth_headers) -> None:
    response = client.post("/api/progress", json={"word": "apple"}, headers=auth_headers)

    assert response.status_code == 400


def test_list_progress_filters_and_summarizes(client: TestClient, auth_headers) -> None:
    for word, source, mastered in [
        ("apple", "oxford", True),
        ("dog", "oxford", False),
        ("tree", "topics", True),
    ]:
        client.post(
            "/api/progress",
            json={"word": word, "source": source, "isMastered": mastered},
            headers=auth_headers,
        )

    everything = client.get("/api/progress", params={"source": "all"}, headers=auth_headers)
    assert everything.status_code == 200
    stats = everything.json()["data"]["stats"]
    assert stats == {"totalWords": 3, "masteredWords": 2, "inProgress": 1, "masteryRate": "66.7"}

    oxford = client.get("/api/progress", params={"source": "oxford"}, headers=auth_headers).json()
    assert {row["word"] for row in oxford["data"]["progress"]} == {"apple", "dog"}


def test_list_progress_orders_by_most_recent_update(db_session) -> None:
    service = ProgressService(db_session)
    start = datetime(2024, 5, 1, tzinfo=timezone.utc)
    service.record_progress(
        user_id="user-1", payload=ProgressUpdate(word="apple", source="oxford"), now=start
    )
    service.record_progress(
        user_id="user-1",
        payload=ProgressUpdate(word="dog", source="oxford"),
        now=start + timedelta(hours=1),
    )
    service.record_progress(
        user_id="user-1",
        payload=ProgressUpdate(word="apple", source="oxford", is_mastered=True),
        now=start + timedelta(hours=2),
    )

    rows = service.list_progress(user_id="user-1")

    assert [row.word for row in rows] == ["apple", "dog"]
    apple = rows[0]
    assert apple.attempts == 2
    assert apple.learned_date.isoformat() == "2024-05-01"


def test_format_rate() -> None:
    assert format_rate(0, 0) == "0"
    assert format_rate(1, 3) == "33.3"
    assert format_rate(2, 2) == "100.0"
