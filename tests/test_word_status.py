"""Integration tests for the word status endpoints."""
from __future__ import annotations

from fastapi.testclient import TestClient

from app.core.word_strings import split_terms
from app.db.models.word_status import UserWordStrings


def test_word_status_requires_authorization(client: TestClient) -> None:
    response = client.get("/api/word-status", params={"word": "apple"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


def test_word_status_rejects_invalid_token(client: TestClient) -> None:
    response = client.get(
        "/api/word-status", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


def test_new_word_is_not_started_then_mastered(client: TestClient, auth_headers) -> None:
    before = client.get(
        "/api/word-status", params={"word": "apple", "source": "oxford"}, headers=auth_headers
    )
    assert before.status_code == 200
    assert before.json() == {"word": "apple", "source": "oxford", "status": "not-started"}

    update = client.post(
        "/api/word-status",
        json={"word": "apple", "source": "oxford", "isCorrect": True},
        headers=auth_headers,
    )
    assert update.status_code == 200
    assert update.json()["status"] == "mastered"

    after = client.get("/api/word-status", params={"word": "apple"}, headers=auth_headers)
    assert after.json()["status"] == "mastered"


def test_status_lists_stay_exclusive(client: TestClient, auth_headers, db_session) -> None:
    for word, is_correct in [("apple", True), ("dog", False), ("apple", False), ("dog", True)]:
        response = client.post(
            "/api/word-status",
            json={"word": word, "source": "oxford", "isCorrect": is_correct},
            headers=auth_headers,
        )
        assert response.status_code == 200

    strings = client.get("/api/word-status", headers=auth_headers).json()
    assert strings["source"] == "oxford"
    assert split_terms(strings["masteredWords"]) == ["dog"]
    assert split_terms(strings["learningWords"]) == ["apple"]

    rows = db_session.query(UserWordStrings).all()
    assert len(rows) == 1


def test_sources_are_tracked_separately(client: TestClient, auth_headers) -> None:
    client.post(
        "/api/word-status",
        json={"word": "apple", "source": "topics", "isCorrect": True},
        headers=auth_headers,
    )

    oxford = client.get(
        "/api/word-status", params={"word": "apple", "source": "oxford"}, headers=auth_headers
    )
    topics = client.get(
        "/api/word-status", params={"word": "apple", "source": "topics"}, headers=auth_headers
    )

    assert oxford.json()["status"] == "not-started"
    assert topics.json()["status"] == "mastered"


def test_users_do_not_share_word_strings(client: TestClient, auth_headers, make_auth_headers) -> None:
    client.post(
        "/api/word-status",
        json={"word": "apple", "source": "oxford", "isCorrect": True},
        headers=auth_headers,
    )

    other = client.get("/api/word-status", headers=make_auth_headers("user-2"))

    assert other.json() == {"masteredWords": "", "learningWords": "", "source": "oxford"}


def test_update_requires_boolean_is_correct(client: TestClient, auth_headers) -> None:
    for payload in (
        {"word": "apple", "source": "oxford", "isCorrect": "yes"},
        {"word": "apple", "source": "oxford"},
        {"source": "oxford", "isCorrect": True},
        {"word": "apple", "isCorrect": False},
    ):
        response = client.post("/api/word-status", json=payload, headers=auth_headers)
        assert response.status_code == 400
