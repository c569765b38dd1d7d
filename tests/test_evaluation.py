"""Tests for the AI evaluation endpoints and their fallbacks."""
from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_sentence_evaluator
from app.core.prompts.evaluation_prompts import MEANING_CORRECT
from app.services.evaluation import SOURCE_AI, SOURCE_FALLBACK, SentenceEvaluator
from app.services.llm_service import GeminiProvider, LLMService


def gemini_reply(text: str) -> dict:
    return {
        "candidates": [{"content": {"parts": [{"text": text}]}}],
        "usageMetadata": {"promptTokenCount": 12, "candidatesTokenCount": 30, "totalTokenCount": 42},
    }


def evaluator_with(handler) -> SentenceEvaluator:
    provider = GeminiProvider(
        api_key="test-key", model="gemini-2.0-flash", transport=httpx.MockTransport(handler)
    )
    return SentenceEvaluator(LLMService(provider=provider))


@pytest.fixture()
def use_evaluator(app):
    def install(evaluator: SentenceEvaluator) -> None:
        app.dependency_overrides[get_sentence_evaluator] = lambda: evaluator

    return install


PASSING_TEXT = (
    "📚 Từ vựng: Dùng đúng từ \"apple\".\n"
    "🔤 Ngữ pháp: Đúng.\n"
    "✨ Chất lượng: Câu rõ ràng.\n"
    "💡 Kết luận: ĐẠT - tốt lắm!"
)
FAILING_TEXT = (
    "📚 Từ vựng: Không sử dụng từ vựng yêu cầu.\n"
    "🔤 Ngữ pháp: Sai chủ ngữ.\n"
    "✨ Chất lượng: Chưa rõ nghĩa.\n"
    "💡 Kết luận: CHƯA ĐẠT - hãy dùng từ \"apple\"."
)


def test_simple_evaluation_passes_on_pass_marker(client: TestClient, use_evaluator) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["key"] = request.headers["X-goog-api-key"]
        seen["prompt"] = json.loads(request.content)["contents"][0]["parts"][0]["text"]
        return httpx.Response(200, json=gemini_reply(PASSING_TEXT))

    use_evaluator(evaluator_with(handler))
    response = client.post(
        "/api/ai-evaluate-simple",
        json={"word": "apple", "meaning": "quả táo", "userInput": "I eat an apple every day"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["source"] == SOURCE_AI
    assert body["evaluation"] == {"passed": True, "feedback": PASSING_TEXT, "confidence": 0.85}
    assert seen["path"].endswith("/models/gemini-2.0-flash:generateContent")
    assert seen["key"] == "test-key"
    assert "I eat an apple every day" in seen["prompt"]


def test_simple_evaluation_fails_on_not_passed_marker(client: TestClient, use_evaluator) -> None:
    use_evaluator(evaluator_with(lambda request: httpx.Response(200, json=gemini_reply(FAILING_TEXT))))

    response = client.post(
        "/api/ai-evaluate-simple",
        json={"word": "apple", "meaning": "quả táo", "userInput": "He go to school"},
    )

    evaluation = response.json()["evaluation"]
    assert evaluation["passed"] is False
    assert evaluation["confidence"] == 0.75


@pytest.mark.parametrize(
    ("word", "user_input", "expected"),
    [("apple", "I like Apple pie", True), ("apple", "I like pie", False), ("app", "app", False)],
)
def test_rate_limited_ai_uses_simple_fallback(
    client: TestClient, use_evaluator, word: str, user_input: str, expected: bool
) -> None:
    use_evaluator(
        evaluator_with(lambda request: httpx.Response(429, json={"error": {"code": 429}}))
    )

    response = client.post(
        "/api/ai-evaluate-simple",
        json={"word": word, "userInput": user_input},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["source"] == SOURCE_FALLBACK
    assert body["evaluation"]["passed"] is expected
    assert body["evaluation"]["confidence"] == 0.5


def test_simple_evaluation_without_api_key_uses_fallback(client: TestClient) -> None:
    response = client.post(
        "/api/ai-evaluate-simple", json={"word": "dog", "userInput": "My dog is friendly"}
    )

    assert response.status_code == 200
    assert response.json()["source"] == SOURCE_FALLBACK
    assert response.json()["evaluation"]["passed"] is True


def test_other_ai_errors_return_server_error(client: TestClient, use_evaluator) -> None:
    use_evaluator(evaluator_with(lambda request: httpx.Response(500, text="backend exploded")))

    response = client.post(
        "/api/ai-evaluate-simple", json={"word": "apple", "userInput": "I eat an apple"}
    )

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "500" in body["details"]


def test_simple_evaluation_requires_word_and_input(client: TestClient) -> None:
    response = client.post("/api/ai-evaluate-simple", json={"word": "apple"})

    assert response.status_code == 400


def test_meaning_evaluation_parses_fenced_json(client: TestClient, use_evaluator) -> None:
    reply = '```json\n{"passed": true, "feedback": "Đúng nghĩa", "confidence": 1.7}\n```'
    use_evaluator(evaluator_with(lambda request: httpx.Response(200, json=gemini_reply(reply))))

    response = client.post(
        "/api/ai-evaluate",
        json={"word": "apple", "meaning": "quả táo", "userInput": "táo"},
    )

    assert response.status_code == 200
    evaluation = response.json()["evaluation"]
    assert evaluation["passed"] is True
    assert evaluation["feedback"] == "Đúng nghĩa ✓"
    assert evaluation["confidence"] == 1.0
    assert evaluation["word"] == "apple"
    assert evaluation["userInput"] == "táo"


def test_meaning_evaluation_falls_back_to_token_overlap(client: TestClient, use_evaluator) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=gemini_reply("not json at all"))

    use_evaluator(evaluator_with(handler))

    response = client.post(
        "/api/ai-evaluate",
        json={"word": "apple", "meaning": "quả táo, trái cây", "userInput": "trái cây đỏ"},
    )

    evaluation = response.json()["evaluation"]
    assert evaluation["passed"] is True
    assert evaluation["confidence"] == 0.3


@pytest.mark.parametrize("feedback", [5, ["Đúng"], {"text": "Đúng"}])
def test_meaning_evaluation_non_text_feedback_falls_back(
    client: TestClient, use_evaluator, feedback
) -> None:
    reply = json.dumps({"passed": True, "feedback": feedback, "confidence": 0.9})
    use_evaluator(evaluator_with(lambda request: httpx.Response(200, json=gemini_reply(reply))))

    response = client.post(
        "/api/ai-evaluate",
        json={"word": "apple", "meaning": "quả táo", "userInput": "táo"},
    )

    assert response.status_code == 200
    evaluation = response.json()["evaluation"]
    assert evaluation["passed"] is True
    assert evaluation["feedback"] == MEANING_CORRECT
    assert evaluation["confidence"] == 0.3


def test_meaning_evaluation_without_api_key(client: TestClient) -> None:
    response = client.post(
        "/api/ai-evaluate",
        json={"word": "apple", "meaning": "quả táo", "userInput": "  Quả Táo "},
    )

    evaluation = response.json()["evaluation"]
    assert evaluation["passed"] is True
    assert evaluation["confidence"] == 0.5


def test_meaning_evaluation_requires_fields(client: TestClient) -> None:
    response = client.post("/api/ai-evaluate", json={"word": "apple", "userInput": "táo"})

    assert response.status_code == 400


def test_practice_feedback(client: TestClient, use_evaluator) -> None:
    use_evaluator(
        evaluator_with(lambda request: httpx.Response(200, json=gemini_reply("Câu đúng, rất tốt!")))
    )

    response = client.post(
        "/api/gemini-practice",
        json={"word": "apple", "meaning": "quả táo", "example": "An apple a day.", "userInput": "I eat apples."},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "feedback": "Câu đúng, rất tốt!"}


def test_practice_feedback_without_ai_is_an_error(client: TestClient) -> None:
    response = client.post("/api/gemini-practice", json={"word": "apple", "userInput": "I eat apples."})

    assert response.status_code == 500
    assert response.json()["success"] is False
