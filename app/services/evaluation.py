"""AI-assisted evaluation of learner sentences and answers."""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from app.config import settings
from app.core.prompts.evaluation_prompts import (
    CONCLUSION_PASS,
    FAIL_MARKER,
    FALLBACK_WORD_MISSING,
    FALLBACK_WORD_USED,
    MEANING_CORRECT,
    MEANING_EVALUATION_PROMPT,
    MEANING_RETRY,
    PASS_MARKER,
    PRACTICE_FEEDBACK_PROMPT,
    SENTENCE_EVALUATION_PROMPT,
)
from app.services.llm_service import LLMProviderError, LLMService
from app.utils.exceptions import LLMServiceError

SOURCE_AI = "gemini-ai"
SOURCE_FALLBACK = "fallback-simple"

_CODE_FENCE = re.compile(r"```json\n?|\n?```")
_MEANING_SPLIT = re.compile(r"[\s,;.-]+")


@dataclass
class EvaluationResult:
    passed: bool
    feedback: str
    confidence: float
    source: str = SOURCE_AI


def _mentions_word(word: str, user_input: str) -> bool:
    return word.lower() in user_input.lower() and len(user_input.strip()) > 3


def _clamp_confidence(value: Any) -> float:
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return 0.5
    if confidence != confidence or confidence == 0:
        # NaN and zero both fall back to the neutral default.
        return 0.5
    return max(0.0, min(1.0, confidence))


class SentenceEvaluator:
    """Grade learner input with Gemini, degrading to local heuristics."""

    def __init__(self, llm: Optional[LLMService] = None) -> None:
        self.llm = llm

    # ------------------------------------------------------------------
    # Sentence evaluation
    # ------------------------------------------------------------------
    def evaluate_sentence(self, *, word: str, meaning: str | None, user_input: str) -> EvaluationResult:
        """Judge a sentence written with ``word``.

        A rate-limited (or unconfigured) AI falls back to checking that the word
        appears in the sentence. Any other AI failure raises
        :class:`LLMServiceError`.
        """

        if self.llm is None:
            logger.warning("No AI provider configured, using simple evaluation", word=word)
            return self._simple_fallback(word, user_input)

        prompt = SENTENCE_EVALUATION_PROMPT.format(
            word=word, meaning=meaning or "", user_input=user_input
        )
        try:
            result = self.llm.generate_text(prompt)
        except LLMProviderError as exc:
            if exc.rate_limited:
                logger.warning("AI quota exhausted, using simple evaluation", word=word)
                return self._simple_fallback(word, user_input)
            raise LLMServiceError(str(exc), {"status_code": exc.status_code}) from exc

        text = result.content.strip()
        passed = CONCLUSION_PASS in text or (PASS_MARKER in text and FAIL_MARKER not in text)
        logger.info("Sentence evaluated", word=word, passed=passed)
        return EvaluationResult(
            passed=passed,
            feedback=text,
            confidence=0.85 if passed else 0.75,
            source=SOURCE_AI,
        )

    @staticmethod
    def _simple_fallback(word: str, user_input: str) -> EvaluationResult:
        passed = _mentions_word(word, user_input)
        template = FALLBACK_WORD_USED if passed else FALLBACK_WORD_MISSING
        return EvaluationResult(
            passed=passed,
            feedback=template.format(word=word),
            confidence=0.5,
            source=SOURCE_FALLBACK,
        )

    # ------------------------------------------------------------------
    # Meaning evaluation
    # ------------------------------------------------------------------
    def evaluate_meaning(self, *, word: str, meaning: str, user_input: str) -> EvaluationResult:
        """Judge whether ``user_input`` expresses the meaning of ``word``.

        Never raises: AI failures fall back to token overlap with the meaning.
        """

        normalized_input = user_input.lower().strip()
        normalized_meaning = meaning.lower()

        if self.llm is None:
            passed = normalized_input in normalized_meaning or normalized_meaning in normalized_input
            return EvaluationResult(
                passed=passed,
                feedback=MEANING_CORRECT if passed else MEANING_RETRY,
                confidence=0.5,
                source=SOURCE_FALLBACK,
            )

        prompt = MEANING_EVALUATION_PROMPT.format(word=word, meaning=meaning, user_input=user_input)
        try:
            result = self.llm.generate_text(
                prompt, model=settings.GEMINI_LEGACY_MODEL, json_mode=True
            )
            payload = json.loads(_CODE_FENCE.sub("", result.content).strip())
            if not isinstance(payload, dict):
                raise ValueError("AI evaluation is not a JSON object")
            feedback = payload.get("feedback")
            if feedback is not None and not isinstance(feedback, str):
                raise ValueError("AI feedback is not text")
        except (LLMProviderError, ValueError) as exc:
            logger.warning("AI meaning evaluation failed, using token overlap", word=word, error=str(exc))
            tokens = [token for token in _MEANING_SPLIT.split(normalized_meaning) if token]
            passed = any(token in normalized_input or normalized_input in token for token in tokens)
            return EvaluationResult(
                passed=passed,
                feedback=MEANING_CORRECT if passed else MEANING_RETRY,
                confidence=0.3,
                source=SOURCE_FALLBACK,
            )

        passed = bool(payload.get("passed"))
        mark = "✓" if passed else "✗"
        if not feedback:
            feedback = f"AI evaluation completed {mark}"
        elif "✓" not in feedback and "✗" not in feedback:
            feedback = f"{feedback} {mark}"
        return EvaluationResult(
            passed=passed,
            feedback=feedback,
            confidence=_clamp_confidence(payload.get("confidence")),
            source=SOURCE_AI,
        )

    # ------------------------------------------------------------------
    # Practice feedback
    # ------------------------------------------------------------------
    def practice_feedback(
        self,
        *,
        word: str | None,
        meaning: str | None,
        example: str | None,
        user_input: str | None,
    ) -> str:
        """Return short free-text feedback on a practice sentence."""

        if self.llm is None:
            raise LLMServiceError("AI provider is not configured")

        prompt = PRACTICE_FEEDBACK_PROMPT.format(
            word=word or "",
            meaning=meaning or "",
            example=example or "",
            user_input=user_input or "",
        )
        try:
            result = self.llm.generate_text(prompt)
        except LLMProviderError as exc:
            raise LLMServiceError(str(exc), {"status_code": exc.status_code}) from exc
        return result.content


__all__ = ["EvaluationResult", "SOURCE_AI", "SOURCE_FALLBACK", "SentenceEvaluator"]
