"""Pydantic models for AI sentence evaluation endpoints."""
from __future__ import annotations

from typing import Optional

from app.schemas.common import CamelModel


class EvaluationRequest(CamelModel):
    """A learner's sentence (or answer) for a target word."""

    word: Optional[str] = None
    meaning: Optional[str] = None
    user_input: Optional[str] = None
    source: Optional[str] = None
    topic: Optional[str] = None


class Evaluation(CamelModel):
    passed: bool
    feedback: str
    confidence: float


class SimpleEvaluationResponse(CamelModel):
    success: bool = True
    evaluation: Evaluation
    source: str


class LegacyEvaluation(Evaluation):
    word: str
    user_input: str


class LegacyEvaluationResponse(CamelModel):
    success: bool = True
    evaluation: LegacyEvaluation


class PracticeRequest(CamelModel):
    word: Optional[str] = None
    meaning: Optional[str] = None
    example: Optional[str] = None
    user_input: Optional[str] = None


class PracticeResponse(CamelModel):
    success: bool = True
    feedback: str
