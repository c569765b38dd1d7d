"""Pydantic models for learner progress endpoints."""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from app.schemas.common import CamelModel


class ProgressUpdate(CamelModel):
    """Payload for recording one practice submission.

    ``word`` and ``source`` are checked by the endpoint so that a missing value
    is reported as a 400 rather than a schema error.
    """

    word: Optional[str] = None
    word_meaning: Optional[str] = None
    source: Optional[str] = None
    topic: Optional[str] = None
    is_mastered: bool = False
    feedback: Optional[str] = None


class ProgressRead(CamelModel):
    """Stored progress of a learner for one word."""

    id: int
    user_id: str
    word: str
    word_meaning: Optional[str] = None
    source: str
    topic: Optional[str] = None
    is_mastered: bool
    attempts: int
    learned_date: Optional[date] = None
    first_attempt_date: Optional[datetime] = None
    last_attempt_date: Optional[datetime] = None
    ai_feedback: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProgressStats(CamelModel):
    total_words: int
    mastered_words: int
    in_progress: int
    mastery_rate: str


class ProgressListData(CamelModel):
    progress: list[ProgressRead]
    stats: ProgressStats


class ProgressListResponse(CamelModel):
    success: bool = True
    data: ProgressListData


class ProgressSaveResponse(CamelModel):
    success: bool = True
    data: ProgressRead
