"""Pydantic models for word status endpoints."""
from __future__ import annotations

from typing import Any, Optional

from app.schemas.common import CamelModel


class WordStatusUpdate(CamelModel):
    """Result of one answer for a word.

    ``is_correct`` must be a JSON boolean; the endpoint rejects anything else.
    """

    word: Optional[str] = None
    source: Optional[str] = None
    is_correct: Any = None


class WordStatusRead(CamelModel):
    word: str
    source: str
    status: str


class WordStatusStrings(CamelModel):
    """Raw delimited term strings of one source."""

    mastered_words: str = ""
    learning_words: str = ""
    source: str
