"""Pydantic schemas for Oxford word endpoints."""
from __future__ import annotations

from typing import Optional

from app.schemas.common import CamelModel


class WordRead(CamelModel):
    """Representation of an Oxford word."""

    id: int
    term: str
    meaning: str
    part_of_speech: Optional[str] = None
    example: Optional[str] = None
    ipa: Optional[str] = None
    image_url: Optional[str] = None
    topic: Optional[str] = None
    level: Optional[str] = None


class WordListResponse(CamelModel):
    """Paginated word list payload."""

    words: list[WordRead]
    total: int
    page: int
    limit: int
    total_pages: int


class WordCountResponse(CamelModel):
    total: int


class RandomWord(CamelModel):
    """Word prompt used by the mini-games."""

    term: str
    meaning: str
