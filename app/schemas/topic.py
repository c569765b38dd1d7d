"""Pydantic schemas for topic endpoints."""
from __future__ import annotations

from typing import Optional

from app.schemas.common import CamelModel


class TopicStatRead(CamelModel):
    """Word count of one predefined topic."""

    name: str
    icon: str
    description: str
    word_count: int


class CuratedTopicRead(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    word_count: int


class TopicWordRead(CamelModel):
    id: int
    term: str
    meaning: str
    part_of_speech: Optional[str] = None
    example: Optional[str] = None
    image_url: Optional[str] = None
