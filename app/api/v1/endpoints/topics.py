"""Curated topic collection endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import CuratedTopicRead, TopicWordRead
from app.services.vocabulary import VocabularyService

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("", response_model=list[CuratedTopicRead])
def list_topics(db: Session = Depends(get_db)) -> list[CuratedTopicRead]:
    """Return curated topics ordered by name with their word counts."""

    return [
        CuratedTopicRead(
            id=topic.id, name=topic.name, description=topic.description, word_count=count
        )
        for topic, count in VocabularyService(db).list_topics()
    ]


@router.get("/{topic_id}/words", response_model=list[TopicWordRead])
def list_topic_words(topic_id: int, db: Session = Depends(get_db)) -> list[TopicWordRead]:
    return [TopicWordRead.model_validate(word) for word in VocabularyService(db).topic_words(topic_id)]
