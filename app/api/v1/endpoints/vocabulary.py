"""Oxford word list browsing endpoints."""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api import deps
from app.config import settings
from app.core.security import AuthUser
from app.core.topics import TOPIC_NAMES
from app.schemas import TopicStatRead, WordCountResponse, WordListResponse, WordRead
from app.services.vocabulary import VocabularyService
from app.services.word_cache import WordCache
from app.utils.cache import build_cache_key, cache_backend

router = APIRouter(prefix="/oxford", tags=["oxford"])

LIST_CACHE_NAMESPACE = "oxford:list"
ALL_WORDS_LIMIT = 10000


def _parse_limit(raw: str) -> int:
    if raw == "all":
        return ALL_WORDS_LIMIT
    try:
        value = int(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="limit must be a number or 'all'"
        ) from exc
    return min(max(value, 1), ALL_WORDS_LIMIT)


@router.get("", response_model=WordListResponse)
def list_words(
    search: str = Query(default="", description="Substring of the term or meaning"),
    topic: str = Query(default="", description="Stored topic to filter by"),
    page: int = Query(default=1, ge=1),
    limit: str = Query(default="50", description="Page size, or 'all'"),
    db: Session = Depends(deps.get_db),
) -> WordListResponse:
    """Return one page of Oxford words ordered by term."""

    page_size = _parse_limit(limit)
    cache_key = build_cache_key(search=search, topic=topic, page=page, limit=page_size)
    cached = cache_backend.get(LIST_CACHE_NAMESPACE, cache_key)
    if cached is not None:
        return cached

    service = VocabularyService(db)
    words = service.list_words(
        search=search or None,
        topic=topic or None,
        limit=page_size,
        offset=(page - 1) * page_size,
    )
    total = service.count_words(search=search or None, topic=topic or None)
    response = WordListResponse(
        words=[WordRead.model_validate(word) for word in words],
        total=total,
        page=page,
        limit=page_size,
        total_pages=math.ceil(total / page_size),
    )
    payload = response.model_dump(mode="json", by_alias=True)
    cache_backend.set(LIST_CACHE_NAMESPACE, cache_key, payload, ttl_seconds=settings.WORD_CACHE_TTL_SECONDS)
    return payload


@router.get("/count", response_model=WordCountResponse)
def count_words(
    search: str = Query(default=""),
    db: Session = Depends(deps.get_db),
) -> WordCountResponse:
    return WordCountResponse(total=VocabularyService(db).count_words(search=search or None))


@router.get("/topics", response_model=list[TopicStatRead])
def list_topic_stats(cache: WordCache = Depends(deps.get_word_cache)) -> list[TopicStatRead]:
    """Word counts of the predefined topics, served from the word cache."""

    return cache.load_topic_stats()


@router.get("/topics/{topic_name}/words", response_model=list[WordRead])
def list_topic_words(
    topic_name: str,
    cache: WordCache = Depends(deps.get_word_cache),
) -> list[WordRead]:
    if topic_name not in TOPIC_NAMES:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown topic")
    return cache.get_words_by_topic(topic_name)


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
def clear_word_cache(
    cache: WordCache = Depends(deps.get_word_cache),
    current_user: AuthUser = Depends(deps.get_current_user),
) -> None:
    """Drop cached words and topic stats so the next read refetches them."""

    cache.clear_cache()
    cache_backend.invalidate(LIST_CACHE_NAMESPACE, prefix="")
