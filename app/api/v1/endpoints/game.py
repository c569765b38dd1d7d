"""Word prompts for the vocabulary mini-games."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import RandomWord
from app.services.vocabulary import VocabularyService

router = APIRouter(prefix="/game", tags=["game"])

MAX_RANDOM_WORDS = 50


@router.get("/random", response_model=list[RandomWord])
def random_words(
    n: int = Query(default=10, description="Number of words, clamped to 1..50"),
    db: Session = Depends(get_db),
) -> list[RandomWord]:
    """Return ``n`` random Oxford words with their meanings."""

    count = min(max(n, 1), MAX_RANDOM_WORDS)
    words = VocabularyService(db).random_words(count)
    logger.debug("Random game words selected", requested=n, returned=len(words))
    return [RandomWord.model_validate(word) for word in words]
