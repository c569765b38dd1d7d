"""Mastered/learning status of individual words."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.core.security import AuthUser
from app.schemas import WordStatusRead, WordStatusStrings, WordStatusUpdate
from app.services.word_status import DEFAULT_SOURCE, WordStatusService

router = APIRouter(prefix="/word-status", tags=["word-status"])


@router.get("", response_model=WordStatusRead | WordStatusStrings)
def read_word_status(
    word: str | None = Query(default=None),
    source: str = Query(default=DEFAULT_SOURCE),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    """Status of ``word``, or both raw term strings when no word is given.

    Read failures degrade to ``not-started`` or empty strings.
    """

    service = WordStatusService(db)
    if word:
        try:
            word_status = service.get_status(user_id=current_user.id, source=source, word=word)
        except SQLAlchemyError:
            logger.exception("Failed to read word status", user_id=current_user.id, word=word)
            word_status = "not-started"
        return WordStatusRead(word=word, source=source, status=word_status)

    try:
        row = service.get_strings(user_id=current_user.id, source=source)
    except SQLAlchemyError:
        logger.exception("Failed to read word strings", user_id=current_user.id, source=source)
        row = None
    return WordStatusStrings(
        mastered_words=(row.mastered_words if row else "") or "",
        learning_words=(row.learning_words if row else "") or "",
        source=source,
    )


@router.post("", response_model=WordStatusRead)
def update_word_status(
    payload: WordStatusUpdate,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
) -> WordStatusRead:
    """Move a word to the mastered or learning list after an answer."""

    if not payload.word or not payload.source or not isinstance(payload.is_correct, bool):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing fields")

    new_status = WordStatusService(db).update_status(
        user_id=current_user.id,
        source=payload.source,
        word=payload.word,
        is_correct=payload.is_correct,
    )
    return WordStatusRead(word=payload.word, source=payload.source, status=new_status)
