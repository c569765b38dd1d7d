"""Mastered/learning term sets of a learner, stored as delimited strings."""
from __future__ import annotations

from datetime import datetime, timezone

from loguru import logger
from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from app.core.word_strings import WordStatus, apply_status, status_of
from app.db.models.word_status import UserWordStrings

DEFAULT_SOURCE = "oxford"


class WordStatusService:
    """Read and update a learner's word strings for one source."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_strings(self, *, user_id: str, source: str) -> UserWordStrings | None:
        stmt = select(UserWordStrings).where(
            and_(UserWordStrings.user_id == user_id, UserWordStrings.source == source)
        )
        return self.db.scalars(stmt).first()

    def list_strings(self, *, user_id: str) -> list[UserWordStrings]:
        stmt = (
            select(UserWordStrings)
            .where(UserWordStrings.user_id == user_id)
            .order_by(UserWordStrings.source)
        )
        return list(self.db.scalars(stmt))

    def get_status(self, *, user_id: str, source: str, word: str) -> WordStatus:
        row = self.get_strings(user_id=user_id, source=source)
        if row is None:
            return "not-started"
        return status_of(word, row.mastered_words, row.learning_words)

    def update_status(self, *, user_id: str, source: str, word: str, is_correct: bool) -> WordStatus:
        """Move ``word`` to the mastered (correct) or learning list.

        Read-modify-write without locking: concurrent writers for the same
        learner and source overwrite each other.
        """

        row = self.get_strings(user_id=user_id, source=source)
        if row is None:
            row = UserWordStrings(user_id=user_id, source=source, mastered_words="", learning_words="")
            self.db.add(row)

        row.mastered_words, row.learning_words = apply_status(
            row.mastered_words, row.learning_words, word, is_correct
        )
        row.last_updated = datetime.now(timezone.utc)
        self.db.commit()

        status: WordStatus = "mastered" if is_correct else "learning"
        logger.info("Word status updated", user_id=user_id, source=source, word=word, status=status)
        return status


__all__ = ["DEFAULT_SOURCE", "WordStatusService"]
