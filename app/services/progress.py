"""Business logic for per-word learner progress."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from loguru import logger
from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from app.db.models.progress import UserProgress
from app.schemas.progress import ProgressStats, ProgressUpdate


def format_rate(part: int, whole: int) -> str:
    """Return ``part / whole`` as a one-decimal percentage string, ``"0"`` when empty."""

    if whole <= 0:
        return "0"
    return f"{part / whole * 100:.1f}"


class ProgressService:
    """High level helper for learner progress workflows."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _progress_query(self, user_id: str, word: str, source: str):
        return select(UserProgress).where(
            and_(
                UserProgress.user_id == user_id,
                UserProgress.word == word,
                UserProgress.source == source,
            )
        )

    def list_progress(self, *, user_id: str, source: str | None = None) -> list[UserProgress]:
        """Return a learner's progress rows, most recently updated first.

        ``source`` of ``None`` or ``"all"`` returns every source.
        """

        stmt = (
            select(UserProgress)
            .where(UserProgress.user_id == user_id)
            .order_by(UserProgress.updated_at.desc(), UserProgress.id.desc())
        )
        if source and source != "all":
            stmt = stmt.where(UserProgress.source == source)
        return list(self.db.scalars(stmt))

    @staticmethod
    def summarize(rows: Iterable[UserProgress]) -> ProgressStats:
        rows = list(rows)
        total = len(rows)
        mastered = sum(1 for row in rows if row.is_mastered)
        return ProgressStats(
            total_words=total,
            mastered_words=mastered,
            in_progress=total - mastered,
            mastery_rate=format_rate(mastered, total),
        )

    def record_progress(
        self,
        *,
        user_id: str,
        payload: ProgressUpdate,
        now: datetime | None = None,
    ) -> UserProgress:
        """Insert or update the row for ``(user, word, source)``."""

        now = now or datetime.now(timezone.utc)
        progress = self.db.scalars(
            self._progress_query(user_id, payload.word, payload.source)
        ).first()
        if progress is None:
            progress = UserProgress(
                user_id=user_id,
                word=payload.word,
                source=payload.source,
                attempts=0,
                created_at=now,
            )
            self.db.add(progress)

        progress.record_attempt(
            attempted_at=now,
            is_mastered=payload.is_mastered,
            word_meaning=payload.word_meaning,
            topic=payload.topic or None,
            feedback=payload.feedback,
        )
        self.db.commit()
        self.db.refresh(progress)
        logger.info(
            "Progress recorded",
            user_id=user_id,
            word=payload.word,
            source=payload.source,
            attempts=progress.attempts,
        )
        return progress


__all__ = ["ProgressService", "format_rate"]
