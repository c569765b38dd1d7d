"""Service helpers for Oxford word and curated topic endpoints."""
from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from app.db.models.topic import Topic, TopicWord
from app.db.models.vocabulary import OxfordWord
from app.schemas.vocabulary import WordRead


class VocabularyService:
    """Provide querying utilities for the Oxford list and curated topics."""

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _search_filter(search: str | None):
        if not search:
            return None
        pattern = f"%{search}%"
        return or_(OxfordWord.term.ilike(pattern), OxfordWord.meaning.ilike(pattern))

    def list_words(
        self,
        *,
        search: str | None = None,
        topic: str | None = None,
        limit: int,
        offset: int,
    ) -> list[OxfordWord]:
        """Return a slice of Oxford words ordered by term."""

        stmt = select(OxfordWord).order_by(OxfordWord.term.asc()).offset(offset).limit(limit)
        condition = self._search_filter(search)
        if condition is not None:
            stmt = stmt.where(condition)
        if topic:
            stmt = stmt.where(OxfordWord.topic == topic)
        return list(self.db.scalars(stmt))

    def count_words(self, *, search: str | None = None, topic: str | None = None) -> int:
        """Return the number of Oxford words matching the filters."""

        stmt = select(func.count()).select_from(OxfordWord)
        condition = self._search_filter(search)
        if condition is not None:
            stmt = stmt.where(condition)
        if topic:
            stmt = stmt.where(OxfordWord.topic == topic)
        return int(self.db.scalar(stmt) or 0)

    def list_all_words(self) -> list[WordRead]:
        """Return the full word list; used to fill the word cache."""

        stmt = select(OxfordWord).order_by(OxfordWord.term.asc())
        return [WordRead.model_validate(word) for word in self.db.scalars(stmt)]

    def random_words(self, count: int) -> list[OxfordWord]:
        stmt = select(OxfordWord).order_by(func.random()).limit(count)
        return list(self.db.scalars(stmt))

    def words_without_images(self, limit: int) -> list[OxfordWord]:
        """Return words that still need an image, ordered by term."""

        stmt = (
            select(OxfordWord)
            .where(or_(OxfordWord.image_url.is_(None), OxfordWord.image_url == ""))
            .order_by(OxfordWord.term.asc())
            .limit(limit)
        )
        return list(self.db.scalars(stmt))

    def set_image_url(self, term: str, image_url: str) -> int:
        """Store ``image_url`` on every word whose term matches case-insensitively.

        Returns the number of updated rows.
        """

        stmt = select(OxfordWord).where(func.lower(OxfordWord.term) == term.lower())
        words = list(self.db.scalars(stmt))
        for word in words:
            word.image_url = image_url
        self.db.commit()
        return len(words)

    # ------------------------------------------------------------------
    # Curated topics
    # ------------------------------------------------------------------
    def list_topics(self) -> list[tuple[Topic, int]]:
        """Return curated topics ordered by name with their word counts."""

        stmt = (
            select(Topic, func.count(TopicWord.id))
            .outerjoin(TopicWord, TopicWord.topic_id == Topic.id)
            .group_by(Topic.id)
            .order_by(Topic.name)
        )
        return [(topic, int(count)) for topic, count in self.db.execute(stmt)]

    def topic_words(self, topic_id: int) -> list[TopicWord]:
        """Return the words of a curated topic ordered by term.

        Unknown topics simply have no words.
        """

        stmt = select(TopicWord).where(TopicWord.topic_id == topic_id).order_by(TopicWord.term)
        return list(self.db.scalars(stmt))


__all__ = ["VocabularyService"]
