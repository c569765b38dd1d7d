"""Learner progress models."""
from datetime import date, datetime

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from app.db.base import Base


class UserProgress(Base):
    """One row per (user, word, source) practice history."""

    __tablename__ = "user_progress"
    __table_args__ = (UniqueConstraint("user_id", "word", "source"),)

    id = Column(Integer, primary_key=True)
    # Subject of the auth provider's token; users live with the provider.
    user_id = Column(String(64), nullable=False, index=True)
    word = Column(Text, nullable=False)
    word_meaning = Column(Text)
    source = Column(String(20), nullable=False)  # "oxford" or "topics"
    topic = Column(String(100))

    is_mastered = Column(Boolean, default=False)
    attempts = Column(Integer, default=0)
    ai_feedback = Column(Text)

    learned_date = Column(Date)
    first_attempt_date = Column(DateTime(timezone=True))
    last_attempt_date = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def record_attempt(
        self,
        *,
        attempted_at: datetime,
        is_mastered: bool,
        word_meaning: str | None,
        topic: str | None,
        feedback: str | None,
    ) -> None:
        """Apply one practice submission to the row."""

        if self.first_attempt_date is None:
            self.first_attempt_date = attempted_at
        if self.learned_date is None:
            self.learned_date = attempted_at.date() if attempted_at else date.today()
        self.attempts = (self.attempts or 0) + 1
        self.is_mastered = is_mastered
        self.word_meaning = word_meaning
        self.topic = topic
        self.ai_feedback = feedback
        self.last_attempt_date = attempted_at
        self.updated_at = attempted_at
