"""Delimited mastered/learning term sets per learner and source."""
from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from app.db.base import Base


class UserWordStrings(Base):
    """Mastered and learning terms of a learner, each stored as one string.

    See :mod:`app.core.word_strings` for the encoding.
    """

    __tablename__ = "user_word_strings"
    __table_args__ = (UniqueConstraint("user_id", "source"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    source = Column(String(20), nullable=False)
    mastered_words = Column(Text, nullable=False, default="")
    learning_words = Column(Text, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_updated = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
