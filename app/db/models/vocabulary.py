"""Oxford word list models."""
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from app.db.base import Base


class OxfordWord(Base):
    """A word of the curated Oxford 3000 list."""

    __tablename__ = "oxford_words"

    id = Column(Integer, primary_key=True)
    term = Column(Text, nullable=False, index=True)
    meaning = Column(Text, nullable=False)
    part_of_speech = Column("pos", String(50), nullable=True)
    example = Column(Text, nullable=True)
    ipa = Column(String(100), nullable=True)
    image_url = Column(Text, nullable=True)
    # NULL means the topic is derived from the word's text at read time.
    topic = Column(String(100), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<OxfordWord term={self.term!r} topic={self.topic!r}>"
