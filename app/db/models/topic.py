"""Curated topic collection models."""
from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base


class Topic(Base):
    """A hand-curated vocabulary topic."""

    __tablename__ = "topics"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text)

    words = relationship(
        "TopicWord", back_populates="topic", cascade="all, delete-orphan", lazy="selectin"
    )


class TopicWord(Base):
    """A word belonging to a curated topic."""

    __tablename__ = "topic_words"

    id = Column(Integer, primary_key=True)
    topic_id = Column(
        Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True
    )
    term = Column(Text, nullable=False)
    meaning = Column(Text, nullable=False)
    part_of_speech = Column("pos", String(50), nullable=True)
    example = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)

    topic = relationship("Topic", back_populates="words")
