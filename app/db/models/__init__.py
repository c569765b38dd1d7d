"""Database models package."""
from app.db.models.vocabulary import OxfordWord
from app.db.models.topic import Topic, TopicWord
from app.db.models.progress import UserProgress
from app.db.models.word_status import UserWordStrings

__all__ = [
    "OxfordWord",
    "Topic",
    "TopicWord",
    "UserProgress",
    "UserWordStrings",
]
