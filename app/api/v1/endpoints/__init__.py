"""API endpoint modules for v1."""

from app.api.v1.endpoints import (
    auth,
    custom,
    evaluation,
    game,
    images,
    progress,
    stats,
    topics,
    vocabulary,
    word_status,
)

__all__ = [
    "auth",
    "custom",
    "evaluation",
    "game",
    "images",
    "progress",
    "stats",
    "topics",
    "vocabulary",
    "word_status",
]
