"""API router for version 1."""
from fastapi import APIRouter

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


api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(vocabulary.router)
api_router.include_router(images.router)
api_router.include_router(topics.router)
api_router.include_router(game.router)
api_router.include_router(evaluation.router)
api_router.include_router(progress.router)
api_router.include_router(word_status.router)
api_router.include_router(stats.router)
api_router.include_router(custom.router)
