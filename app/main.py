"""FastAPI application factory."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.v1 import api_router
from app.config import settings
from app.db.session import SessionLocal
from app.schemas import WordRead
from app.services.vocabulary import VocabularyService
from app.services.word_cache import WordCache


tags_metadata: List[dict[str, str]] = [
    {"name": "oxford", "description": "Browse the Oxford 3000 word list and its topics."},
    {"name": "evaluation", "description": "AI feedback on learner sentences."},
    {"name": "word-status", "description": "Track mastered and learning words."},
]


def fetch_oxford_words() -> list[WordRead]:
    """Load the full Oxford list from the database for the word cache."""

    with SessionLocal() as db:
        return VocabularyService(db).list_all_words()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    word_cache = WordCache(fetch_oxford_words)
    app.state.word_cache = word_cache
    logger.info("Word cache ready", ttl=word_cache.ttl)
    try:
        yield
    finally:
        word_cache.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Oxford 3000 vocabulary trainer with AI sentence feedback.",
        version="0.1.0",
        openapi_tags=tags_metadata,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors(), "message": "Validation failed"},
        )

    @app.get(f"{settings.API_PREFIX}/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
