"""Shared API dependencies."""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger
from sqlalchemy.orm import Session

from app.core.security import AuthUser, InvalidTokenError, resolve_user
from app.db.session import SessionLocal
from app.services.evaluation import SentenceEvaluator
from app.services.images import ImageService
from app.services.llm_service import LLMService
from app.services.sheet_import import SheetImporter
from app.services.word_cache import WordCache

bearer_scheme = HTTPBearer(auto_error=False)

_llm_service_singleton: LLMService | None = None


def get_db() -> Session:
    """Yield a database session for request lifetime."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthUser:
    """Resolve the authenticated user from the Authorization header."""

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return resolve_user(credentials.credentials)
    except InvalidTokenError as exc:
        logger.info("Rejected bearer token", error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def get_llm_service() -> LLMService | None:
    """Return a cached LLM service, or ``None`` when no provider is configured."""

    global _llm_service_singleton
    if _llm_service_singleton is None:
        try:
            _llm_service_singleton = LLMService()
        except ValueError:
            logger.warning("Gemini API key missing; AI evaluation uses local fallbacks")
            return None
    return _llm_service_singleton


def get_sentence_evaluator(
    llm_service: LLMService | None = Depends(get_llm_service),
) -> SentenceEvaluator:
    return SentenceEvaluator(llm_service)


def get_word_cache(request: Request) -> WordCache:
    """Return the word cache created at application startup."""

    return request.app.state.word_cache


def get_image_service(db: Session = Depends(get_db)) -> ImageService:
    return ImageService(db)


def get_sheet_importer() -> SheetImporter:
    return SheetImporter()
