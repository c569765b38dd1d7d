"""Endpoints for per-word learner progress."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.core.security import AuthUser
from app.schemas import (
    ProgressListData,
    ProgressListResponse,
    ProgressRead,
    ProgressSaveResponse,
    ProgressUpdate,
)
from app.services.progress import ProgressService

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressListResponse)
def list_progress(
    source: str | None = Query(default=None, description="oxford, topics or all"),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
) -> ProgressListResponse:
    """Return the learner's progress rows, most recent first, with totals."""

    service = ProgressService(db)
    rows = service.list_progress(user_id=current_user.id, source=source)
    return ProgressListResponse(
        data=ProgressListData(
            progress=[ProgressRead.model_validate(row) for row in rows],
            stats=service.summarize(rows),
        )
    )


@router.post("", response_model=ProgressSaveResponse)
def save_progress(
    payload: ProgressUpdate,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
) -> ProgressSaveResponse:
    """Record one practice submission for a word."""

    if not payload.word or not payload.source:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: word, source",
        )
    progress = ProgressService(db).record_progress(user_id=current_user.id, payload=payload)
    return ProgressSaveResponse(data=ProgressRead.model_validate(progress))
