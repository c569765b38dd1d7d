"""Learner statistics endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.core.security import AuthUser
from app.schemas import StatsResponse
from app.services.stats import StatsService, empty_stats

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def get_stats(
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    """Mastered and learning counts per source, with completion rates."""

    try:
        data = StatsService(db).compute(user_id=current_user.id)
    except SQLAlchemyError:
        logger.exception("Failed to compute stats", user_id=current_user.id)
        body = StatsResponse(success=False, error="Server error", data=empty_stats())
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(mode="json", by_alias=True),
        )
    return StatsResponse(data=data)
