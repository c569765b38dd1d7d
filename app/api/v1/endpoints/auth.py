"""Authentication endpoints.

Sign-up and sign-in happen with the hosted auth provider; this API only
reports who a bearer token belongs to.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user
from app.core.security import AuthUser
from app.schemas import AuthUserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=AuthUserRead)
def read_current_user(current_user: AuthUser = Depends(get_current_user)) -> AuthUserRead:
    return AuthUserRead(id=current_user.id, email=current_user.email, role=current_user.role)
