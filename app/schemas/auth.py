"""Authentication related schemas."""
from __future__ import annotations

from typing import Optional

from app.schemas.common import CamelModel


class AuthUserRead(CamelModel):
    """The authenticated user as known from the provider's token."""

    id: str
    email: Optional[str] = None
    role: Optional[str] = None
