"""Verification of access tokens issued by the hosted auth provider."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from app.config import settings


ALGORITHM = "HS256"


class InvalidTokenError(Exception):
    """Raised when a JWT cannot be decoded or is invalid."""


@dataclass(frozen=True)
class AuthUser:
    """Local shape of the provider's user, built from token claims."""

    id: str
    email: str | None = None
    role: str | None = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "AuthUser":
        subject = claims.get("sub")
        if not subject:
            raise InvalidTokenError("Token has no subject")
        return cls(id=str(subject), email=claims.get("email"), role=claims.get("role"))


def create_access_token(
    subject: str | Any,
    *,
    email: str | None = None,
    expires_minutes: int = 60,
) -> str:
    """Sign a provider-compatible access token; used for local development and tests."""

    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    payload: Dict[str, Any] = {
        "exp": expire,
        "sub": str(subject),
        "aud": settings.AUTH_JWT_AUDIENCE,
        "role": "authenticated",
    }
    if email:
        payload["email"] = email
    return jwt.encode(payload, settings.AUTH_JWT_SECRET, algorithm=ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode a JWT and return its payload, raising ``InvalidTokenError`` if invalid."""

    try:
        return jwt.decode(
            token,
            settings.AUTH_JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=settings.AUTH_JWT_AUDIENCE,
        )
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc


def resolve_user(token: str) -> AuthUser:
    """Return the user a bearer token belongs to."""

    return AuthUser.from_claims(decode_token(token))
