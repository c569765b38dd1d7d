"""Pydantic models for word image endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel


class ImageRequest(CamelModel):
    term: Optional[str] = None


class ImageResponse(CamelModel):
    term: str
    image_url: str
    updated: int


class ImageSearchResponse(CamelModel):
    term: str
    urls: list[str]


class ImageBatchRequest(CamelModel):
    limit: int = Field(default=20, ge=1, le=200)


class ImageBatchResponse(CamelModel):
    """Outcome of a sequential image lookup run."""

    requested: int
    loaded: int
    failed: list[str] = Field(default_factory=list)
