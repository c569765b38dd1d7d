"""Pydantic models for custom vocabulary imports."""
from __future__ import annotations

from typing import Optional

from app.schemas.common import CamelModel


class SheetImportRequest(CamelModel):
    """Either a Google Sheets link or raw CSV text."""

    url: Optional[str] = None
    csv: Optional[str] = None


class VocabPair(CamelModel):
    en: str
    vn: str


class SheetImportResponse(CamelModel):
    source_url: Optional[str] = None
    total: int
    items: list[VocabPair]
