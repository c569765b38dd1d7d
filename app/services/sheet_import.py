"""Import custom vocabulary pairs from a Google Sheet or raw CSV text.

Column A holds the English term and column B its Vietnamese meaning.
"""
from __future__ import annotations

import csv
import io
import re
import time
from typing import Iterable, Optional
from urllib.parse import parse_qs, urlencode, urlsplit

import httpx
from loguru import logger

from app.config import settings
from app.schemas.sheet import VocabPair
from app.utils.exceptions import SheetImportError

_SHEET_PATH = re.compile(r"/spreadsheets/d/([a-zA-Z0-9\-_]+)")
_FRAGMENT_GID = re.compile(r"gid=(\d+)")


def parse_csv(text: str) -> list[list[str]]:
    """Split CSV text into rows of cells."""

    return list(csv.reader(io.StringIO(text, newline="")))


def extract_sheet_ids(url: str) -> Optional[tuple[str, str]]:
    """Return ``(spreadsheet_id, gid)`` for a Google Sheets link, or ``None``."""

    value = (url or "").strip()
    if not value:
        return None
    if not re.match(r"^https?://", value, re.IGNORECASE):
        value = "https://" + value

    parts = urlsplit(value)
    if (parts.hostname or "").lower() != "docs.google.com":
        return None
    match = _SHEET_PATH.search(parts.path)
    if not match:
        return None

    gid = parse_qs(parts.query).get("gid", ["0"])[0] or "0"
    if gid == "0" and parts.fragment:
        fragment_match = _FRAGMENT_GID.search(parts.fragment)
        if fragment_match:
            gid = fragment_match.group(1)
    return match.group(1), gid


def build_csv_url(sheet_id: str, gid: str = "0") -> str:
    query = urlencode({"format": "csv", "gid": gid or "0", "_": int(time.time() * 1000)})
    return f"https://docs.google.com/spreadsheets/d/{sheet_id}/export?{query}"


def rows_to_pairs(rows: Iterable[list[str]]) -> list[VocabPair]:
    """Turn CSV rows into vocabulary pairs.

    An ``en``/``vn`` header row and rows with an empty cell are dropped.
    """

    pairs = [
        VocabPair(
            en=(row[0] if len(row) > 0 else "").strip(),
            vn=(row[1] if len(row) > 1 else "").strip(),
        )
        for row in rows
    ]
    if pairs and pairs[0].en.lower() == "en" and pairs[0].vn.lower() == "vn":
        pairs = pairs[1:]
    pairs = [pair for pair in pairs if pair.en and pair.vn]
    if not pairs:
        raise SheetImportError("No valid rows found (column A = en, column B = vn)")
    return pairs


class SheetImporter:
    """Fetch a published Google Sheet as CSV and parse it."""

    def __init__(self, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        self.transport = transport

    def fetch_csv(self, url: str) -> str:
        ids = extract_sheet_ids(url)
        if ids is None:
            raise SheetImportError("Not a Google Sheets link", {"url": url})

        csv_url = build_csv_url(*ids)
        try:
            with httpx.Client(
                timeout=settings.HTTP_TIMEOUT_SECONDS,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = client.get(csv_url)
        except httpx.HTTPError as exc:
            raise SheetImportError(f"Could not download sheet: {exc}") from exc

        if response.status_code >= 400:
            logger.warning("Sheet download failed", status=response.status_code, sheet_id=ids[0])
            raise SheetImportError(
                "Could not download sheet; is it shared publicly?",
                {"status_code": response.status_code},
            )
        return response.text

    def import_pairs(self, *, url: str | None = None, text: str | None = None) -> list[VocabPair]:
        if text is None:
            if not url:
                raise SheetImportError("Provide a sheet url or csv text")
            text = self.fetch_csv(url)
        pairs = rows_to_pairs(parse_csv(text))
        logger.info("Custom vocabulary imported", pairs=len(pairs))
        return pairs


__all__ = ["SheetImporter", "build_csv_url", "extract_sheet_ids", "parse_csv", "rows_to_pairs"]
