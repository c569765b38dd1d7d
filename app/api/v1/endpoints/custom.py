"""Custom vocabulary imported from a learner's own spreadsheet."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_sheet_importer
from app.schemas import SheetImportRequest, SheetImportResponse
from app.services.sheet_import import SheetImporter
from app.utils.exceptions import SheetImportError, handle_sheet_import_error

router = APIRouter(prefix="/custom", tags=["custom"])


@router.post("/import", response_model=SheetImportResponse)
def import_sheet(
    payload: SheetImportRequest,
    importer: SheetImporter = Depends(get_sheet_importer),
) -> SheetImportResponse:
    """Parse English/Vietnamese pairs from a Google Sheets link or CSV text."""

    if not payload.url and payload.csv is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Provide either url or csv"
        )
    try:
        items = importer.import_pairs(url=payload.url, text=payload.csv)
    except SheetImportError as exc:
        raise handle_sheet_import_error(exc) from exc
    return SheetImportResponse(source_url=payload.url, total=len(items), items=items)
