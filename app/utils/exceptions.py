"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional
from fastapi import HTTPException, status
from loguru import logger


class VocabAppException(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class LLMServiceError(VocabAppException):
    """LLM service communication errors."""
    pass


class ImageServiceError(VocabAppException):
    """Image provider communication errors."""
    pass


class SheetImportError(VocabAppException):
    """Spreadsheet import errors."""
    pass


def handle_image_service_error(error: ImageServiceError) -> HTTPException:
    """Handle image provider errors."""
    logger.error(f"Image service error: {error.message}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error.message,
    )


def handle_sheet_import_error(error: SheetImportError) -> HTTPException:
    """Handle spreadsheet import errors."""
    logger.warning(f"Sheet import error: {error.message}")
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error.message,
    )
