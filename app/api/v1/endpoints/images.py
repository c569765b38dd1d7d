"""Endpoints attaching Unsplash images to Oxford words."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api import deps
from app.api.v1.endpoints.vocabulary import LIST_CACHE_NAMESPACE
from app.core.security import AuthUser
from app.schemas import (
    ImageBatchRequest,
    ImageBatchResponse,
    ImageRequest,
    ImageResponse,
    ImageSearchResponse,
)
from app.services.images import ImageNotFoundError, ImageService
from app.utils.cache import cache_backend
from app.utils.exceptions import ImageServiceError, handle_image_service_error

router = APIRouter(prefix="/oxford/image", tags=["images"])


@router.post("", response_model=ImageResponse)
def assign_image(
    payload: ImageRequest,
    service: ImageService = Depends(deps.get_image_service),
) -> ImageResponse:
    """Look up an image for ``term`` and store it on the matching words."""

    if not payload.term:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="term required")
    try:
        image_url, updated = service.assign_image(payload.term)
    except ImageNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No image found") from exc
    except ImageServiceError as exc:
        raise handle_image_service_error(exc) from exc
    cache_backend.invalidate(LIST_CACHE_NAMESPACE, prefix="")
    return ImageResponse(term=payload.term, image_url=image_url, updated=updated)


@router.get("/search", response_model=ImageSearchResponse)
def search_images(
    term: str = Query(default=""),
    per: int = Query(default=8, ge=1),
    service: ImageService = Depends(deps.get_image_service),
) -> ImageSearchResponse:
    """Return candidate image URLs for ``term`` (at most 12)."""

    if not term:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="term required")
    try:
        urls = service.search(term, per=per)
    except ImageServiceError as exc:
        raise handle_image_service_error(exc) from exc
    return ImageSearchResponse(term=term, urls=urls)


@router.post("/batch", response_model=ImageBatchResponse)
def load_missing_images(
    payload: ImageBatchRequest | None = None,
    service: ImageService = Depends(deps.get_image_service),
    current_user: AuthUser = Depends(deps.get_current_user),
) -> ImageBatchResponse:
    """Fill images for words that have none, pausing between lookups."""

    result = service.load_missing((payload or ImageBatchRequest()).limit)
    if result.loaded:
        cache_backend.invalidate(LIST_CACHE_NAMESPACE, prefix="")
    return result
