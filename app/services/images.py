"""Word illustrations looked up on Unsplash."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import httpx
from loguru import logger
from sqlalchemy.orm import Session

from app.config import settings
from app.schemas.image import ImageBatchResponse
from app.services.vocabulary import VocabularyService
from app.utils.exceptions import ImageServiceError

MAX_SEARCH_RESULTS = 12


class ImageNotFoundError(LookupError):
    """Raised when a search yields no usable image."""


def _photo_url(result: dict[str, Any]) -> Optional[str]:
    urls = result.get("urls") or {}
    return urls.get("small") or urls.get("regular")


@dataclass
class UnsplashClient:
    """Minimal client for the Unsplash photo search API."""

    access_key: Optional[str]
    base_url: str = "https://api.unsplash.com"
    timeout: float = 15.0
    transport: Optional[httpx.BaseTransport] = field(default=None, repr=False)

    def search(self, term: str, *, per_page: int = 1) -> list[str]:
        """Return up to ``per_page`` squarish image URLs for ``term``."""

        if not self.access_key:
            raise ImageServiceError("Unsplash access key is not configured")

        try:
            with httpx.Client(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = client.get(
                    "/search/photos",
                    params={"query": term, "per_page": per_page, "orientation": "squarish"},
                    headers={
                        "Authorization": f"Client-ID {self.access_key}",
                        "Accept-Version": "v1",
                    },
                )
        except httpx.HTTPError as exc:
            raise ImageServiceError(f"Unsplash request failed: {exc}") from exc

        if response.status_code >= 400:
            logger.warning("Unsplash returned error", status=response.status_code, term=term)
            raise ImageServiceError(
                f"Unsplash {response.status_code}", {"status_code": response.status_code}
            )

        results = response.json().get("results") or []
        return [url for url in (_photo_url(item) for item in results) if url]


class ImageService:
    """Attach Unsplash images to Oxford words."""

    def __init__(
        self,
        db: Session,
        *,
        client: Optional[UnsplashClient] = None,
        delay_seconds: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.db = db
        self.client = client or UnsplashClient(
            access_key=settings.UNSPLASH_ACCESS_KEY,
            base_url=settings.UNSPLASH_API_BASE,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        self.delay_seconds = (
            settings.IMAGE_BATCH_DELAY_SECONDS if delay_seconds is None else delay_seconds
        )
        self._sleep = sleep
        self._vocabulary = VocabularyService(db)

    def search(self, term: str, *, per: int = 8) -> list[str]:
        return self.client.search(term, per_page=max(1, min(per, MAX_SEARCH_RESULTS)))

    def assign_image(self, term: str) -> tuple[str, int]:
        """Store the first image found for ``term`` on every matching word.

        Returns the image URL and the number of updated words.
        """

        urls = self.client.search(term, per_page=1)
        if not urls:
            raise ImageNotFoundError(f"No image found for {term!r}")
        updated = self._vocabulary.set_image_url(term, urls[0])
        logger.info("Image assigned", term=term, updated=updated)
        return urls[0], updated

    def load_missing(self, limit: int) -> ImageBatchResponse:
        """Fill images for words without one, one request at a time.

        A fixed delay separates consecutive lookups to stay within the API's
        rate limit. Failures are collected and do not stop the run.
        """

        words = self._vocabulary.words_without_images(limit)
        loaded = 0
        failed: list[str] = []
        for index, word in enumerate(words):
            if index:
                self._sleep(self.delay_seconds)
            try:
                self.assign_image(word.term)
            except (ImageNotFoundError, ImageServiceError) as exc:
                logger.warning("Image lookup failed", term=word.term, error=str(exc))
                failed.append(word.term)
            else:
                loaded += 1
        logger.info("Image batch finished", requested=len(words), loaded=loaded, failed=len(failed))
        return ImageBatchResponse(requested=len(words), loaded=loaded, failed=failed)


__all__ = ["ImageNotFoundError", "ImageService", "UnsplashClient"]
