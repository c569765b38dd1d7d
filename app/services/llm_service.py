"""LLM service backed by the Gemini ``generateContent`` API."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.config import settings


@dataclass
class LLMResult:
    """Structured response returned by the :class:`LLMService`."""

    provider: str
    model: str
    content: str
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    raw_response: Dict[str, Any]


class LLMProviderError(RuntimeError):
    """Raised when a provider returns an error response.

    ``status_code`` holds the upstream HTTP status, or ``None`` when the request
    never produced a response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def rate_limited(self) -> bool:
        return self.status_code == 429


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning("Retrying Gemini request", attempt=retry_state.attempt_number, error=str(error))


class BaseLLMProvider(Protocol):
    """Protocol shared by provider implementations."""

    name: str

    def generate(self, prompt: str, **kwargs: Any) -> LLMResult:  # pragma: no cover - interface definition
        """Generate a completion for a single-turn prompt."""


@dataclass
class GeminiProvider:
    """Generate text completions using the Gemini REST API."""

    api_key: str
    model: str
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout: float = 30.0
    transport: Optional[httpx.BaseTransport] = field(default=None, repr=False)

    name: str = "gemini"

    # Only transport failures are retried; HTTP error statuses are returned to the caller.
    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(max(settings.LLM_MAX_RETRIES, 1)),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        before_sleep=_log_retry,
        reraise=True,
    )
    def _post(self, model: str, payload: Dict[str, Any]) -> httpx.Response:
        with httpx.Client(
            base_url=self.base_url, timeout=self.request_timeout, transport=self.transport
        ) as client:
            return client.post(
                f"/models/{model}:generateContent",
                json=payload,
                headers={"Content-Type": "application/json", "X-goog-api-key": self.api_key},
            )

    def generate(self, prompt: str, **kwargs: Any) -> LLMResult:
        model = kwargs.get("model") or self.model
        payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        generation_config: Dict[str, Any] = {}
        if "temperature" in kwargs:
            generation_config["temperature"] = kwargs["temperature"]
        if kwargs.get("json_mode"):
            generation_config["responseMimeType"] = "application/json"
        if generation_config:
            payload["generationConfig"] = generation_config

        try:
            response = self._post(model, payload)
        except httpx.HTTPError as exc:
            raise LLMProviderError(f"Gemini request failed: {exc}") from exc

        if response.status_code >= 400:
            logger.error("Gemini returned error", status=response.status_code, body=response.text)
            raise LLMProviderError(
                f"Gemini error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        data = response.json()
        candidates = data.get("candidates") or [{}]
        parts = (candidates[0].get("content") or {}).get("parts") or [{}]
        content = parts[0].get("text")
        if not content:
            raise LLMProviderError("Gemini response did not include content")

        usage = data.get("usageMetadata", {})
        prompt_tokens = usage.get("promptTokenCount", 0)
        completion_tokens = usage.get("candidatesTokenCount", 0)
        result = LLMResult(
            provider=self.name,
            model=model,
            content=content.strip(),
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=usage.get("totalTokenCount", prompt_tokens + completion_tokens),
            raw_response=data,
        )
        logger.info("Gemini completion success", model=result.model, tokens=result.total_tokens)
        return result


class LLMService:
    """Entry point for text generation used by the evaluators."""

    def __init__(self, provider: Optional[BaseLLMProvider] = None) -> None:
        self._provider = provider or self._build_default_provider()
        if self._provider is None:
            raise ValueError("LLMService requires a configured provider")

    @staticmethod
    def _build_default_provider() -> Optional[BaseLLMProvider]:
        if not settings.GEMINI_API_KEY:
            return None
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_API_BASE,
            request_timeout=settings.LLM_REQUEST_TIMEOUT_SECONDS,
        )

    @property
    def provider_name(self) -> str:
        return self._provider.name

    def generate_text(
        self,
        prompt: str,
        *,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
    ) -> LLMResult:
        """Generate a completion, raising :class:`LLMProviderError` on failure."""

        kwargs: Dict[str, Any] = {"json_mode": json_mode}
        if model:
            kwargs["model"] = model
        if temperature is not None:
            kwargs["temperature"] = temperature
        result = self._provider.generate(prompt, **kwargs)
        logger.debug("LLM provider success", provider=self._provider.name, tokens=result.total_tokens)
        return result


__all__ = ["GeminiProvider", "LLMProviderError", "LLMResult", "LLMService"]
