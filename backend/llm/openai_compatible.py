"""OpenAI-compatible chat completions client (Groq by default)."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

import httpx

from config import Settings, get_settings

from .base import (
    BaseCompletionClient,
    ChatMessage,
    CompletionError,
    CompletionErrorKind,
    extract_error_message,
)

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/v1/chat/completions"
GENERIC_PROVIDER_ERROR = "Provider API error"


def create_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Create the shared HTTP client for provider requests."""
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.provider_base_url,
        timeout=httpx.Timeout(timeout=settings.completion_timeout_seconds, connect=10.0),
    )


class OpenAICompatibleClient(BaseCompletionClient):
    """Single-shot, non-streaming completions over ``POST /v1/chat/completions``.

    One attempt per call: no retries and no streaming.
    """

    def __init__(
        self,
        api_key_provider: Callable[[], str],
        http_client: httpx.AsyncClient,
        model: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(api_key_provider)
        self.settings = settings or get_settings()
        self.model = model or self.settings.llm_model
        self._http = http_client

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        model: str | None = None,
        temperature: float | None = None,
    ) -> str:
        """Send messages and return the first choice's content."""
        api_key = self.require_api_key()

        payload: dict[str, Any] = {
            "model": model or self.model,
            "messages": [
                {"role": m["role"], "content": m["content"]} for m in messages
            ],
        }
        if temperature is not None:
            payload["temperature"] = temperature

        logger.debug(
            "Completion request: model=%s, %d messages", payload["model"], len(messages)
        )

        try:
            response = await self._http.post(
                COMPLETIONS_PATH,
                json=payload,
                headers={"Authorization": f"Bearer {api_key}"},
            )
        except httpx.HTTPError as e:
            logger.error("Completion request failed: %s", e)
            raise CompletionError(
                CompletionErrorKind.NETWORK, f"Could not reach provider: {e}"
            ) from e

        if not response.is_success:
            message = extract_error_message(response) or GENERIC_PROVIDER_ERROR
            logger.warning("Provider returned HTTP %d: %s", response.status_code, message)
            raise CompletionError(
                CompletionErrorKind.PROVIDER, message, status_code=response.status_code
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Malformed completion response: %s", e)
            raise CompletionError(
                CompletionErrorKind.MALFORMED_RESPONSE,
                "Provider response did not contain a completion",
                status_code=response.status_code,
            ) from e

        if not isinstance(content, str):
            raise CompletionError(
                CompletionErrorKind.MALFORMED_RESPONSE,
                "Provider completion content is not text",
                status_code=response.status_code,
            )

        return content
