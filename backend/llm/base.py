"""Base completion client interface.

Defines the contract every chat-completion provider adapter implements and the
error taxonomy callers branch on.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypedDict

import httpx

from errors import ValidationError

MISSING_API_KEY_MESSAGE = "Please add your API key first."


class ChatMessage(TypedDict):
    """Role-tagged message as sent to the provider."""

    role: str
    content: str


class CompletionErrorKind(str, Enum):
    """Why a completion request failed."""

    NETWORK = "network"
    PROVIDER = "provider"
    MALFORMED_RESPONSE = "malformed_response"


class CompletionError(Exception):
    """Raised when a completion request fails."""

    def __init__(
        self,
        kind: CompletionErrorKind,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code


def extract_error_message(response: httpx.Response) -> str | None:
    """Return ``error.message`` from a provider error body, if present."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None


class BaseCompletionClient(ABC):
    """Abstract base class for completion providers.

    The API key is read through ``api_key_provider`` on every call so a key
    saved after startup takes effect immediately.
    """

    def __init__(self, api_key_provider: Callable[[], str]) -> None:
        self._api_key_provider = api_key_provider

    def require_api_key(self) -> str:
        """Return the current API key.

        Raises:
            ValidationError: If no key has been saved.
        """
        api_key = self._api_key_provider()
        if not api_key:
            raise ValidationError(MISSING_API_KEY_MESSAGE)
        return api_key

    @abstractmethod
    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        model: str | None = None,
        temperature: float | None = None,
    ) -> str:
        """Send the full message list and return the completion text.

        Args:
            messages: Role-tagged messages, oldest first.
            model: Override model name.
            temperature: Sampling temperature. Omitted from the request if None.

        Returns:
            Text of the first completion choice.

        Raises:
            ValidationError: If no API key is configured.
            CompletionError: If the request fails for any other reason.
        """
