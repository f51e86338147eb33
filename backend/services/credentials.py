"""Provider API key storage and advisory validation.

The key is read once when the store is created, overwritten wholesale on save
and exposed through ``current``. ``validate`` only probes the provider; it
never persists anything and nothing requires it to pass before ``save``.
"""

import logging

import httpx

from errors import ValidationError
from llm.base import extract_error_message
from services.types import CredentialCheck, CredentialStatus
from storage import KeyValueStorage

logger = logging.getLogger(__name__)

CREDENTIAL_KEY = "user_api_key"
MODELS_PATH = "/v1/models"


class CredentialStore:
    """Owns the provider API key."""

    def __init__(self, storage: KeyValueStorage, http_client: httpx.AsyncClient) -> None:
        """Initialize the store and load any saved key.

        Args:
            storage: Key-value storage holding the raw key.
            http_client: Client pointed at the provider, used by validate().
        """
        self.storage = storage
        self._http = http_client
        self._value = ""
        self.load()

    @property
    def current(self) -> str:
        """The live API key, empty when none is saved."""
        return self._value

    @property
    def is_set(self) -> bool:
        return bool(self._value)

    def load(self) -> str:
        """Read the key from storage. A missing entry yields an empty key."""
        self._value = self.storage.get_item(CREDENTIAL_KEY) or ""
        return self._value

    def save(self, value: str) -> None:
        """Persist a new key, replacing the previous one.

        Raises:
            ValidationError: If the value is empty or whitespace only.
        """
        if not value or not value.strip():
            raise ValidationError("API key cannot be empty")

        value = value.strip()
        self.storage.set_item(CREDENTIAL_KEY, value)
        self._value = value
        logger.info("API key saved (%s)", self.masked())

    def clear(self) -> None:
        """Forget the saved key."""
        self.storage.remove_item(CREDENTIAL_KEY)
        self._value = ""
        logger.info("API key cleared")

    def masked(self) -> str:
        """Display form of the key: only the last 4 characters are shown."""
        if not self._value:
            return ""
        return "****" + self._value[-4:]

    async def validate(self, value: str) -> CredentialCheck:
        """Probe the provider's model listing with the given key.

        HTTP 200 means valid, 401/403 invalid; any other status or a transport
        failure is reported as a network error with the provider's message.

        Raises:
            ValidationError: If the value is empty or whitespace only.
        """
        if not value or not value.strip():
            raise ValidationError("API key cannot be empty")

        try:
            response = await self._http.get(
                MODELS_PATH,
                headers={"Authorization": f"Bearer {value.strip()}"},
            )
        except httpx.HTTPError as e:
            logger.warning("API key probe failed: %s", e)
            return CredentialCheck(
                CredentialStatus.NETWORK_ERROR, f"Could not reach provider: {e}"
            )

        if response.status_code == 200:
            return CredentialCheck(
                CredentialStatus.VALID, "API key is valid", response.status_code
            )

        message = (
            extract_error_message(response)
            or f"Provider returned HTTP {response.status_code}"
        )
        if response.status_code in (401, 403):
            logger.info("API key rejected by provider (HTTP %d)", response.status_code)
            return CredentialCheck(CredentialStatus.INVALID, message, response.status_code)

        logger.warning("Unexpected API key probe response: HTTP %d", response.status_code)
        return CredentialCheck(
            CredentialStatus.NETWORK_ERROR, message, response.status_code
        )
