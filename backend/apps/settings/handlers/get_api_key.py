"""GET /settings/api-key - Whether a key is saved, in masked form."""

from fastapi import Depends
from pydantic import BaseModel, Field

from dependencies import get_credential_store
from services import CredentialStore

# --- Response Schema ---


class ApiKeyStatusResponse(BaseModel):
    """Masked view of the saved key. The raw key is never returned."""

    configured: bool = Field(..., description="Whether a key is saved")
    masked_key: str = Field("", description="Last 4 characters of the key")


# --- Handler ---


async def get_api_key(
    credentials: CredentialStore = Depends(get_credential_store),
) -> ApiKeyStatusResponse:
    return ApiKeyStatusResponse(
        configured=credentials.is_set, masked_key=credentials.masked()
    )
