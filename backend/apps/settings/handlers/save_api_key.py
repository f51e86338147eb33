"""PUT /settings/api-key - Save the provider API key."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from dependencies import get_credential_store
from responses import (
    SERVICE_ERRORS,
    ResponseCode,
    error_response,
    service_error_response,
    success_response,
)
from services import CredentialStore

logger = logging.getLogger(__name__)


# --- Request Schema ---


class ApiKeyRequest(BaseModel):
    """Request body carrying an API key."""

    api_key: str = Field(..., description="Provider API key")


# --- Handler ---


async def save_api_key(
    request: ApiKeyRequest,
    credentials: CredentialStore = Depends(get_credential_store),
) -> JSONResponse:
    """Save the key, replacing any previous one.

    A blank key is rejected and the saved key is left unchanged.
    """
    request_id = str(uuid.uuid4())[:8]

    try:
        credentials.save(request.api_key)
        return success_response(
            ResponseCode.API_KEY_SAVED,
            {"configured": True, "masked_key": credentials.masked()},
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Failed to save API key", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
