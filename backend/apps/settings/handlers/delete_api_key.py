"""DELETE /settings/api-key - Forget the saved API key."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

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


async def delete_api_key(
    credentials: CredentialStore = Depends(get_credential_store),
) -> JSONResponse:
    request_id = str(uuid.uuid4())[:8]

    try:
        credentials.clear()
        return success_response(
            ResponseCode.RECORD_DELETED, {"configured": False}, request_id
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Failed to clear API key", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
