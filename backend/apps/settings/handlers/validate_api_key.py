"""POST /settings/api-key/validate - Check a key against the provider.

Validation is advisory: the key is not saved, whatever the outcome.
"""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.settings.handlers.save_api_key import ApiKeyRequest
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


async def validate_api_key(
    request: ApiKeyRequest,
    credentials: CredentialStore = Depends(get_credential_store),
) -> JSONResponse:
    request_id = str(uuid.uuid4())[:8]

    try:
        check = await credentials.validate(request.api_key)
        logger.info("[%s] API key check: %s", request_id, check.status.value)
        return success_response(
            ResponseCode.SUCCESS,
            {
                "valid": check.valid,
                "status": check.status.value,
                "message": check.message,
                "provider_status": check.status_code,
            },
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Failed to validate API key", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
