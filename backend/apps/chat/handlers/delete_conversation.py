"""DELETE /chat/conversations/{conversation_id} - Delete a conversation."""

import logging
import uuid

from fastapi import Depends, Query
from fastapi.responses import JSONResponse

from dependencies import get_chat_service
from responses import (
    SERVICE_ERRORS,
    ResponseCode,
    error_response,
    service_error_response,
    success_response,
)
from services import ChatService

logger = logging.getLogger(__name__)


async def delete_conversation(
    conversation_id: str,
    confirm: bool = Query(default=False, description="Must be true to delete"),
    chat_service: ChatService = Depends(get_chat_service),
) -> JSONResponse:
    """Delete a conversation and all its messages once confirmed."""
    request_id = str(uuid.uuid4())[:8]
    logger.info("[%s] Delete conversation request: %s", request_id, conversation_id)

    try:
        deleted = chat_service.delete_conversation(conversation_id, lambda _: confirm)
        if not deleted:
            return error_response(
                ResponseCode.DELETE_NOT_CONFIRMED, request_id=request_id
            )

        return success_response(
            ResponseCode.RECORD_DELETED,
            {"deleted_conversation_id": conversation_id},
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Failed to delete conversation", request_id)
        return error_response(
            ResponseCode.INTERNAL_ERROR, f"Failed to delete conversation: {e}", request_id
        )
