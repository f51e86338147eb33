"""POST /chat/conversations - Start a new conversation."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.chat.schemas import ConversationDetail
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


async def create_conversation(
    chat_service: ChatService = Depends(get_chat_service),
) -> JSONResponse:
    """Create an empty conversation titled 'New Chat' and select it."""
    request_id = str(uuid.uuid4())[:8]

    try:
        conversation = chat_service.create_conversation()
        return success_response(
            ResponseCode.CONVERSATION_CREATED,
            ConversationDetail.from_record(conversation).model_dump(mode="json"),
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Failed to create conversation", request_id)
        return error_response(
            ResponseCode.INTERNAL_ERROR, f"Failed to create conversation: {e}", request_id
        )
