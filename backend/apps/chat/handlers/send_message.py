"""POST /chat/conversations/{conversation_id}/messages - Send a message.

Appends the user message, sends the whole conversation to the provider and
appends the reply. The first reply also fixes the conversation title.
"""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from apps.chat.schemas import ConversationDetail, MessageView
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


# --- Request Schema ---


class SendMessageRequest(BaseModel):
    """Request body for sending a chat message."""

    content: str = Field(..., min_length=1, description="User message text")


# --- Handler ---


async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> JSONResponse:
    """Send a message and wait for the assistant reply."""
    request_id = str(uuid.uuid4())[:8]
    logger.info(
        "[%s] Chat message for %s: %s", request_id, conversation_id, request.content[:100]
    )

    try:
        reply = await chat_service.send_message(conversation_id, request.content)
        conversation = chat_service.conversations.get(conversation_id)

        return success_response(
            ResponseCode.SUCCESS,
            {
                "message": MessageView.from_record(reply).model_dump(),
                "conversation": (
                    ConversationDetail.from_record(conversation).model_dump(mode="json")
                    if conversation
                    else None
                ),
            },
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Unexpected error sending message", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
