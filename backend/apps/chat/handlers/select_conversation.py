"""PUT /chat/conversations/{conversation_id}/select - Switch conversation."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.chat.schemas import ConversationDetail
from dependencies import get_chat_service
from responses import ResponseCode, success_response
from services import ChatService

logger = logging.getLogger(__name__)


async def select_conversation(
    conversation_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> JSONResponse:
    """Select a conversation.

    Unknown ids are accepted and simply leave nothing selected.
    """
    request_id = str(uuid.uuid4())[:8]
    conversation = chat_service.select_conversation(conversation_id)
    logger.debug("[%s] Selected conversation %s", request_id, conversation_id)

    return success_response(
        ResponseCode.SUCCESS,
        {
            "selected_id": conversation_id,
            "conversation": (
                ConversationDetail.from_record(conversation).model_dump(mode="json")
                if conversation
                else None
            ),
        },
        request_id,
    )
