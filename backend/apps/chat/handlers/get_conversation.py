"""GET /chat/conversations/{conversation_id} - Get a conversation with messages."""

from fastapi import Depends, HTTPException

from apps.chat.schemas import ConversationDetail
from dependencies import get_chat_service
from responses import ResponseCode, error_dict
from services import ChatService


async def get_conversation(
    conversation_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> ConversationDetail:
    """Get one conversation and its full history."""
    conversation = chat_service.conversations.get(conversation_id)
    if conversation is None:
        raise HTTPException(
            status_code=404,
            detail=error_dict(
                ResponseCode.RECORD_NOT_FOUND,
                f"Conversation '{conversation_id}' not found",
            ),
        )
    return ConversationDetail.from_record(conversation)
