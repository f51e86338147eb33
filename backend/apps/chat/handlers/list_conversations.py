"""GET /chat/conversations - List conversations, newest first."""

from fastapi import Depends
from pydantic import BaseModel, Field

from apps.chat.schemas import ConversationSummary
from dependencies import get_chat_service
from services import ChatService

# --- Response Schema ---


class ConversationListResponse(BaseModel):
    """Response for listing conversations."""

    conversations: list[ConversationSummary]
    selected_id: str | None = Field(None, description="Currently selected conversation")


# --- Handler ---


async def list_conversations(
    chat_service: ChatService = Depends(get_chat_service),
) -> ConversationListResponse:
    """List all conversations."""
    store = chat_service.conversations
    return ConversationListResponse(
        conversations=[ConversationSummary.from_record(c) for c in store.items],
        selected_id=store.selected_id,
    )
