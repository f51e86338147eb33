"""Chat routes - registers all chat endpoints."""

from fastapi import APIRouter

from apps.chat.handlers import (
    create_conversation,
    delete_conversation,
    get_conversation,
    list_conversations,
    select_conversation,
    send_message,
)
from apps.chat.handlers.list_conversations import ConversationListResponse
from apps.chat.schemas import ConversationDetail

router = APIRouter(prefix="/chat", tags=["Chat"])

# GET /chat/conversations - List conversations
router.get("/conversations", response_model=ConversationListResponse)(
    list_conversations
)

# POST /chat/conversations - Create conversation
router.post("/conversations")(create_conversation)

# GET /chat/conversations/{conversation_id} - Get conversation
router.get("/conversations/{conversation_id}", response_model=ConversationDetail)(
    get_conversation
)

# PUT /chat/conversations/{conversation_id}/select - Select conversation
router.put("/conversations/{conversation_id}/select")(select_conversation)

# DELETE /chat/conversations/{conversation_id} - Delete conversation
router.delete("/conversations/{conversation_id}")(delete_conversation)

# POST /chat/conversations/{conversation_id}/messages - Send message
router.post("/conversations/{conversation_id}/messages")(send_message)
