"""API schemas for conversations and messages."""

from pydantic import BaseModel, Field

from storage import Conversation, Message


class MessageView(BaseModel):
    """A message in API responses."""

    id: str = Field(..., description="Message ID")
    role: str = Field(..., description="Message role (user/assistant)")
    content: str = Field(..., description="Message content")

    @classmethod
    def from_record(cls, message: Message) -> "MessageView":
        return cls(id=message.id, role=message.role.value, content=message.content)


class ConversationSummary(BaseModel):
    """Conversation metadata for list views."""

    id: str = Field(..., description="Conversation ID")
    title: str = Field(..., description="Conversation title")
    message_count: int = Field(default=0, description="Number of messages")

    @classmethod
    def from_record(cls, conversation: Conversation) -> "ConversationSummary":
        return cls(
            id=conversation.id,
            title=conversation.title,
            message_count=len(conversation.messages),
        )


class ConversationDetail(ConversationSummary):
    """Conversation with its full message history."""

    messages: list[MessageView]

    @classmethod
    def from_record(cls, conversation: Conversation) -> "ConversationDetail":
        return cls(
            id=conversation.id,
            title=conversation.title,
            message_count=len(conversation.messages),
            messages=[MessageView.from_record(m) for m in conversation.messages],
        )
