"""Multi-turn chat over persisted conversations.

A send is two separate store mutations around one awaited completion:

1. Append the user message
2. Call the provider with the full conversation history
3. Append the assistant reply and, on the first reply, freeze the title

Each mutation transforms the latest stored conversation, so two sends in
flight for the same conversation both land. Their replies are appended in
completion order (last write wins on the title, which is set only once).
"""

import logging

from config import Settings, get_settings
from errors import RecordNotFoundError, ValidationError
from llm import BaseCompletionClient, ChatMessage
from services.collection_store import CollectionStore, ConfirmGate
from storage import Conversation, Message, Role

logger = logging.getLogger(__name__)


class ChatService:
    """Chat mode: conversations and message exchange."""

    def __init__(
        self,
        conversations: CollectionStore[Conversation],
        completion_client: BaseCompletionClient,
        settings: Settings | None = None,
    ) -> None:
        self.conversations = conversations
        self.completion_client = completion_client
        self.settings = settings or get_settings()

    def create_conversation(self) -> Conversation:
        """Create an empty conversation and select it."""
        conversation = Conversation()
        self.conversations.insert(conversation)
        self.conversations.select(conversation.id)
        logger.info("Created conversation %s", conversation.id)
        return conversation

    def select_conversation(self, conversation_id: str | None) -> Conversation | None:
        return self.conversations.select(conversation_id)

    def delete_conversation(self, conversation_id: str, confirm: ConfirmGate) -> bool:
        return self.conversations.remove(conversation_id, confirm)

    async def send_message(self, conversation_id: str, content: str) -> Message:
        """Append a user message, get a reply and append it.

        Args:
            conversation_id: Target conversation.
            content: User text; surrounding whitespace is stripped.

        Returns:
            The assistant message that was appended.

        Raises:
            ValidationError: If the message is blank or no API key is saved.
            RecordNotFoundError: If the conversation does not exist, or was
                deleted while the reply was pending.
            CompletionError: If the provider request fails. The user message
                stays in the conversation.
        """
        text = content.strip()
        if not text:
            raise ValidationError("Message cannot be empty")
        if self.conversations.get(conversation_id) is None:
            raise RecordNotFoundError(f"Conversation '{conversation_id}' not found")
        self.completion_client.require_api_key()

        user_message = Message(role=Role.USER, content=text)
        conversation = self.conversations.update(
            conversation_id,
            lambda c: c.model_copy(update={"messages": (*c.messages, user_message)}),
        )

        history: list[ChatMessage] = [
            {"role": m.role.value, "content": m.content} for m in conversation.messages
        ]
        reply = await self.completion_client.complete(
            history, temperature=self.settings.chat_temperature
        )

        assistant_message = Message(role=Role.ASSISTANT, content=reply)
        try:
            self.conversations.update(
                conversation_id, lambda c: self._append_reply(c, assistant_message)
            )
        except RecordNotFoundError:
            logger.warning(
                "Conversation %s was deleted before its reply arrived", conversation_id
            )
            raise

        return assistant_message

    def _append_reply(self, conversation: Conversation, reply: Message) -> Conversation:
        update: dict = {"messages": (*conversation.messages, reply)}
        if not conversation.titled:
            first_user = next(
                (m for m in conversation.messages if m.role is Role.USER), None
            )
            if first_user is not None:
                update["title"] = first_user.content[: self.settings.title_max_chars]
                update["titled"] = True
        return conversation.model_copy(update=update)
