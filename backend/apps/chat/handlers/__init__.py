"""Chat handlers."""

from apps.chat.handlers.create_conversation import create_conversation
from apps.chat.handlers.delete_conversation import delete_conversation
from apps.chat.handlers.get_conversation import get_conversation
from apps.chat.handlers.list_conversations import list_conversations
from apps.chat.handlers.select_conversation import select_conversation
from apps.chat.handlers.send_message import send_message

__all__ = [
    "list_conversations",
    "create_conversation",
    "get_conversation",
    "select_conversation",
    "delete_conversation",
    "send_message",
]
