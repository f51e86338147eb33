"""Local persistence: key-value backends and persisted record schemas."""

from storage.backend import (
    InMemoryStorage,
    JsonFileStorage,
    KeyValueStorage,
    StorageError,
)
from storage.models import (
    CONVERSATION_CODEC,
    CONVERSATIONS_KEY,
    DEFAULT_CONVERSATION_TITLE,
    DOCUMENT_CODEC,
    DOCUMENTS_KEY,
    SCHEMA_VERSION,
    CollectionCodec,
    Conversation,
    Document,
    Message,
    Role,
    StorageParseError,
)

__all__ = [
    # Backends
    "KeyValueStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "StorageError",
    # Schemas
    "Conversation",
    "Document",
    "Message",
    "Role",
    "CollectionCodec",
    "StorageParseError",
    "CONVERSATION_CODEC",
    "DOCUMENT_CODEC",
    "CONVERSATIONS_KEY",
    "DOCUMENTS_KEY",
    "DEFAULT_CONVERSATION_TITLE",
    "SCHEMA_VERSION",
]
