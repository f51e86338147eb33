"""Schemas for records persisted in local storage.

Collections are written as a versioned envelope::

    {"schema_version": 2, "items": [...]}

Version 1 is the bare JSON array written by the browser build. It is still
accepted and migrated record by record on load.
"""

import json
import logging
import uuid
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaValidationError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 2

CONVERSATIONS_KEY = "chat_conversations"
DOCUMENTS_KEY = "rag_documents"

DEFAULT_CONVERSATION_TITLE = "New Chat"


class StorageParseError(Exception):
    """Raised when a persisted blob cannot be decoded into records."""


def generate_id() -> str:
    """Generate an opaque unique record id."""
    return str(uuid.uuid4())


class Role(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id, description="Message ID")
    role: Role = Field(..., description="Message role: 'user' or 'assistant'")
    content: str = Field(..., description="Message content")


class Conversation(BaseModel):
    """A chat conversation.

    ``titled`` flips to True once the title has been derived from the first
    user message; after that the title never changes.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id, description="Conversation ID")
    title: str = Field(default=DEFAULT_CONVERSATION_TITLE, description="Title")
    messages: tuple[Message, ...] = Field(
        default=(), description="Messages in creation order"
    )
    titled: bool = Field(default=False, description="Whether the title is frozen")


class Document(BaseModel):
    """An uploaded document. ``content`` never changes after upload."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id, description="Document ID")
    filename: str = Field(..., description="Original filename")
    content: str = Field(..., description="Extracted plain text")
    summary: str | None = Field(None, description="Latest generated summary")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Upload timestamp"
    )


T = TypeVar("T", bound=BaseModel)

# Upgrades a raw record from version N to N + 1.
Migration = Callable[[dict[str, Any]], dict[str, Any]]


class CollectionCodec(Generic[T]):
    """Encodes a record collection to a versioned JSON envelope and back."""

    def __init__(
        self,
        model: type[T],
        migrations: dict[int, Migration] | None = None,
    ) -> None:
        self.model = model
        self.migrations = migrations or {}

    def encode(self, items: Sequence[T]) -> str:
        """Serialize the whole collection."""
        envelope = {
            "schema_version": SCHEMA_VERSION,
            "items": [item.model_dump(mode="json") for item in items],
        }
        return json.dumps(envelope, ensure_ascii=False)

    def decode(self, raw: str) -> list[T]:
        """Parse a persisted blob, migrating older schema versions.

        Raises:
            StorageParseError: If the blob is not valid JSON, has an unknown
                layout or version, or holds records that fail validation.
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageParseError(f"Invalid JSON: {e}") from e

        if isinstance(data, list):
            version, items = 1, data
        elif isinstance(data, dict) and isinstance(data.get("items"), list):
            version, items = data.get("schema_version"), data["items"]
        else:
            raise StorageParseError("Unrecognized collection layout")

        if not isinstance(version, int) or not 1 <= version <= SCHEMA_VERSION:
            raise StorageParseError(f"Unsupported schema version: {version!r}")

        records: list[T] = []
        for item in items:
            if not isinstance(item, dict):
                raise StorageParseError("Collection item is not an object")
            for from_version in range(version, SCHEMA_VERSION):
                migrate = self.migrations.get(from_version)
                if migrate is not None:
                    item = migrate(item)
            try:
                records.append(self.model.model_validate(item))
            except SchemaValidationError as e:
                raise StorageParseError(
                    f"Invalid {self.model.__name__} record: {e}"
                ) from e

        if version < SCHEMA_VERSION:
            logger.info(
                "Migrated %d %s records from schema v%d",
                len(records),
                self.model.__name__,
                version,
            )
        return records


def _migrate_conversation_v1(item: dict[str, Any]) -> dict[str, Any]:
    # v1 had no title flag; a non-default title means it was already derived.
    if "titled" in item:
        return item
    title = item.get("title", DEFAULT_CONVERSATION_TITLE)
    return {**item, "titled": title != DEFAULT_CONVERSATION_TITLE}


CONVERSATION_CODEC: CollectionCodec[Conversation] = CollectionCodec(
    Conversation, migrations={1: _migrate_conversation_v1}
)
DOCUMENT_CODEC: CollectionCodec[Document] = CollectionCodec(Document)
