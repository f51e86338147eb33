"""FastAPI dependency injection for stores and services.

Stores and mode services hold process-wide state (the loaded collections,
the selection, the latest answer), so they are created once with
@lru_cache(). Tests replace them through app.dependency_overrides.
"""

from functools import lru_cache

import httpx

from config import get_settings
from llm import BaseCompletionClient, CompletionClient, create_http_client
from services import (
    ChatService,
    CollectionStore,
    CredentialStore,
    DocumentParser,
    DocumentQAService,
    GenerationService,
)
from storage import (
    CONVERSATION_CODEC,
    CONVERSATIONS_KEY,
    DOCUMENT_CODEC,
    DOCUMENTS_KEY,
    Conversation,
    Document,
    JsonFileStorage,
    KeyValueStorage,
)

# --- Cached Singletons ---
# These are created once and reused across all requests


@lru_cache
def get_storage() -> KeyValueStorage:
    """Get the local key-value storage."""
    return JsonFileStorage(get_settings().storage_dir)


@lru_cache
def get_http_client() -> httpx.AsyncClient:
    """Get the shared provider HTTP client."""
    return create_http_client(get_settings())


@lru_cache
def get_credential_store() -> CredentialStore:
    """Get the API key store (loads the saved key on first use)."""
    return CredentialStore(get_storage(), get_http_client())


@lru_cache
def get_conversation_store() -> CollectionStore[Conversation]:
    """Get the conversation collection (loaded on first use)."""
    return CollectionStore(get_storage(), CONVERSATIONS_KEY, CONVERSATION_CODEC)


@lru_cache
def get_document_store() -> CollectionStore[Document]:
    """Get the document collection (loaded on first use)."""
    return CollectionStore(get_storage(), DOCUMENTS_KEY, DOCUMENT_CODEC)


@lru_cache
def get_completion_client() -> BaseCompletionClient:
    """Get the completion client; it reads the current key on every call."""
    credentials = get_credential_store()
    return CompletionClient(
        api_key_provider=lambda: credentials.current,
        http_client=get_http_client(),
    )


# --- Lightweight Services (per-request is fine) ---


def get_document_parser() -> DocumentParser:
    """Get document parser (stateless, cheap to create)."""
    return DocumentParser()


# --- Mode Services ---


@lru_cache
def get_chat_service() -> ChatService:
    """Get chat mode service."""
    return ChatService(get_conversation_store(), get_completion_client())


@lru_cache
def get_document_qa_service() -> DocumentQAService:
    """Get document Q&A service (owns the latest-answer view state)."""
    return DocumentQAService(
        get_document_store(),
        get_completion_client(),
        get_document_parser(),
    )


@lru_cache
def get_generation_service() -> GenerationService:
    """Get blog/code generation service."""
    return GenerationService(get_completion_client())
