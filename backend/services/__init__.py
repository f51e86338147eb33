"""Services module for the assistant's stores and modes.

Contains:
- Credential storage and validation
- Write-through record collections
- Document parsing and chunking
- Chat, document Q&A and generation modes

Note: Service instances are managed via dependencies.py using FastAPI DI.
"""

from services.chat import ChatService
from services.chunker import Chunker, chunk_text, expected_chunk_count
from services.collection_store import CollectionStore
from services.credentials import CREDENTIAL_KEY, CredentialStore
from services.document import (
    DocumentParseError,
    DocumentParser,
    EmptyDocumentError,
    FileTooLargeError,
)
from services.document_qa import DocumentQAService
from services.generation import GenerationService
from services.types import (
    CredentialCheck,
    CredentialStatus,
    GeneratedCode,
    ParsedDocument,
    TextChunk,
)

__all__ = [
    # Stores
    "CredentialStore",
    "CREDENTIAL_KEY",
    "CollectionStore",
    # Modes
    "ChatService",
    "DocumentQAService",
    "GenerationService",
    # Document services
    "Chunker",
    "chunk_text",
    "expected_chunk_count",
    "DocumentParser",
    "DocumentParseError",
    "EmptyDocumentError",
    "FileTooLargeError",
    # Types
    "CredentialCheck",
    "CredentialStatus",
    "GeneratedCode",
    "ParsedDocument",
    "TextChunk",
]
