"""Shared types and dataclasses for services.

Provides typed alternatives to dict[str, Any] for better type safety.
"""

from dataclasses import dataclass
from enum import Enum


class CredentialStatus(str, Enum):
    """Outcome of probing the provider with an API key."""

    VALID = "valid"
    INVALID = "invalid"
    NETWORK_ERROR = "network_error"


@dataclass
class CredentialCheck:
    """Result of an advisory API key validation."""

    status: CredentialStatus
    message: str
    status_code: int | None = None

    @property
    def valid(self) -> bool:
        """Only a confirmed key counts as valid."""
        return self.status is CredentialStatus.VALID


@dataclass
class ParsedDocument:
    """Result of extracting text from an uploaded file."""

    text: str
    filename: str
    document_type: str
    page_count: int | None = None


@dataclass
class TextChunk:
    """A chunk of text with position metadata."""

    text: str
    chunk_index: int
    start_char: int
    end_char: int


@dataclass
class GeneratedCode:
    """Code mode reply split into the first fenced block and the prose around it."""

    code: str
    explanation: str
    language: str
