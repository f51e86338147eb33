"""Fixed-width text chunking with overlap.

Splits text into windows of ``size`` characters where each window starts
``size - overlap`` characters after the previous one. Chunking stops at the
first window that reaches the end of the text, so:

- every chunk but the last is exactly ``size`` long
- consecutive chunks share exactly ``overlap`` characters
- ``ceil((len - overlap) / (size - overlap))`` chunks are produced when
  ``len > overlap``, otherwise one

Boundaries are purely positional: chunks can split words and sentences.
Document Q&A currently sends a flat character prefix instead; this module is
kept for retrieval over documents too long for one request.
"""

import logging
import math

from config import Settings, get_settings
from errors import ConfigError
from services.types import TextChunk

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1200
DEFAULT_CHUNK_OVERLAP = 200


def _validate_window(size: int, overlap: int) -> None:
    if size <= 0:
        raise ConfigError(f"Chunk size must be positive, got {size}")
    if overlap < 0:
        raise ConfigError(f"Chunk overlap cannot be negative, got {overlap}")
    if overlap >= size:
        raise ConfigError(
            f"Chunk overlap ({overlap}) must be smaller than chunk size ({size})"
        )


def chunk_text(
    text: str,
    size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[str]:
    """Split text into overlapping fixed-size windows.

    Args:
        text: Text to split. Empty text yields no chunks.
        size: Window length in characters.
        overlap: Characters shared by consecutive windows.

    Returns:
        Chunks in source order.

    Raises:
        ConfigError: If size <= 0, overlap < 0 or overlap >= size.
    """
    _validate_window(size, overlap)

    chunks: list[str] = []
    step = size - overlap
    start = 0
    while start < len(text):
        chunks.append(text[start : start + size])
        if start + size >= len(text):
            break
        start += step
    return chunks


def expected_chunk_count(length: int, size: int, overlap: int) -> int:
    """Number of chunks chunk_text() produces for a text of this length."""
    _validate_window(size, overlap)
    if length <= 0:
        return 0
    if length <= overlap:
        return 1
    return math.ceil((length - overlap) / (size - overlap))


class Chunker:
    """Chunks text using the configured window size and overlap."""

    def __init__(
        self,
        chunk_size: int | None = None,
        chunk_overlap: int | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize chunker, falling back to settings for unset values."""
        settings = settings or get_settings()
        self.chunk_size = chunk_size if chunk_size is not None else settings.chunk_size
        self.chunk_overlap = (
            chunk_overlap if chunk_overlap is not None else settings.chunk_overlap
        )
        _validate_window(self.chunk_size, self.chunk_overlap)

    def chunk_text(self, text: str) -> list[TextChunk]:
        """Split text into chunks with position metadata."""
        step = self.chunk_size - self.chunk_overlap
        chunks = [
            TextChunk(
                text=window,
                chunk_index=index,
                start_char=index * step,
                end_char=index * step + len(window),
            )
            for index, window in enumerate(
                chunk_text(text, self.chunk_size, self.chunk_overlap)
            )
        ]

        logger.debug(
            "Chunking complete: %d chars -> %d chunks (size: %d, overlap: %d)",
            len(text),
            len(chunks),
            self.chunk_size,
            self.chunk_overlap,
        )
        return chunks

    def estimate_chunk_count(self, text_length: int) -> int:
        """Number of chunks a text of this length will produce."""
        return expected_chunk_count(text_length, self.chunk_size, self.chunk_overlap)
