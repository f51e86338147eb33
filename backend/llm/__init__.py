"""LLM module - unified interface for chat completion providers.

Usage:
    from llm import CompletionClient, CompletionError

    client = CompletionClient(api_key_provider, http_client)
    text = await client.complete([{"role": "user", "content": "Hi"}])

Structure:
    - base.py: Abstract interface (BaseCompletionClient) and error taxonomy
    - openai_compatible.py: OpenAI-compatible HTTP implementation
    - prompts/: System prompts and templates per mode
"""

from llm.base import (
    MISSING_API_KEY_MESSAGE,
    BaseCompletionClient,
    ChatMessage,
    CompletionError,
    CompletionErrorKind,
    extract_error_message,
)
from llm.openai_compatible import OpenAICompatibleClient, create_http_client

# Default provider - can be swapped by changing this alias
CompletionClient = OpenAICompatibleClient

__all__ = [
    "MISSING_API_KEY_MESSAGE",
    "BaseCompletionClient",
    "ChatMessage",
    "CompletionClient",
    "CompletionError",
    "CompletionErrorKind",
    "OpenAICompatibleClient",
    "create_http_client",
    "extract_error_message",
]
