"""Pytest configuration and fixtures for Deskmate tests."""

import asyncio
import json
import os
import sys
import tempfile

# Point storage at a throwaway directory BEFORE any imports that might trigger Settings
os.environ.setdefault("STORAGE_DIR", tempfile.mkdtemp(prefix="deskmate-tests-"))

from collections.abc import Callable

import httpx
import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import Settings  # noqa: E402
from llm import BaseCompletionClient  # noqa: E402
from services import CollectionStore  # noqa: E402
from storage import (  # noqa: E402
    CONVERSATION_CODEC,
    CONVERSATIONS_KEY,
    DOCUMENT_CODEC,
    DOCUMENTS_KEY,
    InMemoryStorage,
)

PROVIDER_BASE_URL = "https://provider.test"


def completion_body(content: str) -> dict:
    """Minimal OpenAI-style chat completion body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class FakeProvider:
    """Scripted provider for httpx.MockTransport.

    Queue a response (or an exception to raise) per expected request; every
    request is recorded for assertions.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: list[httpx.Response | Exception | Callable] = []

    def reply(self, content: str) -> "FakeProvider":
        self._queue.append(httpx.Response(200, json=completion_body(content)))
        return self

    def respond(self, status_code: int, body=None) -> "FakeProvider":
        self._queue.append(httpx.Response(status_code, json=body))
        return self

    def respond_raw(self, status_code: int, text: str) -> "FakeProvider":
        self._queue.append(httpx.Response(status_code, text=text))
        return self

    def fail(self, exc: Exception) -> "FakeProvider":
        self._queue.append(exc)
        return self

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"Unexpected provider request: {request.url}")
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        storage_dir=tmp_path,
        provider_base_url=PROVIDER_BASE_URL,
    )


@pytest.fixture
def storage():
    """Empty in-memory key-value storage."""
    return InMemoryStorage()


@pytest.fixture
def provider():
    """Scripted provider; queue responses before making requests."""
    return FakeProvider()


@pytest.fixture
def http_client(provider):
    """Async HTTP client whose requests are answered by the fake provider."""
    return httpx.AsyncClient(
        transport=httpx.MockTransport(provider), base_url=PROVIDER_BASE_URL
    )


@pytest.fixture
def sample_text():
    """Plain-text document content for upload tests."""
    return (
        "Deskmate keeps conversations and documents on this machine.\n\n"
        "Chapter 1: Modes\n\n"
        "Chat, document Q&A, blog writing and code generation share one API key.\n"
    )


class ScriptedCompletionClient(BaseCompletionClient):
    """Completion client returning queued replies.

    Set ``gate`` to an asyncio.Event to hold replies until the test releases it.
    """

    def __init__(self, api_key: str = "gsk_test") -> None:
        super().__init__(lambda: self.api_key)
        self.api_key = api_key
        self.replies: list[str | Exception] = []
        self.calls: list[dict] = []
        self.gate: asyncio.Event | None = None

    async def complete(self, messages, *, model=None, temperature=None) -> str:
        self.require_api_key()
        self.calls.append(
            {"messages": list(messages), "model": model, "temperature": temperature}
        )
        reply = self.replies.pop(0)
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def completion_client():
    """Completion client with a saved key and no queued replies."""
    return ScriptedCompletionClient()


@pytest.fixture
def conversation_store(storage):
    return CollectionStore(storage, CONVERSATIONS_KEY, CONVERSATION_CODEC)


@pytest.fixture
def document_store(storage):
    return CollectionStore(storage, DOCUMENTS_KEY, DOCUMENT_CODEC)
