"""Tests for the chat mode service."""

import asyncio

import pytest

from errors import RecordNotFoundError, ValidationError
from llm import CompletionError, CompletionErrorKind
from services import ChatService
from storage import CONVERSATION_CODEC, CONVERSATIONS_KEY, Role


@pytest.fixture
def chat_service(conversation_store, completion_client, settings):
    return ChatService(conversation_store, completion_client, settings=settings)


class TestConversations:
    """Tests for conversation lifecycle."""

    def test_create_selects_new_conversation(self, chat_service):
        first = chat_service.create_conversation()
        second = chat_service.create_conversation()

        assert second.title == "New Chat"
        assert second.messages == ()
        assert chat_service.conversations.selected_id == second.id
        assert [c.id for c in chat_service.conversations.items] == [second.id, first.id]

    def test_delete_requires_confirmation(self, chat_service):
        conversation = chat_service.create_conversation()

        assert not chat_service.delete_conversation(conversation.id, lambda _: False)
        assert chat_service.delete_conversation(conversation.id, lambda _: True)
        assert chat_service.conversations.items == []
        assert chat_service.conversations.selected_id is None


class TestSendMessage:
    """Tests for ChatService.send_message."""

    @pytest.mark.asyncio
    async def test_reply_appended_with_full_history(
        self, chat_service, completion_client, settings
    ):
        conversation = chat_service.create_conversation()
        completion_client.replies += ["Hi! How can I help?", "Sure."]

        await chat_service.send_message(conversation.id, "Hello")
        reply = await chat_service.send_message(conversation.id, "  Tell me more  ")

        assert reply.role is Role.ASSISTANT
        assert reply.content == "Sure."
        stored = chat_service.conversations.get(conversation.id)
        assert [(m.role, m.content) for m in stored.messages] == [
            (Role.USER, "Hello"),
            (Role.ASSISTANT, "Hi! How can I help?"),
            (Role.USER, "Tell me more"),
            (Role.ASSISTANT, "Sure."),
        ]
        second_call = completion_client.calls[1]
        assert [m["content"] for m in second_call["messages"]] == [
            "Hello",
            "Hi! How can I help?",
            "Tell me more",
        ]
        assert second_call["temperature"] == settings.chat_temperature

    @pytest.mark.asyncio
    async def test_title_set_only_after_reply(self, chat_service, completion_client):
        """Test the title changes when the reply lands, not when the user sends."""
        chat_service.create_conversation()
        target = chat_service.create_conversation()
        completion_client.replies.append("Rust is a systems programming language.")
        completion_client.gate = asyncio.Event()

        task = asyncio.create_task(chat_service.send_message(target.id, "What is Rust?"))
        await asyncio.sleep(0)
        pending = chat_service.conversations.get(target.id)

        assert [m.content for m in pending.messages] == ["What is Rust?"]
        assert pending.title == "New Chat"

        completion_client.gate.set()
        await task

        titles = [c.title for c in chat_service.conversations.items]
        assert titles == ["What is Rust?", "New Chat"]

    @pytest.mark.asyncio
    async def test_title_truncated_and_frozen(self, chat_service, completion_client):
        conversation = chat_service.create_conversation()
        completion_client.replies += ["first", "second"]
        long_message = "Explain the difference between processes and threads please"

        await chat_service.send_message(conversation.id, long_message)
        await chat_service.send_message(conversation.id, "And coroutines?")

        stored = chat_service.conversations.get(conversation.id)
        assert stored.title == long_message[:40]
        assert stored.titled

    @pytest.mark.asyncio
    async def test_message_persisted(self, chat_service, completion_client, storage):
        conversation = chat_service.create_conversation()
        completion_client.replies.append("Hello!")

        await chat_service.send_message(conversation.id, "Hi")

        (saved,) = CONVERSATION_CODEC.decode(storage.get_item(CONVERSATIONS_KEY))
        assert [m.content for m in saved.messages] == ["Hi", "Hello!"]

    @pytest.mark.asyncio
    async def test_blank_message_rejected(self, chat_service, completion_client):
        conversation = chat_service.create_conversation()

        with pytest.raises(ValidationError):
            await chat_service.send_message(conversation.id, "   ")
        assert completion_client.calls == []

    @pytest.mark.asyncio
    async def test_missing_key_leaves_conversation_untouched(
        self, chat_service, completion_client
    ):
        conversation = chat_service.create_conversation()
        completion_client.api_key = ""

        with pytest.raises(ValidationError, match="Please add your API key first."):
            await chat_service.send_message(conversation.id, "Hello")

        assert chat_service.conversations.get(conversation.id).messages == ()

    @pytest.mark.asyncio
    async def test_unknown_conversation(self, chat_service):
        with pytest.raises(RecordNotFoundError):
            await chat_service.send_message("missing", "Hello")

    @pytest.mark.asyncio
    async def test_provider_failure_keeps_user_message(
        self, chat_service, completion_client
    ):
        conversation = chat_service.create_conversation()
        completion_client.replies.append(
            CompletionError(CompletionErrorKind.PROVIDER, "Invalid API Key", 401)
        )

        with pytest.raises(CompletionError):
            await chat_service.send_message(conversation.id, "Hello")

        stored = chat_service.conversations.get(conversation.id)
        assert [m.content for m in stored.messages] == ["Hello"]
        assert stored.title == "New Chat"

    @pytest.mark.asyncio
    async def test_concurrent_sends_keep_all_messages(
        self, chat_service, completion_client
    ):
        """Test two sends in flight on different conversations both land."""
        a = chat_service.create_conversation()
        b = chat_service.create_conversation()
        completion_client.replies += ["reply a", "reply b"]
        completion_client.gate = asyncio.Event()

        tasks = [
            asyncio.create_task(chat_service.send_message(a.id, "to a")),
            asyncio.create_task(chat_service.send_message(b.id, "to b")),
        ]
        await asyncio.sleep(0)
        completion_client.gate.set()
        await asyncio.gather(*tasks)

        for conversation_id, sent in ((a.id, "to a"), (b.id, "to b")):
            stored = chat_service.conversations.get(conversation_id)
            assert len(stored.messages) == 2
            assert stored.messages[0].content == sent
            assert stored.title == sent

    @pytest.mark.asyncio
    async def test_concurrent_sends_same_conversation(
        self, chat_service, completion_client
    ):
        """Test two sends in flight on one conversation both commit."""
        conversation = chat_service.create_conversation()
        completion_client.replies += ["reply 1", "reply 2"]
        completion_client.gate = asyncio.Event()

        tasks = [
            asyncio.create_task(chat_service.send_message(conversation.id, "first")),
            asyncio.create_task(chat_service.send_message(conversation.id, "second")),
        ]
        await asyncio.sleep(0)
        completion_client.gate.set()
        await asyncio.gather(*tasks)

        stored = chat_service.conversations.get(conversation.id)
        assert [(m.role, m.content) for m in stored.messages] == [
            (Role.USER, "first"),
            (Role.USER, "second"),
            (Role.ASSISTANT, "reply 1"),
            (Role.ASSISTANT, "reply 2"),
        ]
        assert stored.title == "first"
        assert stored.titled

    @pytest.mark.asyncio
    async def test_deleted_while_pending(self, chat_service, completion_client):
        conversation = chat_service.create_conversation()
        completion_client.replies.append("too late")
        completion_client.gate = asyncio.Event()

        task = asyncio.create_task(chat_service.send_message(conversation.id, "Hi"))
        await asyncio.sleep(0)
        chat_service.delete_conversation(conversation.id, lambda _: True)
        completion_client.gate.set()

        with pytest.raises(RecordNotFoundError):
            await task
        assert chat_service.conversations.items == []
