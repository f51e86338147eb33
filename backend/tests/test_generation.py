"""Tests for blog and code generation."""

import pytest

from errors import ValidationError
from services import GenerationService
from services.generation import split_code_reply


@pytest.fixture
def generation_service(completion_client, settings):
    return GenerationService(completion_client, settings=settings)


class TestBlog:
    """Tests for GenerationService.generate_blog."""

    @pytest.mark.asyncio
    async def test_blog_request(self, generation_service, completion_client, settings):
        completion_client.replies.append("# Remote work\n\n...")

        result = await generation_service.generate_blog(
            "Remote work", tone="casual", length="short"
        )

        assert result == "# Remote work\n\n..."
        (call,) = completion_client.calls
        system, user = call["messages"]
        assert system["role"] == "system"
        assert user["role"] == "user"
        assert "Remote work" in user["content"]
        assert "casual" in user["content"]
        assert "300-500 words" in user["content"]
        assert call["temperature"] == settings.blog_temperature

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"topic": "   "},
            {"topic": "AI", "tone": "sarcastic"},
            {"topic": "AI", "length": "epic"},
        ],
    )
    async def test_invalid_blog_options(
        self, generation_service, completion_client, kwargs
    ):
        with pytest.raises(ValidationError):
            await generation_service.generate_blog(**kwargs)
        assert completion_client.calls == []


class TestCode:
    """Tests for GenerationService.generate_code."""

    @pytest.mark.asyncio
    async def test_code_request(self, generation_service, completion_client, settings):
        completion_client.replies.append("fn main() {}")

        result = await generation_service.generate_code("Hello world", "rust")

        assert result.language == "rust"
        (call,) = completion_client.calls
        assert "code in rust." in call["messages"][0]["content"]
        assert call["messages"][1] == {"role": "user", "content": "Hello world"}
        assert call["temperature"] == settings.code_temperature

    @pytest.mark.asyncio
    async def test_unknown_language(self, generation_service):
        with pytest.raises(ValidationError):
            await generation_service.generate_code("Hello world", "cobol")

    @pytest.mark.asyncio
    async def test_blank_task(self, generation_service):
        with pytest.raises(ValidationError):
            await generation_service.generate_code("\n", "python")

    @pytest.mark.asyncio
    async def test_missing_key(self, generation_service, completion_client):
        completion_client.api_key = ""

        with pytest.raises(ValidationError, match="Please add your API key first."):
            await generation_service.generate_code("Hello world", "python")


class TestCodeReplySplit:
    """Tests for splitting a code reply into code and explanation."""

    @pytest.mark.asyncio
    async def test_fenced_reply(self, generation_service, completion_client):
        """Test the first fenced block is the code and the rest is explanation."""
        completion_client.replies.append("```python\nprint(1)\n```\nPrints one.")

        result = await generation_service.generate_code("print one", "python")

        assert result.code == "print(1)"
        assert result.explanation == "Prints one."

    @pytest.mark.asyncio
    async def test_unfenced_reply_is_all_code(
        self, generation_service, completion_client
    ):
        completion_client.replies.append("print(1)")

        result = await generation_service.generate_code("print one", "python")

        assert result.code == "print(1)"
        assert result.explanation == ""

    def test_prose_around_first_block(self):
        reply = (
            "Here you go:\n```js\nconst a = 1;\n```\n"
            "Then:\n```js\nconst b = 2;\n```"
        )

        code, explanation = split_code_reply(reply)

        assert code == "const a = 1;"
        assert explanation.startswith("Here you go:")
        assert "const b = 2;" in explanation
        assert "const a = 1;" not in explanation
