"""Blog and code generation modes.

Both are single requests: a system prompt selecting the output shape and one
user message carrying the task. Nothing is persisted.
"""

import logging
import re

from config import Settings, get_settings
from errors import ValidationError
from llm import BaseCompletionClient
from llm.prompts import (
    BLOG_LENGTH_GUIDES,
    BLOG_PROMPT,
    BLOG_SYSTEM_PROMPT,
    BLOG_TONES,
    CODE_LANGUAGES,
    CODE_SYSTEM_PROMPT,
)
from services.types import GeneratedCode

logger = logging.getLogger(__name__)

# First ``` block; an optional info string (```python) is skipped
CODE_FENCE_PATTERN = re.compile(r"```\w*\n(.*?)```", re.DOTALL)


class GenerationService:
    """Generates blog posts and code snippets."""

    def __init__(
        self,
        completion_client: BaseCompletionClient,
        settings: Settings | None = None,
    ) -> None:
        self.completion_client = completion_client
        self.settings = settings or get_settings()

    async def generate_blog(
        self,
        topic: str,
        tone: str = "professional",
        length: str = "medium",
    ) -> str:
        """Write a blog post about a topic.

        Args:
            topic: What the post is about.
            tone: One of BLOG_TONES.
            length: 'short', 'medium' or 'long'.

        Raises:
            ValidationError: If the topic is blank, an option is unknown or no
                API key is saved.
            CompletionError: If the provider request fails.
        """
        topic = topic.strip()
        if not topic:
            raise ValidationError("Topic cannot be empty")
        if tone not in BLOG_TONES:
            raise ValidationError(f"Unknown tone '{tone}'")
        if length not in BLOG_LENGTH_GUIDES:
            raise ValidationError(f"Unknown length '{length}'")

        logger.info("Generating %s %s blog post", length, tone)
        prompt = BLOG_PROMPT.format(
            tone=tone, topic=topic, length_guide=BLOG_LENGTH_GUIDES[length]
        )
        return await self.completion_client.complete(
            [
                {"role": "system", "content": BLOG_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self.settings.blog_temperature,
        )

    async def generate_code(
        self, task: str, language: str = "javascript"
    ) -> GeneratedCode:
        """Generate code for a task in the given language.

        The reply is split into the first fenced block and the remaining prose.

        Raises:
            ValidationError: If the task is blank, the language is unknown or
                no API key is saved.
            CompletionError: If the provider request fails.
        """
        task = task.strip()
        if not task:
            raise ValidationError("Task cannot be empty")
        if language not in CODE_LANGUAGES:
            raise ValidationError(f"Unsupported language '{language}'")

        logger.info("Generating %s code", language)
        reply = await self.completion_client.complete(
            [
                {
                    "role": "system",
                    "content": CODE_SYSTEM_PROMPT.format(language=language),
                },
                {"role": "user", "content": task},
            ],
            temperature=self.settings.code_temperature,
        )
        code, explanation = split_code_reply(reply)
        return GeneratedCode(code=code, explanation=explanation, language=language)


def split_code_reply(reply: str) -> tuple[str, str]:
    """Split a reply into (code, explanation).

    The first fenced block is the code and everything outside it is the
    explanation. Without a fence the whole reply is code.
    """
    match = CODE_FENCE_PATTERN.search(reply)
    if match is None:
        return reply, ""
    explanation = reply[: match.start()] + reply[match.end() :]
    return match.group(1).strip(), explanation.strip()
