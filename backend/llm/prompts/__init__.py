"""LLM prompts for the document and generation modes."""

from llm.prompts.document_qa import (
    DOCUMENT_QA_PROMPT,
    DOCUMENT_QA_SYSTEM_PROMPT,
    SUMMARIZE_SYSTEM_PROMPT,
)
from llm.prompts.generation import (
    BLOG_LENGTH_GUIDES,
    BLOG_PROMPT,
    BLOG_SYSTEM_PROMPT,
    BLOG_TONES,
    CODE_LANGUAGES,
    CODE_SYSTEM_PROMPT,
)

__all__ = [
    "SUMMARIZE_SYSTEM_PROMPT",
    "DOCUMENT_QA_SYSTEM_PROMPT",
    "DOCUMENT_QA_PROMPT",
    "BLOG_SYSTEM_PROMPT",
    "BLOG_PROMPT",
    "BLOG_TONES",
    "BLOG_LENGTH_GUIDES",
    "CODE_SYSTEM_PROMPT",
    "CODE_LANGUAGES",
]
