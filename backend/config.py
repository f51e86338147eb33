"""Configuration and settings for Deskmate.

Uses Pydantic Settings for fail-fast validation on startup.
No variable is required: the provider API key is pasted by the user and kept
in local storage, never read from the environment.
"""

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Local Storage
    storage_dir: Path = Field(
        default=Path.home() / ".deskmate",
        description="Directory holding the persisted key-value blobs",
    )

    # Completion Provider
    provider_base_url: str = Field(
        default="https://api.groq.com/openai",
        description="Base URL of the OpenAI-compatible provider (without /v1)",
    )
    llm_model: str = Field(
        default="llama-3.3-70b-versatile", description="Model used for every mode"
    )
    completion_timeout_seconds: float = Field(
        default=60.0, description="Total timeout for a single provider request"
    )

    # Per-mode sampling temperatures
    chat_temperature: float = Field(default=0.7, description="Chat mode temperature")
    blog_temperature: float = Field(default=0.7, description="Blog mode temperature")
    code_temperature: float = Field(default=0.5, description="Code mode temperature")

    # Document Q&A
    document_context_chars: int = Field(
        default=12000,
        description="Characters of document content sent with a summarize/ask request",
    )
    max_file_size_mb: int = Field(default=10, description="Max upload size in MB")

    # Conversations
    title_max_chars: int = Field(
        default=40, description="Max length of a title derived from the first message"
    )

    # Chunking
    chunk_size: int = Field(default=1200, description="Chunk window size in chars")
    chunk_overlap: int = Field(default=200, description="Chunk overlap in chars")

    @field_validator("provider_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the provider URL so paths can be appended safely."""
        return v.strip().rstrip("/")

    @model_validator(mode="after")
    def validate_chunking(self) -> "Settings":
        """Reject chunk settings that would never advance."""
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise ValueError("chunk_overlap must be >= 0 and smaller than chunk_size")
        return self

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# CORS Configuration
CORS_CONFIG: dict[str, Any] = {
    "allow_origins": [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    "allow_credentials": True,
    "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    "allow_headers": ["*"],
    "expose_headers": ["*"],
    "max_age": 600,
}

# FastAPI App Configuration
APP_CONFIG: dict[str, Any] = {
    "title": "Deskmate",
    "description": (
        "Multi-mode LLM assistant: chat, document Q&A, blog and code generation. "
        "Conversations, documents and the API key are kept in local storage."
    ),
    "version": "0.1.0",
    "docs_url": "/api/docs",
    "redoc_url": "/api/redoc",
    "openapi_url": "/api/openapi.json",
    "openapi_tags": [
        {
            "name": "Health",
            "description": "Health check and service status",
        },
        {
            "name": "Settings",
            "description": "Provider API key management",
        },
        {
            "name": "Chat",
            "description": "Multi-turn conversations",
        },
        {
            "name": "Documents",
            "description": "Document upload, summaries and Q&A",
        },
        {
            "name": "Generate",
            "description": "Blog post and code generation",
        },
    ],
}


def get_app_config() -> dict[str, Any]:
    """Get FastAPI application configuration."""
    return APP_CONFIG.copy()


def get_cors_config() -> dict[str, Any]:
    """Get CORS middleware configuration."""
    return CORS_CONFIG.copy()
