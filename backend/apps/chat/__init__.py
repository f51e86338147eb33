"""Chat module - conversations and message exchange."""

from apps.chat.routes import router

__all__ = ["router"]
