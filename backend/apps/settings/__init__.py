"""Settings module - provider API key."""

from apps.settings.routes import router

__all__ = ["router"]
