"""Generate module - blog and code generation."""

from apps.generate.routes import router

__all__ = ["router"]
