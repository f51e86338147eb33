"""Documents module - upload, summarize and question documents."""

from apps.documents.routes import router

__all__ = ["router"]
