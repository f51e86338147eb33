"""Document handlers."""

from apps.documents.handlers.ask_document import ask_document
from apps.documents.handlers.delete_document import delete_document
from apps.documents.handlers.get_selected_document import get_selected_document
from apps.documents.handlers.list_documents import list_documents
from apps.documents.handlers.select_document import select_document
from apps.documents.handlers.summarize_document import summarize_document
from apps.documents.handlers.upload_document import upload_document

__all__ = [
    "upload_document",
    "list_documents",
    "get_selected_document",
    "select_document",
    "delete_document",
    "summarize_document",
    "ask_document",
]
