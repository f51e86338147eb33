"""GET /documents/selected - The selected document and its latest answer."""

from fastapi import Depends
from pydantic import BaseModel, Field

from apps.documents.schemas import DocumentSummary
from dependencies import get_document_qa_service
from services import DocumentQAService

# --- Response Schema ---


class SelectedDocumentResponse(BaseModel):
    """Selected document view."""

    document: DocumentSummary | None = None
    answer: str = Field("", description="Latest answer for this document")


# --- Handler ---


async def get_selected_document(
    qa_service: DocumentQAService = Depends(get_document_qa_service),
) -> SelectedDocumentResponse:
    selected = qa_service.documents.selected
    return SelectedDocumentResponse(
        document=DocumentSummary.from_record(selected) if selected else None,
        answer=qa_service.answer,
    )
