"""GET /documents - List stored documents, newest first."""

from fastapi import Depends
from pydantic import BaseModel, Field

from apps.documents.schemas import DocumentSummary
from dependencies import get_document_qa_service
from services import DocumentQAService

# --- Response Schema ---


class DocumentListResponse(BaseModel):
    """Response for listing documents."""

    documents: list[DocumentSummary]
    selected_id: str | None = Field(None, description="Currently selected document")
    total: int = Field(..., description="Total number of documents")


# --- Handler ---


async def list_documents(
    qa_service: DocumentQAService = Depends(get_document_qa_service),
) -> DocumentListResponse:
    """List all stored documents."""
    store = qa_service.documents
    documents = [DocumentSummary.from_record(d) for d in store.items]
    return DocumentListResponse(
        documents=documents,
        selected_id=store.selected_id,
        total=len(documents),
    )
