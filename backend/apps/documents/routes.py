"""Document routes - registers all document endpoints."""

from fastapi import APIRouter

from apps.documents.handlers import (
    ask_document,
    delete_document,
    get_selected_document,
    list_documents,
    select_document,
    summarize_document,
    upload_document,
)
from apps.documents.handlers.get_selected_document import SelectedDocumentResponse
from apps.documents.handlers.list_documents import DocumentListResponse

router = APIRouter(prefix="/documents", tags=["Documents"])

# POST /documents/upload - Upload document
router.post("/upload")(upload_document)

# GET /documents - List documents
router.get("", response_model=DocumentListResponse)(list_documents)

# GET /documents/selected - Selected document and latest answer
router.get("/selected", response_model=SelectedDocumentResponse)(
    get_selected_document
)

# PUT /documents/{document_id}/select - Select document
router.put("/{document_id}/select")(select_document)

# DELETE /documents/{document_id} - Delete document
router.delete("/{document_id}")(delete_document)

# POST /documents/{document_id}/summarize - Summarize document
router.post("/{document_id}/summarize")(summarize_document)

# POST /documents/{document_id}/ask - Ask a question
router.post("/{document_id}/ask")(ask_document)
