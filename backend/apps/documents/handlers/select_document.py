"""PUT /documents/{document_id}/select - Switch the selected document."""

import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.documents.schemas import DocumentSummary
from dependencies import get_document_qa_service
from responses import ResponseCode, success_response
from services import DocumentQAService


async def select_document(
    document_id: str,
    qa_service: DocumentQAService = Depends(get_document_qa_service),
) -> JSONResponse:
    """Select a document. Any answer for the previous one is discarded."""
    request_id = str(uuid.uuid4())[:8]
    document = qa_service.select(document_id)

    return success_response(
        ResponseCode.SUCCESS,
        {
            "selected_id": document_id,
            "document": (
                DocumentSummary.from_record(document).model_dump(mode="json")
                if document
                else None
            ),
        },
        request_id,
    )
