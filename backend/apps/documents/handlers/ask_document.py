"""POST /documents/{document_id}/ask - Ask a question about a document."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from dependencies import get_document_qa_service
from responses import (
    SERVICE_ERRORS,
    ResponseCode,
    error_response,
    service_error_response,
    success_response,
)
from services import DocumentQAService

logger = logging.getLogger(__name__)


# --- Request Schema ---


class AskRequest(BaseModel):
    """Request body for a document question."""

    question: str = Field(..., min_length=1, description="Question about the document")


# --- Handler ---


async def ask_document(
    document_id: str,
    request: AskRequest,
    qa_service: DocumentQAService = Depends(get_document_qa_service),
) -> JSONResponse:
    """Answer a question using only the document's content."""
    request_id = str(uuid.uuid4())[:8]
    logger.info(
        "[%s] Question for %s: %s", request_id, document_id, request.question[:100]
    )

    try:
        answer = await qa_service.ask(document_id, request.question)
        return success_response(
            ResponseCode.SUCCESS,
            {"document_id": document_id, "answer": answer},
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Unexpected error answering question", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
