"""POST /documents/{document_id}/summarize - Summarize a document."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.documents.schemas import DocumentSummary
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


async def summarize_document(
    document_id: str,
    qa_service: DocumentQAService = Depends(get_document_qa_service),
) -> JSONResponse:
    """Generate a summary and store it on the document."""
    request_id = str(uuid.uuid4())[:8]
    logger.info("[%s] Summarize document %s", request_id, document_id)

    try:
        document = await qa_service.summarize(document_id)
        return success_response(
            ResponseCode.SUCCESS,
            DocumentSummary.from_record(document).model_dump(mode="json"),
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Unexpected error during summarize", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
