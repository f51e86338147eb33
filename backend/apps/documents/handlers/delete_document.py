"""DELETE /documents/{document_id} - Delete a document."""

import logging
import uuid

from fastapi import Depends, Query
from fastapi.responses import JSONResponse

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


async def delete_document(
    document_id: str,
    confirm: bool = Query(default=False, description="Must be true to delete"),
    qa_service: DocumentQAService = Depends(get_document_qa_service),
) -> JSONResponse:
    """Delete a document once confirmed.

    Deleting the selected document clears the selection and its answer.
    """
    request_id = str(uuid.uuid4())[:8]
    logger.info("[%s] Delete document request: %s", request_id, document_id)

    try:
        if not qa_service.delete(document_id, lambda _: confirm):
            return error_response(
                ResponseCode.DELETE_NOT_CONFIRMED, request_id=request_id
            )

        return success_response(
            ResponseCode.RECORD_DELETED,
            {"deleted_document_id": document_id},
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Failed to delete document", request_id)
        return error_response(
            ResponseCode.INTERNAL_ERROR, f"Failed to delete document: {e}", request_id
        )
