"""POST /documents/upload - Upload a document and select it."""

import logging
import uuid

from fastapi import Depends, File, UploadFile
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


async def upload_document(
    file: UploadFile = File(...),
    qa_service: DocumentQAService = Depends(get_document_qa_service),
) -> JSONResponse:
    """Upload a document (PDF, DOCX or plain text).

    Flow:
    1. Read the upload
    2. Extract text (size and emptiness checks happen here)
    3. Store as a new document and select it
    """
    request_id = str(uuid.uuid4())[:8]
    logger.info("[%s] Upload: %s (%s bytes)", request_id, file.filename, file.size)

    try:
        data = await file.read()
        document = await qa_service.upload(
            file.filename or "document", data, file.content_type
        )

        logger.info("[%s] Stored document %s", request_id, document.id)
        return success_response(
            ResponseCode.DOCUMENT_UPLOADED,
            DocumentSummary.from_record(document).model_dump(mode="json"),
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Unexpected error during upload", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
