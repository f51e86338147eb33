"""POST /generate/code - Generate code for a task."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from dependencies import get_generation_service
from responses import (
    SERVICE_ERRORS,
    ResponseCode,
    error_response,
    service_error_response,
    success_response,
)
from services import GenerationService

logger = logging.getLogger(__name__)


# --- Request Schema ---


class CodeRequest(BaseModel):
    """Request body for code generation."""

    task: str = Field(..., min_length=1, description="What the code should do")
    language: str = Field(default="javascript", description="Target language")


# --- Handler ---


async def generate_code(
    request: CodeRequest,
    generation_service: GenerationService = Depends(get_generation_service),
) -> JSONResponse:
    request_id = str(uuid.uuid4())[:8]
    logger.info("[%s] Code request (%s)", request_id, request.language)

    try:
        result = await generation_service.generate_code(
            request.task, request.language
        )
        return success_response(
            ResponseCode.SUCCESS,
            {
                "code": result.code,
                "explanation": result.explanation,
                "language": result.language,
            },
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Unexpected error generating code", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
