"""POST /generate/blog - Write a blog post."""

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


class BlogRequest(BaseModel):
    """Request body for blog generation."""

    topic: str = Field(..., min_length=1, description="What the post is about")
    tone: str = Field(default="professional", description="Writing tone")
    length: str = Field(default="medium", description="short, medium or long")


# --- Handler ---


async def generate_blog(
    request: BlogRequest,
    generation_service: GenerationService = Depends(get_generation_service),
) -> JSONResponse:
    request_id = str(uuid.uuid4())[:8]
    logger.info("[%s] Blog request: %s", request_id, request.topic[:100])

    try:
        content = await generation_service.generate_blog(
            request.topic, request.tone, request.length
        )
        return success_response(
            ResponseCode.SUCCESS,
            {"content": content, "tone": request.tone, "length": request.length},
            request_id,
        )

    except SERVICE_ERRORS as e:
        return service_error_response(e, request_id)

    except Exception as e:
        logger.exception("[%s] Unexpected error generating blog", request_id)
        return error_response(ResponseCode.INTERNAL_ERROR, str(e), request_id)
