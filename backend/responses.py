"""Standardized response infrastructure for API endpoints.

Provides consistent response format with structured codes and messages, and
the mapping from service exceptions to those codes.
"""

import logging
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse

from errors import ConfigError, RecordNotFoundError, ValidationError
from llm import CompletionError, CompletionErrorKind
from services.document import DocumentParseError, EmptyDocumentError, FileTooLargeError
from storage import StorageError

logger = logging.getLogger(__name__)


class ResponseCode(str, Enum):
    """Response codes for API responses.

    Ranges: 0xxx=Success, 1xxx=Client Error, 2xxx=Server Error, 3xxx=Provider
    """

    # Success codes
    SUCCESS = "0000"
    CONVERSATION_CREATED = "0001"
    DOCUMENT_UPLOADED = "0002"
    RECORD_DELETED = "0003"
    API_KEY_SAVED = "0004"

    # Client errors
    VALIDATION_ERROR = "1000"
    FILE_TOO_LARGE = "1002"
    RECORD_NOT_FOUND = "1003"
    EMPTY_DOCUMENT = "1004"
    CORRUPTED_FILE = "1005"
    DELETE_NOT_CONFIRMED = "1006"

    # Server errors
    INTERNAL_ERROR = "2000"
    STORAGE_ERROR = "2001"
    CONFIG_ERROR = "2002"

    # Completion provider errors
    PROVIDER_ERROR = "3000"
    PROVIDER_UNREACHABLE = "3001"
    MALFORMED_PROVIDER_RESPONSE = "3002"


# Response messages mapped to codes
RESPONSE_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.SUCCESS: "Operation completed successfully",
    ResponseCode.CONVERSATION_CREATED: "Conversation created",
    ResponseCode.DOCUMENT_UPLOADED: "Document uploaded successfully",
    ResponseCode.RECORD_DELETED: "Deleted successfully",
    ResponseCode.API_KEY_SAVED: "API key saved successfully",
    ResponseCode.VALIDATION_ERROR: "Request validation failed",
    ResponseCode.FILE_TOO_LARGE: "File exceeds maximum allowed size",
    ResponseCode.RECORD_NOT_FOUND: "Not found",
    ResponseCode.EMPTY_DOCUMENT: "No readable text found",
    ResponseCode.CORRUPTED_FILE: "File appears corrupted",
    ResponseCode.DELETE_NOT_CONFIRMED: "Deletion was not confirmed",
    ResponseCode.INTERNAL_ERROR: "An internal error occurred",
    ResponseCode.STORAGE_ERROR: "Local storage could not be read or written",
    ResponseCode.CONFIG_ERROR: "Invalid configuration",
    ResponseCode.PROVIDER_ERROR: "The completion provider returned an error",
    ResponseCode.PROVIDER_UNREACHABLE: "Could not reach the completion provider",
    ResponseCode.MALFORMED_PROVIDER_RESPONSE: "Unexpected response from the completion provider",
}

# HTTP status codes for each response code
HTTP_STATUS_MAP: dict[ResponseCode, int] = {
    ResponseCode.SUCCESS: 200,
    ResponseCode.CONVERSATION_CREATED: 201,
    ResponseCode.DOCUMENT_UPLOADED: 201,
    ResponseCode.RECORD_DELETED: 200,
    ResponseCode.API_KEY_SAVED: 200,
    ResponseCode.VALIDATION_ERROR: 422,
    ResponseCode.FILE_TOO_LARGE: 413,
    ResponseCode.RECORD_NOT_FOUND: 404,
    ResponseCode.EMPTY_DOCUMENT: 400,
    ResponseCode.CORRUPTED_FILE: 400,
    ResponseCode.DELETE_NOT_CONFIRMED: 409,
    ResponseCode.INTERNAL_ERROR: 500,
    ResponseCode.STORAGE_ERROR: 500,
    ResponseCode.CONFIG_ERROR: 500,
    ResponseCode.PROVIDER_ERROR: 502,
    ResponseCode.PROVIDER_UNREACHABLE: 504,
    ResponseCode.MALFORMED_PROVIDER_RESPONSE: 502,
}

# Service exceptions that map to a fixed code
SERVICE_ERROR_MAP: dict[type[Exception], ResponseCode] = {
    ValidationError: ResponseCode.VALIDATION_ERROR,
    RecordNotFoundError: ResponseCode.RECORD_NOT_FOUND,
    FileTooLargeError: ResponseCode.FILE_TOO_LARGE,
    EmptyDocumentError: ResponseCode.EMPTY_DOCUMENT,
    DocumentParseError: ResponseCode.CORRUPTED_FILE,
    StorageError: ResponseCode.STORAGE_ERROR,
    ConfigError: ResponseCode.CONFIG_ERROR,
}

COMPLETION_ERROR_MAP: dict[CompletionErrorKind, ResponseCode] = {
    CompletionErrorKind.PROVIDER: ResponseCode.PROVIDER_ERROR,
    CompletionErrorKind.NETWORK: ResponseCode.PROVIDER_UNREACHABLE,
    CompletionErrorKind.MALFORMED_RESPONSE: ResponseCode.MALFORMED_PROVIDER_RESPONSE,
}

# Exceptions handlers turn into error responses instead of 500s
SERVICE_ERRORS: tuple[type[Exception], ...] = (
    *SERVICE_ERROR_MAP,
    CompletionError,
)


def get_message(code: ResponseCode) -> str:
    """Get the message for a response code."""
    return RESPONSE_MESSAGES.get(code, "Unknown error")


def get_http_status(code: ResponseCode) -> int:
    """Get HTTP status code for a response code."""
    return HTTP_STATUS_MAP.get(code, 500)


def success_dict(
    code: ResponseCode,
    data: Any = None,
    custom_message: str | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Build a standardized success response dictionary."""
    return {
        "code": code.value,
        "success": True,
        "message": custom_message or get_message(code),
        "timestamp": datetime.now(UTC).isoformat(),
        "request_id": request_id,
        "data": data,
    }


def error_dict(
    code: ResponseCode,
    custom_message: str | None = None,
    error_details: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Build a standardized error response dictionary."""
    return {
        "code": code.value,
        "success": False,
        "message": custom_message or get_message(code),
        "timestamp": datetime.now(UTC).isoformat(),
        "request_id": request_id,
        "error_details": error_details,
    }


# --- JSONResponse helpers ---


def success_response(
    code: ResponseCode,
    data: Any = None,
    request_id: str | None = None,
) -> JSONResponse:
    """Create a JSONResponse with success format."""
    return JSONResponse(
        content=success_dict(code, data, request_id=request_id),
        status_code=get_http_status(code),
    )


def error_response(
    code: ResponseCode,
    custom_message: str | None = None,
    request_id: str | None = None,
    error_details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a JSONResponse with error format."""
    return JSONResponse(
        content=error_dict(code, custom_message, error_details, request_id),
        status_code=get_http_status(code),
    )


def service_error_response(exc: Exception, request_id: str | None = None) -> JSONResponse:
    """Map a service exception to its error response and log it."""
    details = None
    if isinstance(exc, CompletionError):
        code = COMPLETION_ERROR_MAP[exc.kind]
        details = {"kind": exc.kind.value, "provider_status": exc.status_code}
    else:
        code = next(
            (c for cls, c in SERVICE_ERROR_MAP.items() if isinstance(exc, cls)),
            ResponseCode.INTERNAL_ERROR,
        )

    log_fn = logger.warning if code.value.startswith("1") else logger.error
    log_fn("[%s] %s: %s", request_id, type(exc).__name__, exc)
    return error_response(code, str(exc), request_id, details)
