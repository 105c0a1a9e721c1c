"""
API error types and exception handlers.

- Defines a small hierarchy of ApiError exceptions.
- Maps errors to a consistent JSON shape for clients.
- Registers FastAPI exception handlers.

Domain errors raised by the engines (e.g. ProhibitedLanguageError from the
drafting-prompt gate) are translated into ApiError subclasses by the routes.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from northnode.core.logging import get_logger

__all__ = [
    "ApiError",
    "ContentTooLargeError",
    "UnsafePromptError",
    "ErrorBody",
    "ErrorResponse",
    "register_exception_handlers",
]

log = get_logger(__name__)


# -------------------------------
# Error response models
# -------------------------------

class ErrorBody(BaseModel):
    code: str = Field(..., description="Stable machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict = Field(default_factory=dict, description="Optional structured details")


class ErrorResponse(BaseModel):
    error: ErrorBody
    request_id: Optional[str] = Field(default=None, description="Client-supplied correlation/request id")


# -------------------------------
# Exception types
# -------------------------------

class ApiError(Exception):
    """
    Base API error with HTTP status and machine code.
    """
    status_code: int = 400
    code: str = "bad_request"

    def __init__(self, message: str, *, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ContentTooLargeError(ApiError):
    """Submitted content exceeds the configured character cap."""
    status_code = 400
    code = "content_too_large"


class UnsafePromptError(ApiError):
    """A compiled drafting prompt tripped the prohibited-language gate."""
    status_code = 422
    code = "prohibited_language"


# -------------------------------
# Handlers
# -------------------------------

def _make_json_response(request: Request, exc: ApiError) -> JSONResponse:
    req_id = request.headers.get("x-request-id") or request.headers.get("x-correlation-id")
    body = ErrorResponse(
        error=ErrorBody(code=exc.code, message=exc.message, details=exc.details or {}),
        request_id=req_id,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    - ApiError: mapped directly.
    - Request/pydantic validation errors: 422 validation_error with details.
    - Anything else: 500 server_error.
    """
    if isinstance(exc, ApiError):
        return _make_json_response(request, exc)

    if isinstance(exc, (RequestValidationError, ValidationError)):
        details: dict[str, Any] = {"errors": _jsonable_errors(exc)}
        err = ApiError("Validation error", details=details)
        err.status_code = 422
        err.code = "validation_error"
        return _make_json_response(request, err)

    return await unhandled_error_handler(request, exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("unhandled error", exc_info=exc, extra={"path": request.url.path})
    generic = ApiError("Internal server error")
    generic.status_code = 500
    generic.code = "server_error"
    return _make_json_response(request, generic)


def _jsonable_errors(exc: Exception) -> list:
    errors = exc.errors()  # type: ignore[attr-defined]
    cleaned = []
    for item in errors:
        entry = {k: v for k, v in item.items() if k in {"loc", "msg", "type"}}
        entry["loc"] = [str(part) for part in entry.get("loc", ())]
        cleaned.append(entry)
    return cleaned


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers on the FastAPI app.
    """
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, api_error_handler)
    app.add_exception_handler(ValidationError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
