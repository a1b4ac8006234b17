"""Error envelope for the HTTP API.

Every failure answers ``{"success": false, "code", "message", "errors"}``
with the status carried by the error kind.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError

from shared.errors import StorefrontError, UpstreamError

logger = structlog.get_logger(__name__)


def error_response(status_code: int, code: str, message: str, errors=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "code": code,
            "message": message,
            "errors": errors or {},
        },
    )


def _first_message(messages) -> str:
    if isinstance(messages, dict):
        for field_messages in messages.values():
            if field_messages:
                return str(field_messages[0] if isinstance(field_messages, list) else field_messages)
    elif isinstance(messages, list) and messages:
        return str(messages[0])
    return str(messages) if messages else "Invalid request"


def _request_errors(exc: RequestValidationError) -> dict:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        location = [str(part) for part in error.get("loc", ())[1:]] or ["_request"]
        errors.setdefault(".".join(location), []).append(error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Map storefront and framework errors onto the error envelope."""

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Request failed", path=request.url.path, code=exc.code, error=exc.message)
        return error_response(exc.status_code, exc.code, exc.message, exc.messages)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
        return error_response(400, "VALIDATION_ERROR", _first_message(messages), messages)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = _request_errors(exc)
        return error_response(400, "VALIDATION_ERROR", _first_message(errors), errors)

    @app.exception_handler(ObjectNotFoundError)
    async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
        return error_response(404, "NOT_FOUND", "Resource not found", {"_entity": [str(exc)]})

    @app.exception_handler(ExpectedVersionError)
    async def version_conflict_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
        logger.warning("Concurrent update rejected", path=request.url.path, error=str(exc))
        return error_response(409, "CONFLICT", "The resource was modified concurrently; retry the request")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", path=request.url.path)
        return error_response(500, UpstreamError.code, "Internal server error")
