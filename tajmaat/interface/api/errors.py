"""Exception handlers rendering domain and interface errors as envelopes."""

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tajmaat.domain.error import (
    ContentValidationError,
    DomainError,
    DuplicatePronunciationError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    StorageValidationError,
    UnknownContentTypeError,
)
from tajmaat.domain.service import ErrorTranslator
from tajmaat.interface.api.envelope import error_response
from tajmaat.interface.error import ApiError

_translator = ErrorTranslator()


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.code, **exc.extra)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error raised by a use case onto its status and code."""
    if isinstance(exc, UnknownContentTypeError):
        return error_response(
            400, str(exc), "INVALID_CONTENT_TYPE", received=exc.received
        )
    if isinstance(exc, ContentValidationError):
        return error_response(400, str(exc), "VALIDATION_FAILED", details=exc.errors)
    if isinstance(exc, NotFoundError):
        return error_response(404, str(exc), "NOT_FOUND")
    if isinstance(exc, NotAuthorizedError):
        logfire.warn("Forbidden content change", error=str(exc))
        return error_response(403, "You can only change your own content", "FORBIDDEN")
    if isinstance(exc, DuplicatePronunciationError):
        return error_response(400, str(exc), "DUPLICATE_PRONUNCIATION")
    if isinstance(exc, (StorageError, StorageValidationError)):
        translated = _translator.translate(exc)
        return error_response(
            translated.http_status, translated.message, "DATABASE_ERROR"
        )

    logfire.warn("Unmapped domain error", error=str(exc), path=request.url.path)
    return error_response(400, str(exc), "DOMAIN_ERROR")


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on an application."""
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(DomainError, handle_domain_error)
