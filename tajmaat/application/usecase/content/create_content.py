"""Create content use case: the ingestion pipeline.

TypeCheck -> FieldCheck -> Coerce -> Persist -> Rehydrate -> Done

TypeCheck and FieldCheck failures end in a rejection, persistence failures
in a translated failure. A failed rehydrate never undoes a successful
create: the bare record is returned instead.
"""

from typing import Any, Literal, Optional, Union
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tajmaat.application.usecase.base import BaseUseCase
from tajmaat.domain.error import UnknownContentTypeError
from tajmaat.domain.model import Content, ContentWithAuthor
from tajmaat.domain.service import (
    ContentCoercer,
    ContentService,
    ContentValidator,
    ErrorTranslator,
)
from tajmaat.domain.value import UserId


class CreateContentRequest(BaseModel):
    """Create content request.

    `type` and `data` are passed through exactly as the caller sent them.
    """

    type: Any = None
    data: Any = None
    actor_id: str  # User ID from the verified session


class IngestionCreated(BaseModel):
    """Record created; `details` holds the rehydrated view when available."""

    status: Literal["created"] = "created"
    record: Content
    details: Optional[ContentWithAuthor] = None
    rehydrated: bool = False


class IngestionRejected(BaseModel):
    """Request rejected before anything was written."""

    status: Literal["rejected"] = "rejected"
    code: Literal["INVALID_CONTENT_TYPE", "VALIDATION_FAILED"]
    message: str
    errors: list[str] = []
    received: Any = None


class IngestionFailed(BaseModel):
    """Storage refused the record."""

    status: Literal["failed"] = "failed"
    http_status: int
    message: str


IngestionResult = Union[IngestionCreated, IngestionRejected, IngestionFailed]


class CreateContentUseCase(BaseUseCase):
    """Use case ingesting a new content record of any type."""

    def __init__(
        self,
        validator: ContentValidator,
        coercer: ContentCoercer,
        content_service: ContentService,
        error_translator: ErrorTranslator,
    ) -> None:
        """Initialize create content use case.

        Args:
            validator: Content validator
            coercer: Content coercer
            content_service: Content domain service
            error_translator: Storage error translator
        """
        self.validator = validator
        self.coercer = coercer
        self.content_service = content_service
        self.error_translator = error_translator

    async def execute(self, request: CreateContentRequest) -> IngestionResult:
        """Run a payload through the ingestion pipeline.

        Args:
            request: Raw type tag, raw data and acting member

        Returns:
            Exactly one of created, rejected or failed
        """
        with logfire.span(
            "create_content.execute",
            content_type=str(request.type),
            actor_id=request.actor_id,
        ):
            try:
                content_type = self.validator.validate_type(request.type)
            except UnknownContentTypeError as e:
                logfire.warn("Unknown content type", received=str(request.type))
                return IngestionRejected(
                    code="INVALID_CONTENT_TYPE", message=str(e), received=request.type
                )

            errors = self.validator.validate_fields(content_type, request.data)
            if errors:
                logfire.warn(
                    "Content validation failed",
                    content_type=content_type.value,
                    errors=errors,
                )
                return IngestionRejected(
                    code="VALIDATION_FAILED",
                    message="Content validation failed",
                    errors=errors,
                )

            try:
                record = self.coercer.coerce(
                    content_type, request.data, UserId(UUID(request.actor_id))
                )
            except PydanticValidationError as e:
                errors = [error["msg"] for error in e.errors()]
                logfire.warn(
                    "Coerced record rejected",
                    content_type=content_type.value,
                    errors=errors,
                )
                return IngestionRejected(
                    code="VALIDATION_FAILED",
                    message="Content validation failed",
                    errors=errors,
                )

            try:
                saved = await self.content_service.create(record)
            except Exception as e:
                translated = self.error_translator.translate(e)
                return IngestionFailed(
                    http_status=translated.http_status, message=translated.message
                )

            details = await self._rehydrate(saved)

            logfire.info(
                "Content created successfully",
                content_type=content_type.value,
                content_id=str(saved.id),
                rehydrated=details is not None,
            )
            return IngestionCreated(
                record=saved, details=details, rehydrated=details is not None
            )

    async def _rehydrate(self, saved: Content) -> Optional[ContentWithAuthor]:
        try:
            details = await self.content_service.get_with_author(
                saved.content_type, saved.id
            )
        except Exception as e:
            logfire.warn(
                "Rehydrate failed, returning bare record",
                content_type=saved.content_type.value,
                content_id=str(saved.id),
                error=str(e),
            )
            return None

        if details is None:
            logfire.warn(
                "Created record missing on rehydrate",
                content_type=saved.content_type.value,
                content_id=str(saved.id),
            )
        return details
