"""Update content use case."""

from typing import Any, Mapping

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tajmaat.domain.error import ContentValidationError
from tajmaat.domain.model import Content
from tajmaat.domain.service import ContentCoercer, ContentService, ContentValidator

from .lookup import load_owned_record

_NOT_AN_OBJECT = "Content data is required and must be an object"


class UpdateContentRequest(BaseModel):
    """Update content request.

    `data` is a partial payload; only the type's updatable fields are read.
    """

    type: str
    content_id: str
    user_id: str  # Current user ID (must be author)
    data: Any = None


class UpdateContentUseCase:
    """Use case for editing a record's updatable fields."""

    def __init__(
        self,
        validator: ContentValidator,
        coercer: ContentCoercer,
        content_service: ContentService,
    ) -> None:
        """Initialize update content use case.

        Args:
            validator: Content validator
            coercer: Content coercer
            content_service: Content domain service
        """
        self.validator = validator
        self.coercer = coercer
        self.content_service = content_service

    async def execute(self, request: UpdateContentRequest) -> Content:
        """Execute update content flow.

        Steps:
        1. Resolve the type and load the record
        2. Check the member is its author
        3. Merge the updatable fields of the patch over the stored record
        4. Revalidate and recoerce the merged payload
        5. Copy the updatable fields onto the stored record and save it

        Author, type, id, creation time and counters never change.

        Returns:
            The updated record

        Raises:
            UnknownContentTypeError: If the type tag is not accepted
            NotFoundError: If the record does not exist
            NotAuthorizedError: If the member is not the author
            ContentValidationError: If the merged record violates any rule
            StorageError: If storage rejects the update
        """
        content_type = self.validator.validate_type(request.type)

        with logfire.span(
            "update_content.execute",
            content_type=content_type.value,
            content_id=request.content_id,
            user_id=request.user_id,
        ):
            record = await load_owned_record(
                self.content_service,
                content_type,
                request.content_id,
                request.user_id,
            )

            if not isinstance(request.data, Mapping):
                raise ContentValidationError([_NOT_AN_OBJECT])

            merged = self._merge(record, request.data)

            errors = self.validator.validate_fields(content_type, merged)
            if errors:
                logfire.warn(
                    "Content update rejected",
                    content_type=content_type.value,
                    errors=errors,
                )
                raise ContentValidationError(errors)

            try:
                coerced = self.coercer.coerce(content_type, merged, record.author_id)
            except PydanticValidationError as e:
                raise ContentValidationError([error["msg"] for error in e.errors()])

            changes = {
                field: getattr(coerced, field) for field in record.updatable_fields
            }

            return await self.content_service.update(record.model_copy(update=changes))

    @staticmethod
    def _merge(record: Content, patch: Mapping[str, Any]) -> dict[str, Any]:
        """Stored record in wire form, overlaid with the patch's updatable keys."""
        accepted = {record.wire_key(field) for field in record.updatable_fields}
        merged = record.model_dump(mode="json", by_alias=True)
        merged.update({key: value for key, value in patch.items() if key in accepted})
        return merged
