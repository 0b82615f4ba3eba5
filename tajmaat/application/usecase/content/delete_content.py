"""Delete content use case."""

import logfire
from pydantic import BaseModel

from tajmaat.domain.service import ContentService, ContentValidator

from .lookup import load_owned_record


class DeleteContentRequest(BaseModel):
    """Delete content request."""

    type: str
    content_id: str
    user_id: str  # Current user ID (must be author)


class DeleteContentUseCase:
    """Use case for deleting a record (hard delete)."""

    def __init__(
        self, validator: ContentValidator, content_service: ContentService
    ) -> None:
        self.validator = validator
        self.content_service = content_service

    async def execute(self, request: DeleteContentRequest) -> None:
        """Execute delete content flow.

        Raises:
            UnknownContentTypeError: If the type tag is not accepted
            NotFoundError: If the record does not exist
            NotAuthorizedError: If the member is not the author
        """
        content_type = self.validator.validate_type(request.type)

        with logfire.span(
            "delete_content.execute",
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
            await self.content_service.delete(content_type, record.id)
