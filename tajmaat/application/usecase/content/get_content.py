"""Get content use case."""

from pydantic import BaseModel

from tajmaat.domain.error import NotFoundError
from tajmaat.domain.model import ContentWithAuthor
from tajmaat.domain.service import ContentService, ContentValidator

from .lookup import parse_content_id


class GetContentRequest(BaseModel):
    """Get content request."""

    type: str
    content_id: str


class GetContentUseCase:
    """Use case for reading a record with its author and engagement."""

    def __init__(
        self, validator: ContentValidator, content_service: ContentService
    ) -> None:
        self.validator = validator
        self.content_service = content_service

    async def execute(self, request: GetContentRequest) -> ContentWithAuthor:
        """Execute get content flow.

        Raises:
            UnknownContentTypeError: If the type tag is not accepted
            NotFoundError: If the record does not exist
        """
        content_type = self.validator.validate_type(request.type)
        content_id = parse_content_id(content_type, request.content_id)

        # Sentences and words count their reads
        if content_type.includes_pronunciations:
            await self.content_service.record_view(content_type, content_id)

        details = await self.content_service.get_with_author(content_type, content_id)
        if details is None:
            raise NotFoundError(content_type.label, request.content_id)
        return details
