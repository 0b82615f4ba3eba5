"""Delete pronunciation use case."""

import logfire
from pydantic import BaseModel

from tajmaat.domain.service import ContentService, ContentValidator

from .add_pronunciation import pronounceable_type
from .lookup import check_contributor, load_pronunciation


class DeletePronunciationRequest(BaseModel):
    """Delete pronunciation request."""

    type: str
    content_id: str
    pronunciation_id: str
    user_id: str  # Current user ID (must be the contributor)


class DeletePronunciationUseCase:
    """Use case for removing a pronunciation (hard delete)."""

    def __init__(
        self, validator: ContentValidator, content_service: ContentService
    ) -> None:
        self.validator = validator
        self.content_service = content_service

    async def execute(self, request: DeletePronunciationRequest) -> None:
        """Execute delete pronunciation flow.

        Raises:
            UnknownContentTypeError: If the type tag is not accepted
            ContentValidationError: If the type takes no pronunciations
            NotFoundError: If the record or the pronunciation does not exist
            NotAuthorizedError: If the member did not record it
        """
        content_type = pronounceable_type(self.validator, request.type)

        with logfire.span(
            "delete_pronunciation.execute",
            content_type=content_type.value,
            pronunciation_id=request.pronunciation_id,
            user_id=request.user_id,
        ):
            entry = await load_pronunciation(
                self.content_service,
                content_type,
                request.content_id,
                request.pronunciation_id,
            )
            check_contributor(entry, request.user_id)
            await self.content_service.delete_pronunciation(entry.pronunciation.id)
