"""Get pronunciation use case."""

from pydantic import BaseModel

from tajmaat.domain.model import PronunciationEntry
from tajmaat.domain.service import ContentService, ContentValidator

from .add_pronunciation import pronounceable_type
from .lookup import load_pronunciation


class GetPronunciationRequest(BaseModel):
    """Get pronunciation request."""

    type: str
    content_id: str
    pronunciation_id: str


class GetPronunciationUseCase:
    """Use case for reading one pronunciation with its contributor."""

    def __init__(
        self, validator: ContentValidator, content_service: ContentService
    ) -> None:
        self.validator = validator
        self.content_service = content_service

    async def execute(self, request: GetPronunciationRequest) -> PronunciationEntry:
        """Execute get pronunciation flow.

        Raises:
            UnknownContentTypeError: If the type tag is not accepted
            ContentValidationError: If the type takes no pronunciations
            NotFoundError: If the record or the pronunciation does not exist
        """
        content_type = pronounceable_type(self.validator, request.type)
        return await load_pronunciation(
            self.content_service,
            content_type,
            request.content_id,
            request.pronunciation_id,
        )
