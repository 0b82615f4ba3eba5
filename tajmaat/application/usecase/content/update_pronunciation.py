"""Update pronunciation use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from tajmaat.domain.error import DuplicatePronunciationError
from tajmaat.domain.model import Pronunciation
from tajmaat.domain.service import ContentService, ContentValidator

from .add_pronunciation import parse_pronunciation, pronounceable_type
from .lookup import check_contributor, load_pronunciation

_ACCENT_TAKEN = "لديك نطق آخر لهذه اللهجة مسبقاً"


class UpdatePronunciationRequest(BaseModel):
    """Update pronunciation request."""

    type: str
    content_id: str
    pronunciation_id: str
    user_id: str  # Current user ID (must be the contributor)
    accent: Any = None
    pronunciation: Any = None


class UpdatePronunciationUseCase:
    """Use case for editing the accent or text of a pronunciation."""

    def __init__(
        self, validator: ContentValidator, content_service: ContentService
    ) -> None:
        """Initialize update pronunciation use case.

        Args:
            validator: Content validator
            content_service: Content domain service
        """
        self.validator = validator
        self.content_service = content_service

    async def execute(self, request: UpdatePronunciationRequest) -> Pronunciation:
        """Execute update pronunciation flow.

        Both the accent and the text are sent again, as when adding.

        Raises:
            UnknownContentTypeError: If the type tag is not accepted
            ContentValidationError: If the type takes no pronunciations, or the
                accent or text is missing or invalid
            NotFoundError: If the record or the pronunciation does not exist
            NotAuthorizedError: If the member did not record it
            DuplicatePronunciationError: If the new accent is already used by
                another of the member's pronunciations of this record
        """
        content_type = pronounceable_type(self.validator, request.type)
        accent, text = parse_pronunciation(request.accent, request.pronunciation)

        with logfire.span(
            "update_pronunciation.execute",
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

            updated = await self.content_service.update_pronunciation(
                entry.pronunciation.model_copy(
                    update={"accent": accent, "pronunciation": text}
                )
            )
            if updated is None:
                raise DuplicatePronunciationError(_ACCENT_TAKEN)
            return updated
