"""Add pronunciation use case."""

from typing import Any
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from tajmaat.domain.error import (
    ContentValidationError,
    DuplicatePronunciationError,
    NotFoundError,
)
from tajmaat.domain.model import Pronunciation
from tajmaat.domain.service import ContentService, ContentValidator
from tajmaat.domain.service.coercion import is_blank, optional_text
from tajmaat.domain.value import Accent, ContentType, PronunciationId, UserId

from .lookup import parse_content_id

_FIELDS_REQUIRED = "اللهجة والنطق مطلوبان"
_INVALID_ACCENT = "اللهجة المحددة غير صحيحة"
_NOT_PRONOUNCEABLE = "النطق متاح للجمل والكلمات فقط"
_ALREADY_RECORDED = "لقد أضفت نطقاً لهذه اللهجة مسبقاً"


def pronounceable_type(validator: ContentValidator, tag: str) -> ContentType:
    """Resolve a type tag that accepts pronunciations.

    Raises:
        UnknownContentTypeError: If the tag is not accepted
        ContentValidationError: If the type takes no pronunciations
    """
    content_type = validator.validate_type(tag)
    if not content_type.includes_pronunciations:
        raise ContentValidationError([_NOT_PRONOUNCEABLE])
    return content_type


def parse_pronunciation(accent: Any, pronunciation: Any) -> tuple[Accent, str]:
    """Read the accent and trimmed text sent for a pronunciation.

    Raises:
        ContentValidationError: If either is missing or the accent is unknown
    """
    text = optional_text(pronunciation)
    if is_blank(accent) or text is None:
        raise ContentValidationError([_FIELDS_REQUIRED])

    try:
        return Accent(optional_text(accent)), text
    except ValueError:
        raise ContentValidationError([_INVALID_ACCENT])


class AddPronunciationRequest(BaseModel):
    """Add pronunciation request."""

    type: str
    content_id: str
    user_id: str  # Contributing member
    accent: Any = None
    pronunciation: Any = None


class AddPronunciationUseCase:
    """Use case for recording how a sentence or word sounds in an accent."""

    def __init__(
        self, validator: ContentValidator, content_service: ContentService
    ) -> None:
        """Initialize add pronunciation use case.

        Args:
            validator: Content validator
            content_service: Content domain service
        """
        self.validator = validator
        self.content_service = content_service

    async def execute(self, request: AddPronunciationRequest) -> Pronunciation:
        """Execute add pronunciation flow.

        Returns:
            The saved pronunciation

        Raises:
            UnknownContentTypeError: If the type tag is not accepted
            ContentValidationError: If the type takes no pronunciations, or the
                accent or text is missing or invalid
            NotFoundError: If the record does not exist
            DuplicatePronunciationError: If the member already recorded this
                accent for the record
        """
        content_type = pronounceable_type(self.validator, request.type)
        accent, text = parse_pronunciation(request.accent, request.pronunciation)

        content_id = parse_content_id(content_type, request.content_id)

        with logfire.span(
            "add_pronunciation.execute",
            content_type=content_type.value,
            content_id=request.content_id,
            accent=accent.value,
        ):
            record = await self.content_service.get_by_id(content_type, content_id)
            if record is None:
                raise NotFoundError(content_type.label, request.content_id)

            pronunciation = Pronunciation(
                id=PronunciationId(uuid4()),
                user_id=UserId(UUID(request.user_id)),
                content_type=content_type,
                content_id=content_id,
                accent=accent,
                pronunciation=text,
            )

            saved = await self.content_service.add_pronunciation(pronunciation)
            if saved is None:
                raise DuplicatePronunciationError(_ALREADY_RECORDED)
            return saved
