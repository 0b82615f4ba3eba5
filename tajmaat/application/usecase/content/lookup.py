"""Record lookup shared by the per-record content use cases."""

from uuid import UUID

from tajmaat.domain.error import NotAuthorizedError, NotFoundError
from tajmaat.domain.model import Content, PronunciationEntry
from tajmaat.domain.service import ContentService
from tajmaat.domain.value import ContentId, ContentType, PronunciationId, UserId


def parse_content_id(content_type: ContentType, raw_id: str) -> ContentId:
    """Parse a record ID from a URL; malformed IDs name no record.

    Raises:
        NotFoundError: If the ID is not a UUID
    """
    try:
        return ContentId(UUID(raw_id))
    except ValueError:
        raise NotFoundError(content_type.label, raw_id)


async def load_owned_record(
    content_service: ContentService,
    content_type: ContentType,
    raw_id: str,
    user_id: str,
) -> Content:
    """Load a record the acting member is about to change.

    Raises:
        NotFoundError: If the record does not exist
        NotAuthorizedError: If the member is not its author
    """
    content_id = parse_content_id(content_type, raw_id)
    record = await content_service.get_by_id(content_type, content_id)
    if record is None:
        raise NotFoundError(content_type.label, raw_id)

    if record.author_id != UserId(UUID(user_id)):
        raise NotAuthorizedError(content_type.value, raw_id, user_id)

    return record


async def load_pronunciation(
    content_service: ContentService,
    content_type: ContentType,
    raw_content_id: str,
    raw_pronunciation_id: str,
) -> PronunciationEntry:
    """Load a pronunciation through the record it belongs to.

    Raises:
        NotFoundError: If the record, or the pronunciation on it, does not exist
    """
    content_id = parse_content_id(content_type, raw_content_id)
    record = await content_service.get_by_id(content_type, content_id)
    if record is None:
        raise NotFoundError(content_type.label, raw_content_id)

    try:
        pronunciation_id = PronunciationId(UUID(raw_pronunciation_id))
    except ValueError:
        raise NotFoundError("Pronunciation", raw_pronunciation_id)

    entry = await content_service.get_pronunciation(
        content_type, content_id, pronunciation_id
    )
    if entry is None:
        raise NotFoundError("Pronunciation", raw_pronunciation_id)
    return entry


def check_contributor(entry: PronunciationEntry, user_id: str) -> None:
    """Only the member who recorded a pronunciation may change it.

    Raises:
        NotAuthorizedError: If the member did not record it
    """
    pronunciation = entry.pronunciation
    if pronunciation.user_id != UserId(UUID(user_id)):
        raise NotAuthorizedError("pronunciation", str(pronunciation.id), user_id)
