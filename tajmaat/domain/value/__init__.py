"""Domain value objects for Tajmaat."""

from tajmaat.domain.value.identifiers import (
    ContentId,
    EngagementId,
    PronunciationId,
    UserId,
)
from tajmaat.domain.value.types import (
    Accent,
    ContentType,
    IdeaPriority,
    IdeaStatus,
    QuestionKind,
    StorageErrorCode,
    TranslatedError,
)

__all__ = [
    # Identifiers
    "UserId",
    "ContentId",
    "PronunciationId",
    "EngagementId",
    # Types
    "Accent",
    "ContentType",
    "IdeaPriority",
    "IdeaStatus",
    "QuestionKind",
    "StorageErrorCode",
    "TranslatedError",
]
