"""Domain value objects for Tajmaat.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from tajmaat.domain.value.common import ValueObject


class ContentType(str, Enum):
    """Discriminator selecting the fields, rules and table of a content record."""

    POST = "post"
    BOOK = "book"
    IDEA = "idea"
    IMAGE = "image"
    VIDEO = "video"
    TRUTH = "truth"
    QUESTION = "question"
    AD = "ad"
    PRODUCT = "product"
    SENTENCE = "sentence"
    WORD = "word"

    @property
    def label(self) -> str:
        """Human readable name used in response messages."""
        return self.value.capitalize()

    @property
    def requires_content(self) -> bool:
        """Whether the record carries a required `content` body.

        Images carry a description instead.
        """
        return self is not ContentType.IMAGE

    @property
    def includes_pronunciations(self) -> bool:
        """Whether members can attach pronunciations to this type."""
        return self in (ContentType.SENTENCE, ContentType.WORD)

    @property
    def forced_category(self) -> str | None:
        """Category written regardless of caller input, if any.

        Kept for compatibility with existing feeds that filter these types
        by a fixed category. Pending product confirmation.
        """
        return _FORCED_CATEGORIES.get(self)


_FORCED_CATEGORIES: dict[ContentType, str] = {
    ContentType.VIDEO: "فيديو",
    ContentType.QUESTION: "سؤال",
    ContentType.TRUTH: "حقيقة",
}


class IdeaStatus(str, Enum):
    """Review status of an idea."""

    PENDING_REVIEW = "قيد المراجعة"


class IdeaPriority(str, Enum):
    """Priority levels accepted for ideas."""

    LOW = "منخفضة"
    MEDIUM = "متوسطة"
    HIGH = "عالية"


class QuestionKind(str, Enum):
    """Kinds of questions."""

    NEEDS_ANSWER = "يحتاج إجابة"
    POLL = "استطلاع رأي"
    DISCUSSION = "نقاش"


class Accent(str, Enum):
    """Amazigh accents a pronunciation can be recorded in."""

    KABYLE = "قبائلي"
    CHAOUI = "شاوي"
    MOZABITE = "مزابي"
    TUAREG = "ترقي"
    CHENOUI = "شنوي"
    GOURARI = "قورايي"
    TACHELHIT = "تاشلحيت"


class StorageErrorCode(str, Enum):
    """Failure classes reported by the persistence layer."""

    UNIQUE_VIOLATION = "unique_violation"
    NOT_FOUND = "not_found"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    CHECK_VIOLATION = "check_violation"


class TranslatedError(ValueObject):
    """HTTP status and user-facing message for a failure."""

    http_status: int
    message: str
