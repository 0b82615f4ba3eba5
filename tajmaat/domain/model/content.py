"""Content records.

Every content type shares a common core (title, category, author, image) and
layers its own fields on top. Each class maps to exactly one table, selected
by its `content_type`.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from tajmaat.domain.model.common import DomainModel, WireModel
from tajmaat.domain.model.engagement import Comment, Like, PronunciationEntry, Share
from tajmaat.domain.model.member import AuthorProfile
from tajmaat.domain.value import (
    ContentId,
    ContentType,
    IdeaPriority,
    IdeaStatus,
    QuestionKind,
    UserId,
)

_BASE_UPDATABLE = ("title", "category", "subcategory", "image")


class Content(WireModel):
    """Common core of every content record.

    `id` and `created_at` are assigned by storage on insert.
    """

    content_type: ClassVar[ContentType]
    updatable_fields: ClassVar[tuple[str, ...]] = _BASE_UPDATABLE

    id: Optional[ContentId] = None
    title: str = Field(min_length=1)
    category: str = Field(min_length=1)
    subcategory: Optional[str] = None
    image: Optional[str] = None
    author_id: UserId
    created_at: Optional[datetime] = None

    @classmethod
    def wire_key(cls, field_name: str) -> str:
        """Key under which a field travels in request payloads."""
        return cls.model_fields[field_name].alias or field_name


class TextContent(Content):
    """Content record with a required text body."""

    updatable_fields: ClassVar[tuple[str, ...]] = _BASE_UPDATABLE + ("content",)

    content: str = Field(min_length=1)


class Post(TextContent):
    content_type: ClassVar[ContentType] = ContentType.POST


class Truth(TextContent):
    content_type: ClassVar[ContentType] = ContentType.TRUTH


class Book(TextContent):
    content_type: ClassVar[ContentType] = ContentType.BOOK
    updatable_fields: ClassVar[tuple[str, ...]] = TextContent.updatable_fields + (
        "pages",
        "language",
        "isbn",
    )

    pages: Optional[int] = Field(default=None, ge=0)
    language: Optional[str] = None
    isbn: Optional[str] = None


class Idea(TextContent):
    content_type: ClassVar[ContentType] = ContentType.IDEA
    updatable_fields: ClassVar[tuple[str, ...]] = TextContent.updatable_fields + (
        "status",
        "priority",
    )

    status: str = IdeaStatus.PENDING_REVIEW.value
    priority: IdeaPriority = IdeaPriority.MEDIUM
    votes: int = Field(default=0, ge=0)


class Image(Content):
    """Image record: a description replaces the text body."""

    content_type: ClassVar[ContentType] = ContentType.IMAGE
    updatable_fields: ClassVar[tuple[str, ...]] = _BASE_UPDATABLE + (
        "description",
        "location",
        "resolution",
        "tags",
    )

    description: str = Field(min_length=1)
    location: Optional[str] = None
    resolution: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class Video(TextContent):
    content_type: ClassVar[ContentType] = ContentType.VIDEO
    updatable_fields: ClassVar[tuple[str, ...]] = TextContent.updatable_fields + (
        "duration",
        "quality",
        "language",
    )

    duration: Optional[str] = None  # HH:MM:SS
    quality: Optional[str] = None
    language: Optional[str] = None


class Question(TextContent):
    content_type: ClassVar[ContentType] = ContentType.QUESTION
    updatable_fields: ClassVar[tuple[str, ...]] = TextContent.updatable_fields + (
        "question_type",
    )

    question_type: QuestionKind = Field(default=QuestionKind.NEEDS_ANSWER, alias="type")
    answered: bool = False


class Ad(TextContent):
    """Fundraising ad."""

    content_type: ClassVar[ContentType] = ContentType.AD
    updatable_fields: ClassVar[tuple[str, ...]] = TextContent.updatable_fields + (
        "target_amount",
        "current_amount",
        "deadline",
    )

    target_amount: float = Field(default=0, ge=0)
    current_amount: float = Field(default=0, ge=0)
    deadline: Optional[datetime] = None


class Product(TextContent):
    content_type: ClassVar[ContentType] = ContentType.PRODUCT
    updatable_fields: ClassVar[tuple[str, ...]] = TextContent.updatable_fields + (
        "price",
        "currency",
        "in_stock",
        "sizes",
        "colors",
    )

    price: float = Field(ge=0)
    currency: str = Field(min_length=1)
    in_stock: bool = True
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)


class Sentence(TextContent):
    """Amazigh sentence with its translation as `content`."""

    content_type: ClassVar[ContentType] = ContentType.SENTENCE

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=1000)
    views: int = Field(default=0, ge=0)


class Word(TextContent):
    """Amazigh word with its meaning as `content`."""

    content_type: ClassVar[ContentType] = ContentType.WORD

    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=500)
    views: int = Field(default=0, ge=0)


CONTENT_MODELS: dict[ContentType, type[Content]] = {
    model.content_type: model
    for model in (
        Post,
        Book,
        Idea,
        Image,
        Video,
        Truth,
        Question,
        Ad,
        Product,
        Sentence,
        Word,
    )
}


class ContentWithAuthor(DomainModel):
    """A content record joined with its author and engagement.

    `pronunciations` is only populated for types that accept them.
    """

    content: Content
    author: Optional[AuthorProfile] = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    shares: list[Share] = Field(default_factory=list)
    pronunciations: Optional[list[PronunciationEntry]] = None
