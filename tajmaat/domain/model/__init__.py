"""Domain model entities for Tajmaat."""

from tajmaat.domain.model.content import (
    CONTENT_MODELS,
    Ad,
    Book,
    Content,
    ContentWithAuthor,
    Idea,
    Image,
    Post,
    Product,
    Question,
    Sentence,
    TextContent,
    Truth,
    Video,
    Word,
)
from tajmaat.domain.model.engagement import (
    Comment,
    Like,
    Pronunciation,
    PronunciationEntry,
    Share,
)
from tajmaat.domain.model.member import AuthorProfile, Member

__all__ = [
    "CONTENT_MODELS",
    "Ad",
    "AuthorProfile",
    "Book",
    "Comment",
    "Content",
    "ContentWithAuthor",
    "Idea",
    "Image",
    "Like",
    "Member",
    "Post",
    "Product",
    "Pronunciation",
    "PronunciationEntry",
    "Question",
    "Sentence",
    "Share",
    "TextContent",
    "Truth",
    "Video",
    "Word",
]
