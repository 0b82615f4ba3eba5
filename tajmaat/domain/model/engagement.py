"""Engagement entities attached to content.

Likes, comments and shares reference their target polymorphically through
(content_type, content_id), the same way for every content type.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tajmaat.domain.model.common import WireModel
from tajmaat.domain.model.member import AuthorProfile
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    EngagementId,
    PronunciationId,
    UserId,
)


class Like(WireModel):
    """A reaction left by a member; `emoji` is the reaction kind."""

    id: EngagementId
    user_id: UserId
    content_type: ContentType
    content_id: ContentId
    emoji: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class Comment(WireModel):
    """A comment on a content record."""

    id: EngagementId
    user_id: UserId
    content_type: ContentType
    content_id: ContentId
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)


class Share(WireModel):
    """A share of a content record."""

    id: EngagementId
    user_id: UserId
    content_type: ContentType
    content_id: ContentId
    created_at: datetime = Field(default_factory=datetime.now)


class Pronunciation(WireModel):
    """A member's pronunciation of a sentence or word in a given accent.

    Business rules:
    - Only sentences and words accept pronunciations
    - One pronunciation per member, content and accent
    """

    id: PronunciationId
    user_id: UserId
    content_type: ContentType
    content_id: ContentId
    accent: Accent
    pronunciation: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)


class PronunciationEntry(WireModel):
    """Pronunciation joined with its contributor's public profile."""

    pronunciation: Pronunciation
    user: Optional[AuthorProfile] = None
