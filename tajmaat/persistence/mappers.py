"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from enum import Enum
from typing import Any, Dict
from uuid import UUID

from tajmaat.domain.model import (
    CONTENT_MODELS,
    AuthorProfile,
    Comment,
    Content,
    Like,
    Member,
    Pronunciation,
    Share,
)
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    EngagementId,
    PronunciationId,
    UserId,
)

# Columns generated by the database on insert
_GENERATED = {"id", "created_at"}


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_content(content_type: ContentType, row: Dict[str, Any]) -> Content:
    """Convert a content table row to the record model of its type.

    Args:
        content_type: Type whose table the row was read from
        row: Database row as dict

    Returns:
        Content record
    """
    model = CONTENT_MODELS[content_type]
    columns = {key: value for key, value in row.items() if key in model.model_fields}
    columns["id"] = ContentId(_uuid(row["id"]))
    columns["author_id"] = UserId(_uuid(row["author_id"]))
    return model.model_validate(columns)


def content_to_dict(record: Content) -> Dict[str, Any]:
    """Convert a content record to a dict of column values.

    Generated columns (id, created_at) are left out; enum values are stored
    as their plain text.
    """
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in record.model_dump(exclude=_GENERATED).items()
    }


def row_to_member(row: Dict[str, Any]) -> Member:
    """Convert database row to Member domain model."""
    return Member(
        id=UserId(_uuid(row["id"])),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row.get("email"),
        avatar=row.get("avatar"),
        image=row.get("image"),
        bio=row.get("bio"),
        created_at=row["created_at"],
    )


def member_to_dict(member: Member) -> Dict[str, Any]:
    """Convert Member domain model to database dict."""
    return member.model_dump()


def row_to_author_profile(row: Dict[str, Any]) -> AuthorProfile:
    """Convert a users row (or the user columns of a join) to a public profile."""
    return AuthorProfile(
        id=UserId(_uuid(row["id"])),
        first_name=row["first_name"],
        last_name=row["last_name"],
        avatar=row.get("avatar"),
        image=row.get("image"),
    )


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=EngagementId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content_type=ContentType(row["content_type"]),
        content_id=ContentId(_uuid(row["content_id"])),
        emoji=row.get("emoji"),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=EngagementId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content_type=ContentType(row["content_type"]),
        content_id=ContentId(_uuid(row["content_id"])),
        content=row["content"],
        created_at=row["created_at"],
    )


def row_to_share(row: Dict[str, Any]) -> Share:
    """Convert database row to Share domain model."""
    return Share(
        id=EngagementId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content_type=ContentType(row["content_type"]),
        content_id=ContentId(_uuid(row["content_id"])),
        created_at=row["created_at"],
    )


def row_to_pronunciation(row: Dict[str, Any]) -> Pronunciation:
    """Convert database row to Pronunciation domain model."""
    return Pronunciation(
        id=PronunciationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content_type=ContentType(row["content_type"]),
        content_id=ContentId(_uuid(row["content_id"])),
        accent=Accent(row["accent"]),
        pronunciation=row["pronunciation"],
        created_at=row["created_at"],
    )


def pronunciation_to_dict(pronunciation: Pronunciation) -> Dict[str, Any]:
    """Convert Pronunciation domain model to database dict."""
    return {
        "id": pronunciation.id,
        "user_id": pronunciation.user_id,
        "content_type": pronunciation.content_type.value,
        "content_id": pronunciation.content_id,
        "accent": pronunciation.accent.value,
        "pronunciation": pronunciation.pronunciation,
        "created_at": pronunciation.created_at,
    }
