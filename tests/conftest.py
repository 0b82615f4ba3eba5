"""Test configuration and fixtures."""

from typing import Any
from uuid import uuid4

from tajmaat.domain.model import Member
from tajmaat.domain.value import ContentType, UserId


def make_member(first_name: str = "Amazigh", last_name: str = "Tajmaat") -> Member:
    """Build a member with a fresh ID."""
    return Member(
        id=UserId(uuid4()),
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}@example.com",
        avatar="/avatars/default.png",
    )


def valid_data(content_type: ContentType, **overrides: Any) -> dict[str, Any]:
    """A payload that passes validation for the given content type."""
    base = {"title": "Title", "category": "ثقافة", "content": "Body text"}
    per_type: dict[ContentType, dict[str, Any]] = {
        ContentType.BOOK: {"pages": "320", "isbn": "978-3-16-148410-0"},
        ContentType.IDEA: {"priority": "عالية"},
        ContentType.IMAGE: {
            "image": "https://cdn.example.com/photo.jpg",
            "description": "Atlas mountains",
            "tags": "nature, mountains",
        },
        ContentType.VIDEO: {"duration": "00:03:15", "quality": "1080p"},
        ContentType.QUESTION: {"type": "نقاش"},
        ContentType.AD: {"targetAmount": "5000", "deadline": "2026-12-31"},
        ContentType.PRODUCT: {"price": "49.5", "currency": "DZD", "sizes": ["S", "M"]},
        ContentType.SENTENCE: {"title": "Azul fell-awen", "content": "السلام عليكم"},
        ContentType.WORD: {"title": "Tanemmirt", "content": "شكرا"},
    }
    data = {**base, **per_type.get(content_type, {})}
    if content_type is ContentType.IMAGE:
        del data["content"]
    return {**data, **overrides}
