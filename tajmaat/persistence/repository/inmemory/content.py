"""In-memory content repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from tajmaat.domain.error import StorageError
from tajmaat.domain.model import (
    Comment,
    Content,
    ContentWithAuthor,
    Like,
    Pronunciation,
    PronunciationEntry,
    Share,
)
from tajmaat.domain.repository import ContentRepository, MemberRepository
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    PronunciationId,
    StorageErrorCode,
    UserId,
)

Engagement = Like | Comment | Share


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing.

    Author profiles are joined from the member repository it is given, the
    way the database joins the users table.
    """

    def __init__(self, member_repository: MemberRepository) -> None:
        self.member_repository = member_repository
        self._records: dict[tuple[ContentType, ContentId], Content] = {}
        self._engagement: list[Engagement] = []
        self._pronunciations: list[Pronunciation] = []

    async def create(self, record: Content) -> Content:
        """Insert a record, assigning its id and creation time."""
        saved = record.model_copy(
            update={"id": ContentId(uuid4()), "created_at": datetime.now()}
        )
        self._records[(saved.content_type, saved.id)] = saved
        return saved

    async def find_by_id(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[Content]:
        """Find a record by type and ID."""
        return self._records.get((content_type, content_id))

    async def fetch_with_author(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentWithAuthor]:
        """Read a record with its author and engagement."""
        record = await self.find_by_id(content_type, content_id)
        if record is None:
            return None

        author = await self.member_repository.find_by_id(record.author_id)
        targeted = [
            e
            for e in self._engagement
            if e.content_type == content_type and e.content_id == content_id
        ]

        pronunciations = None
        if content_type.includes_pronunciations:
            pronunciations = [
                await self._entry(p)
                for p in self._pronunciations
                if p.content_type == content_type and p.content_id == content_id
            ]

        return ContentWithAuthor(
            content=record,
            author=author.public_profile() if author else None,
            likes=[e for e in targeted if isinstance(e, Like)],
            comments=[e for e in targeted if isinstance(e, Comment)],
            shares=[e for e in targeted if isinstance(e, Share)],
            pronunciations=pronunciations,
        )

    async def update(self, record: Content) -> Content:
        """Replace a stored record, keeping its author."""
        key = (record.content_type, record.id)
        existing = self._records.get(key)
        if existing is None:
            raise StorageError(StorageErrorCode.NOT_FOUND, f"{record.id}")

        updated = record.model_copy(update={"author_id": existing.author_id})
        self._records[key] = updated
        return updated

    async def delete(self, content_type: ContentType, content_id: ContentId) -> None:
        """Delete a record and its engagement."""
        if self._records.pop((content_type, content_id), None) is None:
            raise StorageError(StorageErrorCode.NOT_FOUND, f"{content_id}")

        def attached(item: Engagement | Pronunciation) -> bool:
            return item.content_type == content_type and item.content_id == content_id

        self._engagement = [e for e in self._engagement if not attached(e)]
        self._pronunciations = [p for p in self._pronunciations if not attached(p)]

    async def add_pronunciation(self, pronunciation: Pronunciation) -> Pronunciation:
        """Attach a pronunciation.

        Raises:
            StorageError: unique_violation if the member already recorded
                this accent for the record
        """
        if await self.has_pronunciation(
            pronunciation.content_type,
            pronunciation.content_id,
            pronunciation.user_id,
            pronunciation.accent,
        ):
            raise StorageError(StorageErrorCode.UNIQUE_VIOLATION, "pronunciation")

        self._pronunciations.append(pronunciation)
        return pronunciation

    async def has_pronunciation(
        self,
        content_type: ContentType,
        content_id: ContentId,
        user_id: UserId,
        accent: Accent,
    ) -> bool:
        """Check whether a member already recorded this accent for a record."""
        return any(
            p.content_type == content_type
            and p.content_id == content_id
            and p.user_id == user_id
            and p.accent == accent
            for p in self._pronunciations
        )

    async def increment_views(
        self, content_type: ContentType, content_id: ContentId
    ) -> None:
        """Count one more read of a sentence or word."""
        key = (content_type, content_id)
        record = self._records.get(key)
        if record is not None:
            self._records[key] = record.model_copy(update={"views": record.views + 1})

    async def find_pronunciation(
        self,
        content_type: ContentType,
        content_id: ContentId,
        pronunciation_id: PronunciationId,
    ) -> Optional[PronunciationEntry]:
        """Find one pronunciation of a record with its contributor's profile."""
        for p in self._pronunciations:
            if (
                p.id == pronunciation_id
                and p.content_type == content_type
                and p.content_id == content_id
            ):
                return await self._entry(p)
        return None

    async def update_pronunciation(self, pronunciation: Pronunciation) -> Pronunciation:
        """Replace a stored pronunciation's accent and text."""
        for index, p in enumerate(self._pronunciations):
            if p.id == pronunciation.id:
                updated = p.model_copy(
                    update={
                        "accent": pronunciation.accent,
                        "pronunciation": pronunciation.pronunciation,
                    }
                )
                self._pronunciations[index] = updated
                return updated
        raise StorageError(StorageErrorCode.NOT_FOUND, f"{pronunciation.id}")

    async def delete_pronunciation(self, pronunciation_id: PronunciationId) -> None:
        """Delete a pronunciation."""
        remaining = [p for p in self._pronunciations if p.id != pronunciation_id]
        if len(remaining) == len(self._pronunciations):
            raise StorageError(StorageErrorCode.NOT_FOUND, f"{pronunciation_id}")
        self._pronunciations = remaining

    async def _entry(self, pronunciation: Pronunciation) -> PronunciationEntry:
        contributor = await self.member_repository.find_by_id(pronunciation.user_id)
        return PronunciationEntry(
            pronunciation=pronunciation,
            user=contributor.public_profile() if contributor else None,
        )

    def add_engagement(self, item: Engagement) -> None:
        """Record a like, comment or share (test helper)."""
        self._engagement.append(item)
