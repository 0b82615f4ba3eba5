"""Content domain service."""

import logfire

from tajmaat.domain.model.content import Content, ContentWithAuthor
from tajmaat.domain.model.engagement import Pronunciation, PronunciationEntry
from tajmaat.domain.repository import ContentRepository
from tajmaat.domain.value import ContentId, ContentType, PronunciationId

from .base import Service


class ContentService(Service):
    """Domain service for content persistence across all content types."""

    def __init__(self, content_repository: ContentRepository) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
        """
        self.content_repository = content_repository

    async def create(self, record: Content) -> Content:
        """Insert a new record.

        Args:
            record: Coerced, unsaved record

        Returns:
            Saved record with id and creation time

        Raises:
            StorageError: If the backend rejects the insert
            StorageValidationError: If the schema rejects the data
        """
        with logfire.span(
            "content_service.create",
            content_type=record.content_type.value,
            author_id=str(record.author_id),
        ):
            saved = await self.content_repository.create(record)
            logfire.info(
                "Content saved",
                content_type=saved.content_type.value,
                content_id=str(saved.id),
            )
            return saved

    async def get_by_id(
        self, content_type: ContentType, content_id: ContentId
    ) -> Content | None:
        """Get a record by type and ID.

        Returns:
            Record if found, None otherwise
        """
        with logfire.span(
            "content_service.get_by_id",
            content_type=content_type.value,
            content_id=str(content_id),
        ):
            record = await self.content_repository.find_by_id(content_type, content_id)
            if record is None:
                logfire.warn(
                    "Content not found",
                    content_type=content_type.value,
                    content_id=str(content_id),
                )
            return record

    async def get_with_author(
        self, content_type: ContentType, content_id: ContentId
    ) -> ContentWithAuthor | None:
        """Get a record joined with its author and engagement.

        Returns:
            Joined record if found, None otherwise
        """
        with logfire.span(
            "content_service.get_with_author",
            content_type=content_type.value,
            content_id=str(content_id),
        ):
            return await self.content_repository.fetch_with_author(
                content_type, content_id
            )

    async def update(self, record: Content) -> Content:
        """Persist changes to an existing record."""
        with logfire.span(
            "content_service.update",
            content_type=record.content_type.value,
            content_id=str(record.id),
        ):
            updated = await self.content_repository.update(record)
            logfire.info(
                "Content updated",
                content_type=updated.content_type.value,
                content_id=str(updated.id),
            )
            return updated

    async def delete(self, content_type: ContentType, content_id: ContentId) -> None:
        """Delete a record."""
        with logfire.span(
            "content_service.delete",
            content_type=content_type.value,
            content_id=str(content_id),
        ):
            await self.content_repository.delete(content_type, content_id)
            logfire.info(
                "Content deleted",
                content_type=content_type.value,
                content_id=str(content_id),
            )

    async def add_pronunciation(self, pronunciation: Pronunciation) -> Pronunciation | None:
        """Attach a pronunciation unless the member already recorded this accent.

        Returns:
            Saved pronunciation, or None if it duplicates an existing one
        """
        with logfire.span(
            "content_service.add_pronunciation",
            content_type=pronunciation.content_type.value,
            content_id=str(pronunciation.content_id),
            accent=pronunciation.accent.value,
        ):
            if await self.content_repository.has_pronunciation(
                pronunciation.content_type,
                pronunciation.content_id,
                pronunciation.user_id,
                pronunciation.accent,
            ):
                logfire.warn(
                    "Duplicate pronunciation",
                    content_id=str(pronunciation.content_id),
                    user_id=str(pronunciation.user_id),
                )
                return None

            saved = await self.content_repository.add_pronunciation(pronunciation)
            logfire.info("Pronunciation added", pronunciation_id=str(saved.id))
            return saved

    async def record_view(
        self, content_type: ContentType, content_id: ContentId
    ) -> None:
        """Count a read of a sentence or word."""
        await self.content_repository.increment_views(content_type, content_id)

    async def get_pronunciation(
        self,
        content_type: ContentType,
        content_id: ContentId,
        pronunciation_id: PronunciationId,
    ) -> PronunciationEntry | None:
        """Get one pronunciation of a record with its contributor.

        Returns:
            The pronunciation if found on this record, None otherwise
        """
        with logfire.span(
            "content_service.get_pronunciation",
            content_id=str(content_id),
            pronunciation_id=str(pronunciation_id),
        ):
            return await self.content_repository.find_pronunciation(
                content_type, content_id, pronunciation_id
            )

    async def update_pronunciation(
        self, pronunciation: Pronunciation
    ) -> Pronunciation | None:
        """Persist an edited pronunciation.

        Returns:
            Updated pronunciation, or None if the member already recorded the
            new accent in another pronunciation of this record
        """
        with logfire.span(
            "content_service.update_pronunciation",
            pronunciation_id=str(pronunciation.id),
            accent=pronunciation.accent.value,
        ):
            current = await self.content_repository.find_pronunciation(
                pronunciation.content_type,
                pronunciation.content_id,
                pronunciation.id,
            )
            accent_changed = (
                current is not None
                and current.pronunciation.accent != pronunciation.accent
            )
            if accent_changed and await self.content_repository.has_pronunciation(
                pronunciation.content_type,
                pronunciation.content_id,
                pronunciation.user_id,
                pronunciation.accent,
            ):
                logfire.warn(
                    "Duplicate pronunciation",
                    content_id=str(pronunciation.content_id),
                    user_id=str(pronunciation.user_id),
                )
                return None

            updated = await self.content_repository.update_pronunciation(pronunciation)
            logfire.info("Pronunciation updated", pronunciation_id=str(updated.id))
            return updated

    async def delete_pronunciation(self, pronunciation_id: PronunciationId) -> None:
        """Delete a pronunciation."""
        with logfire.span(
            "content_service.delete_pronunciation",
            pronunciation_id=str(pronunciation_id),
        ):
            await self.content_repository.delete_pronunciation(pronunciation_id)
            logfire.info("Pronunciation deleted", pronunciation_id=str(pronunciation_id))
