"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tajmaat.domain.model.content import Content, ContentWithAuthor
from tajmaat.domain.model.engagement import Pronunciation, PronunciationEntry
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    PronunciationId,
    UserId,
)


class ContentRepository(ABC):
    """Repository for content records of every type.

    Each content type is stored in its own table, selected by the record's
    `content_type`. Implementations raise `StorageError` or
    `StorageValidationError` for backend failures, never driver exceptions.
    """

    @abstractmethod
    async def create(self, record: Content) -> Content:
        """Insert a new record into its type's table.

        Args:
            record: Unsaved record

        Returns:
            The record with its generated id and creation time

        Raises:
            StorageError: If the backend rejects the insert
            StorageValidationError: If the schema rejects the data
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[Content]:
        """Find a record by type and ID.

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def fetch_with_author(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentWithAuthor]:
        """Read a record joined with its author and engagement.

        Sentences and words also include their pronunciations, each with its
        contributor's public profile.

        Returns:
            The joined record if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, record: Content) -> Content:
        """Persist changes to an existing record.

        Args:
            record: Record carrying its id

        Returns:
            The updated record

        Raises:
            StorageError: With code not_found if the record no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, content_type: ContentType, content_id: ContentId) -> None:
        """Delete a record (hard delete).

        Raises:
            StorageError: With code not_found if the record does not exist
        """
        pass

    @abstractmethod
    async def add_pronunciation(self, pronunciation: Pronunciation) -> Pronunciation:
        """Attach a pronunciation to a sentence or word.

        Returns:
            The saved pronunciation
        """
        pass

    @abstractmethod
    async def has_pronunciation(
        self,
        content_type: ContentType,
        content_id: ContentId,
        user_id: UserId,
        accent: Accent,
    ) -> bool:
        """Check whether a member already recorded this accent for a record."""
        pass

    @abstractmethod
    async def increment_views(
        self, content_type: ContentType, content_id: ContentId
    ) -> None:
        """Count one more read of a sentence or word.

        Does nothing when the record does not exist.
        """
        pass

    @abstractmethod
    async def find_pronunciation(
        self,
        content_type: ContentType,
        content_id: ContentId,
        pronunciation_id: PronunciationId,
    ) -> Optional[PronunciationEntry]:
        """Find one pronunciation of a record with its contributor's profile.

        Returns:
            The pronunciation if it exists and belongs to the record, None otherwise
        """
        pass

    @abstractmethod
    async def update_pronunciation(self, pronunciation: Pronunciation) -> Pronunciation:
        """Persist a changed accent or pronunciation text.

        Raises:
            StorageError: With code not_found if the pronunciation no longer exists
        """
        pass

    @abstractmethod
    async def delete_pronunciation(self, pronunciation_id: PronunciationId) -> None:
        """Delete a pronunciation.

        Raises:
            StorageError: With code not_found if the pronunciation does not exist
        """
        pass
