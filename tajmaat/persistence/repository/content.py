"""PostgreSQL implementation of Content repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import Select, Table, and_, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from tajmaat.domain.error import StorageError
from tajmaat.domain.model import (
    Content,
    ContentWithAuthor,
    Pronunciation,
    PronunciationEntry,
)
from tajmaat.domain.repository import ContentRepository
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    PronunciationId,
    StorageErrorCode,
    UserId,
)
from tajmaat.persistence.errors import to_storage_error
from tajmaat.persistence.mappers import (
    content_to_dict,
    pronunciation_to_dict,
    row_to_author_profile,
    row_to_comment,
    row_to_content,
    row_to_like,
    row_to_pronunciation,
    row_to_share,
)
from tajmaat.persistence.tables import (
    CONTENT_TABLES,
    ENGAGEMENT_TABLES,
    comments_table,
    likes_table,
    pronunciations_table,
    shares_table,
    users_table,
)

# Set at creation, never rewritten by an update
_IMMUTABLE_COLUMNS = {"author_id"}


def _pronunciations_of(content_type: ContentType, content_id: ContentId) -> Select:
    """Pronunciations of one record, each joined with its contributor."""
    contributor = users_table.alias("contributor")
    return (
        select(
            pronunciations_table,
            contributor.c.first_name,
            contributor.c.last_name,
            contributor.c.avatar,
            contributor.c.image,
        )
        .select_from(
            pronunciations_table.outerjoin(
                contributor, contributor.c.id == pronunciations_table.c.user_id
            )
        )
        .where(pronunciations_table.c.content_type == content_type.value)
        .where(pronunciations_table.c.content_id == content_id)
    )


def _row_to_entry(row) -> PronunciationEntry:
    user = None
    if row["first_name"] is not None:
        user = row_to_author_profile({**row, "id": row["user_id"]})
    return PronunciationEntry(pronunciation=row_to_pronunciation(dict(row)), user=user)


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def _savepoint(self) -> AsyncIterator[None]:
        """Run statements in a SAVEPOINT, mapping driver errors to storage errors.

        A failed statement rolls back to the savepoint, leaving the request
        transaction usable.
        """
        try:
            async with self.session.begin_nested():
                yield
        except DBAPIError as e:
            raise to_storage_error(e) from e

    async def create(self, record: Content) -> Content:
        """Insert a record into its type's table."""
        table = CONTENT_TABLES[record.content_type]
        stmt = table.insert().values(**content_to_dict(record)).returning(table)
        async with self._savepoint():
            result = await self.session.execute(stmt)
            row = result.mappings().one()
        return row_to_content(record.content_type, dict(row))

    async def find_by_id(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[Content]:
        """Find a record by type and ID."""
        table = CONTENT_TABLES[content_type]
        stmt = select(table).where(table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_content(content_type, dict(row)) if row else None

    async def fetch_with_author(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentWithAuthor]:
        """Read a record with its author and engagement.

        Runs inside a SAVEPOINT so that a failed read leaves the enclosing
        transaction usable.
        """
        async with self._savepoint():
            return await self._fetch_with_author(content_type, content_id)

    async def _fetch_with_author(
        self, content_type: ContentType, content_id: ContentId
    ) -> Optional[ContentWithAuthor]:
        record = await self.find_by_id(content_type, content_id)
        if record is None:
            return None

        author_row = (
            (
                await self.session.execute(
                    select(users_table).where(users_table.c.id == record.author_id)
                )
            )
            .mappings()
            .first()
        )

        likes = await self._engagement_rows(likes_table, content_type, content_id)
        comments = await self._engagement_rows(comments_table, content_type, content_id)
        shares = await self._engagement_rows(shares_table, content_type, content_id)

        pronunciations = None
        if content_type.includes_pronunciations:
            pronunciations = await self._pronunciations(content_type, content_id)

        return ContentWithAuthor(
            content=record,
            author=row_to_author_profile(dict(author_row)) if author_row else None,
            likes=[row_to_like(row) for row in likes],
            comments=[row_to_comment(row) for row in comments],
            shares=[row_to_share(row) for row in shares],
            pronunciations=pronunciations,
        )

    async def _engagement_rows(
        self, table: Table, content_type: ContentType, content_id: ContentId
    ) -> list[dict]:
        stmt = (
            select(table)
            .where(table.c.content_type == content_type.value)
            .where(table.c.content_id == content_id)
            .order_by(table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def _pronunciations(
        self, content_type: ContentType, content_id: ContentId
    ) -> list[PronunciationEntry]:
        stmt = _pronunciations_of(content_type, content_id).order_by(
            pronunciations_table.c.created_at
        )
        result = await self.session.execute(stmt)
        return [_row_to_entry(row) for row in result.mappings().all()]

    async def update(self, record: Content) -> Content:
        """Persist changes to an existing record."""
        table = CONTENT_TABLES[record.content_type]
        values = {
            key: value
            for key, value in content_to_dict(record).items()
            if key not in _IMMUTABLE_COLUMNS
        }
        stmt = (
            table.update()
            .where(table.c.id == record.id)
            .values(**values)
            .returning(table)
        )
        async with self._savepoint():
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        if row is None:
            raise StorageError(StorageErrorCode.NOT_FOUND, f"{record.id}")
        return row_to_content(record.content_type, dict(row))

    async def delete(self, content_type: ContentType, content_id: ContentId) -> None:
        """Delete a record and the engagement attached to it (hard delete)."""
        table = CONTENT_TABLES[content_type]
        async with self._savepoint():
            result = await self.session.execute(
                table.delete().where(table.c.id == content_id)
            )
            if result.rowcount == 0:
                raise StorageError(StorageErrorCode.NOT_FOUND, f"{content_id}")

            for engagement in ENGAGEMENT_TABLES:
                await self.session.execute(
                    engagement.delete().where(
                        and_(
                            engagement.c.content_type == content_type.value,
                            engagement.c.content_id == content_id,
                        )
                    )
                )

    async def add_pronunciation(self, pronunciation: Pronunciation) -> Pronunciation:
        """Attach a pronunciation to a sentence or word."""
        stmt = (
            pronunciations_table.insert()
            .values(**pronunciation_to_dict(pronunciation))
            .returning(pronunciations_table)
        )
        async with self._savepoint():
            result = await self.session.execute(stmt)
            row = result.mappings().one()
        return row_to_pronunciation(dict(row))

    async def has_pronunciation(
        self,
        content_type: ContentType,
        content_id: ContentId,
        user_id: UserId,
        accent: Accent,
    ) -> bool:
        """Check whether a member already recorded this accent for a record."""
        stmt = (
            select(pronunciations_table.c.id)
            .where(pronunciations_table.c.content_type == content_type.value)
            .where(pronunciations_table.c.content_id == content_id)
            .where(pronunciations_table.c.user_id == user_id)
            .where(pronunciations_table.c.accent == accent.value)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def increment_views(
        self, content_type: ContentType, content_id: ContentId
    ) -> None:
        """Count one more read of a sentence or word."""
        table = CONTENT_TABLES[content_type]
        stmt = (
            table.update()
            .where(table.c.id == content_id)
            .values(views=table.c.views + 1)
        )
        async with self._savepoint():
            await self.session.execute(stmt)

    async def find_pronunciation(
        self,
        content_type: ContentType,
        content_id: ContentId,
        pronunciation_id: PronunciationId,
    ) -> Optional[PronunciationEntry]:
        """Find one pronunciation of a record with its contributor's profile."""
        stmt = _pronunciations_of(content_type, content_id).where(
            pronunciations_table.c.id == pronunciation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_entry(row) if row else None

    async def update_pronunciation(self, pronunciation: Pronunciation) -> Pronunciation:
        """Persist a changed accent or pronunciation text."""
        stmt = (
            pronunciations_table.update()
            .where(pronunciations_table.c.id == pronunciation.id)
            .values(
                accent=pronunciation.accent.value,
                pronunciation=pronunciation.pronunciation,
            )
            .returning(pronunciations_table)
        )
        async with self._savepoint():
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        if row is None:
            raise StorageError(StorageErrorCode.NOT_FOUND, f"{pronunciation.id}")
        return row_to_pronunciation(dict(row))

    async def delete_pronunciation(self, pronunciation_id: PronunciationId) -> None:
        """Delete a pronunciation."""
        async with self._savepoint():
            result = await self.session.execute(
                pronunciations_table.delete().where(
                    pronunciations_table.c.id == pronunciation_id
                )
            )
            if result.rowcount == 0:
                raise StorageError(StorageErrorCode.NOT_FOUND, f"{pronunciation_id}")
