"""Integration tests for PostgresContentRepository.

These tests need a reachable PostgreSQL at DATABASE__URL and are skipped
otherwise. The schema is created from the table metadata.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from tajmaat.domain.error import StorageError
from tajmaat.domain.model import Ad, Image, Pronunciation, Word
from tajmaat.domain.repository import ContentRepository, MemberRepository
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    PronunciationId,
    StorageErrorCode,
    UserId,
)
from tajmaat.persistence.tables import metadata
from tests.conftest import make_member
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def schema(integration_env):
    engine = await integration_env.get(AsyncEngine)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL unavailable: {e}")
    return integration_env


class TestContentRepositoryIntegration:
    """Round trips through the per-type tables."""

    @pytest.mark.asyncio
    async def test_create_and_fetch_with_author(self, schema):
        members = await schema.get(MemberRepository)
        repo = await schema.get(ContentRepository)
        author = await members.save(make_member())

        saved = await repo.create(
            Image(
                title="Tassili",
                category="طبيعة",
                image="https://cdn.example.com/tassili.jpg",
                description="Rock formations",
                tags=["desert", "sahara"],
                author_id=author.id,
            )
        )
        details = await repo.fetch_with_author(ContentType.IMAGE, saved.id)

        assert saved.id is not None
        assert saved.created_at is not None
        assert details.content.tags == ["desert", "sahara"]
        assert details.author.id == author.id
        assert details.likes == []
        assert details.pronunciations is None

    @pytest.mark.asyncio
    async def test_unknown_author_is_foreign_key_violation(self, schema):
        repo = await schema.get(ContentRepository)

        with pytest.raises(StorageError) as exc_info:
            await repo.create(
                Ad(
                    title="Fundraiser",
                    category="تبرع",
                    content="Help the library",
                    target_amount=1000,
                    author_id=UserId(uuid4()),
                )
            )

        assert exc_info.value.code == StorageErrorCode.FOREIGN_KEY_VIOLATION.value

    @pytest.mark.asyncio
    async def test_session_survives_a_failed_insert(self, schema):
        members = await schema.get(MemberRepository)
        repo = await schema.get(ContentRepository)
        author = await members.save(make_member())

        with pytest.raises(StorageError):
            await repo.create(
                Word(
                    title="Aman",
                    category="طبيعة",
                    content="ماء",
                    author_id=UserId(uuid4()),
                )
            )
        saved = await repo.create(
            Word(title="Aman", category="طبيعة", content="ماء", author_id=author.id)
        )

        assert await repo.find_by_id(ContentType.WORD, saved.id) is not None

    @pytest.mark.asyncio
    async def test_duplicate_pronunciation_is_unique_violation(self, schema):
        members = await schema.get(MemberRepository)
        repo = await schema.get(ContentRepository)
        author = await members.save(make_member())
        word = await repo.create(
            Word(title="Aman", category="طبيعة", content="ماء", author_id=author.id)
        )

        def pronunciation() -> Pronunciation:
            return Pronunciation(
                id=PronunciationId(uuid4()),
                user_id=author.id,
                content_type=ContentType.WORD,
                content_id=word.id,
                accent=Accent.KABYLE,
                pronunciation="a-man",
            )

        await repo.add_pronunciation(pronunciation())
        assert await repo.has_pronunciation(
            ContentType.WORD, word.id, author.id, Accent.KABYLE
        )
        with pytest.raises(StorageError) as exc_info:
            await repo.add_pronunciation(pronunciation())

        assert exc_info.value.code == StorageErrorCode.UNIQUE_VIOLATION.value

    @pytest.mark.asyncio
    async def test_delete_missing_record_is_not_found(self, schema):
        repo = await schema.get(ContentRepository)

        with pytest.raises(StorageError) as exc_info:
            await repo.delete(ContentType.POST, ContentId(uuid4()))

        assert exc_info.value.code == StorageErrorCode.NOT_FOUND.value

    @pytest.mark.asyncio
    async def test_increment_views(self, schema):
        members = await schema.get(MemberRepository)
        repo = await schema.get(ContentRepository)
        author = await members.save(make_member())
        word = await repo.create(
            Word(title="Aman", category="طبيعة", content="ماء", author_id=author.id)
        )

        await repo.increment_views(ContentType.WORD, word.id)
        await repo.increment_views(ContentType.WORD, word.id)

        assert (await repo.find_by_id(ContentType.WORD, word.id)).views == 2

    @pytest.mark.asyncio
    async def test_find_update_and_delete_pronunciation(self, schema):
        members = await schema.get(MemberRepository)
        repo = await schema.get(ContentRepository)
        author = await members.save(make_member(first_name="Dihya"))
        word = await repo.create(
            Word(title="Aman", category="طبيعة", content="ماء", author_id=author.id)
        )
        saved = await repo.add_pronunciation(
            Pronunciation(
                id=PronunciationId(uuid4()),
                user_id=author.id,
                content_type=ContentType.WORD,
                content_id=word.id,
                accent=Accent.KABYLE,
                pronunciation="a-man",
            )
        )

        entry = await repo.find_pronunciation(ContentType.WORD, word.id, saved.id)
        assert entry.user.first_name == "Dihya"
        assert (
            await repo.find_pronunciation(ContentType.WORD, ContentId(uuid4()), saved.id)
            is None
        )

        updated = await repo.update_pronunciation(
            saved.model_copy(update={"accent": Accent.CHAOUI, "pronunciation": "aman"})
        )
        assert updated.accent == Accent.CHAOUI
        assert updated.pronunciation == "aman"

        await repo.delete_pronunciation(saved.id)
        assert await repo.find_pronunciation(ContentType.WORD, word.id, saved.id) is None
        with pytest.raises(StorageError) as exc_info:
            await repo.delete_pronunciation(saved.id)

        assert exc_info.value.code == StorageErrorCode.NOT_FOUND.value
