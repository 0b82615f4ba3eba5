"""Unit tests for ContentService."""

from datetime import datetime
from uuid import uuid4

import pytest

from tajmaat.domain.model import Comment, Like, Post, Pronunciation, Share, Word
from tajmaat.domain.repository import ContentRepository, MemberRepository
from tajmaat.domain.service import ContentService
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    EngagementId,
    PronunciationId,
    UserId,
)
from tests.conftest import make_member
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _post(author_id: UserId) -> Post:
    return Post(title="Azul", category="ثقافة", content="Text", author_id=author_id)


def _word(author_id: UserId) -> Word:
    return Word(title="Aman", category="طبيعة", content="ماء", author_id=author_id)


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamp(self, unit_env):
        content_service = await unit_env.get(ContentService)

        saved = await content_service.create(_post(UserId(uuid4())))

        assert saved.id is not None
        assert saved.created_at is not None
        assert saved.title == "Azul"

    @pytest.mark.asyncio
    async def test_records_of_different_types_are_separate(self, unit_env):
        content_service = await unit_env.get(ContentService)
        saved = await content_service.create(_post(UserId(uuid4())))

        assert await content_service.get_by_id(ContentType.POST, saved.id) is not None
        assert await content_service.get_by_id(ContentType.BOOK, saved.id) is None


class TestGetWithAuthor:
    """Tests for the joined read."""

    @pytest.mark.asyncio
    async def test_joins_author_and_engagement(self, unit_env):
        content_service = await unit_env.get(ContentService)
        member_repo = await unit_env.get(MemberRepository)
        content_repo = await unit_env.get(ContentRepository)

        author = await member_repo.save(make_member())
        saved = await content_service.create(_post(author.id))

        fan_id = UserId(uuid4())
        target = {"content_type": ContentType.POST, "content_id": saved.id}
        content_repo.add_engagement(
            Like(id=EngagementId(uuid4()), user_id=fan_id, emoji="❤️", **target)
        )
        content_repo.add_engagement(
            Comment(id=EngagementId(uuid4()), user_id=fan_id, content="Nice", **target)
        )
        content_repo.add_engagement(
            Share(id=EngagementId(uuid4()), user_id=fan_id, **target)
        )

        details = await content_service.get_with_author(ContentType.POST, saved.id)

        assert details.author.id == author.id
        assert details.author.first_name == author.first_name
        assert len(details.likes) == 1
        assert len(details.comments) == 1
        assert len(details.shares) == 1
        assert details.pronunciations is None

    @pytest.mark.asyncio
    async def test_words_include_pronunciations_with_contributor(self, unit_env):
        content_service = await unit_env.get(ContentService)
        member_repo = await unit_env.get(MemberRepository)

        author = await member_repo.save(make_member())
        contributor = await member_repo.save(make_member("Tiziri", "Ait"))
        saved = await content_service.create(_word(author.id))

        await content_service.add_pronunciation(
            Pronunciation(
                id=PronunciationId(uuid4()),
                user_id=contributor.id,
                content_type=ContentType.WORD,
                content_id=saved.id,
                accent=Accent.KABYLE,
                pronunciation="a-man",
                created_at=datetime.now(),
            )
        )

        details = await content_service.get_with_author(ContentType.WORD, saved.id)

        assert len(details.pronunciations) == 1
        entry = details.pronunciations[0]
        assert entry.pronunciation.accent == Accent.KABYLE
        assert entry.user.first_name == "Tiziri"

    @pytest.mark.asyncio
    async def test_missing_record_returns_none(self, unit_env):
        content_service = await unit_env.get(ContentService)

        details = await content_service.get_with_author(
            ContentType.POST, ContentId(uuid4())
        )

        assert details is None


class TestAddPronunciation:
    """Tests for the one-per-accent rule."""

    @pytest.mark.asyncio
    async def test_duplicate_accent_returns_none(self, unit_env):
        content_service = await unit_env.get(ContentService)
        saved = await content_service.create(_word(UserId(uuid4())))
        user_id = UserId(uuid4())

        def pronunciation(accent: Accent) -> Pronunciation:
            return Pronunciation(
                id=PronunciationId(uuid4()),
                user_id=user_id,
                content_type=ContentType.WORD,
                content_id=saved.id,
                accent=accent,
                pronunciation="a-man",
            )

        first = await content_service.add_pronunciation(pronunciation(Accent.KABYLE))
        duplicate = await content_service.add_pronunciation(
            pronunciation(Accent.KABYLE)
        )
        other_accent = await content_service.add_pronunciation(
            pronunciation(Accent.CHAOUI)
        )

        assert first is not None
        assert duplicate is None
        assert other_accent is not None
