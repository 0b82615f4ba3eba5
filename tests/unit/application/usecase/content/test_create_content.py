"""Unit tests for CreateContentUseCase (the ingestion pipeline)."""

from uuid import uuid4

import pytest

from tajmaat.application.usecase.content import (
    CreateContentRequest,
    CreateContentUseCase,
    IngestionCreated,
    IngestionFailed,
    IngestionRejected,
)
from tajmaat.domain.error import StorageError, StorageValidationError
from tajmaat.domain.model import Content
from tajmaat.domain.repository import ContentRepository, MemberRepository
from tajmaat.domain.service import (
    ContentCoercer,
    ContentService,
    ContentValidator,
    ErrorTranslator,
)
from tajmaat.domain.value import ContentType, StorageErrorCode
from tajmaat.persistence.repository.inmemory import (
    InMemoryContentRepository,
    InMemoryMemberRepository,
)
from tests.conftest import make_member, valid_data
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RejectingRepository(InMemoryContentRepository):
    """Repository whose inserts fail with a fixed error."""

    def __init__(self, error: Exception) -> None:
        super().__init__(InMemoryMemberRepository())
        self.error = error

    async def create(self, record: Content) -> Content:
        raise self.error


class BrokenReadRepository(InMemoryContentRepository):
    """Repository whose joined read fails after a successful insert."""

    async def fetch_with_author(self, content_type, content_id):
        raise RuntimeError("connection reset during join")


class VanishingRepository(InMemoryContentRepository):
    """Repository that cannot find a record it just created."""

    async def fetch_with_author(self, content_type, content_id):
        return None


class PermissiveValidator(ContentValidator):
    """Validator that accepts every payload."""

    def validate_fields(self, content_type, data):
        return []


def _use_case(repository: ContentRepository) -> CreateContentUseCase:
    return CreateContentUseCase(
        validator=ContentValidator(),
        coercer=ContentCoercer(),
        content_service=ContentService(content_repository=repository),
        error_translator=ErrorTranslator(),
    )


class TestCreateContent:
    """Tests for successful ingestion."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", list(ContentType))
    async def test_every_type_is_created(self, unit_env, content_type):
        use_case = await unit_env.get(CreateContentUseCase)

        result = await use_case.execute(
            CreateContentRequest(
                type=content_type.value,
                data=valid_data(content_type),
                actor_id=str(uuid4()),
            )
        )

        assert isinstance(result, IngestionCreated)
        assert result.record.content_type == content_type
        assert result.record.id is not None
        assert result.rehydrated is True

    @pytest.mark.asyncio
    async def test_round_trip_preserves_submitted_fields(self, unit_env):
        """The rehydrated record matches the trimmed submission and has an author."""
        use_case = await unit_env.get(CreateContentUseCase)
        member_repo = await unit_env.get(MemberRepository)
        author = await member_repo.save(make_member())

        result = await use_case.execute(
            CreateContentRequest(
                type="book",
                data=valid_data(
                    ContentType.BOOK,
                    title="  Tamurt  ",
                    content=" A novel ",
                    category=" رواية ",
                ),
                actor_id=str(author.id),
            )
        )

        assert isinstance(result, IngestionCreated)
        record = result.details.content
        assert record.title == "Tamurt"
        assert record.content == "A novel"
        assert record.category == "رواية"
        assert result.details.author is not None
        assert result.details.author.id == author.id

    @pytest.mark.asyncio
    async def test_author_comes_from_actor_not_payload(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        actor_id = str(uuid4())

        result = await use_case.execute(
            CreateContentRequest(
                type="post",
                data=valid_data(ContentType.POST, authorId=str(uuid4())),
                actor_id=actor_id,
            )
        )

        assert str(result.record.author_id) == actor_id

    @pytest.mark.asyncio
    async def test_identical_submissions_create_two_records(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)
        request = CreateContentRequest(
            type="post", data=valid_data(ContentType.POST), actor_id=str(uuid4())
        )

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert isinstance(first, IngestionCreated)
        assert isinstance(second, IngestionCreated)
        assert first.record.id != second.record.id


class TestRejections:
    """Tests for type and field check failures."""

    @pytest.mark.asyncio
    async def test_unknown_type_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)

        result = await use_case.execute(
            CreateContentRequest(type="poem", data={}, actor_id=str(uuid4()))
        )

        assert isinstance(result, IngestionRejected)
        assert result.code == "INVALID_CONTENT_TYPE"
        assert result.received == "poem"
        assert "post" in result.message

    @pytest.mark.asyncio
    async def test_invalid_fields_are_rejected_with_every_error(self, unit_env):
        use_case = await unit_env.get(CreateContentUseCase)

        result = await use_case.execute(
            CreateContentRequest(
                type="product",
                data={"title": "Rug", "price": "-1"},
                actor_id=str(uuid4()),
            )
        )

        assert isinstance(result, IngestionRejected)
        assert result.code == "VALIDATION_FAILED"
        assert result.message == "Content validation failed"
        assert len(result.errors) == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content_type,field,value,message",
        [
            (ContentType.POST, "image", ["https://cdn.example.com/a.jpg"], "Invalid image URL"),
            (ContentType.BOOK, "isbn", {"value": "1234567890"}, "Invalid ISBN format"),
            (ContentType.VIDEO, "duration", ["00:03:15"], "Duration must be in HH:MM:SS format"),
            (ContentType.QUESTION, "type", {"kind": "نقاش"}, "Invalid question type"),
            (ContentType.IDEA, "priority", ["عالية"], "Invalid priority level"),
        ],
    )
    async def test_non_text_values_are_rejected(
        self, unit_env, content_type, field, value, message
    ):
        use_case = await unit_env.get(CreateContentUseCase)

        result = await use_case.execute(
            CreateContentRequest(
                type=content_type.value,
                data=valid_data(content_type, **{field: value}),
                actor_id=str(uuid4()),
            )
        )

        assert isinstance(result, IngestionRejected)
        assert result.code == "VALIDATION_FAILED"
        assert result.errors == [message]

    @pytest.mark.asyncio
    async def test_record_refused_by_model_is_rejected(self):
        """A payload the field rules pass but the typed record refuses."""
        repository = InMemoryContentRepository(InMemoryMemberRepository())
        use_case = CreateContentUseCase(
            validator=PermissiveValidator(),
            coercer=ContentCoercer(),
            content_service=ContentService(content_repository=repository),
            error_translator=ErrorTranslator(),
        )

        result = await use_case.execute(
            CreateContentRequest(type="post", data={}, actor_id=str(uuid4()))
        )

        assert isinstance(result, IngestionRejected)
        assert result.code == "VALIDATION_FAILED"
        assert result.errors
        assert repository._records == {}

    @pytest.mark.asyncio
    async def test_rejection_writes_nothing(self):
        repository = InMemoryContentRepository(InMemoryMemberRepository())
        use_case = _use_case(repository)

        await use_case.execute(
            CreateContentRequest(type="post", data={}, actor_id=str(uuid4()))
        )

        assert repository._records == {}


class TestStorageFailures:
    """Tests for persistence failures and rehydrate degradation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error,status",
        [
            (StorageError(StorageErrorCode.UNIQUE_VIOLATION), 400),
            (StorageError(StorageErrorCode.FOREIGN_KEY_VIOLATION), 400),
            (StorageValidationError("value too long"), 400),
            (StorageError("53300"), 500),
            (RuntimeError("pool exhausted"), 500),
        ],
    )
    async def test_persist_failure_is_translated(self, error, status):
        use_case = _use_case(RejectingRepository(error))

        result = await use_case.execute(
            CreateContentRequest(
                type="post", data=valid_data(ContentType.POST), actor_id=str(uuid4())
            )
        )

        assert isinstance(result, IngestionFailed)
        assert result.http_status == status

    @pytest.mark.asyncio
    async def test_failed_rehydrate_still_reports_created(self):
        repository = BrokenReadRepository(InMemoryMemberRepository())
        use_case = _use_case(repository)

        result = await use_case.execute(
            CreateContentRequest(
                type="idea", data=valid_data(ContentType.IDEA), actor_id=str(uuid4())
            )
        )

        assert isinstance(result, IngestionCreated)
        assert result.rehydrated is False
        assert result.details is None
        assert await repository.find_by_id(ContentType.IDEA, result.record.id)

    @pytest.mark.asyncio
    async def test_missing_row_on_rehydrate_returns_bare_record(self):
        use_case = _use_case(VanishingRepository(InMemoryMemberRepository()))

        result = await use_case.execute(
            CreateContentRequest(
                type="word", data=valid_data(ContentType.WORD), actor_id=str(uuid4())
            )
        )

        assert isinstance(result, IngestionCreated)
        assert result.rehydrated is False
        assert result.record.title == "Tanemmirt"
