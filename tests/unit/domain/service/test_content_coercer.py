"""Unit tests for ContentCoercer and its parsing helpers."""

from datetime import datetime
from uuid import uuid4

import pytest

from tajmaat.domain.model import Ad, Book, Idea, Image, Product, Question, Sentence
from tajmaat.domain.service import ContentCoercer
from tajmaat.domain.service.coercion import (
    optional_text,
    parse_flag,
    parse_integer,
    parse_number,
    split_list,
)
from tajmaat.domain.value import (
    ContentType,
    IdeaPriority,
    IdeaStatus,
    QuestionKind,
    UserId,
)
from tests.conftest import valid_data


@pytest.fixture
def coercer() -> ContentCoercer:
    return ContentCoercer()


@pytest.fixture
def actor_id() -> UserId:
    return UserId(uuid4())


class TestHelpers:
    """Tests for the parsing helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("a, b ,, c", ["a", "b", "c"]),
            ([" a ", "", "b"], ["a", "b"]),
            ("", []),
            (None, []),
            ([{"x": 1}, "a", ["b"], True], ["a"]),
            ({"x": 1}, []),
            (42, ["42"]),
        ],
    )
    def test_split_list(self, value, expected):
        assert split_list(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [("12.5", 12.5), (7, 7.0), (" 3 ", 3.0), ("12abc", None), ("nan", None)],
    )
    def test_parse_number(self, value, expected):
        assert parse_number(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(" a ", "a"), (5, "5"), ("   ", None), (["a"], None), ({"a": 1}, None), (False, None)],
    )
    def test_optional_text(self, value, expected):
        assert optional_text(value) == expected

    def test_parse_number_rejects_booleans(self):
        assert parse_number(True) is None

    def test_parse_integer_rejects_fractions(self):
        assert parse_integer("300") == 300
        assert parse_integer("2.5") is None

    @pytest.mark.parametrize(
        "value,expected",
        [(None, True), ("false", False), ("0", False), ("yes", True), (False, False)],
    )
    def test_parse_flag(self, value, expected):
        assert parse_flag(value, default=True) is expected


class TestCoerce:
    """Tests for per-type coercion."""

    def test_trims_strings_and_sets_author(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.POST,
            {"title": "  Azul  ", "category": " ثقافة ", "content": " text "},
            actor_id,
        )

        assert record.title == "Azul"
        assert record.category == "ثقافة"
        assert record.content == "text"
        assert record.author_id == actor_id
        assert record.id is None

    def test_absent_optional_strings_are_none(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.POST, valid_data(ContentType.POST, subcategory="  "), actor_id
        )

        assert record.subcategory is None
        assert record.image is None

    def test_book_fields(self, coercer, actor_id):
        record = coercer.coerce(ContentType.BOOK, valid_data(ContentType.BOOK), actor_id)

        assert isinstance(record, Book)
        assert record.pages == 320
        assert record.isbn == "978-3-16-148410-0"
        assert record.language is None

    def test_book_without_pages(self, coercer, actor_id):
        data = valid_data(ContentType.BOOK)
        del data["pages"]

        record = coercer.coerce(ContentType.BOOK, data, actor_id)

        assert record.pages is None

    def test_idea_defaults(self, coercer, actor_id):
        data = valid_data(ContentType.IDEA)
        del data["priority"]

        record = coercer.coerce(ContentType.IDEA, {**data, "votes": 99}, actor_id)

        assert isinstance(record, Idea)
        assert record.status == IdeaStatus.PENDING_REVIEW.value
        assert record.priority == IdeaPriority.MEDIUM
        assert record.votes == 0

    def test_image_tags_from_comma_string(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.IMAGE, valid_data(ContentType.IMAGE), actor_id
        )

        assert isinstance(record, Image)
        assert record.tags == ["nature", "mountains"]
        assert record.description == "Atlas mountains"

    def test_image_tags_from_list(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.IMAGE,
            valid_data(ContentType.IMAGE, tags=["sea", " ", "sky "]),
            actor_id,
        )

        assert record.tags == ["sea", "sky"]

    @pytest.mark.parametrize(
        "content_type,category",
        [
            (ContentType.VIDEO, "فيديو"),
            (ContentType.QUESTION, "سؤال"),
            (ContentType.TRUTH, "حقيقة"),
        ],
    )
    def test_category_override(self, coercer, actor_id, content_type, category):
        record = coercer.coerce(
            content_type, valid_data(content_type, category="رياضة"), actor_id
        )

        assert record.category == category

    def test_other_types_keep_submitted_category(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.BOOK, valid_data(ContentType.BOOK, category="رواية"), actor_id
        )

        assert record.category == "رواية"

    def test_question_defaults(self, coercer, actor_id):
        data = valid_data(ContentType.QUESTION)
        del data["type"]

        record = coercer.coerce(
            ContentType.QUESTION, {**data, "answered": True}, actor_id
        )

        assert isinstance(record, Question)
        assert record.question_type == QuestionKind.NEEDS_ANSWER
        assert record.answered is False

    def test_ad_amounts_and_deadline(self, coercer, actor_id):
        record = coercer.coerce(ContentType.AD, valid_data(ContentType.AD), actor_id)

        assert isinstance(record, Ad)
        assert record.target_amount == 5000
        assert record.current_amount == 0
        assert record.deadline == datetime(2026, 12, 31)

    def test_ad_without_deadline(self, coercer, actor_id):
        data = valid_data(ContentType.AD)
        del data["deadline"]
        del data["targetAmount"]

        record = coercer.coerce(ContentType.AD, data, actor_id)

        assert record.deadline is None
        assert record.target_amount == 0

    def test_product_fields(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.PRODUCT,
            valid_data(ContentType.PRODUCT, colors="red,blue"),
            actor_id,
        )

        assert isinstance(record, Product)
        assert record.price == 49.5
        assert record.in_stock is True
        assert record.sizes == ["S", "M"]
        assert record.colors == ["red", "blue"]

    def test_product_out_of_stock(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.PRODUCT,
            valid_data(ContentType.PRODUCT, inStock="false"),
            actor_id,
        )

        assert record.in_stock is False

    def test_sentence_views_start_at_zero(self, coercer, actor_id):
        record = coercer.coerce(
            ContentType.SENTENCE,
            valid_data(ContentType.SENTENCE, views=500),
            actor_id,
        )

        assert isinstance(record, Sentence)
        assert record.views == 0

    def test_wire_dump_uses_camel_case(self, coercer, actor_id):
        record = coercer.coerce(ContentType.AD, valid_data(ContentType.AD), actor_id)

        dumped = record.model_dump(by_alias=True)

        assert "targetAmount" in dumped
        assert "authorId" in dumped
        assert "target_amount" not in dumped
