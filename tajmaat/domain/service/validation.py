"""Content validation domain service.

Checks a raw payload against the rules of its content type before anything
is written. Every violated rule is reported; validation never stops at the
first problem.
"""

import re
from functools import partial
from typing import Any, Callable, Mapping
from urllib.parse import urlsplit

from tajmaat.domain.error import ContentValidationError, UnknownContentTypeError
from tajmaat.domain.value import ContentType, IdeaPriority, QuestionKind

from .base import Service
from .coercion import (
    is_blank,
    is_text_value,
    optional_text,
    parse_date,
    parse_integer,
    parse_number,
)

_ISBN = re.compile(r"^(?:\d{10}|\d{13})$")
_DURATION = re.compile(r"^\d{2}:\d{2}:\d{2}$")
_DATA_URL = re.compile(
    r"^data:[\w.+-]+/[\w.+-]+(?:;[\w.+-]+=[\w.+-]+)*;base64,[A-Za-z0-9+/]+=*$"
)

_TITLE_REQUIRED = {
    ContentType.SENTENCE: "عنوان الجملة مطلوب",
    ContentType.WORD: "الكلمة مطلوبة",
}
_CATEGORY_REQUIRED = {
    ContentType.SENTENCE: "تصنيف الجملة مطلوب",
    ContentType.WORD: "تصنيف الكلمة مطلوب",
}
_CONTENT_REQUIRED = {
    ContentType.SENTENCE: "ترجمة الجملة مطلوبة",
    ContentType.WORD: "معنى الكلمة مطلوب",
}

Rule = Callable[[ContentType, Mapping[str, Any]], list[str]]


def _text(data: Mapping[str, Any], key: str) -> str:
    return optional_text(data.get(key)) or ""


def _malformed(data: Mapping[str, Any], key: str) -> bool:
    """Whether a field is present but is not text (a list, an object, a bool)."""
    value = data.get(key)
    return value is not None and not is_text_value(value)


def is_acceptable_image_url(value: str) -> bool:
    """Whether an image reference is safe to store and render.

    Accepts site-relative paths, base64 data URLs and absolute http(s) URLs
    with a host. Anything else (javascript:, file:, malformed URLs) is refused.
    """
    value = value.strip()
    if value.startswith("/") and not value.startswith("//"):
        return not any(char.isspace() for char in value)
    if value.startswith("data:"):
        return _DATA_URL.match(value) is not None
    if any(char.isspace() for char in value):
        return False
    try:
        parts = urlsplit(value)
        # Accessing .port validates it
        parts.port
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def _common_rules(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    errors = []
    if not _text(data, "title"):
        errors.append(_TITLE_REQUIRED.get(content_type, "Title is required"))
    if not _text(data, "category"):
        errors.append(_CATEGORY_REQUIRED.get(content_type, "Category is required"))
    if _malformed(data, "subcategory"):
        errors.append("subcategory must be text")
    return errors


def _require_content(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    if not _text(data, "content"):
        return [_CONTENT_REQUIRED.get(content_type, "Content is required")]
    return []


def _limit_lengths(
    title_max: int,
    content_max: int,
    title_message: str,
    content_message: str,
    content_type: ContentType,
    data: Mapping[str, Any],
) -> list[str]:
    errors = []
    if len(_text(data, "title")) > title_max:
        errors.append(title_message)
    if len(_text(data, "content")) > content_max:
        errors.append(content_message)
    return errors


def _require_image_and_description(
    content_type: ContentType, data: Mapping[str, Any]
) -> list[str]:
    errors = []
    if not _text(data, "image"):
        errors.append("Image URL is required for image posts")
    if not _text(data, "description"):
        errors.append("Description is required for image posts")
    return errors


def _check_book(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    errors = []
    isbn = _text(data, "isbn")
    if _malformed(data, "isbn") or (isbn and not _ISBN.match(isbn.replace("-", ""))):
        errors.append("Invalid ISBN format")
    pages = data.get("pages")
    if not is_blank(pages):
        parsed = parse_integer(pages)
        if parsed is None:
            errors.append("Pages must be a whole number")
        elif parsed < 0:
            errors.append("Pages must not be negative")
    return errors


def _check_idea(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    priority = _text(data, "priority")
    if _malformed(data, "priority") or (
        priority and priority not in {p.value for p in IdeaPriority}
    ):
        return ["Invalid priority level"]
    return []


def _check_video(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    duration = _text(data, "duration")
    if _malformed(data, "duration") or (duration and not _DURATION.match(duration)):
        return ["Duration must be in HH:MM:SS format"]
    return []


def _check_question(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    kind = _text(data, "type")
    if _malformed(data, "type") or (
        kind and kind not in {k.value for k in QuestionKind}
    ):
        return ["Invalid question type"]
    return []


def _check_amount(data: Mapping[str, Any], key: str, label: str) -> list[str]:
    value = data.get(key)
    if is_blank(value):
        return []
    number = parse_number(value)
    if number is None:
        return [f"{label} must be a valid number"]
    if number < 0:
        return [f"{label} must not be negative"]
    return []


def _check_ad(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    errors = _check_amount(data, "targetAmount", "Target amount")
    errors += _check_amount(data, "currentAmount", "Current amount")
    deadline = data.get("deadline")
    if not is_blank(deadline) and parse_date(deadline) is None:
        errors.append("Invalid deadline date")
    return errors


def _check_product(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    errors = []
    if is_blank(data.get("price")):
        errors.append("Price is required for products")
    else:
        errors += _check_amount(data, "price", "Price")
    if not _text(data, "currency"):
        errors.append("Currency is required for products")
    return errors


def _check_image_url(content_type: ContentType, data: Mapping[str, Any]) -> list[str]:
    image = _text(data, "image")
    if _malformed(data, "image") or (image and not is_acceptable_image_url(image)):
        return ["Invalid image URL"]
    return []


def _check_plain_text(
    keys: tuple[str, ...], content_type: ContentType, data: Mapping[str, Any]
) -> list[str]:
    return [f"{key} must be text" for key in keys if _malformed(data, key)]


def _check_lists(
    keys: tuple[str, ...], content_type: ContentType, data: Mapping[str, Any]
) -> list[str]:
    errors = []
    for key in keys:
        value = data.get(key)
        if value is None or is_text_value(value):
            continue
        if not isinstance(value, (list, tuple)) or not all(
            is_text_value(item) for item in value
        ):
            errors.append(f"{key} must be text or a list of text")
    return errors


# One entry per content type; a new type registers its rules here.
_FIELD_RULES: dict[ContentType, tuple[Rule, ...]] = {
    ContentType.POST: (),
    ContentType.TRUTH: (),
    ContentType.BOOK: (_check_book, partial(_check_plain_text, ("language",))),
    ContentType.IDEA: (_check_idea, partial(_check_plain_text, ("status",))),
    ContentType.IMAGE: (
        _require_image_and_description,
        partial(_check_plain_text, ("location", "resolution")),
        partial(_check_lists, ("tags",)),
    ),
    ContentType.VIDEO: (
        _check_video,
        partial(_check_plain_text, ("quality", "language")),
    ),
    ContentType.QUESTION: (_check_question,),
    ContentType.AD: (_check_ad,),
    ContentType.PRODUCT: (_check_product, partial(_check_lists, ("sizes", "colors"))),
    ContentType.SENTENCE: (
        partial(
            _limit_lengths,
            200,
            1000,
            "يجب ألا يتجاوز عنوان الجملة 200 حرف",
            "يجب ألا تتجاوز ترجمة الجملة 1000 حرف",
        ),
    ),
    ContentType.WORD: (
        partial(
            _limit_lengths,
            100,
            500,
            "يجب ألا تتجاوز الكلمة 100 حرف",
            "يجب ألا يتجاوز معنى الكلمة 500 حرف",
        ),
    ),
}


class ContentValidator(Service):
    """Domain service checking content type tags and payloads."""

    @staticmethod
    def accepted_types() -> list[str]:
        """All accepted content type tags, in declaration order."""
        return [content_type.value for content_type in ContentType]

    def validate_type(self, tag: object) -> ContentType:
        """Resolve a content type tag.

        Args:
            tag: Tag as sent by the caller

        Returns:
            The matching content type

        Raises:
            UnknownContentTypeError: If the tag is not accepted
        """
        if isinstance(tag, str):
            try:
                return ContentType(tag)
            except ValueError:
                pass
        raise UnknownContentTypeError(tag, self.accepted_types())

    def validate_fields(self, content_type: ContentType, data: Any) -> list[str]:
        """Check a payload against every rule of its content type.

        Args:
            content_type: Content type tag
            data: Raw payload

        Returns:
            Every violated rule's message; empty when the payload is valid
        """
        if not isinstance(data, Mapping):
            return ["Content data is required and must be an object"]

        errors = _common_rules(content_type, data)
        if content_type.requires_content:
            errors += _require_content(content_type, data)
        for rule in _FIELD_RULES[content_type]:
            errors += rule(content_type, data)
        errors += _check_image_url(content_type, data)
        return errors

    def validate(self, content_type: ContentType, data: Any) -> None:
        """Raise if a payload violates any rule.

        Raises:
            ContentValidationError: With every violated rule
        """
        errors = self.validate_fields(content_type, data)
        if errors:
            raise ContentValidationError(errors)
