"""Content coercion domain service.

Turns a raw, already validated payload into the typed record stored for its
content type: strings are trimmed, numbers and dates parsed, comma lists
split, and per-type defaults applied.

Absent-value discipline (one per field, never mixed):
- optional strings (subcategory, image, language, isbn, ...) -> None
- optional numbers (pages) and dates (deadline) -> None
- list fields (tags, sizes, colors) -> []
- ad amounts -> 0, product in_stock -> True
"""

import math
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

import logfire
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tajmaat.domain.model.content import CONTENT_MODELS, Content
from tajmaat.domain.value import (
    ContentType,
    IdeaPriority,
    IdeaStatus,
    QuestionKind,
    UserId,
)

from .base import Service

_DATETIME = TypeAdapter(datetime)

_FALSE_FLAGS = frozenset({"", "false", "0", "no", "off"})


def is_blank(value: Any) -> bool:
    """Whether a raw value counts as absent."""
    return value is None or (isinstance(value, str) and not value.strip())


def is_text_value(value: Any) -> bool:
    """Whether a raw value can be read as text: a string or a plain number.

    Lists, objects and booleans are not text.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def optional_text(value: Any) -> Optional[str]:
    """Trimmed text, or None when absent, blank or not a text value."""
    if not is_text_value(value):
        return None
    text = value.strip() if isinstance(value, str) else str(value).strip()
    return text or None


def required_text(value: Any) -> str:
    """Trimmed text for a field validation guarantees is present."""
    return optional_text(value) or ""


def split_list(value: Any) -> list[str]:
    """Normalize a list field given either as a list or a comma separated string.

    Items are trimmed and empty items dropped: "a, b ,, c" -> ["a", "b", "c"].
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = [str(item) for item in value if is_text_value(item)]
    elif is_text_value(value):
        items = str(value).split(",")
    else:
        return []
    return [item.strip() for item in items if item.strip()]


def parse_number(value: Any) -> Optional[float]:
    """Parse a finite number from an int, float or numeric string."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_integer(value: Any) -> Optional[int]:
    """Parse a whole number; fractional values are not integers."""
    number = parse_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def parse_date(value: Any) -> Optional[datetime]:
    """Parse an ISO date or datetime (or a unix timestamp)."""
    if is_blank(value) or isinstance(value, bool):
        return None
    try:
        return _DATETIME.validate_python(
            value.strip() if isinstance(value, str) else value
        )
    except PydanticValidationError:
        return None


def parse_flag(value: Any, default: bool) -> bool:
    """Parse a boolean sent as a bool, number or string."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_FLAGS
    return bool(value)


def apply_category_override(
    content_type: ContentType, fields: dict[str, Any]
) -> dict[str, Any]:
    """Replace the category of types that publish under a fixed category.

    Videos, questions and truths always land in their own category whatever
    the caller sent. Pending product confirmation; see
    `ContentType.forced_category`.
    """
    forced = content_type.forced_category
    if forced is None:
        return fields
    if fields.get("category") != forced:
        logfire.info(
            "Category overridden",
            content_type=content_type.value,
            submitted=fields.get("category"),
            forced=forced,
        )
    return {**fields, "category": forced}


Coercer = Callable[[Mapping[str, Any]], dict[str, Any]]


def _base_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "title": required_text(data.get("title")),
        "category": required_text(data.get("category")),
        "subcategory": optional_text(data.get("subcategory")),
        "image": optional_text(data.get("image")),
    }


def _text_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {**_base_fields(data), "content": required_text(data.get("content"))}


def _book_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        **_text_fields(data),
        "pages": parse_integer(data.get("pages")),
        "language": optional_text(data.get("language")),
        "isbn": optional_text(data.get("isbn")),
    }


def _idea_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        **_text_fields(data),
        "status": optional_text(data.get("status")) or IdeaStatus.PENDING_REVIEW.value,
        "priority": optional_text(data.get("priority")) or IdeaPriority.MEDIUM.value,
        "votes": 0,
    }


def _image_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        **_base_fields(data),
        "description": required_text(data.get("description")),
        "location": optional_text(data.get("location")),
        "resolution": optional_text(data.get("resolution")),
        "tags": split_list(data.get("tags")),
    }


def _video_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        **_text_fields(data),
        "duration": optional_text(data.get("duration")),
        "quality": optional_text(data.get("quality")),
        "language": optional_text(data.get("language")),
    }


def _question_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        **_text_fields(data),
        "question_type": optional_text(data.get("type"))
        or QuestionKind.NEEDS_ANSWER.value,
        "answered": False,
    }


def _ad_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    target = parse_number(data.get("targetAmount"))
    current = parse_number(data.get("currentAmount"))
    return {
        **_text_fields(data),
        "target_amount": target if target is not None else 0,
        "current_amount": current if current is not None else 0,
        "deadline": parse_date(data.get("deadline")),
    }


def _product_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        **_text_fields(data),
        "price": parse_number(data.get("price")),
        "currency": required_text(data.get("currency")),
        "in_stock": parse_flag(data.get("inStock"), default=True),
        "sizes": split_list(data.get("sizes")),
        "colors": split_list(data.get("colors")),
    }


def _counted_text_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {**_text_fields(data), "views": 0}


# One entry per content type; a new type registers its coercer here.
_COERCERS: dict[ContentType, Coercer] = {
    ContentType.POST: _text_fields,
    ContentType.TRUTH: _text_fields,
    ContentType.BOOK: _book_fields,
    ContentType.IDEA: _idea_fields,
    ContentType.IMAGE: _image_fields,
    ContentType.VIDEO: _video_fields,
    ContentType.QUESTION: _question_fields,
    ContentType.AD: _ad_fields,
    ContentType.PRODUCT: _product_fields,
    ContentType.SENTENCE: _counted_text_fields,
    ContentType.WORD: _counted_text_fields,
}


class ContentCoercer(Service):
    """Domain service normalizing validated payloads into content records."""

    def coerce(
        self, content_type: ContentType, data: Mapping[str, Any], actor_id: UserId
    ) -> Content:
        """Build the typed record for a validated payload.

        Args:
            content_type: Content type tag
            data: Raw payload that passed validation
            actor_id: Acting member, recorded as the immutable author

        Returns:
            Unsaved content record (no id or creation time yet)
        """
        fields = _COERCERS[content_type](data)
        fields = apply_category_override(content_type, fields)
        return CONTENT_MODELS[content_type](author_id=actor_id, **fields)
