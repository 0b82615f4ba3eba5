"""JSON shapes of content records sent to the frontend."""

from typing import Any, Optional

from tajmaat.domain.model import Content, ContentWithAuthor, PronunciationEntry


def _dump(model) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def content_payload(
    record: Content, details: Optional[ContentWithAuthor] = None
) -> dict[str, Any]:
    """Flatten a record, and its author and engagement when known, into JSON.

    Without `details` only the record's own fields are sent.
    """
    if details is not None:
        record = details.content

    payload = {**_dump(record), "contentType": record.content_type.value}
    if details is None:
        return payload

    payload["author"] = _dump(details.author) if details.author else None
    payload["likes"] = [_dump(like) for like in details.likes]
    payload["comments"] = [_dump(comment) for comment in details.comments]
    payload["shares"] = [_dump(share) for share in details.shares]
    payload["_count"] = {
        "likes": len(details.likes),
        "comments": len(details.comments),
        "shares": len(details.shares),
    }
    if details.pronunciations is not None:
        payload["pronunciations"] = [
            pronunciation_payload(entry) for entry in details.pronunciations
        ]
    return payload


def pronunciation_payload(entry: PronunciationEntry) -> dict[str, Any]:
    """A pronunciation with its contributor's public profile under `user`."""
    return {
        **_dump(entry.pronunciation),
        "user": _dump(entry.user) if entry.user else None,
    }
