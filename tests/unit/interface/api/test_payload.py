"""Unit tests for content payload shapes."""

from datetime import datetime
from uuid import uuid4

from tajmaat.domain.model import (
    Comment,
    ContentWithAuthor,
    Like,
    Pronunciation,
    PronunciationEntry,
    Question,
    Word,
)
from tajmaat.domain.value import (
    Accent,
    ContentId,
    ContentType,
    EngagementId,
    PronunciationId,
    QuestionKind,
    UserId,
)
from tajmaat.interface.api.payload import content_payload, pronunciation_payload
from tests.conftest import make_member


def _word() -> Word:
    return Word(
        id=ContentId(uuid4()),
        title="Azul",
        category="تحية",
        content="مرحبا",
        author_id=UserId(uuid4()),
        created_at=datetime(2026, 1, 5, 9, 30),
    )


def test_bare_record_uses_wire_keys():
    question = Question(
        id=ContentId(uuid4()),
        title="Anwa?",
        category="سؤال",
        content="Who?",
        author_id=UserId(uuid4()),
        question_type=QuestionKind.POLL,
    )

    payload = content_payload(question)

    assert payload["contentType"] == "question"
    assert payload["type"] == QuestionKind.POLL.value
    assert payload["authorId"] == str(question.author_id)
    assert "author" not in payload
    assert "_count" not in payload


def test_details_add_author_engagement_and_counts():
    word = _word()
    author = make_member()
    like = Like(
        id=EngagementId(uuid4()),
        user_id=UserId(uuid4()),
        content_type=ContentType.WORD,
        content_id=word.id,
        emoji="❤️",
    )
    comment = Comment(
        id=EngagementId(uuid4()),
        user_id=UserId(uuid4()),
        content_type=ContentType.WORD,
        content_id=word.id,
        content="Tanemmirt!",
    )
    pronunciation = Pronunciation(
        id=PronunciationId(uuid4()),
        user_id=author.id,
        content_type=ContentType.WORD,
        content_id=word.id,
        accent=Accent.KABYLE,
        pronunciation="a-zul",
    )
    details = ContentWithAuthor(
        content=word,
        author=author.public_profile(),
        likes=[like],
        comments=[comment],
        pronunciations=[
            PronunciationEntry(pronunciation=pronunciation, user=author.public_profile())
        ],
    )

    payload = content_payload(word, details)

    assert payload["author"]["firstName"] == "Amazigh"
    assert "email" not in payload["author"]
    assert payload["_count"] == {"likes": 1, "comments": 1, "shares": 0}
    assert payload["likes"][0]["emoji"] == "❤️"
    assert payload["pronunciations"][0]["accent"] == Accent.KABYLE.value
    assert payload["pronunciations"][0]["user"]["lastName"] == "Tajmaat"


def test_missing_author_is_null():
    word = _word()

    payload = content_payload(word, ContentWithAuthor(content=word))

    assert payload["author"] is None
    assert "pronunciations" not in payload


def test_pronunciation_payload_nests_contributor():
    contributor = make_member(first_name="Tiziri")
    entry = PronunciationEntry(
        pronunciation=Pronunciation(
            id=PronunciationId(uuid4()),
            user_id=contributor.id,
            content_type=ContentType.SENTENCE,
            content_id=ContentId(uuid4()),
            accent=Accent.TUAREG,
            pronunciation="azul",
        ),
        user=contributor.public_profile(),
    )

    payload = pronunciation_payload(entry)

    assert payload["accent"] == Accent.TUAREG.value
    assert payload["contentType"] == "sentence"
    assert payload["user"]["firstName"] == "Tiziri"
