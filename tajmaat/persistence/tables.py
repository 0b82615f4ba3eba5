"""SQLAlchemy table definitions for Tajmaat.

The schema itself is owned outside this service; these definitions only
describe the tables the repositories query.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

from tajmaat.domain.value import ContentType

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("email", String(255), nullable=True, unique=True),
    Column("avatar", Text, nullable=True),
    Column("image", Text, nullable=True),  # Avatar from the sign-in provider
    Column("bio", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)


# ============================================================================
# CONTENT TABLES (one per content type, sharing a common core)
# ============================================================================
def _content_table(name: str, *columns: Column, title_length: int = 300) -> Table:
    table = Table(
        name,
        metadata,
        Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
        Column("title", String(title_length), nullable=False),
        Column("category", String(100), nullable=False),
        Column("subcategory", String(100), nullable=True),
        Column("image", Text, nullable=True),
        Column(
            "author_id",
            UUID,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *columns,
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
    )
    Index(f"idx_{name}_author_id", table.c.author_id)
    Index(f"idx_{name}_created_at", table.c.created_at.desc())
    return table


posts_table = _content_table("posts", Column("content", Text, nullable=False))

truths_table = _content_table("truths", Column("content", Text, nullable=False))

books_table = _content_table(
    "books",
    Column("content", Text, nullable=False),
    Column("pages", Integer, nullable=True),
    Column("language", String(50), nullable=True),
    Column("isbn", String(20), nullable=True),
)

ideas_table = _content_table(
    "ideas",
    Column("content", Text, nullable=False),
    Column("status", String(50), nullable=False, server_default="قيد المراجعة"),
    Column("priority", String(20), nullable=False, server_default="متوسطة"),
    Column("votes", Integer, nullable=False, server_default="0"),
)

images_table = _content_table(
    "images",
    Column("description", Text, nullable=False),
    Column("location", String(255), nullable=True),
    Column("resolution", String(50), nullable=True),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
)

videos_table = _content_table(
    "videos",
    Column("content", Text, nullable=False),
    Column("duration", String(8), nullable=True),  # HH:MM:SS
    Column("quality", String(20), nullable=True),
    Column("language", String(50), nullable=True),
)

questions_table = _content_table(
    "questions",
    Column("content", Text, nullable=False),
    Column("question_type", String(30), nullable=False, server_default="يحتاج إجابة"),
    Column("answered", Boolean, nullable=False, server_default="false"),
)

ads_table = _content_table(
    "ads",
    Column("content", Text, nullable=False),
    Column("target_amount", Float, nullable=False, server_default="0"),
    Column("current_amount", Float, nullable=False, server_default="0"),
    Column("deadline", TIMESTAMP(timezone=True), nullable=True),
)

products_table = _content_table(
    "products",
    Column("content", Text, nullable=False),
    Column("price", Float, nullable=False),
    Column("currency", String(10), nullable=False),
    Column("in_stock", Boolean, nullable=False, server_default="true"),
    Column("sizes", ARRAY(Text), nullable=False, server_default="{}"),
    Column("colors", ARRAY(Text), nullable=False, server_default="{}"),
)

sentences_table = _content_table(
    "sentences",
    Column("content", String(1000), nullable=False),  # Translation
    Column("views", Integer, nullable=False, server_default="0"),
    title_length=200,
)

words_table = _content_table(
    "words",
    Column("content", String(500), nullable=False),  # Meaning
    Column("views", Integer, nullable=False, server_default="0"),
    title_length=100,
)

CONTENT_TABLES: dict[ContentType, Table] = {
    ContentType.POST: posts_table,
    ContentType.BOOK: books_table,
    ContentType.IDEA: ideas_table,
    ContentType.IMAGE: images_table,
    ContentType.VIDEO: videos_table,
    ContentType.TRUTH: truths_table,
    ContentType.QUESTION: questions_table,
    ContentType.AD: ads_table,
    ContentType.PRODUCT: products_table,
    ContentType.SENTENCE: sentences_table,
    ContentType.WORD: words_table,
}


# ============================================================================
# ENGAGEMENT TABLES (polymorphic target: content_type + content_id)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content_type", String(20), nullable=False),
    Column("content_id", UUID, nullable=False),
    Column("emoji", String(20), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "content_type", "content_id", name="unique_like"),
)

Index("idx_likes_target", likes_table.c.content_type, likes_table.c.content_id)

comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content_type", String(20), nullable=False),
    Column("content_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_target", comments_table.c.content_type, comments_table.c.content_id)

shares_table = Table(
    "shares",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content_type", String(20), nullable=False),
    Column("content_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_shares_target", shares_table.c.content_type, shares_table.c.content_id)

# ============================================================================
# PRONUNCIATIONS TABLE (sentences and words only)
# ============================================================================
pronunciations_table = Table(
    "pronunciations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content_type", String(20), nullable=False),
    Column("content_id", UUID, nullable=False),
    Column("accent", String(20), nullable=False),
    Column("pronunciation", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id",
        "content_type",
        "content_id",
        "accent",
        name="unique_pronunciation_per_accent",
    ),
)

Index(
    "idx_pronunciations_target",
    pronunciations_table.c.content_type,
    pronunciations_table.c.content_id,
)

ENGAGEMENT_TABLES = (likes_table, comments_table, shares_table, pronunciations_table)
