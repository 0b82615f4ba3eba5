"""PostgreSQL repository implementations."""

from tajmaat.persistence.repository.content import PostgresContentRepository
from tajmaat.persistence.repository.member import PostgresMemberRepository

__all__ = [
    "PostgresContentRepository",
    "PostgresMemberRepository",
]
