"""In-memory repository implementations for testing."""

from .content import InMemoryContentRepository
from .member import InMemoryMemberRepository

__all__ = [
    "InMemoryContentRepository",
    "InMemoryMemberRepository",
]
