"""Mock persistence providers for testing."""

from dishka import Scope, provide

from tajmaat.domain.repository import ContentRepository, MemberRepository
from tajmaat.persistence.repository.inmemory import (
    InMemoryContentRepository,
    InMemoryMemberRepository,
)
from tajmaat.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self) -> MemberRepository:
        """Provide in-memory member repository."""
        return InMemoryMemberRepository()

    @provide(scope=Scope.REQUEST)
    def get_content_repository(
        self, member_repository: MemberRepository
    ) -> ContentRepository:
        """Provide in-memory content repository joined to the member repository."""
        return InMemoryContentRepository(member_repository)
