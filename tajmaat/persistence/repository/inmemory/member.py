"""In-memory member repository for testing."""

from typing import Optional

from tajmaat.domain.model.member import Member
from tajmaat.domain.repository.member import MemberRepository
from tajmaat.domain.value import UserId


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self) -> None:
        self._members: dict[UserId, Member] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Member]:
        """Find a member by ID."""
        return self._members.get(user_id)

    async def save(self, member: Member) -> Member:
        """Save a member (create or update)."""
        self._members[member.id] = member
        return member
