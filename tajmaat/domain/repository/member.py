"""Member repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tajmaat.domain.model.member import Member
from tajmaat.domain.value import UserId


class MemberRepository(ABC):
    """Repository for Member aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Member]:
        """Find a member by ID.

        Args:
            user_id: The member's unique identifier

        Returns:
            The member if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, member: Member) -> Member:
        """Save a member (create or update).

        Args:
            member: The member to save

        Returns:
            The saved member
        """
        pass
