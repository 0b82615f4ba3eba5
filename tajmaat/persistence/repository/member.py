"""PostgreSQL implementation of Member repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tajmaat.domain.model import Member
from tajmaat.domain.repository import MemberRepository
from tajmaat.domain.value import UserId
from tajmaat.persistence.mappers import member_to_dict, row_to_member
from tajmaat.persistence.tables import users_table


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Member]:
        """Find a member by ID.

        Args:
            user_id: Member ID to look up

        Returns:
            Member if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_member(dict(row)) if row else None

    async def save(self, member: Member) -> Member:
        """Save a member (create or update)."""
        existing = await self.find_by_id(member.id)

        member_dict = member_to_dict(member)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == member.id)
                .values(**member_dict)
            )
        else:
            stmt = users_table.insert().values(**member_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return member
