"""Member aggregate root.

Members sign in through the frontend's session provider; this service only
needs their public profile to decorate the content they publish.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tajmaat.domain.model.common import WireModel
from tajmaat.domain.value import UserId


class AuthorProfile(WireModel):
    """Public fields of a member shown next to their content."""

    id: UserId
    first_name: str
    last_name: str
    avatar: Optional[str] = None
    image: Optional[str] = None  # Provider avatar, fallback for `avatar`


class Member(WireModel):
    """Member aggregate root."""

    id: UserId
    first_name: str
    last_name: str
    email: Optional[str] = None
    avatar: Optional[str] = None
    image: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    def public_profile(self) -> AuthorProfile:
        """Project the member onto the fields other members may see."""
        return AuthorProfile(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            avatar=self.avatar,
            image=self.image,
        )
