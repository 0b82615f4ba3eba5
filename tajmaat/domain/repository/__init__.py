"""Repository interfaces for Tajmaat domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tajmaat.domain.repository.content import ContentRepository
from tajmaat.domain.repository.member import MemberRepository

__all__ = [
    "ContentRepository",
    "MemberRepository",
]
