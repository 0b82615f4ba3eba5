"""Strongly typed identifiers for Tajmaat domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ContentId = NewType("ContentId", UUID)
PronunciationId = NewType("PronunciationId", UUID)
EngagementId = NewType("EngagementId", UUID)
