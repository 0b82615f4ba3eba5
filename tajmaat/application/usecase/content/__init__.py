"""Content use cases."""

from .add_pronunciation import AddPronunciationRequest, AddPronunciationUseCase
from .create_content import (
    CreateContentRequest,
    CreateContentUseCase,
    IngestionCreated,
    IngestionFailed,
    IngestionRejected,
    IngestionResult,
)
from .delete_content import DeleteContentRequest, DeleteContentUseCase
from .delete_pronunciation import (
    DeletePronunciationRequest,
    DeletePronunciationUseCase,
)
from .get_content import GetContentRequest, GetContentUseCase
from .get_pronunciation import GetPronunciationRequest, GetPronunciationUseCase
from .update_content import UpdateContentRequest, UpdateContentUseCase
from .update_pronunciation import (
    UpdatePronunciationRequest,
    UpdatePronunciationUseCase,
)

__all__ = [
    "AddPronunciationRequest",
    "AddPronunciationUseCase",
    "CreateContentRequest",
    "CreateContentUseCase",
    "DeleteContentRequest",
    "DeleteContentUseCase",
    "DeletePronunciationRequest",
    "DeletePronunciationUseCase",
    "GetContentRequest",
    "GetContentUseCase",
    "GetPronunciationRequest",
    "GetPronunciationUseCase",
    "IngestionCreated",
    "IngestionFailed",
    "IngestionRejected",
    "IngestionResult",
    "UpdateContentRequest",
    "UpdateContentUseCase",
    "UpdatePronunciationRequest",
    "UpdatePronunciationUseCase",
]
