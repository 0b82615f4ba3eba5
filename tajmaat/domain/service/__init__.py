"""Domain services."""

from .base import Service
from .coercion import ContentCoercer
from .content_service import ContentService
from .error_translator import ErrorTranslator
from .jwt_service import JWTService
from .validation import ContentValidator

__all__ = [
    "ContentCoercer",
    "ContentService",
    "ContentValidator",
    "ErrorTranslator",
    "JWTService",
    "Service",
]
