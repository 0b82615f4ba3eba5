"""Domain layer DI providers."""

from dishka import Scope, provide

from tajmaat.config import AuthSettings
from tajmaat.domain.repository import ContentRepository
from tajmaat.domain.service import (
    ContentCoercer,
    ContentService,
    ContentValidator,
    ErrorTranslator,
    JWTService,
)
from tajmaat.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_content_validator(self) -> ContentValidator:
        """Provide content validator."""
        return ContentValidator()

    @provide
    def get_content_coercer(self) -> ContentCoercer:
        """Provide content coercer."""
        return ContentCoercer()

    @provide
    def get_error_translator(self) -> ErrorTranslator:
        """Provide storage error translator."""
        return ErrorTranslator()

    @provide
    def get_content_service(
        self, content_repository: ContentRepository
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(content_repository=content_repository)
