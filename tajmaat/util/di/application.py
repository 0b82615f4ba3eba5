"""Application layer DI providers."""

from dishka import Scope, provide

from tajmaat.application.usecase.auth import GetCurrentUserUseCase
from tajmaat.application.usecase.content import (
    AddPronunciationUseCase,
    CreateContentUseCase,
    DeleteContentUseCase,
    DeletePronunciationUseCase,
    GetContentUseCase,
    GetPronunciationUseCase,
    UpdateContentUseCase,
    UpdatePronunciationUseCase,
)
from tajmaat.domain.service import (
    ContentCoercer,
    ContentService,
    ContentValidator,
    ErrorTranslator,
    JWTService,
)
from tajmaat.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_create_content_use_case(
        self,
        validator: ContentValidator,
        coercer: ContentCoercer,
        content_service: ContentService,
        error_translator: ErrorTranslator,
    ) -> CreateContentUseCase:
        """Provide create content use case."""
        return CreateContentUseCase(
            validator=validator,
            coercer=coercer,
            content_service=content_service,
            error_translator=error_translator,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_content_use_case(
        self, validator: ContentValidator, content_service: ContentService
    ) -> GetContentUseCase:
        """Provide get content use case."""
        return GetContentUseCase(validator=validator, content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_update_content_use_case(
        self,
        validator: ContentValidator,
        coercer: ContentCoercer,
        content_service: ContentService,
    ) -> UpdateContentUseCase:
        """Provide update content use case."""
        return UpdateContentUseCase(
            validator=validator, coercer=coercer, content_service=content_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_content_use_case(
        self, validator: ContentValidator, content_service: ContentService
    ) -> DeleteContentUseCase:
        """Provide delete content use case."""
        return DeleteContentUseCase(
            validator=validator, content_service=content_service
        )

    @provide(scope=Scope.REQUEST)
    def get_add_pronunciation_use_case(
        self, validator: ContentValidator, content_service: ContentService
    ) -> AddPronunciationUseCase:
        """Provide add pronunciation use case."""
        return AddPronunciationUseCase(
            validator=validator, content_service=content_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_pronunciation_use_case(
        self, validator: ContentValidator, content_service: ContentService
    ) -> GetPronunciationUseCase:
        """Provide get pronunciation use case."""
        return GetPronunciationUseCase(
            validator=validator, content_service=content_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_pronunciation_use_case(
        self, validator: ContentValidator, content_service: ContentService
    ) -> UpdatePronunciationUseCase:
        """Provide update pronunciation use case."""
        return UpdatePronunciationUseCase(
            validator=validator, content_service=content_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_pronunciation_use_case(
        self, validator: ContentValidator, content_service: ContentService
    ) -> DeletePronunciationUseCase:
        """Provide delete pronunciation use case."""
        return DeletePronunciationUseCase(
            validator=validator, content_service=content_service
        )
