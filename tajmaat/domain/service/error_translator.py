"""Storage error translation domain service."""

import logfire

from tajmaat.domain.error import StorageError, StorageValidationError
from tajmaat.domain.value import StorageErrorCode, TranslatedError

from .base import Service

_KNOWN_CODES: dict[str, TranslatedError] = {
    StorageErrorCode.UNIQUE_VIOLATION.value: TranslatedError(
        http_status=400, message="هذا المحتوى موجود مسبقاً"
    ),
    StorageErrorCode.NOT_FOUND.value: TranslatedError(
        http_status=404, message="السجل غير موجود"
    ),
    StorageErrorCode.FOREIGN_KEY_VIOLATION.value: TranslatedError(
        http_status=400, message="السجل المرتبط غير موجود"
    ),
    StorageErrorCode.CHECK_VIOLATION.value: TranslatedError(
        http_status=400, message="البيانات لا تستوفي شروط الحفظ"
    ),
}

_STORAGE_VALIDATION = TranslatedError(
    http_status=400, message="البيانات المرسلة غير صالحة للحفظ"
)
_DATABASE_ERROR = TranslatedError(
    http_status=500, message="حدث خطأ في قاعدة البيانات"
)
_INTERNAL_ERROR = TranslatedError(http_status=500, message="حدث خطأ داخلي في الخادم")


class ErrorTranslator(Service):
    """Maps persistence failures to an HTTP status and a user-facing message."""

    def translate(self, error: Exception) -> TranslatedError:
        """Translate a failure raised while writing content.

        Args:
            error: Exception raised by the repository

        Returns:
            Status and localized message to report to the caller
        """
        if isinstance(error, StorageValidationError):
            logfire.warn("Storage rejected content data", detail=error.detail)
            return _STORAGE_VALIDATION

        if isinstance(error, StorageError):
            translated = _KNOWN_CODES.get(error.code)
            if translated is not None:
                logfire.warn(
                    "Storage constraint failed", code=error.code, detail=error.detail
                )
                return translated

            logfire.error(
                "Unhandled storage error", code=error.code, detail=error.detail
            )
            return _DATABASE_ERROR

        logfire.error(
            "Unexpected error while storing content",
            error=str(error),
            error_type=type(error).__name__,
        )
        return _INTERNAL_ERROR
