"""Interface layer errors."""

from typing import Any


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ApiError(InterfaceError):
    """Error rendered as a `{success: false, error, code}` envelope."""

    def __init__(self, status_code: int, code: str, message: str, **extra: Any):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.extra = extra
        super().__init__(message)


def auth_required(message: str = "Authentication required") -> ApiError:
    return ApiError(401, "AUTH_REQUIRED", message)


def invalid_json() -> ApiError:
    return ApiError(400, "INVALID_JSON", "Invalid JSON in request body")


def invalid_body() -> ApiError:
    return ApiError(400, "INVALID_JSON", "Request body must be a JSON object")


def internal_error() -> ApiError:
    return ApiError(500, "INTERNAL_ERROR", "Internal server error")
