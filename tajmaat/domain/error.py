"""Domain layer errors."""

from enum import Enum
from typing import Iterable


class DomainError(Exception):
    """Base domain error."""

    pass


class UnknownContentTypeError(DomainError):
    """Raised when a content type tag is not one of the accepted tags."""

    def __init__(self, received: object, accepted: Iterable[str]):
        self.received = received
        self.accepted = list(accepted)
        super().__init__(
            f"Invalid content type. Valid types: {', '.join(self.accepted)}"
        )


class ContentValidationError(DomainError):
    """Raised when content data violates one or more field rules."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Content validation failed")


class NotAuthorizedError(DomainError):
    """Raised when a member attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicatePronunciationError(DomainError):
    """Raised when a member records a second pronunciation for the same accent."""

    pass


class StorageError(DomainError):
    """Failure reported by the persistence layer.

    `code` is a `StorageErrorCode` value for the failure classes the service
    recognizes, or the raw backend code otherwise.
    """

    def __init__(self, code: str | Enum | None, detail: str = ""):
        self.code = code.value if isinstance(code, Enum) else code
        self.detail = detail
        message = f"Storage error {self.code}"
        super().__init__(f"{message}: {detail}" if detail else message)


class StorageValidationError(DomainError):
    """Data rejected by the storage schema itself (types, nullability, lengths)."""

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = "Storage rejected data"
        super().__init__(f"{message}: {detail}" if detail else message)
