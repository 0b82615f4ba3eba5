"""Translation of database driver errors into domain storage errors."""

from sqlalchemy.exc import DBAPIError

from tajmaat.domain.error import DomainError, StorageError, StorageValidationError
from tajmaat.domain.value import StorageErrorCode

# PostgreSQL SQLSTATE codes for integrity constraint violations
_CONSTRAINT_CODES: dict[str, StorageErrorCode] = {
    "23505": StorageErrorCode.UNIQUE_VIOLATION,
    "23503": StorageErrorCode.FOREIGN_KEY_VIOLATION,
    "23514": StorageErrorCode.CHECK_VIOLATION,
}

_NOT_NULL_VIOLATION = "23502"
_DATA_EXCEPTION_CLASS = "22"


def sqlstate_of(error: DBAPIError) -> str | None:
    """SQLSTATE reported by the driver, if any."""
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def to_storage_error(error: DBAPIError) -> DomainError:
    """Map a driver error onto the storage error taxonomy.

    Constraint violations keep their class, data exceptions (class 22) and
    NOT NULL violations mean the data did not fit the schema, and anything
    else is reported with its raw SQLSTATE.
    """
    sqlstate = sqlstate_of(error)
    detail = str(error.orig) if error.orig is not None else str(error)

    if sqlstate in _CONSTRAINT_CODES:
        return StorageError(_CONSTRAINT_CODES[sqlstate], detail)
    if sqlstate is not None and (
        sqlstate == _NOT_NULL_VIOLATION or sqlstate.startswith(_DATA_EXCEPTION_CLASS)
    ):
        return StorageValidationError(detail)
    return StorageError(sqlstate or "unknown", detail)
