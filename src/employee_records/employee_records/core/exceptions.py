from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind


class DuplicateKeyError(DomainError):
    """Raised when an employee ID is already used by another row."""

    kind = ErrorKind.DUPLICATE_KEY


class NotFoundError(DomainError):
    """Raised when the target employee row does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidFormatError(DomainError):
    """Raised when an inline image payload is malformed."""

    kind = ErrorKind.INVALID_FORMAT


class MissingInputError(DomainError):
    """Raised when a required input is absent."""

    kind = ErrorKind.MISSING_INPUT


class BackingStoreError(Exception):
    """Raised when the tabular store or the file store fails."""

    kind = ErrorKind.BACKING_STORE_FAILURE
