class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class DuplicateKeyError(DomainError):
    """Raised by repositories when the store rejects a row on a unique key."""


class DecodeError(DomainError):
    """Raised when an uploaded file cannot be read as a spreadsheet."""


class ImportAbortedError(DomainError):
    """Raised when an upload contains no usable rows at all."""


class RowValidationError(DomainError):
    """A single spreadsheet row failed normalization; message is user-facing."""
