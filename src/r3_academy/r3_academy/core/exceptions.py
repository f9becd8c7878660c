class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested student does not exist."""


class MissingDateRangeError(ValidationError):
    """Raised when a history export is requested without both dates."""


class NothingToExportError(DomainError):
    """Raised when an export would produce an empty file."""
