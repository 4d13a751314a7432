class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NoDataError(DomainError):
    """Raised when a valid request matches nothing worth exporting."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""
