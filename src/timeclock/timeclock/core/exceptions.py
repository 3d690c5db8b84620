class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidClockEventError(ValidationError):
    """Raised when a clock event record is malformed (missing employee, bad timestamp or kind)."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or notification does not exist."""
