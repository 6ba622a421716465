class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StateDecodeError(DomainError):
    """Raised when a persisted snapshot cannot be decoded."""
