class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InsightsError(DomainError):
    """Raised when the insights model call fails or returns an unusable result."""
