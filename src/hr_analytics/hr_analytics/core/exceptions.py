class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ReportNotFoundError(DomainError):
    """Raised when a report name is not registered."""
