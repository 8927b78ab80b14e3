class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when an input row is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when shift rules or time values cannot be understood."""
