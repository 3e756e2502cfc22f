class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when no authenticated identity is available."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class SchemaVersionError(DomainError):
    """Raised when the database schema is older than the code expects."""
