class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required argument is missing or invalid."""


class AuthenticationError(DomainError):
    """Raised when the caller credential is missing or cannot be verified."""


class AuthorizationError(DomainError):
    """Raised when an authenticated caller lacks permission for an action."""
