class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class ConflictError(DomainError):
    """Raised when a uniqueness rule would be violated."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class TokenRequiredError(DomainError):
    """Raised when a protected request carries no bearer token."""

    def __init__(self, message: str = "Access token required."):
        super().__init__(message)


class InvalidTokenError(DomainError):
    """Raised when a bearer token fails signature or expiry checks."""

    def __init__(self, message: str = "Invalid or expired token."):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a resource is missing or not owned by the caller."""


class ConsistencyError(DomainError):
    """Raised when server-side data no longer matches an authenticated identity."""
