class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when the bearer token is missing, invalid or expired."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    """Raised when a write would duplicate an existing record."""

    status_code = 409


class PaymentError(DomainError):
    """Raised when the payment processor rejects or fails a request."""

    status_code = 502
