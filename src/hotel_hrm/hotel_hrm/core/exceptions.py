"""Domain errors raised by services; the HTTP layer maps them by ``status_code``."""


class DomainError(Exception):
    status_code = 400


class ValidationError(DomainError):
    """Input is malformed or breaks a business rule (bad period, negative amount...)."""

    status_code = 400


class AuthenticationError(DomainError):
    """Credentials were rejected. The message never says which part was wrong."""

    status_code = 401


class AuthorizationError(DomainError):
    """The current principal's role does not allow the operation."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404
