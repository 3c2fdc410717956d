"""Service-layer error taxonomy. Routes translate these into HTTP responses."""


class ServiceError(Exception):
    """Base for expected, user-facing failures raised by the services."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Missing or malformed input (400)."""


class AuthenticationError(ServiceError):
    """Missing, invalid or expired session token (401)."""


class AuthorizationError(ServiceError):
    """Authenticated, but the role or ownership check failed (403)."""


class NotFoundError(ServiceError):
    """A referenced game, platform or user does not exist (404)."""


class ConflictError(ServiceError):
    """Username already taken (400)."""
