"""
Error taxonomy shared by services and the HTTP layer.

Services raise these; sensorhub.main maps each to its HTTP status. Routes never
build HTTPException for domain failures.
"""


class SensorHubError(Exception):
    """Base class for expected, mapped failures."""

    status_code: int = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(SensorHubError):
    """Malformed or missing input; always client-correctable."""

    status_code = 400


class InvalidCredentials(SensorHubError):
    """Unknown username or wrong password. Both causes share one message."""

    status_code = 401


class Unauthenticated(SensorHubError):
    """Missing, malformed, tampered or expired bearer token."""

    status_code = 401


class Forbidden(SensorHubError):
    """Valid token whose role is not allowed on the route."""

    status_code = 403


class NotFound(SensorHubError):
    status_code = 404


class DuplicateUsername(SensorHubError):
    status_code = 409


class InternalError(SensorHubError):
    """Store, hasher or signing failure. Cause text is only exposed in DEBUG mode."""

    status_code = 500
