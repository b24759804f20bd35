"""
Failure taxonomy for the Q&A bounded context.

Every fallible operation in the service raises exactly one of the errors
defined here. They travel unchanged up to the request boundary, where the
classifier turns them into an HTTP status and a plain-text body.

str(error) is the fixed client-facing message. Embedded driver, library
and transport errors are only reachable through diagnostic(), which is
meant for log records.
No framework imports allowed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExternalFailure:
    """Normalized snapshot of a third-party API error response.

    Attributes:
        status: HTTP status code returned by the API.
        message: Error message reported by the API.
    """

    status: int
    message: str

    def __str__(self) -> str:
        return f"Status: {self.status}, Message: {self.message}"


class QAError(Exception):
    """Base error for all Q&A failure kinds."""

    message = "Unexpected failure"

    def __init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def diagnostic(self) -> str:
        """Return the full, untruncated detail for log output."""
        return self.message


class _WrappedError(QAError):
    """A failure kind that embeds the exception that caused it."""

    def __init__(self, source: BaseException) -> None:
        super().__init__()
        self.source = source

    def diagnostic(self) -> str:
        return f"{self.message}: {type(self.source).__name__}: {self.source}"


class ParseError(_WrappedError):
    """Raised when a query or path parameter is not a valid number."""

    message = "Cannot parse parameter"


class MissingParameters(QAError):
    """Raised when required query parameters are absent."""

    message = "Missing parameter"


class WrongPassword(QAError):
    """Raised when login credentials do not match."""

    message = "Wrong password"


class CannotDecryptToken(QAError):
    """Raised when a session token fails to decode or verify."""

    message = "Cannot decrypt token"


class Unauthorized(QAError):
    """Raised when the caller does not own the targeted resource."""

    message = "No permission to change the underlying resource"


class CredentialHashingError(_WrappedError):
    """Raised when the password hashing library fails."""

    message = "Cannot verify password"


class QuestionNotFound(QAError):
    """Raised when a referenced question id does not exist."""

    message = "Question not found"


class DatabaseQueryError(_WrappedError):
    """Raised when a data-layer query fails.

    source is the driver-level exception. For constraint violations it
    exposes the database error code used for duplicate-key detection.
    """

    message = "Cannot update, invalid data"


class MigrationError(_WrappedError):
    """Raised when schema migration fails at startup."""

    message = "Cannot migrate data"


class ExternalAPIError(_WrappedError):
    """Raised when a third-party API call fails at the transport level."""

    message = "External API error"


class ExternalMiddlewareError(_WrappedError):
    """Raised when a retried third-party API call exhausts its retries."""

    message = "External API error"


class _ExternalResponseError(QAError):
    """A failure kind that carries a third-party error response."""

    def __init__(self, failure: ExternalFailure) -> None:
        super().__init__()
        self.failure = failure

    def diagnostic(self) -> str:
        return f"{self.message}: {self.failure}"


class ExternalClientError(_ExternalResponseError):
    """Raised when a third-party API rejects the call with a 4xx response."""

    message = "External client error"


class ExternalServerError(_ExternalResponseError):
    """Raised when a third-party API fails with a 5xx response."""

    message = "External server error"
