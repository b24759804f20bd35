"""
Failure classification and recovery.

Turns the failure signals attached to one request into exactly one
plain-text HTTP response. Signals are probed in a fixed priority order,
so a request carrying several signals always gets the same answer no
matter which stage attached them first.

Client bodies never contain driver, library or transport detail.
Each branch emits one log event that does.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from starlette.responses import PlainTextResponse

from app.domain.qa.errors import (
    DatabaseQueryError,
    ExternalAPIError,
    ExternalClientError,
    ExternalMiddlewareError,
    ExternalServerError,
    QAError,
    Unauthorized,
    WrongPassword,
)
from app.shared.errors.signals import CorsForbidden, MalformedBody

logger = logging.getLogger(__name__)

# Unique-constraint violation SQLSTATE in PostgreSQL.
DUPLICATE_KEY = "23505"

HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_416 = 416
HTTP_422 = 422
HTTP_500 = 500

INTERNAL_SERVER_ERROR = "Internal Server Error"

EmitEvent = Callable[[int, str], None]


@dataclass(frozen=True)
class Recovery:
    """The response chosen for a failed request."""

    status_code: int
    body: str


def log_event(level: int, message: str) -> None:
    """Default event sink: the process-wide logging configuration."""
    logger.log(level, message)


def _database_error_code(error: BaseException) -> str | None:
    """Return the SQLSTATE of a constraint violation, if it exposes one."""
    if not isinstance(error, IntegrityError):
        return None
    driver_error = error.orig
    # psycopg 3 exposes sqlstate, psycopg2 exposes pgcode.
    for attribute in ("sqlstate", "pgcode"):
        code = getattr(driver_error, attribute, None)
        if code is not None:
            return str(code)
    return None


def _recover_database(error: DatabaseQueryError, emit: EmitEvent) -> Recovery:
    emit(logging.ERROR, f"Database query error: {error.diagnostic()}")
    if _database_error_code(error.source) == DUPLICATE_KEY:
        return Recovery(HTTP_422, "Account already exists")
    return Recovery(HTTP_422, "Cannot update data")


def _recover_external(error: QAError, emit: EmitEvent) -> Recovery:
    emit(logging.ERROR, error.diagnostic())
    return Recovery(HTTP_500, INTERNAL_SERVER_ERROR)


def _recover_unauthorized(error: Unauthorized, emit: EmitEvent) -> Recovery:
    emit(logging.ERROR, "Not matching account id")
    return Recovery(HTTP_401, "No permission to changing underlying resource")


def _recover_wrong_password(error: WrongPassword, emit: EmitEvent) -> Recovery:
    emit(logging.ERROR, "Entered wrong password")
    return Recovery(HTTP_401, "Wrong E-Mail/Password combination")


def _recover_malformed_body(signal: MalformedBody, emit: EmitEvent) -> Recovery:
    emit(logging.ERROR, f"Cannot deserialize request body: {signal.message}")
    return Recovery(HTTP_422, signal.message)


def _recover_domain(error: QAError, emit: EmitEvent) -> Recovery:
    emit(logging.ERROR, error.diagnostic())
    return Recovery(HTTP_416, str(error))


def _recover_cors(signal: CorsForbidden, emit: EmitEvent) -> Recovery:
    emit(logging.ERROR, f"CORS forbidden error: {signal.message}")
    return Recovery(HTTP_403, signal.message)


# First match wins. QAError must stay after every specific kind.
DISPATCH_ORDER: tuple[tuple[type, Callable[..., Recovery]], ...] = (
    (DatabaseQueryError, _recover_database),
    (ExternalAPIError, _recover_external),
    (Unauthorized, _recover_unauthorized),
    (WrongPassword, _recover_wrong_password),
    (ExternalMiddlewareError, _recover_external),
    (ExternalClientError, _recover_external),
    (ExternalServerError, _recover_external),
    (MalformedBody, _recover_malformed_body),
    (QAError, _recover_domain),
    (CorsForbidden, _recover_cors),
)


def classify(signals: Iterable[object], emit: EmitEvent = log_event) -> Recovery:
    """Select the response for a failed request.

    Args:
        signals: Failure signals attached to the request, in any order.
            Unknown objects are ignored.
        emit: Sink for the single diagnostic event of the chosen branch.

    Returns:
        The status code and plain-text body to send. Falls back to
        404 "Route not found" when no signal is recognised.
    """
    signals = tuple(signals)
    for signal_type, recover in DISPATCH_ORDER:
        for signal in signals:
            if isinstance(signal, signal_type):
                return recover(signal, emit)

    emit(logging.WARNING, "Requested route was not found")
    return Recovery(HTTP_404, "Route not found")


def render(recovery: Recovery) -> PlainTextResponse:
    """Build the HTTP response for a recovery."""
    return PlainTextResponse(recovery.body, status_code=recovery.status_code)
