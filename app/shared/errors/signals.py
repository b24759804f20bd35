"""
Failure signals attached to a request.

A request can fail at several stages (authentication, body parsing,
CORS checks, the handler itself) and each stage may leave a signal
behind. Signals are collected on request.state in attachment order and
read once by the classifier after processing has stopped.
"""

from dataclasses import dataclass

from starlette.requests import Request

_STATE_KEY = "failure_signals"


@dataclass(frozen=True)
class MalformedBody:
    """The request body could not be deserialized.

    Attributes:
        message: Literal text produced by the body parser.
    """

    message: str


@dataclass(frozen=True)
class CorsForbidden:
    """The request violates the CORS policy.

    Attributes:
        message: Literal text produced by the CORS policy.
    """

    message: str


def attach_failure(request: Request, signal: object) -> None:
    """Append a failure signal to the request."""
    signals = getattr(request.state, _STATE_KEY, None)
    if signals is None:
        signals = []
        setattr(request.state, _STATE_KEY, signals)
    signals.append(signal)


def failure_signals(request: Request) -> tuple[object, ...]:
    """Return the signals attached to the request, oldest first."""
    return tuple(getattr(request.state, _STATE_KEY, ()))
