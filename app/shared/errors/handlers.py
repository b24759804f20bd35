"""
Centralized error handlers for FastAPI.

Every handler attaches what it caught to the request as a failure
signal and lets the classifier pick the single response.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse, Response

from app.domain.qa.errors import QAError
from app.shared.errors.classifier import INTERNAL_SERVER_ERROR, classify, render
from app.shared.errors.signals import MalformedBody, attach_failure, failure_signals

logger = logging.getLogger(__name__)

HTTP_400 = 400

BODY_ERROR_PREFIX = "Request body deserialize error"


def _body_error_message(exc: RequestValidationError) -> str | None:
    """Render body-located validation errors the way the parser reports them.

    Returns None when no error concerns the body.
    """
    details = []
    for error in exc.errors():
        location = error.get("loc", ())
        if not location or location[0] != "body":
            continue
        field = ".".join(str(part) for part in location[1:])
        details.append(f"{field}: {error['msg']}" if field else error["msg"])
    if not details:
        return None
    return f"{BODY_ERROR_PREFIX}: {'; '.join(details)}"


def recover(request: Request) -> Response:
    """Answer a failed request from its attached signals."""
    return render(classify(failure_signals(request)))


def register_error_handlers(app: FastAPI) -> None:
    """Register the failure handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(QAError)
    async def handle_qa_error(request: Request, exc: QAError) -> Response:
        """Handle every failure kind of the Q&A taxonomy."""
        attach_failure(request, exc)
        return recover(request)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Handle malformed bodies. Unparseable path segments match no route."""
        message = _body_error_message(exc)
        if message is not None:
            attach_failure(request, MalformedBody(message))
        return recover(request)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Handle HTTP errors raised by Starlette and FastAPI.

        A 400 means the form or multipart body could not be parsed.
        Anything else (404, 405) matches no route.
        """
        if exc.status_code == HTTP_400:
            attach_failure(request, MalformedBody(f"{BODY_ERROR_PREFIX}: {exc.detail}"))
        else:
            logger.debug("Routing failure %d on %s", exc.status_code, request.url.path)
        return recover(request)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        if failure_signals(request):
            return recover(request)
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return PlainTextResponse(INTERNAL_SERVER_ERROR, status_code=500)
