"""
CORS policy middleware.

Any origin is allowed. Preflight requests are checked against the
configured methods and headers; actual requests only get the
Allow-Origin header. A violation is not answered here: it becomes a
CorsForbidden signal and goes through the classifier like every other
failure.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.shared.errors.classifier import classify, render
from app.shared.errors.signals import CorsForbidden, attach_failure, failure_signals

logger = logging.getLogger(__name__)

FORBIDDEN_PREFIX = "CORS request forbidden"
PREFLIGHT_MAX_AGE = "600"


class CorsPolicy:
    """Decides whether a cross-origin request is allowed.

    Args:
        allowed_methods: HTTP methods callers may use.
        allowed_headers: Request headers callers may send (case-insensitive).
    """

    def __init__(self, allowed_methods: list[str], allowed_headers: list[str]) -> None:
        self.allowed_methods = [m.upper() for m in allowed_methods]
        self.allowed_headers = [h.lower() for h in allowed_headers]

    def check_method(self, method: str) -> CorsForbidden | None:
        if method.upper() not in self.allowed_methods:
            return CorsForbidden(f"{FORBIDDEN_PREFIX}: request-method not allowed")
        return None

    def check_headers(self, requested: str) -> CorsForbidden | None:
        for header in requested.split(","):
            name = header.strip().lower()
            if name and name not in self.allowed_headers:
                return CorsForbidden(f"{FORBIDDEN_PREFIX}: header not allowed")
        return None

    def preflight_headers(self, origin: str) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": ", ".join(self.allowed_methods),
            "Access-Control-Allow-Headers": ", ".join(self.allowed_headers),
            "Access-Control-Max-Age": PREFLIGHT_MAX_AGE,
        }


class CorsPolicyMiddleware(BaseHTTPMiddleware):
    """Middleware that enforces a CorsPolicy on cross-origin requests.

    Requests without an Origin header are passed through untouched.
    """

    def __init__(self, app: ASGIApp, policy: CorsPolicy) -> None:
        super().__init__(app)
        self.policy = policy

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Reject or annotate cross-origin requests."""
        origin = request.headers.get("origin")
        if origin is None:
            return await call_next(request)

        requested_method = request.headers.get("access-control-request-method")
        if request.method == "OPTIONS" and requested_method is not None:
            violation = self.policy.check_method(requested_method) or (
                self.policy.check_headers(
                    request.headers.get("access-control-request-headers", "")
                )
            )
            if violation is not None:
                return self._reject(request, violation)
            logger.debug("CORS preflight accepted for %s", origin)
            return Response(status_code=200, headers=self.policy.preflight_headers(origin))

        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = origin
        return response

    @staticmethod
    def _reject(request: Request, violation: CorsForbidden) -> Response:
        attach_failure(request, violation)
        return render(classify(failure_signals(request)))
