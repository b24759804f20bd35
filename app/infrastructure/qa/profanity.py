"""
Adapter: Profanity filter backed by the APILayer bad-words API.

Implements ContentFilterPort.

Failure mapping:
    transport failure, retries exhausted  -> ExternalMiddlewareError
    4xx response                          -> ExternalClientError
    5xx response                          -> ExternalServerError
    unreadable successful response        -> ExternalAPIError
"""

import logging
import random
import time

import httpx

from app.domain.qa.errors import (
    ExternalAPIError,
    ExternalClientError,
    ExternalFailure,
    ExternalMiddlewareError,
    ExternalServerError,
)
from app.domain.qa.ports import ContentFilterPort

logger = logging.getLogger(__name__)

CENSOR_CHARACTER = "*"
MAX_BACKOFF_SECONDS = 8.0


def _failure_from_response(response: httpx.Response) -> ExternalFailure:
    """Normalize an error response into an ExternalFailure."""
    try:
        message = response.json()["message"]
    except (ValueError, KeyError, TypeError):
        message = response.text
    return ExternalFailure(status=response.status_code, message=str(message))


class ProfanityFilter(ContentFilterPort):
    """HTTP client for the bad-words API with retry and exponential backoff.

    Args:
        client: httpx client used for every call.
        api_url: Endpoint of the bad-words API.
        api_key: Value of the apikey header.
        max_retries: Number of attempts made on transport failures.
        backoff_base: First backoff delay in seconds, doubled per attempt.
    """

    def __init__(
        self,
        client: httpx.Client,
        api_url: str,
        api_key: str,
        max_retries: int = 3,
        backoff_base: float = 0.5,
    ) -> None:
        self._client = client
        self._api_url = api_url
        self._api_key = api_key
        self._max_retries = max(1, max_retries)
        self._backoff_base = backoff_base

    def _backoff(self, attempt: int) -> float:
        """Exponential backoff with jitter, capped."""
        delay = self._backoff_base * (2**attempt) + random.uniform(0, self._backoff_base)
        return min(delay, MAX_BACKOFF_SECONDS)

    def _send(self, content: str) -> httpx.Response:
        """POST the content, retrying transport failures.

        Raises:
            ExternalMiddlewareError: If every attempt failed at the transport level.
        """
        last_exception: httpx.TransportError | None = None
        for attempt in range(self._max_retries):
            try:
                return self._client.post(
                    self._api_url,
                    params={"censor_character": CENSOR_CHARACTER},
                    headers={"apikey": self._api_key},
                    content=content.encode("utf-8"),
                )
            except httpx.TransportError as exc:
                last_exception = exc
                logger.warning(
                    "Profanity API transport error (attempt %d/%d): %r",
                    attempt + 1,
                    self._max_retries,
                    exc,
                )

            if attempt < self._max_retries - 1:
                time.sleep(self._backoff(attempt))

        raise ExternalMiddlewareError(last_exception)

    def censor(self, content: str) -> str:
        """Return the content with offensive words replaced by asterisks.

        Args:
            content: User-submitted text.

        Returns:
            The censored text reported by the API.
        """
        response = self._send(content)

        if response.is_client_error:
            failure = _failure_from_response(response)
            logger.error("Profanity API rejected the request: %s", failure)
            raise ExternalClientError(failure)
        if response.is_server_error:
            failure = _failure_from_response(response)
            logger.error("Profanity API failed: %s", failure)
            raise ExternalServerError(failure)

        try:
            return response.json()["censored_content"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            raise ExternalAPIError(exc) from exc
