"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Records are queued and written by a background listener so that
emitting a record never waits on the output stream.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_listener: QueueListener | None = None


def configure_logging(level: str = "WARNING") -> None:
    """Configure process-wide logging for the application.

    Safe to call more than once; the previous listener is replaced.
    There is no teardown beyond process exit.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    global _listener

    if _listener is not None:
        _listener.stop()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(
        logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    log_queue: queue.SimpleQueue = queue.SimpleQueue()
    _listener = QueueListener(log_queue, stream_handler, respect_handler_level=True)
    _listener.start()

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        handlers=[QueueHandler(log_queue)],
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
