"""
Tests for the process-wide logging configuration.
"""

import logging
from logging.handlers import QueueHandler

from app.shared.logging import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_root_logger_uses_queue_handler(self) -> None:
        configure_logging(level="error")
        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert any(isinstance(h, QueueHandler) for h in root.handlers)

    def test_unknown_level_falls_back_to_warning(self) -> None:
        configure_logging(level="chatty")
        assert logging.getLogger().level == logging.WARNING
