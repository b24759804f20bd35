"""
Command-line entry point.

Validates secrets, runs database migrations and starts the HTTP server.

Usage:
    qa-service --log-level info --port 8080
"""

import argparse
import logging
import sys

import uvicorn

from app.core.config import settings
from app.domain.qa.errors import MigrationError
from app.infrastructure.qa.migrate import run_migrations
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Q&A web service")
    parser.add_argument(
        "-l",
        "--log-level",
        default=settings.log_level,
        help="Log level (debug, info, warning, error)",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=settings.port,
        help="Which port the server is listening to",
    )
    parser.add_argument(
        "--skip-migrations",
        action="store_true",
        help="Start without applying database migrations",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings.log_level = args.log_level
    configure_logging(level=args.log_level)

    try:
        settings.require_secrets()
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1

    if not args.skip_migrations:
        try:
            run_migrations(settings.get_database_url())
        except MigrationError as exc:
            logger.error("%s", exc.diagnostic())
            return 1

    uvicorn.run("app.main:app", host="0.0.0.0", port=args.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
