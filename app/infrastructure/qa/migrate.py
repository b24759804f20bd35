"""Database migration utilities.

Migrations are run synchronously at startup before the server accepts
requests. Any failure is reported as MigrationError.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig

from app.domain.qa.errors import MigrationError

logger = logging.getLogger(__name__)

# Directory holding env.py and versions/
MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


def get_alembic_config(database_url: str) -> AlembicConfig:
    """Create an Alembic config pointing at the bundled migrations."""
    config = AlembicConfig()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # Alembic reads options through ConfigParser, which treats % specially.
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def run_migrations(database_url: str) -> None:
    """Upgrade the database schema to the latest revision.

    Raises:
        MigrationError: If Alembic fails to apply a revision.
    """
    config = get_alembic_config(database_url)
    try:
        command.upgrade(config, "head")
    except Exception as exc:
        raise MigrationError(exc) from exc
    logger.info("Database migrations complete")
