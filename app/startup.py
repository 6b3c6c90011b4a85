from __future__ import annotations

import logging
import os

from app import db
from app.dependencies import get_db_path

logger = logging.getLogger(__name__)


def init_database() -> None:
    connection = db.connect(get_db_path())
    try:
        db.run_migrations(connection=connection)
    finally:
        connection.close()
    logger.info("Database ready at %s", get_db_path())


def configure_logging() -> None:
    log_level = os.getenv("VLANPOOL_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
        force=True,
    )
