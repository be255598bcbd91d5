"""
Logging configuration for the user management service.

Configures the root logger once and quiets chatty third-party loggers.
"""

import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging for the application."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=log_level, format=_FORMAT)
    logging.getLogger().setLevel(log_level)

    # Always WARNING to reduce noise
    for name in ("werkzeug", "mysql.connector", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)
