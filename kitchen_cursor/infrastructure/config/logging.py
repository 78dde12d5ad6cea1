"""
Logging setup.
"""

import logging
from typing import Optional

from kitchen_cursor.infrastructure.config.settings import get_settings

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the API and the CLI."""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
