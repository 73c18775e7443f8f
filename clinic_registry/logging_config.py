"""
Logging configuration for the registry.

``setup_logging`` attaches a console handler to the root logger once;
calling it again is a no-op.
"""

import logging
from typing import Optional

from clinic_registry.config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logger.

    Args:
        level: Logging level name; defaults to the configured log_level
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level or get_config().log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
