"""
Logging setup for the Pessoas API.

``setup_logging`` attaches a single console handler to the root logger (or
to the logger passed in). It is called from the application lifespan and is
safe to call again: once the logger has handlers, further calls do nothing.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logger: Optional[logging.Logger] = None) -> None:
    """Configure ``logger`` (default: root) with a console handler.

    Unknown level names fall back to ``INFO``.
    """
    if logger is None:
        logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
